from .entity_store_port import EntityStorePort
from .session_store_port import SessionStorePort

__all__ = [
    'EntityStorePort',
    'SessionStorePort'
]
