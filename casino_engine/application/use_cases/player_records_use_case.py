"""Player records use case"""
from typing import List

from casino_engine.application.ports.entity_store_port import EntityStorePort


class PlayerRecordsUseCase:
    """Achievements and play history of the calling user"""

    def __init__(self, entity_store: EntityStorePort):
        self.entity_store = entity_store

    def achievements(self, user_id: int) -> List[dict]:
        return [a.to_dict() for a in self.entity_store.get_achievements_by_user(user_id)]

    def history(self, user_id: int) -> List[dict]:
        return [entry.to_dict() for entry in self.entity_store.get_game_history_by_user(user_id)]
