"""Browse catalog use case"""
import re
from typing import List

from casino_engine.application.ports.entity_store_port import EntityStorePort
from casino_engine.domain.errors import ValidationError

CATEGORY_ID_PATTERN = re.compile(r"-?[0-9]+")


class BrowseCatalogUseCase:
    """Read-only queries over categories and games"""

    def __init__(self, entity_store: EntityStorePort):
        self.entity_store = entity_store

    def categories(self) -> List[dict]:
        return [category.to_dict() for category in self.entity_store.get_categories()]

    def games(self) -> List[dict]:
        return [game.to_dict() for game in self.entity_store.get_games()]

    def featured_games(self) -> List[dict]:
        return [game.to_dict() for game in self.entity_store.get_featured_games()]

    def games_by_category(self, raw_category_id: str) -> List[dict]:
        """Games of a category; the id comes straight from the URL"""
        if raw_category_id is None or not CATEGORY_ID_PATTERN.fullmatch(raw_category_id):
            raise ValidationError("invalid category id")
        category_id = int(raw_category_id)
        return [game.to_dict() for game in self.entity_store.get_games_by_category(category_id)]
