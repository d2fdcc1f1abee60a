"""Game catalog entity"""
from dataclasses import dataclass
from enum import Enum


class GameType(str, Enum):
    SLOTS = "slots"
    POKER = "poker"
    BLACKJACK = "blackjack"
    ROULETTE = "roulette"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass
class Game:
    """Catalog entry shown to players"""

    id: int
    name: str
    description: str
    image_url: str
    category_id: int
    type: GameType
    difficulty: Difficulty
    rating: int = 45
    featured: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "imageUrl": self.image_url,
            "categoryId": self.category_id,
            "type": self.type.value,
            "difficulty": self.difficulty.value,
            "rating": self.rating,
            "featured": self.featured
        }
