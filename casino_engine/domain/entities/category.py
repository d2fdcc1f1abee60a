"""Game category entity"""
from dataclasses import dataclass


@dataclass
class Category:
    id: int
    name: str
    icon_name: str
    games_count: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "iconName": self.icon_name,
            "gamesCount": self.games_count
        }
