"""Demo catalog loaded at startup"""
import logging

from casino_engine.application.ports.entity_store_port import EntityStorePort
from casino_engine.domain.entities.game_history import utcnow

logger = logging.getLogger(__name__)

DEMO_USERNAME = "player1"
DEMO_PASSWORD = "password123"
DEMO_COINS = 5000


def seed_catalog(store: EntityStorePort) -> None:
    """Create the demo player, categories, featured games and achievements"""
    user = store.create_user(DEMO_USERNAME, DEMO_PASSWORD, coins=DEMO_COINS)

    slots = store.create_category("Slots", "fa-slot-machine", games_count=12)
    cards = store.create_category("Card Games", "fa-cards", games_count=8)
    tables = store.create_category("Table Games", "fa-table", games_count=6)
    store.create_category("Specialty", "fa-dice", games_count=4)

    store.create_game(
        name="Lucky Spin",
        description="Classic three-reel slot machine",
        image_url="/images/slots.jpg",
        category_id=slots.id,
        type="slots",
        difficulty="beginner",
        rating=42,
        featured=True
    )
    store.create_game(
        name="Card Master",
        description="Try your luck at classic poker",
        image_url="/images/poker.jpg",
        category_id=cards.id,
        type="poker",
        difficulty="intermediate",
        rating=47,
        featured=True
    )
    store.create_game(
        name="Black Jack Pro",
        description="Get to 21 and beat the dealer",
        image_url="/images/blackjack.jpg",
        category_id=cards.id,
        type="blackjack",
        difficulty="beginner",
        rating=45,
        featured=True
    )
    store.create_game(
        name="Roulette Royale",
        description="Classic roulette with European rules",
        image_url="/images/roulette.jpg",
        category_id=tables.id,
        type="roulette",
        difficulty="beginner",
        rating=48,
        featured=True
    )

    store.create_achievement(user.id, "Rookie", "Play your first game", unlocked=True, unlocked_at=utcnow())
    store.create_achievement(user.id, "Lucky Streak", "Win 5 times in a row")
    store.create_achievement(user.id, "Jackpot", "Win more than 1000 coins in a single game")

    logger.info("Seeded demo catalog")
