import json
from unittest.mock import patch

from tornado.testing import AsyncHTTPTestCase

from casino_engine.config.container import Container
from casino_engine.config.settings import Settings
from casino_engine.main import make_app


class ApiTestCase(AsyncHTTPTestCase):
    """Runs the full Tornado app against a fresh container"""

    sample = 0.0

    def get_app(self):
        settings = Settings(session_secret="test-secret", seed_catalog=True)
        self.container = Container(settings, rng=lambda: self.sample)
        return make_app(self.container)

    def call(self, method, path, body=None, cookie=None, raw_body=None):
        headers = {"Content-Type": "application/json"}
        if cookie:
            headers["Cookie"] = cookie
        if raw_body is not None:
            payload = raw_body
        elif body is not None:
            payload = json.dumps(body)
        else:
            payload = "" if method == "POST" else None
        return self.fetch(path, method=method, body=payload, headers=headers)

    def login(self, username="player1", password="password123"):
        response = self.call("POST", "/api/auth/login", {"username": username, "password": password})
        assert response.code == 200
        return session_cookie(response)

    def add_player(self, username, coins, **kwargs):
        user = self.container.entity_store.create_user(username, "pw", coins=coins, **kwargs)
        return user, self.login(username, "pw")


def session_cookie(response):
    for header in response.headers.get_list("Set-Cookie"):
        if header.startswith("casino.sid="):
            return header.split(";")[0]
    raise AssertionError("no session cookie set")


def body_of(response):
    return json.loads(response.body)


class AuthTest(ApiTestCase):

    def test_register(self):
        response = self.call("POST", "/api/auth/register", {"username": "alice", "password": "pw"})
        assert response.code == 201
        assert body_of(response) == {"id": 2, "username": "alice"}
        assert self.container.entity_store.get_user(2).coins == 1000

    def test_register_duplicate_username(self):
        response = self.call("POST", "/api/auth/register", {"username": "player1", "password": "x"})
        assert response.code == 400
        assert body_of(response) == {"message": "username already taken"}

    def test_register_missing_fields(self):
        response = self.call("POST", "/api/auth/register", {"username": "alice"})
        assert response.code == 400
        assert "message" in body_of(response)

    def test_register_malformed_json(self):
        response = self.call("POST", "/api/auth/register", raw_body="{nope")
        assert response.code == 400

    def test_login_returns_snapshot(self):
        response = self.call("POST", "/api/auth/login", {"username": "player1", "password": "password123"})
        assert response.code == 200
        assert body_of(response) == {"id": 1, "username": "player1", "coins": 5000, "level": 1, "xp": 0}
        assert session_cookie(response)

    def test_login_wrong_password(self):
        response = self.call("POST", "/api/auth/login", {"username": "player1", "password": "nope"})
        assert response.code == 401
        assert body_of(response) == {"message": "Incorrect password."}

    def test_login_unknown_user(self):
        response = self.call("POST", "/api/auth/login", {"username": "ghost", "password": "nope"})
        assert response.code == 401

    def test_current_user_requires_session(self):
        assert self.call("GET", "/api/auth/user").code == 401

    def test_current_user_and_logout(self):
        cookie = self.login()
        response = self.call("GET", "/api/auth/user", cookie=cookie)
        assert response.code == 200
        assert body_of(response)["username"] == "player1"
        assert "password" not in body_of(response)

        logout = self.call("POST", "/api/auth/logout", cookie=cookie)
        assert logout.code == 200
        assert "message" in body_of(logout)
        assert self.call("GET", "/api/auth/user", cookie=cookie).code == 401

    def test_forged_cookie_is_rejected(self):
        assert self.call("GET", "/api/auth/user", cookie="casino.sid=forged").code == 401


class CatalogTest(ApiTestCase):

    def test_categories(self):
        response = self.call("GET", "/api/categories")
        assert response.code == 200
        categories = body_of(response)
        assert len(categories) == 4
        assert categories[0] == {"id": 1, "name": "Slots", "iconName": "fa-slot-machine", "gamesCount": 12}

    def test_games(self):
        games = body_of(self.call("GET", "/api/games"))
        assert [g["type"] for g in games] == ["slots", "poker", "blackjack", "roulette"]
        assert set(games[0]) == {
            "id", "name", "description", "imageUrl", "categoryId", "type", "difficulty", "rating", "featured"
        }

    def test_featured_games(self):
        games = body_of(self.call("GET", "/api/games/featured"))
        assert len(games) == 4
        assert all(g["featured"] for g in games)

    def test_games_by_category(self):
        games = body_of(self.call("GET", "/api/games/category/2"))
        assert [g["name"] for g in games] == ["Card Master", "Black Jack Pro"]
        assert body_of(self.call("GET", "/api/games/category/99")) == []

    def test_games_by_category_rejects_non_numeric_id(self):
        response = self.call("GET", "/api/games/category/abc")
        assert response.code == 400
        assert body_of(response) == {"message": "invalid category id"}

    def test_games_by_category_rejects_loose_integer_forms(self):
        for raw in ["1_0", "%205%20", "+2", "2.0"]:
            response = self.call("GET", "/api/games/category/" + raw)
            assert response.code == 400
            assert body_of(response) == {"message": "invalid category id"}


class PlayerRecordsTest(ApiTestCase):

    def test_history_requires_session(self):
        response = self.call("GET", "/api/history")
        assert response.code == 401
        assert set(body_of(response)) == {"message"}

    def test_achievements_requires_session(self):
        assert self.call("GET", "/api/achievements").code == 401

    def test_achievements(self):
        achievements = body_of(self.call("GET", "/api/achievements", cookie=self.login()))
        assert len(achievements) == 3
        assert achievements[0]["unlocked"] is True
        assert achievements[0]["unlockedAt"] is not None
        assert achievements[1]["unlockedAt"] is None

    def test_history_only_shows_own_plays(self):
        _, alice = self.add_player("alice", 100)
        self.call("POST", "/api/play/slots", {"bet": 10}, cookie=alice)

        assert body_of(self.call("GET", "/api/history", cookie=self.login())) == []
        history = body_of(self.call("GET", "/api/history", cookie=alice))
        assert len(history) == 1
        assert history[0]["gameType"] == "slots"


class PlayTest(ApiTestCase):

    def history_of(self, user):
        return self.container.entity_store.get_game_history_by_user(user.id)

    def test_forced_win(self):
        user, cookie = self.add_player("alice", 100)

        response = self.call("POST", "/api/play/slots", {"bet": 50}, cookie=cookie)

        assert response.code == 200
        body = body_of(response)
        assert body["success"] is True
        assert body["won"] is True
        assert body["winAmount"] == 100
        assert body["xpEarned"] == 10
        assert body["user"]["coins"] == 150
        assert user.coins == 150
        assert [(h.bet, h.won, h.win_amount) for h in self.history_of(user)] == [(50, True, 100)]

    def test_loss(self):
        self.sample = 0.999
        user, cookie = self.add_player("alice", 100)

        body = body_of(self.call("POST", "/api/play/roulette", {"bet": 25}, cookie=cookie))

        assert body["won"] is False
        assert body["winAmount"] == 0
        assert user.coins == 75

    def test_insufficient_coins(self):
        user, cookie = self.add_player("alice", 30)

        response = self.call("POST", "/api/play/slots", {"bet": 50}, cookie=cookie)

        assert response.code == 400
        assert body_of(response) == {"message": "insufficient coins"}
        assert user.coins == 30
        assert self.history_of(user) == []

    def test_unsupported_game_type(self):
        user, cookie = self.add_player("alice", 100)

        response = self.call("POST", "/api/play/baccarat", {"bet": 10}, cookie=cookie)

        assert response.code == 400
        assert body_of(response) == {"message": "invalid game type"}
        assert (user.coins, user.xp) == (100, 0)
        assert self.history_of(user) == []

    def test_invalid_bets(self):
        user, cookie = self.add_player("alice", 100)
        payloads = [{}, {"bet": "10"}, {"bet": 0}, {"bet": -3}, {"bet": True}, {"bet": None},
                    {"bet": 0.5}, {"bet": 2.5}]
        for payload in payloads:
            response = self.call("POST", "/api/play/slots", payload, cookie=cookie)
            assert response.code == 400
            assert body_of(response) == {"message": "invalid bet"}
        assert user.coins == 100

    def test_huge_integer_bet_is_rejected_as_insufficient(self):
        user, cookie = self.add_player("alice", 100)

        response = self.call("POST", "/api/play/slots", raw_body='{"bet": 1' + "0" * 400 + "}", cookie=cookie)

        assert response.code == 400
        assert body_of(response) == {"message": "insufficient coins"}
        assert user.coins == 100
        assert self.history_of(user) == []

    def test_play_requires_session(self):
        response = self.call("POST", "/api/play/slots", {"bet": 10})
        assert response.code == 401

    def test_level_up(self):
        user, cookie = self.add_player("alice", 1000, xp=90)
        self.sample = 0.999

        body = body_of(self.call("POST", "/api/play/poker", {"bet": 200}, cookie=cookie))

        assert body["xpEarned"] == 20
        assert (body["user"]["level"], body["user"]["xp"]) == (2, 10)

    def test_unexpected_failure_returns_500_and_rolls_back(self):
        user, cookie = self.add_player("alice", 100)
        store = self.container.entity_store

        with patch.object(store, "create_game_history", side_effect=RuntimeError("boom")):
            response = self.call("POST", "/api/play/slots", {"bet": 50}, cookie=cookie)

        assert response.code == 500
        assert body_of(response) == {"message": "Internal server error"}
        assert (user.coins, user.xp) == (100, 0)
        assert self.history_of(user) == []


class OperationsTest(ApiTestCase):

    def test_health(self):
        response = self.call("GET", "/health")
        assert response.code == 200
        assert body_of(response) == {"status": "ok"}

    def test_metrics(self):
        _, cookie = self.add_player("alice", 100)
        self.call("POST", "/api/play/slots", {"bet": 10}, cookie=cookie)

        response = self.call("GET", "/metrics")
        assert response.code == 200
        assert b"casino_plays_total" in response.body
