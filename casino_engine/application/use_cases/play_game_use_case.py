"""Play game use case"""
import logging

import sentry_sdk
from sentry_sdk import start_span

from casino_engine.application.dto.play_request import PlayRequest
from casino_engine.application.dto.play_response import PlayResponse
from casino_engine.application.ports.entity_store_port import EntityStorePort
from casino_engine.domain.errors import InternalError, UnauthorizedError, ValidationError
from casino_engine.domain.services.game_resolver import GameResolver
from casino_engine.domain.services.progression import compute_xp_earned
from casino_engine.metrics import BusinessMetrics

logger = logging.getLogger(__name__)


class PlayGameUseCase:
    """Use case for resolving one bet and applying its coins, XP and history.

    The debit, credit, XP update and history append run inside the user's
    store transaction: they are serialized per user, and an unexpected
    failure restores the coins/level/xp the user had before the debit.
    """

    def __init__(self, entity_store: EntityStorePort, game_resolver: GameResolver):
        self.entity_store = entity_store
        self.game_resolver = game_resolver

    def execute(self, request: PlayRequest) -> PlayResponse:
        """Execute a play for an authenticated user"""
        if not self.game_resolver.supports(request.game_type):
            BusinessMetrics.track_rejection("invalid_game_type")
            raise ValidationError("invalid game type")

        sentry_sdk.set_user({"id": str(request.user_id)})
        sentry_sdk.set_tag("game.type", request.game_type)

        with BusinessMetrics.PLAY_LATENCY.time():
            with self.entity_store.user_transaction(request.user_id) as user:
                if user is None:
                    raise UnauthorizedError()

                with start_span(op="game.funds", name="Check user funds") as span:
                    span.set_data("coins", user.coins)
                    span.set_data("bet", request.bet)
                    if user.coins < request.bet:
                        BusinessMetrics.track_rejection("insufficient_coins")
                        raise ValidationError("insufficient coins")

                with start_span(op="db.balance", name="Debit bet"):
                    self._update_coins(request.user_id, -request.bet)

                with start_span(op="game.rng", name="Resolve outcome") as span:
                    outcome = self.game_resolver.resolve(request.game_type, request.bet)
                    span.set_data("won", outcome.won)
                    span.set_data("win_amount", outcome.win_amount)

                if outcome.won:
                    with start_span(op="db.balance", name="Credit winnings"):
                        self._update_coins(request.user_id, outcome.win_amount)

                xp_earned = compute_xp_earned(request.bet, outcome.won, outcome.win_amount)
                with start_span(op="db.xp", name="Apply XP"):
                    updated_user = self.entity_store.update_user_xp(request.user_id, xp_earned)
                    if updated_user is None:
                        raise InternalError()

                with start_span(op="db.insert", name="Record game history"):
                    self.entity_store.create_game_history(
                        user_id=request.user_id,
                        game_type=request.game_type,
                        bet=request.bet,
                        won=outcome.won,
                        win_amount=outcome.win_amount
                    )

                snapshot = updated_user.snapshot()

        BusinessMetrics.track_play(request.game_type, request.bet, outcome.won, outcome.win_amount)
        sentry_sdk.set_tag("game.win", str(outcome.won))
        logger.info(
            f"User {request.user_id} played {request.game_type}: bet={request.bet} "
            f"won={outcome.won} win_amount={outcome.win_amount} xp={xp_earned}"
        )

        return PlayResponse(
            won=outcome.won,
            win_amount=outcome.win_amount,
            xp_earned=xp_earned,
            user=snapshot
        )

    def _update_coins(self, user_id: int, delta) -> None:
        if self.entity_store.update_user_coins(user_id, delta) is None:
            raise InternalError()
