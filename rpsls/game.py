from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import ValidationError

from rpsls.errors import ScoreTrackingDisabledError
from rpsls.evaluator import evaluate
from rpsls.hand_picker import HandPicker
from rpsls.rules import UNKNOWN_HAND, build_rules
from rpsls.schemas import HandRequest, Outcome, ScoreResponse
from rpsls.scoreboard import ScoreBoard

logger = logging.getLogger(__name__)


class Game:
    """One game instance: a fixed hand set, its rule table and an optional scoreboard."""

    def __init__(
        self,
        accepted_hands: Sequence[str],
        picker: HandPicker | None = None,
        scoreboard: ScoreBoard | None = None,
    ) -> None:
        self.rules = build_rules(accepted_hands)
        self.accepted_hands = tuple(accepted_hands)
        self.picker = picker or HandPicker()
        self.scoreboard = scoreboard

    @property
    def tracks_score(self) -> bool:
        return self.scoreboard is not None

    def parse_hand(self, body: bytes) -> str:
        try:
            return HandRequest.model_validate_json(body).hand
        except ValidationError as exc:
            logger.debug("unreadable hand request (%d bytes): %s", len(body), exc.errors()[0]["msg"])
            return UNKNOWN_HAND

    def play(self, player_hand: str) -> Outcome:
        server_hand = self.picker.pick(self.accepted_hands)
        outcome = evaluate(player_hand, server_hand, self.rules)
        if self.scoreboard is not None:
            self.scoreboard.record(outcome)
        logger.info("player=%s computer=%s result=%s", player_hand, outcome.computer_hand, outcome.result.value)
        return outcome

    def play_raw(self, body: bytes) -> Outcome:
        return self.play(self.parse_hand(body))

    def score(self) -> ScoreResponse:
        if self.scoreboard is None:
            raise ScoreTrackingDisabledError("score tracking is disabled for this game")
        return self.scoreboard.snapshot()
