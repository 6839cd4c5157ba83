from __future__ import annotations

from threading import Lock

from rpsls.schemas import Outcome, Result, ScoreResponse


class ScoreBoard:
    def __init__(self) -> None:
        self._wins = 0
        self._losses = 0
        self._draws = 0
        self._lock = Lock()

    def record(self, outcome: Outcome) -> None:
        if outcome.result is Result.UNKNOWN:
            return
        with self._lock:
            if outcome.result is Result.WIN:
                self._wins += 1
            elif outcome.result is Result.LOST:
                self._losses += 1
            elif outcome.result is Result.DRAW:
                self._draws += 1

    def snapshot(self) -> ScoreResponse:
        with self._lock:
            return ScoreResponse(wins=self._wins, losses=self._losses, draws=self._draws)
