from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, conint, model_validator


HandName = str


class Result(str, Enum):
    WIN = "WIN"
    LOST = "LOST"
    DRAW = "DRAW"
    UNKNOWN = "UNKNOWN"


class HandRequest(BaseModel):
    hand: HandName


class Outcome(BaseModel):
    """Result of one round. ``computer_hand`` is revealed unless the result is UNKNOWN."""

    result: Result
    computer_hand: HandName | None = Field(default=None, alias="computerHand")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="after")
    def _check_revealed_hand(self) -> "Outcome":
        if self.result is Result.UNKNOWN and self.computer_hand is not None:
            raise ValueError("UNKNOWN outcome must not reveal the computer hand")
        if self.result is not Result.UNKNOWN and self.computer_hand is None:
            raise ValueError(f"{self.result.value} outcome must reveal the computer hand")
        return self

    @classmethod
    def unknown(cls) -> "Outcome":
        return cls(result=Result.UNKNOWN)


class ScoreResponse(BaseModel):
    wins: conint(ge=0) = Field(default=0, alias="Wins")
    losses: conint(ge=0) = Field(default=0, alias="Losses")
    draws: conint(ge=0) = Field(default=0, alias="Draws")

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    status: str


class ServiceInfo(BaseModel):
    message: str
    accepted_hands: list[HandName]
    track_score: bool
