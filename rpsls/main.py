from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from starlette.requests import ClientDisconnect

from rpsls.config import Settings, settings
from rpsls.errors import ScoreTrackingDisabledError
from rpsls.game import Game
from rpsls.hand_picker import HandPicker
from rpsls.rules import UNKNOWN_HAND
from rpsls.schemas import HealthResponse, Outcome, ScoreResponse, ServiceInfo
from rpsls.scoreboard import ScoreBoard

logger = logging.getLogger(__name__)


def create_game(config: Settings) -> Game:
    return Game(
        config.accepted_hands,
        picker=HandPicker(seed=config.random_seed),
        scoreboard=ScoreBoard() if config.track_score else None,
    )


def create_app(config: Settings | None = None, game: Game | None = None) -> FastAPI:
    config = config or settings
    game = game or create_game(config)
    logger.info("starting game with hands %s (score tracking %s)", ", ".join(game.accepted_hands), game.tracks_score)

    api = FastAPI(title="Rock Paper Scissors Lizard Spock", version="0.1.0")
    api.state.game = game

    @api.get("/", response_model=ServiceInfo)
    def root() -> ServiceInfo:
        return ServiceInfo(
            message="Rock Paper Scissors Lizard Spock API",
            accepted_hands=list(game.accepted_hands),
            track_score=game.tracks_score,
        )

    @api.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @api.post("/game", response_model=Outcome, response_model_exclude_none=True)
    async def play(request: Request) -> Outcome:
        # Bad bodies are played as an unknown hand so the response is always 200.
        try:
            body = await request.body()
        except ClientDisconnect:
            logger.debug("client disconnected before the hand was read")
            return game.play(UNKNOWN_HAND)
        return game.play_raw(body)

    @api.get("/score", response_model=ScoreResponse)
    def score() -> ScoreResponse:
        try:
            return game.score()
        except ScoreTrackingDisabledError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    return api


app = create_app()
