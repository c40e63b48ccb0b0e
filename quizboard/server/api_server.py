"""FastAPI server that exposes the scoreboard to presentation clients."""

from __future__ import annotations

from threading import Thread

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field
import uvicorn

from quizboard.constants.about import APP_NAME, APP_VERSION
from quizboard.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quizboard.constants.quiz_constants import DEFAULT_REVEAL_TIER_SIZE, DEFAULT_SHOWCASE_SIZE
from quizboard.core.leaderboard_views import ShowcaseEntry
from quizboard.core.models import QuizConfig, RoundDescriptor, TeamEntry, TeamResult
from quizboard.core.score_manager import ScoreManager

_NULLABLE_CONFIG_FIELDS = frozenset({"standard_scale", "ex_aequo_target_value"})


class ConfigPayload(BaseModel):
    """Partial update of the quiz configuration; omitted fields are unchanged."""

    scale_conversion_enabled: bool | None = None
    standard_scale: float | None = None
    gradient_enabled: bool | None = None
    ex_aequo_enabled: bool | None = None
    ex_aequo_target_value: float | None = None


class RoundPayload(BaseModel):
    title: str = ""
    max_score: float = Field(gt=0)
    exclude_from_scale: bool = False
    is_tiebreak_round: bool = False


class RoundUpdatePayload(BaseModel):
    """Partial update of a round; omitted fields are unchanged."""

    title: str | None = None
    max_score: float | None = Field(default=None, gt=0)
    exclude_from_scale: bool | None = None
    is_tiebreak_round: bool | None = None


class TeamPayload(BaseModel):
    name: str


class OrderPayload(BaseModel):
    """Zero-based position the item should move to."""

    target_index: int


class ExcludedPayload(BaseModel):
    excluded: bool


class ScorePayload(BaseModel):
    round_id: int
    team_entry_id: int
    points: float = Field(ge=0)


def _config_dict(config: QuizConfig) -> dict[str, object]:
    return {
        "scale_conversion_enabled": config.scale_conversion_enabled,
        "standard_scale": config.standard_scale,
        "gradient_enabled": config.gradient_enabled,
        "ex_aequo_enabled": config.ex_aequo_enabled,
        "ex_aequo_target_value": config.ex_aequo_target_value,
    }


def _round_dict(round_: RoundDescriptor) -> dict[str, object]:
    return {
        "id": round_.id,
        "title": round_.title,
        "sequence_nr": round_.sequence_nr,
        "max_score": round_.max_score,
        "exclude_from_scale": round_.exclude_from_scale,
        "is_tiebreak_round": round_.is_tiebreak_round,
    }


def _team_dict(team: TeamEntry) -> dict[str, object]:
    return {
        "id": team.id,
        "display_nr": team.display_nr,
        "name": team.name,
        "excluded": team.excluded,
    }


def _result_dict(result: TeamResult) -> dict[str, object]:
    return {
        "team_entry_id": result.team_entry_id,
        "display_nr": result.display_nr,
        "name": result.name,
        "rank": result.rank,
        "total": result.total,
        "tiebreak_value": result.tiebreak_value,
    }


def _showcase_dict(entry: ShowcaseEntry) -> dict[str, object]:
    return {**_result_dict(entry.result), "color": entry.color.to_hex()}


def _get_score_manager_dependency(score_manager: ScoreManager):
    def dependency() -> ScoreManager:
        return score_manager

    return dependency


def create_api_app(score_manager: ScoreManager) -> FastAPI:
    """Create a FastAPI application wired to the provided score manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    manager_dep = _get_score_manager_dependency(score_manager)

    @app.get("/quiz")
    def get_quiz(manager: ScoreManager = Depends(manager_dep)) -> dict[str, object]:
        snapshot = manager.snapshot()
        return {
            "config": _config_dict(snapshot.config),
            "rounds": [_round_dict(r) for r in snapshot.rounds],
            "teams": [_team_dict(t) for t in snapshot.teams],
        }

    @app.put("/config")
    def update_config(
        payload: ConfigPayload,
        manager: ScoreManager = Depends(manager_dep),
    ) -> dict[str, object]:
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in _NULLABLE_CONFIG_FIELDS
        }
        try:
            config = manager.update_config(**changes)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _config_dict(config)

    @app.post("/rounds", status_code=201)
    def add_round(
        payload: RoundPayload,
        manager: ScoreManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            round_ = manager.add_round(
                payload.title,
                payload.max_score,
                exclude_from_scale=payload.exclude_from_scale,
                is_tiebreak_round=payload.is_tiebreak_round,
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _round_dict(round_)

    @app.patch("/rounds/{round_id}")
    def update_round(
        round_id: int,
        payload: RoundUpdatePayload,
        manager: ScoreManager = Depends(manager_dep),
    ) -> dict[str, object]:
        changes = payload.model_dump(exclude_none=True)
        try:
            round_ = manager.update_round(round_id, **changes)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Round {round_id} not found") from exc
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _round_dict(round_)

    @app.put("/rounds/{round_id}/order")
    def move_round(
        round_id: int,
        payload: OrderPayload,
        manager: ScoreManager = Depends(manager_dep),
    ) -> list[dict[str, object]]:
        try:
            rounds = manager.move_round(round_id, payload.target_index)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Round {round_id} not found") from exc
        return [_round_dict(r) for r in rounds]

    @app.delete("/rounds/{round_id}", status_code=204)
    def delete_round(round_id: int, manager: ScoreManager = Depends(manager_dep)) -> None:
        try:
            manager.delete_round(round_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Round {round_id} not found") from exc

    @app.post("/teams", status_code=201)
    def add_team(
        payload: TeamPayload,
        manager: ScoreManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            team = manager.add_team(payload.name)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _team_dict(team)

    @app.put("/teams/{team_id}/order")
    def move_team(
        team_id: int,
        payload: OrderPayload,
        manager: ScoreManager = Depends(manager_dep),
    ) -> list[dict[str, object]]:
        try:
            teams = manager.move_team(team_id, payload.target_index)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Team {team_id} not found") from exc
        return [_team_dict(t) for t in teams]

    @app.put("/teams/{team_id}/excluded")
    def set_team_excluded(
        team_id: int,
        payload: ExcludedPayload,
        manager: ScoreManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            team = manager.set_team_excluded(team_id, payload.excluded)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Team {team_id} not found") from exc
        return _team_dict(team)

    @app.delete("/teams/{team_id}", status_code=204)
    def delete_team(team_id: int, manager: ScoreManager = Depends(manager_dep)) -> None:
        try:
            manager.delete_team(team_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Team {team_id} not found") from exc

    @app.put("/scores")
    def record_score(
        payload: ScorePayload,
        manager: ScoreManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            record = manager.record_score(payload.round_id, payload.team_entry_id, payload.points)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return {
            "round_id": record.round_id,
            "team_entry_id": record.team_entry_id,
            "points": record.points,
        }

    @app.delete("/scores", status_code=204)
    def clear_score(
        round_id: int,
        team_entry_id: int,
        manager: ScoreManager = Depends(manager_dep),
    ) -> None:
        try:
            manager.clear_score(round_id, team_entry_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc

    @app.get("/ranking")
    def get_ranking(manager: ScoreManager = Depends(manager_dep)) -> list[dict[str, object]]:
        return [_result_dict(result) for result in manager.get_ranking()]

    @app.get("/board")
    def get_board(manager: ScoreManager = Depends(manager_dep)) -> dict[str, object]:
        board = manager.get_board()
        return {
            "rounds": [_round_dict(r) for r in board.rounds],
            "tiebreak_round": _round_dict(board.tiebreak_round) if board.tiebreak_round else None,
            "rows": [
                {
                    **_result_dict(row.result),
                    "round_points": list(row.round_points),
                    "color": row.color.to_hex(),
                    "background": row.color.to_rgba_css(0.15),
                }
                for row in board.rows
            ],
        }

    @app.get("/chart")
    def get_chart(manager: ScoreManager = Depends(manager_dep)) -> dict[str, object]:
        chart = manager.get_chart()
        return {
            "max_possible_total": chart.max_possible_total,
            "bars": [
                {
                    **_result_dict(bar.result),
                    "fill": bar.color.to_rgba_css(0.7),
                    "border": bar.color.to_rgba_css(1.0),
                }
                for bar in chart.bars
            ],
        }

    @app.get("/showcase")
    def get_showcase(
        limit: int = Query(DEFAULT_SHOWCASE_SIZE, ge=0),
        manager: ScoreManager = Depends(manager_dep),
    ) -> list[dict[str, object]]:
        return [_showcase_dict(entry) for entry in manager.get_showcase(limit)]

    @app.get("/reveal")
    def get_reveal(
        revealed_count: int = Query(0, ge=0),
        tier_size: int = Query(DEFAULT_REVEAL_TIER_SIZE, ge=1),
        manager: ScoreManager = Depends(manager_dep),
    ) -> dict[str, object]:
        reveal = manager.get_reveal(revealed_count, tier_size)
        return {
            "revealed_count": reveal.revealed_count,
            "team_count": reveal.team_count,
            "tier_size": reveal.tier_size,
            "complete": reveal.is_complete,
            "next_rank": reveal.next_rank,
            "revealed": [_showcase_dict(entry) for entry in reveal.revealed],
        }

    return app


def start_api_server(
    score_manager: ScoreManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(score_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="ScoreboardApiServer", daemon=True)
    thread.start()
    return thread
