"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import date
from uuid import UUID
from zoneinfo import ZoneInfo

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware

from fit_tracker.api.auth import require_identity
from fit_tracker.api.auth import router as auth_router
from fit_tracker.api.models import (
    AdviceRequest,
    ExerciseLogRequest,
    FoodLogRequest,
    ProfileForm,
    ProfileResponse,
)
from fit_tracker.app_logging import configure_logging
from fit_tracker.config import parse_allowed_origins
from fit_tracker.containers import AppContainer
from fit_tracker.domain.auth import Identity
from fit_tracker.domain.stats import local_today


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(settings.log_level, timestamps=settings.environment != "local")
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/profile")
    async def get_profile(
        request: Request, identity: Identity = Depends(require_identity)
    ) -> ProfileResponse:
        """Return the caller's profile."""
        state_container: AppContainer = request.app.state.container
        try:
            profile = state_container.profile_service.get_profile(identity.user_id)
        except Exception as exc:
            logger.exception("Failed to load profile: user_id=%s", identity.user_id)
            raise _bad_gateway(state_container, exc, "Error loading profile.") from exc
        if profile is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return ProfileResponse.from_profile(profile)

    @app.put("/profile")
    async def update_profile(
        form: ProfileForm,
        request: Request,
        identity: Identity = Depends(require_identity),
    ) -> ProfileResponse:
        """Save body metrics and recompute the daily calorie goal."""
        state_container: AppContainer = request.app.state.container
        try:
            profile = state_container.profile_service.update_metrics(
                identity.user_id, form.to_metrics()
            )
        except Exception as exc:
            logger.exception("Failed to update profile: user_id=%s", identity.user_id)
            raise _bad_gateway(
                state_container, exc, "Error updating profile. Please try again later."
            ) from exc
        return ProfileResponse.from_profile(profile)

    @app.get("/profile/goals")
    async def get_goals(
        request: Request, identity: Identity = Depends(require_identity)
    ) -> dict[str, object]:
        """Return TDEE and macro gram targets."""
        state_container: AppContainer = request.app.state.container
        try:
            goals = state_container.profile_service.get_goals(identity.user_id)
        except Exception as exc:
            logger.exception("Failed to load goals: user_id=%s", identity.user_id)
            raise _bad_gateway(state_container, exc, "Error loading goals.") from exc
        return asdict(goals)

    @app.post("/food-logs", status_code=status.HTTP_201_CREATED)
    async def create_food_log(
        payload: FoodLogRequest,
        request: Request,
        identity: Identity = Depends(require_identity),
    ) -> dict[str, object]:
        """Estimate and store a meal."""
        state_container: AppContainer = request.app.state.container
        try:
            entry = await state_container.food_log_service.log_food(
                identity.user_id,
                payload.description,
                payload.meal_type,
                payload.logged_at,
            )
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        except Exception as exc:
            logger.exception("Failed to log food: user_id=%s", identity.user_id)
            raise _bad_gateway(
                state_container, exc, "Error logging food. Please try again later."
            ) from exc
        return asdict(entry)

    @app.get("/food-logs")
    async def list_food_logs(
        request: Request,
        day: date | None = None,
        timezone: str = "UTC",
        identity: Identity = Depends(require_identity),
    ) -> dict[str, object]:
        """List the caller's food logs for a day."""
        state_container: AppContainer = request.app.state.container
        _require_timezone(timezone)
        try:
            entries = state_container.food_log_service.list_for_day(
                identity.user_id, day or local_today(timezone), timezone
            )
        except Exception as exc:
            logger.exception("Failed to list food logs: user_id=%s", identity.user_id)
            raise _bad_gateway(
                state_container, exc, "Error loading food logs."
            ) from exc
        return {"entries": [asdict(entry) for entry in entries]}

    @app.delete("/food-logs/{entry_id}")
    async def delete_food_log(
        entry_id: UUID,
        request: Request,
        identity: Identity = Depends(require_identity),
    ) -> dict[str, str]:
        """Delete one of the caller's food logs."""
        state_container: AppContainer = request.app.state.container
        try:
            deleted = state_container.food_log_service.delete(
                identity.user_id, entry_id
            )
        except Exception as exc:
            logger.exception("Failed to delete food log: entry_id=%s", entry_id)
            raise _bad_gateway(
                state_container, exc, "Error deleting food log."
            ) from exc
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "ok"}

    @app.post("/exercise-logs", status_code=status.HTTP_201_CREATED)
    async def create_exercise_log(
        payload: ExerciseLogRequest,
        request: Request,
        identity: Identity = Depends(require_identity),
    ) -> dict[str, object]:
        """Estimate and store a workout."""
        state_container: AppContainer = request.app.state.container
        try:
            profile = state_container.profile_service.get_profile(identity.user_id)
            entry = await state_container.exercise_log_service.log_exercise(
                identity.user_id,
                payload.description,
                duration_minutes=payload.duration_minutes,
                logged_at=payload.logged_at,
                weight_kg=profile.metrics.weight_kg if profile else None,
            )
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        except Exception as exc:
            logger.exception("Failed to log exercise: user_id=%s", identity.user_id)
            raise _bad_gateway(
                state_container, exc, "Error logging exercise. Please try again later."
            ) from exc
        return asdict(entry)

    @app.get("/exercise-logs")
    async def list_exercise_logs(
        request: Request,
        day: date | None = None,
        timezone: str = "UTC",
        identity: Identity = Depends(require_identity),
    ) -> dict[str, object]:
        """List the caller's exercise logs for a day."""
        state_container: AppContainer = request.app.state.container
        _require_timezone(timezone)
        try:
            entries = state_container.exercise_log_service.list_for_day(
                identity.user_id, day or local_today(timezone), timezone
            )
        except Exception as exc:
            logger.exception(
                "Failed to list exercise logs: user_id=%s", identity.user_id
            )
            raise _bad_gateway(
                state_container, exc, "Error loading exercise logs."
            ) from exc
        return {"entries": [asdict(entry) for entry in entries]}

    @app.delete("/exercise-logs/{entry_id}")
    async def delete_exercise_log(
        entry_id: UUID,
        request: Request,
        identity: Identity = Depends(require_identity),
    ) -> dict[str, str]:
        """Delete one of the caller's exercise logs."""
        state_container: AppContainer = request.app.state.container
        try:
            deleted = state_container.exercise_log_service.delete(
                identity.user_id, entry_id
            )
        except Exception as exc:
            logger.exception("Failed to delete exercise log: entry_id=%s", entry_id)
            raise _bad_gateway(
                state_container, exc, "Error deleting exercise log."
            ) from exc
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "ok"}

    @app.get("/dashboard")
    async def dashboard(
        request: Request,
        day: date | None = None,
        timezone: str = "UTC",
        identity: Identity = Depends(require_identity),
    ) -> dict[str, object]:
        """Return the day's calorie balance and macro progress."""
        state_container: AppContainer = request.app.state.container
        _require_timezone(timezone)
        dashboard_service = state_container.dashboard_service
        try:
            summary = dashboard_service.get_day(identity.user_id, day, timezone)
            macros = dashboard_service.get_macro_progress(
                identity.user_id, summary.day, timezone
            )
        except Exception as exc:
            logger.exception("Failed to load dashboard: user_id=%s", identity.user_id)
            raise _bad_gateway(
                state_container, exc, "Error loading dashboard."
            ) from exc
        return {**asdict(summary), "macros": [asdict(macro) for macro in macros]}

    @app.get("/dashboard/week")
    async def dashboard_week(
        request: Request,
        timezone: str = "UTC",
        identity: Identity = Depends(require_identity),
    ) -> dict[str, object]:
        """Return this week's daily summaries and averages."""
        state_container: AppContainer = request.app.state.container
        _require_timezone(timezone)
        try:
            summary = state_container.dashboard_service.get_week(
                identity.user_id, timezone
            )
        except Exception as exc:
            logger.exception("Failed to load week: user_id=%s", identity.user_id)
            raise _bad_gateway(
                state_container, exc, "Error loading weekly stats."
            ) from exc
        return asdict(summary)

    @app.post("/advice")
    async def advice(
        payload: AdviceRequest,
        request: Request,
        identity: Identity = Depends(require_identity),
    ) -> dict[str, str]:
        """Answer a fitness question using the caller's profile as context."""
        state_container: AppContainer = request.app.state.container
        try:
            profile = state_container.profile_service.get_profile(identity.user_id)
        except Exception:
            logger.exception(
                "Profile unavailable for advice: user_id=%s", identity.user_id
            )
            profile = None
        answer = await state_container.estimation_service.get_fitness_advice(
            payload.question, profile.metrics if profile else None
        )
        return {"answer": answer}

    return app


def _bad_gateway(
    state_container: AppContainer, exc: Exception, fallback: str
) -> HTTPException:
    """Return a 502 with a user-facing message and local debug info."""
    detail = fallback
    if state_container.settings.environment == "local":
        debug = f"{type(exc).__name__}: {exc}".strip()
        if debug:
            detail = f"{fallback} (debug: {debug})"
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)


def _require_timezone(value: str) -> None:
    if not _is_valid_timezone(value):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown timezone: {value}",
        )


def _is_valid_timezone(value: str) -> bool:
    try:
        ZoneInfo(value)
    except Exception:
        return False
    return True
