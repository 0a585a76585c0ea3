"""Exercise logging service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from fit_tracker.domain.logs import ExerciseLogEntry
from fit_tracker.domain.stats import day_bounds, to_utc
from fit_tracker.domain.units import round_half_up
from fit_tracker.services.estimation import EstimationService

DEFAULT_DURATION_MINUTES = 30

_logger = logging.getLogger(__name__)


class ExerciseLogRepository(Protocol):
    """Persistence interface for exercise logs, scoped by owner."""

    def create_exercise_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> ExerciseLogEntry:
        """Insert an exercise log and return the stored row."""

    def list_exercise_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[ExerciseLogEntry]:
        """Return the user's exercise logs in [start, end), newest first."""

    def delete_exercise_log(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete one of the user's exercise logs. Return False if none matched."""


@dataclass
class ExerciseLogService:
    """Service that estimates calorie burn and persists exercise logs."""

    estimation_service: EstimationService
    repository: ExerciseLogRepository

    async def log_exercise(
        self,
        user_id: UUID,
        description: str,
        duration_minutes: int | None = None,
        logged_at: datetime | None = None,
        weight_kg: float | None = None,
    ) -> ExerciseLogEntry:
        """Estimate a workout and store it for the user."""
        cleaned = description.strip()
        if not cleaned:
            raise ValueError("Exercise description is required")
        if duration_minutes is not None and duration_minutes <= 0:
            raise ValueError("Duration must be positive")

        estimate = await self.estimation_service.estimate_exercise(
            cleaned, duration_minutes, weight_kg
        )
        if estimate.is_fallback:
            _logger.warning(
                "Logging exercise with fallback estimate: user_id=%s", user_id
            )
        payload: dict[str, object] = {
            "description": cleaned,
            "exercise_type": estimate.exercise_type.value,
            "duration_minutes": duration_minutes or DEFAULT_DURATION_MINUTES,
            "intensity": estimate.intensity.value,
            "calories_burned": round_half_up(estimate.calories_burned),
            "confidence": estimate.confidence,
            "ai_analysis": "\n".join(estimate.breakdown),
            "created_at": to_utc(logged_at).isoformat(),
        }
        return self.repository.create_exercise_log(user_id, payload)

    def list_for_day(
        self, user_id: UUID, day: date, timezone_name: str = "UTC"
    ) -> list[ExerciseLogEntry]:
        """Return the user's exercise logs for a calendar day."""
        start, end = day_bounds(day, timezone_name)
        return self.repository.list_exercise_logs(user_id, start, end)

    def delete(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete an exercise log owned by the user."""
        return self.repository.delete_exercise_log(user_id, entry_id)
