"""Food logging service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from fit_tracker.domain.logs import FoodLogEntry, MealType
from fit_tracker.domain.stats import day_bounds, to_utc
from fit_tracker.domain.units import round_half_up
from fit_tracker.services.estimation import EstimationService

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food logs, scoped by owner."""

    def create_food_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> FoodLogEntry:
        """Insert a food log and return the stored row."""

    def list_food_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return the user's food logs in [start, end), newest first."""

    def delete_food_log(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete one of the user's food logs. Return False if none matched."""


@dataclass
class FoodLogService:
    """Service that estimates nutrition and persists food logs."""

    estimation_service: EstimationService
    repository: FoodLogRepository

    async def log_food(
        self,
        user_id: UUID,
        description: str,
        meal_type: MealType,
        logged_at: datetime | None = None,
    ) -> FoodLogEntry:
        """Estimate a meal and store it for the user."""
        cleaned = description.strip()
        if not cleaned:
            raise ValueError("Food description is required")

        estimate = await self.estimation_service.estimate_food(cleaned)
        if estimate.is_fallback:
            _logger.warning("Logging food with fallback estimate: user_id=%s", user_id)
        payload: dict[str, object] = {
            "description": cleaned,
            "meal_type": MealType(meal_type).value,
            "calories": round_half_up(estimate.calories),
            "protein": estimate.protein,
            "carbs": estimate.carbs,
            "fat": estimate.fat,
            "fiber": estimate.fiber,
            "sugar": estimate.sugar,
            "sodium": estimate.sodium,
            "confidence": estimate.confidence,
            "ai_analysis": "\n".join(estimate.breakdown),
            "created_at": to_utc(logged_at).isoformat(),
        }
        return self.repository.create_food_log(user_id, payload)

    def list_for_day(
        self, user_id: UUID, day: date, timezone_name: str = "UTC"
    ) -> list[FoodLogEntry]:
        """Return the user's food logs for a calendar day."""
        start, end = day_bounds(day, timezone_name)
        return self.repository.list_food_logs(user_id, start, end)

    def delete(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete a food log owned by the user."""
        return self.repository.delete_food_log(user_id, entry_id)
