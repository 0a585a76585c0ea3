"""User profile service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fit_tracker.domain.goals import (
    EMPTY_GOALS,
    NutrientGoals,
    calculate_nutrient_goals,
    daily_calorie_goal,
)
from fit_tracker.domain.profiles import ProfileMetrics, UserProfile


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile for a user, if present."""

    def update_profile(
        self,
        user_id: UUID,
        metrics: ProfileMetrics,
        daily_calorie_goal: int | None,
    ) -> UserProfile:
        """Persist metrics and the derived calorie goal."""


@dataclass
class ProfileService:
    """Service for reading and updating profiles."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile."""
        return self.repository.get_profile(user_id)

    def update_metrics(self, user_id: UUID, metrics: ProfileMetrics) -> UserProfile:
        """Save metrics and recompute the daily calorie goal."""
        return self.repository.update_profile(
            user_id, metrics, daily_calorie_goal(metrics)
        )

    def get_goals(self, user_id: UUID) -> NutrientGoals:
        """Return calorie and macro goals for the user's current metrics."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            return EMPTY_GOALS
        return calculate_nutrient_goals(profile.metrics)
