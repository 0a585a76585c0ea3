"""Supabase-backed profile repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fit_tracker.domain.profiles import (
    FitnessGoal,
    ProfileMetrics,
    Sex,
    UserProfile,
    parse_activity_level,
)
from fit_tracker.services.profiles import ProfileRepository

_PROFILE_COLUMNS = (
    "id, email, full_name, age, sex, height_cm, weight_kg, activity_level, "
    "fitness_goal, daily_calorie_goal, created_at, updated_at"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("users")
            .select(_PROFILE_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_profile(
        self,
        user_id: UUID,
        metrics: ProfileMetrics,
        daily_calorie_goal: int | None,
    ) -> UserProfile:
        """Update profile metrics and the derived calorie goal."""
        response = (
            self.client.table("users")
            .update(
                {
                    "age": metrics.age,
                    "sex": _enum_value(metrics.sex),
                    "height_cm": metrics.height_cm,
                    "weight_kg": metrics.weight_kg,
                    "activity_level": _enum_value(metrics.activity_level),
                    "fitness_goal": _enum_value(metrics.fitness_goal),
                    "daily_calorie_goal": daily_calorie_goal,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update profile in Supabase")
        return _parse_profile(response.data[0])


def _enum_value(value: object) -> str | None:
    if value is None:
        return None
    return str(getattr(value, "value", value))


def _parse_timestamp(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def _parse_profile(row: dict[str, object]) -> UserProfile:
    activity_raw = row.get("activity_level")
    sex_raw = row.get("sex")
    goal_raw = row.get("fitness_goal")
    height = row.get("height_cm")
    weight = row.get("weight_kg")
    metrics = ProfileMetrics(
        age=row.get("age"),
        sex=Sex(sex_raw) if sex_raw else None,
        height_cm=float(height) if height is not None else None,
        weight_kg=float(weight) if weight is not None else None,
        activity_level=parse_activity_level(activity_raw) if activity_raw else None,
        fitness_goal=FitnessGoal(goal_raw) if goal_raw else None,
    )
    return UserProfile(
        id=UUID(row["id"]),
        email=str(row.get("email") or ""),
        full_name=row.get("full_name"),
        metrics=metrics,
        daily_calorie_goal=row.get("daily_calorie_goal"),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )
