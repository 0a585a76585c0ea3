"""Domain models for user profiles."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID


class Sex(str, Enum):
    """Biological sex category used to pick the BMR formula."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(str, Enum):
    """Ordered activity levels."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class FitnessGoal(str, Enum):
    """Fitness goals that shift the calorie target."""

    LOSE_WEIGHT = "lose_weight"
    MAINTAIN_WEIGHT = "maintain_weight"
    GAIN_WEIGHT = "gain_weight"
    BUILD_MUSCLE = "build_muscle"


# Older clients sent "high" for what is now "active".
ACTIVITY_LEVEL_ALIASES: dict[str, ActivityLevel] = {"high": ActivityLevel.ACTIVE}


def parse_activity_level(value: str) -> ActivityLevel:
    """Parse an activity level, accepting legacy aliases."""
    normalized = value.strip().lower()
    if normalized in ACTIVITY_LEVEL_ALIASES:
        return ACTIVITY_LEVEL_ALIASES[normalized]
    return ActivityLevel(normalized)


@dataclass(frozen=True)
class ProfileMetrics:
    """Body metrics and preferences that drive the goal calculator."""

    age: int | None = None
    sex: Sex | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: ActivityLevel | None = None
    fitness_goal: FitnessGoal | None = None

    def is_complete(self) -> bool:
        """Return True when every metric is present."""
        return all(
            value is not None
            for value in (
                self.age,
                self.sex,
                self.height_cm,
                self.weight_kg,
                self.activity_level,
                self.fitness_goal,
            )
        )


@dataclass(frozen=True)
class UserProfile:
    """Represents a user profile row."""

    id: UUID
    email: str
    full_name: str | None = None
    metrics: ProfileMetrics = field(default_factory=ProfileMetrics)
    daily_calorie_goal: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
