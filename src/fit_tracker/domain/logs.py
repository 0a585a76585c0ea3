"""Domain models for food and exercise logs."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class MealType(str, Enum):
    """Meal category for a food log."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class ExerciseType(str, Enum):
    """Exercise category for an exercise log."""

    CARDIO = "cardio"
    STRENGTH = "strength"
    FLEXIBILITY = "flexibility"
    SPORTS = "sports"
    OTHER = "other"


class Intensity(str, Enum):
    """Exercise intensity."""

    LIGHT = "light"
    MODERATE = "moderate"
    VIGOROUS = "vigorous"
    HIGH = "high"


@dataclass(frozen=True)
class FoodLogEntry:
    """A logged meal with estimated nutrition."""

    id: UUID
    user_id: UUID
    description: str
    meal_type: MealType
    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float | None
    sugar_g: float | None
    sodium_mg: float | None
    confidence: float | None
    ai_analysis: str | None
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ExerciseLogEntry:
    """A logged workout with estimated calorie burn."""

    id: UUID
    user_id: UUID
    description: str
    exercise_type: ExerciseType
    duration_minutes: int
    intensity: Intensity
    calories_burned: int
    confidence: float | None
    ai_analysis: str | None
    created_at: datetime
    updated_at: datetime | None = None
