"""Models for LLM nutrition and exercise estimates."""

from pydantic import BaseModel, ConfigDict, Field

from fit_tracker.domain.logs import ExerciseType, Intensity

FALLBACK_BREAKDOWN = "Unable to analyze - using estimated values"


class FoodEstimate(BaseModel):
    """Estimated nutrition for a free-text meal description."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    fiber: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    sodium: float | None = Field(default=None, ge=0)
    confidence: float = Field(ge=0, le=100)
    breakdown: list[str] = Field(default_factory=list)
    is_fallback: bool = False


class ExerciseEstimate(BaseModel):
    """Estimated calorie burn for a free-text workout description."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    calories_burned: float = Field(ge=0)
    exercise_type: ExerciseType = Field(strict=False)
    intensity: Intensity = Field(strict=False)
    confidence: float = Field(ge=0, le=100)
    breakdown: list[str] = Field(default_factory=list)
    recommendations: list[str] | None = None
    is_fallback: bool = False


def fallback_food_estimate() -> FoodEstimate:
    """Static estimate used when the food estimate can't be produced."""
    return FoodEstimate(
        calories=300,
        protein=15,
        carbs=30,
        fat=10,
        confidence=50,
        breakdown=[FALLBACK_BREAKDOWN],
        is_fallback=True,
    )


def fallback_exercise_estimate(duration_minutes: int | None) -> ExerciseEstimate:
    """Static estimate used when the exercise estimate can't be produced."""
    calories = round(duration_minutes * 5) if duration_minutes else 200
    return ExerciseEstimate(
        calories_burned=calories,
        exercise_type=ExerciseType.OTHER,
        intensity=Intensity.MODERATE,
        confidence=50,
        breakdown=[FALLBACK_BREAKDOWN],
        is_fallback=True,
    )
