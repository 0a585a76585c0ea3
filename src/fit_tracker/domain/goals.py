"""Daily energy and macronutrient goal calculator.

BMR uses the Mifflin-St Jeor equation. TDEE scales BMR by an activity
multiplier and then shifts it by a fixed amount for the fitness goal. Protein
and fat are set per kilogram of body weight and carbohydrates fill the rest of
the calorie budget.

All rounding goes through ``round_half_up`` (ties away from zero).
"""

from dataclasses import dataclass

from fit_tracker.domain.profiles import (
    ActivityLevel,
    FitnessGoal,
    ProfileMetrics,
    Sex,
)
from fit_tracker.domain.units import round_half_up

DEFAULT_ACTIVITY_MULTIPLIER = 1.2
ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

GOAL_ADJUSTMENTS: dict[FitnessGoal, float] = {
    FitnessGoal.LOSE_WEIGHT: -500.0,
    FitnessGoal.MAINTAIN_WEIGHT: 0.0,
    FitnessGoal.GAIN_WEIGHT: 500.0,
    FitnessGoal.BUILD_MUSCLE: 500.0,
}

PROTEIN_G_PER_KG = 2.0
FAT_G_PER_KG = 0.9
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


@dataclass(frozen=True)
class NutrientGoals:
    """Daily calorie and macro targets."""

    tdee: int
    protein_g: int
    carbs_g: int
    fat_g: int


EMPTY_GOALS = NutrientGoals(tdee=0, protein_g=0, carbs_g=0, fat_g=0)


def calculate_bmr(
    sex: Sex | str, weight_kg: float, height_cm: float, age: int
) -> float:
    """Return basal metabolic rate in kcal/day."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if sex == Sex.MALE:
        return base + 5
    return base - 161


def activity_multiplier(level: ActivityLevel | str | None) -> float:
    """Return the TDEE multiplier for an activity level."""
    return ACTIVITY_MULTIPLIERS.get(level, DEFAULT_ACTIVITY_MULTIPLIER)


def adjust_for_goal(tdee: float, goal: FitnessGoal | str | None) -> float:
    """Shift TDEE by the surplus or deficit for a fitness goal."""
    return tdee + GOAL_ADJUSTMENTS.get(goal, 0.0)


def calculate_nutrient_goals(metrics: ProfileMetrics) -> NutrientGoals:
    """Compute calorie and macro goals, or zeros when metrics are incomplete."""
    if not _has_all_inputs(metrics):
        return EMPTY_GOALS

    bmr = calculate_bmr(
        metrics.sex, metrics.weight_kg, metrics.height_cm, metrics.age
    )
    tdee = adjust_for_goal(
        bmr * activity_multiplier(metrics.activity_level), metrics.fitness_goal
    )

    protein_g = round_half_up(PROTEIN_G_PER_KG * metrics.weight_kg)
    fat_g = round_half_up(FAT_G_PER_KG * metrics.weight_kg)
    remaining = tdee - protein_g * KCAL_PER_G_PROTEIN - fat_g * KCAL_PER_G_FAT
    carbs_g = round_half_up(remaining / KCAL_PER_G_CARBS)

    return NutrientGoals(
        tdee=round_half_up(tdee),
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
    )


def daily_calorie_goal(metrics: ProfileMetrics) -> int | None:
    """Return the goal-adjusted daily calorie target, if it can be computed."""
    if not _has_all_inputs(metrics):
        return None
    return calculate_nutrient_goals(metrics).tdee


def _has_all_inputs(metrics: ProfileMetrics) -> bool:
    # Zero counts as absent, same as an unset form field.
    return all(
        (
            metrics.age,
            metrics.sex,
            metrics.height_cm,
            metrics.weight_kg,
            metrics.activity_level,
            metrics.fitness_goal,
        )
    )
