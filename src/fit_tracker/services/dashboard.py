"""Dashboard statistics for food and exercise logs."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from uuid import UUID

from fit_tracker.domain.goals import EMPTY_GOALS, calculate_nutrient_goals
from fit_tracker.domain.logs import ExerciseLogEntry, FoodLogEntry
from fit_tracker.domain.stats import (
    DailySummary,
    MacroProgress,
    MacroTotals,
    PeriodSummary,
    day_bounds,
    local_day,
    local_today,
)
from fit_tracker.services.exercise_logs import ExerciseLogRepository
from fit_tracker.services.food_logs import FoodLogRepository
from fit_tracker.services.profiles import ProfileRepository

DEFAULT_CALORIE_GOAL = 2000
DAYS_PER_WEEK = 7


@dataclass
class DashboardService:
    """Service for computing calorie balance by timezone."""

    food_repository: FoodLogRepository
    exercise_repository: ExerciseLogRepository
    profile_repository: ProfileRepository
    default_calorie_goal: int = DEFAULT_CALORIE_GOAL

    def get_day(
        self, user_id: UUID, day: date | None = None, timezone_name: str = "UTC"
    ) -> DailySummary:
        """Return consumed, burned and remaining calories for a day."""
        resolved_day = day or local_today(timezone_name)
        start, end = day_bounds(resolved_day, timezone_name)
        foods = self.food_repository.list_food_logs(user_id, start, end)
        exercises = self.exercise_repository.list_exercise_logs(user_id, start, end)
        return _summarize_day(
            resolved_day,
            foods,
            exercises,
            self._calorie_goal(user_id),
            timezone_name,
        )

    def get_macro_progress(
        self, user_id: UUID, day: date | None = None, timezone_name: str = "UTC"
    ) -> list[MacroProgress]:
        """Return macro intake for a day against the profile's goals."""
        resolved_day = day or local_today(timezone_name)
        start, end = day_bounds(resolved_day, timezone_name)
        foods = self.food_repository.list_food_logs(user_id, start, end)
        intake = _sum_intake(foods)
        profile = self.profile_repository.get_profile(user_id)
        goals = calculate_nutrient_goals(profile.metrics) if profile else EMPTY_GOALS
        return [
            _progress("protein", intake.protein_g, goals.protein_g),
            _progress("carbs", intake.carbs_g, goals.carbs_g),
            _progress("fat", intake.fat_g, goals.fat_g),
        ]

    def get_week(
        self, user_id: UUID, timezone_name: str = "UTC", today: date | None = None
    ) -> PeriodSummary:
        """Return week-to-date summaries, Monday first, and daily averages."""
        resolved_today = today or local_today(timezone_name)
        week_start = resolved_today - timedelta(days=resolved_today.weekday())
        week_end = week_start + timedelta(days=DAYS_PER_WEEK - 1)
        start, _ = day_bounds(week_start, timezone_name)
        _, end = day_bounds(week_end, timezone_name)
        foods = self.food_repository.list_food_logs(user_id, start, end)
        exercises = self.exercise_repository.list_exercise_logs(user_id, start, end)
        goal = self._calorie_goal(user_id)

        daily = [
            _summarize_day(
                week_start + timedelta(days=offset),
                foods,
                exercises,
                goal,
                timezone_name,
            )
            for offset in range(DAYS_PER_WEEK)
        ]
        total_days = max(len(daily), 1)
        return PeriodSummary(
            daily=daily,
            avg_consumed=sum(entry.consumed for entry in daily) / total_days,
            avg_burned=sum(entry.burned for entry in daily) / total_days,
            avg_net=sum(entry.net for entry in daily) / total_days,
        )

    def _calorie_goal(self, user_id: UUID) -> int:
        profile = self.profile_repository.get_profile(user_id)
        if profile and profile.daily_calorie_goal:
            return profile.daily_calorie_goal
        return self.default_calorie_goal


def _summarize_day(
    day: date,
    foods: list[FoodLogEntry],
    exercises: list[ExerciseLogEntry],
    calorie_goal: int,
    timezone_name: str,
) -> DailySummary:
    day_foods = [log for log in foods if _on_day(log.created_at, day, timezone_name)]
    day_exercises = [
        log for log in exercises if _on_day(log.created_at, day, timezone_name)
    ]
    intake = _sum_intake(day_foods)
    consumed = sum(log.calories for log in day_foods)
    burned = sum(log.calories_burned for log in day_exercises)
    net = consumed - burned
    progress = min(net / calorie_goal * 100, 100.0) if calorie_goal > 0 else 0.0
    return DailySummary(
        day=day,
        consumed=consumed,
        burned=burned,
        net=net,
        calorie_goal=calorie_goal,
        remaining=calorie_goal - net,
        progress_percent=progress,
        intake=intake,
        food_count=len(day_foods),
        exercise_count=len(day_exercises),
    )


def _sum_intake(foods: list[FoodLogEntry]) -> MacroTotals:
    total = MacroTotals(calories=0, protein_g=0, carbs_g=0, fat_g=0)
    for log in foods:
        total = MacroTotals(
            calories=total.calories + log.calories,
            protein_g=total.protein_g + (log.protein_g or 0),
            carbs_g=total.carbs_g + (log.carbs_g or 0),
            fat_g=total.fat_g + (log.fat_g or 0),
        )
    return total


def _progress(name: str, intake_g: float, goal_g: int) -> MacroProgress:
    percent = intake_g / goal_g * 100 if goal_g > 0 else 0.0
    return MacroProgress(name=name, intake_g=intake_g, goal_g=goal_g, percent=percent)


def _on_day(moment: datetime, day: date, timezone_name: str) -> bool:
    return local_day(moment, timezone_name) == day
