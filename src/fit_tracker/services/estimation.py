"""Nutrition and exercise estimation using LLMs."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from fit_tracker.domain.estimation import (
    ExerciseEstimate,
    FoodEstimate,
    fallback_exercise_estimate,
    fallback_food_estimate,
)
from fit_tracker.domain.logs import ExerciseType, Intensity
from fit_tracker.domain.profiles import ProfileMetrics
from fit_tracker.domain.units import cm_to_inches, kg_to_lb

_logger = logging.getLogger(__name__)

ADVICE_FALLBACK = (
    "I'm sorry, I couldn't provide advice at this time. Please consult with a "
    "healthcare professional for personalized fitness guidance."
)

_NULLABLE_NUMBER = {"anyOf": [{"type": "number", "minimum": 0}, {"type": "null"}]}
_STRING_LIST = {"type": "array", "items": {"type": "string"}}

FOOD_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "calories": {"type": "number", "minimum": 0},
        "protein": {"type": "number", "minimum": 0},
        "carbs": {"type": "number", "minimum": 0},
        "fat": {"type": "number", "minimum": 0},
        "fiber": _NULLABLE_NUMBER,
        "sugar": _NULLABLE_NUMBER,
        "sodium": _NULLABLE_NUMBER,
        "confidence": {"type": "number", "minimum": 0, "maximum": 100},
        "breakdown": _STRING_LIST,
    },
    "required": [
        "calories",
        "protein",
        "carbs",
        "fat",
        "fiber",
        "sugar",
        "sodium",
        "confidence",
        "breakdown",
    ],
    "additionalProperties": False,
}

EXERCISE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "calories_burned": {"type": "number", "minimum": 0},
        "exercise_type": {
            "type": "string",
            "enum": [item.value for item in ExerciseType],
        },
        "intensity": {"type": "string", "enum": [item.value for item in Intensity]},
        "confidence": {"type": "number", "minimum": 0, "maximum": 100},
        "breakdown": _STRING_LIST,
        "recommendations": {"anyOf": [_STRING_LIST, {"type": "null"}]},
    },
    "required": [
        "calories_burned",
        "exercise_type",
        "intensity",
        "confidence",
        "breakdown",
        "recommendations",
    ],
    "additionalProperties": False,
}


class EstimationClient(Protocol):
    """Interface for LLM completions."""

    async def complete_json(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
    ) -> dict[str, object]:
        """Return structured output matching the schema."""

    async def complete_text(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        """Return a free-text completion."""


@dataclass
class EstimationService:
    """Service that prompts the LLM and validates its estimates."""

    client: EstimationClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def estimate_food(self, description: str) -> FoodEstimate:
        """Estimate nutrition for a meal, falling back to static values."""
        try:
            raw = await self.client.complete_json(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=_food_prompt(description),
                schema=FOOD_SCHEMA,
                schema_name="food_estimate",
            )
            return FoodEstimate.model_validate(raw)
        except Exception:
            _logger.exception("Food estimation failed, using fallback")
            return fallback_food_estimate()

    async def estimate_exercise(
        self,
        description: str,
        duration_minutes: int | None = None,
        weight_kg: float | None = None,
    ) -> ExerciseEstimate:
        """Estimate calories burned, falling back to a duration-based value."""
        try:
            raw = await self.client.complete_json(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=_exercise_prompt(description, duration_minutes, weight_kg),
                schema=EXERCISE_SCHEMA,
                schema_name="exercise_estimate",
            )
            return ExerciseEstimate.model_validate(raw)
        except Exception:
            _logger.exception("Exercise estimation failed, using fallback")
            return fallback_exercise_estimate(duration_minutes)

    async def get_fitness_advice(
        self, question: str, metrics: ProfileMetrics | None = None
    ) -> str:
        """Answer a fitness question with optional profile context."""
        try:
            answer = await self.client.complete_text(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=_advice_prompt(question, metrics),
            )
        except Exception:
            _logger.exception("Fitness advice failed, using fallback")
            return ADVICE_FALLBACK
        return answer.strip() or ADVICE_FALLBACK


def _food_prompt(description: str) -> str:
    return (
        "Analyze the following food description and estimate its nutrition:\n"
        f'"{description}"\n'
        "Return total calories, grams of protein, carbs and fat, optional grams "
        "of fiber and sugar, optional milligrams of sodium, a confidence from "
        "0 to 100, and a breakdown line per food item. "
        "If portions aren't specified, assume reasonable serving sizes."
    )


def _exercise_prompt(
    description: str, duration_minutes: int | None, weight_kg: float | None
) -> str:
    lines = [
        "Analyze the following exercise description:",
        f'"{description}"',
    ]
    if duration_minutes:
        lines.append(f"Duration: {duration_minutes} minutes")
    if weight_kg:
        lines.append(f"User weight: {kg_to_lb(weight_kg):.0f} lbs")
    else:
        lines.append("Assume average weight of 150 lbs")
    lines.append(
        "Estimate calories burned using standard MET values, classify the "
        "exercise type and intensity, give a confidence from 0 to 100, a "
        "breakdown of the calculation and optional recommendations."
    )
    return "\n".join(lines)


def _advice_prompt(question: str, metrics: ProfileMetrics | None) -> str:
    lines = [
        "You are a helpful fitness and nutrition assistant. Answer the question "
        "with accurate, personalized advice in at most three short paragraphs, "
        "including actionable recommendations and safety considerations.",
    ]
    if metrics is not None:
        lines.extend(
            [
                "User context:",
                f"- Age: {metrics.age or 'Not specified'}",
                f"- Weight: {_format_optional(metrics.weight_kg, kg_to_lb)} lbs",
                f"- Height: {_format_optional(metrics.height_cm, cm_to_inches)} in",
                f"- Fitness goal: {_enum_value(metrics.fitness_goal)}",
                f"- Activity level: {_enum_value(metrics.activity_level)}",
            ]
        )
    lines.append(f'Question: "{question}"')
    return "\n".join(lines)


def _format_optional(
    value: float | None, convert: Callable[[float], float]
) -> str:
    if not value:
        return "Not specified"
    return f"{convert(value):.0f}"


def _enum_value(value: object) -> str:
    if value is None:
        return "Not specified"
    return str(getattr(value, "value", value))
