"""Request and response models for the HTTP API."""

import logging
from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from fit_tracker.domain.auth import AuthSession
from fit_tracker.domain.logs import MealType
from fit_tracker.domain.profiles import (
    ACTIVITY_LEVEL_ALIASES,
    ActivityLevel,
    FitnessGoal,
    ProfileMetrics,
    Sex,
    UserProfile,
    parse_activity_level,
)
from fit_tracker.domain.units import inches_to_cm, lb_to_kg

_logger = logging.getLogger(__name__)

# Limits for the converted values; the columns are NUMERIC(5,2) and > 0.
MAX_HEIGHT_CM = 275.0
MAX_WEIGHT_KG = 650.0


class SignUpRequest(BaseModel):
    """Registration payload."""

    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=6)
    full_name: str | None = Field(default=None, max_length=200)


class SignInRequest(BaseModel):
    """Email and password sign-in payload."""

    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1)


class SessionResponse(BaseModel):
    """Tokens returned after sign-in."""

    user_id: UUID
    email: str | None
    access_token: str
    refresh_token: str | None
    expires_at: datetime | None

    @classmethod
    def from_session(cls, session: AuthSession) -> "SessionResponse":
        """Build a response from a domain session."""
        return cls(
            user_id=session.identity.user_id,
            email=session.identity.email,
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_at=session.expires_at,
        )


class SignUpResponse(BaseModel):
    """Registration result; the session is absent until email is confirmed."""

    user_id: UUID
    email: str | None
    session: SessionResponse | None


class ProfileForm(BaseModel):
    """Profile form input, converted once to metric units."""

    age: int = Field(gt=0, lt=150)
    sex: Sex
    height: float = Field(gt=0, le=MAX_HEIGHT_CM)
    height_unit: Literal["cm", "in"] = "cm"
    weight: float = Field(gt=0, le=1500)
    weight_unit: Literal["kg", "lb"] = "kg"
    activity_level: ActivityLevel
    fitness_goal: FitnessGoal

    @field_validator("activity_level", mode="before")
    @classmethod
    def _normalize_activity_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        if value.strip().lower() in ACTIVITY_LEVEL_ALIASES:
            _logger.warning("Legacy activity level %r mapped to 'active'", value)
        return parse_activity_level(value)

    @model_validator(mode="after")
    def _check_metric_range(self) -> "ProfileForm":
        height_cm, weight_kg = self._metric_values()
        if not 0 < height_cm <= MAX_HEIGHT_CM:
            raise ValueError(f"height must be between 0 and {MAX_HEIGHT_CM:g} cm")
        if not 0 < weight_kg <= MAX_WEIGHT_KG:
            raise ValueError(f"weight must be between 0 and {MAX_WEIGHT_KG:g} kg")
        return self

    def _metric_values(self) -> tuple[float, float]:
        height_cm = self.height
        if self.height_unit == "in":
            height_cm = inches_to_cm(self.height)
        weight_kg = self.weight
        if self.weight_unit == "lb":
            weight_kg = lb_to_kg(self.weight)
        return round(height_cm, 2), round(weight_kg, 2)

    def to_metrics(self) -> ProfileMetrics:
        """Return validated metrics in centimeters and kilograms."""
        height_cm, weight_kg = self._metric_values()
        return ProfileMetrics(
            age=self.age,
            sex=self.sex,
            height_cm=height_cm,
            weight_kg=weight_kg,
            activity_level=self.activity_level,
            fitness_goal=self.fitness_goal,
        )


class ProfileResponse(BaseModel):
    """Profile view returned to clients."""

    id: UUID
    email: str
    full_name: str | None
    age: int | None
    sex: Sex | None
    height_cm: float | None
    weight_kg: float | None
    activity_level: ActivityLevel | None
    fitness_goal: FitnessGoal | None
    daily_calorie_goal: int | None
    profile_complete: bool
    updated_at: datetime | None

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ProfileResponse":
        """Flatten a domain profile."""
        metrics = profile.metrics
        return cls(
            id=profile.id,
            email=profile.email,
            full_name=profile.full_name,
            age=metrics.age,
            sex=metrics.sex,
            height_cm=metrics.height_cm,
            weight_kg=metrics.weight_kg,
            activity_level=metrics.activity_level,
            fitness_goal=metrics.fitness_goal,
            daily_calorie_goal=profile.daily_calorie_goal,
            profile_complete=metrics.is_complete(),
            updated_at=profile.updated_at,
        )


class FoodLogRequest(BaseModel):
    """Free-text meal to estimate and log."""

    description: str = Field(min_length=1, max_length=2000)
    meal_type: MealType
    logged_at: datetime | None = None


class ExerciseLogRequest(BaseModel):
    """Free-text workout to estimate and log."""

    description: str = Field(min_length=1, max_length=2000)
    duration_minutes: int | None = Field(default=None, gt=0, le=1440)
    logged_at: datetime | None = None


class AdviceRequest(BaseModel):
    """Fitness question for the assistant."""

    question: str = Field(min_length=1, max_length=2000)
