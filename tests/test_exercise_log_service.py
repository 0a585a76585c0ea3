"""Tests for the exercise log service."""

import asyncio
from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from fit_tracker.domain.logs import ExerciseType, Intensity
from fit_tracker.services.estimation import EstimationService
from fit_tracker.services.exercise_logs import ExerciseLogService
from tests.conftest import FakeEstimationClient, InMemoryExerciseLogRepository


def test_log_exercise_stores_estimate(
    estimation_service: EstimationService,
    exercise_repository: InMemoryExerciseLogRepository,
) -> None:
    service = ExerciseLogService(estimation_service, exercise_repository)

    entry = asyncio.run(service.log_exercise(uuid4(), "ran 5k", duration_minutes=25))

    assert entry.calories_burned == 310
    assert entry.exercise_type == ExerciseType.CARDIO
    assert entry.intensity == Intensity.MODERATE
    assert entry.duration_minutes == 25


def test_log_exercise_defaults_duration(
    estimation_service: EstimationService,
    exercise_repository: InMemoryExerciseLogRepository,
) -> None:
    service = ExerciseLogService(estimation_service, exercise_repository)

    entry = asyncio.run(service.log_exercise(uuid4(), "stretching"))

    assert entry.duration_minutes == 30


def test_log_exercise_fallback_scales_with_duration(
    exercise_repository: InMemoryExerciseLogRepository,
) -> None:
    estimation_service = EstimationService(
        client=FakeEstimationClient(error=RuntimeError("down")),
        model="gpt-5-mini",
        reasoning_effort=None,
        store=False,
    )
    service = ExerciseLogService(estimation_service, exercise_repository)

    entry = asyncio.run(service.log_exercise(uuid4(), "hiking", duration_minutes=61))

    assert entry.calories_burned == 305
    assert entry.exercise_type == ExerciseType.OTHER
    assert entry.confidence == 50


@pytest.mark.parametrize(
    ("description", "duration"), [("  ", 30), ("rowing", 0), ("rowing", -5)]
)
def test_log_exercise_rejects_invalid_input(
    estimation_service: EstimationService,
    exercise_repository: InMemoryExerciseLogRepository,
    description: str,
    duration: int,
) -> None:
    service = ExerciseLogService(estimation_service, exercise_repository)

    with pytest.raises(ValueError):
        asyncio.run(service.log_exercise(uuid4(), description, duration))
    assert exercise_repository.entries == []


def test_exercise_logs_are_isolated_between_users(
    estimation_service: EstimationService,
    exercise_repository: InMemoryExerciseLogRepository,
) -> None:
    service = ExerciseLogService(estimation_service, exercise_repository)
    owner, intruder = uuid4(), uuid4()
    logged_at = datetime(2024, 6, 1, 18, 0, tzinfo=UTC)
    entry = asyncio.run(
        service.log_exercise(owner, "cycling", 40, logged_at=logged_at)
    )

    assert service.list_for_day(intruder, date(2024, 6, 1)) == []
    assert service.delete(intruder, entry.id) is False
    assert len(service.list_for_day(owner, date(2024, 6, 1))) == 1
