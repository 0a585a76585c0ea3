"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fit_tracker.adapters.openai_estimation_client import OpenAIEstimationClient
from fit_tracker.adapters.supabase_exercise_log_repository import (
    SupabaseExerciseLogRepository,
)
from fit_tracker.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from fit_tracker.adapters.supabase_identity_provider import SupabaseIdentityProvider
from fit_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fit_tracker.config import Settings
from fit_tracker.services.auth import AuthService
from fit_tracker.services.dashboard import DashboardService
from fit_tracker.services.estimation import EstimationService
from fit_tracker.services.exercise_logs import ExerciseLogService
from fit_tracker.services.food_logs import FoodLogService
from fit_tracker.services.profiles import ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    profile_service: ProfileService
    estimation_service: EstimationService
    food_log_service: FoodLogService
    exercise_log_service: ExerciseLogService
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    # Service-role client; every repository query filters by owner id.
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    food_log_repository = SupabaseFoodLogRepository(supabase_client)
    exercise_log_repository = SupabaseExerciseLogRepository(supabase_client)
    identity_provider = SupabaseIdentityProvider.create(
        resolved_settings.supabase_url, resolved_settings.supabase_anon_key
    )
    estimation_client = OpenAIEstimationClient.create(resolved_settings.openai_api_key)
    estimation_service = EstimationService(
        client=estimation_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    dashboard_service = DashboardService(
        food_repository=food_log_repository,
        exercise_repository=exercise_log_repository,
        profile_repository=profile_repository,
        default_calorie_goal=resolved_settings.default_calorie_goal,
    )

    async def close_resources() -> None:
        await estimation_client.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(identity_provider),
        profile_service=ProfileService(profile_repository),
        estimation_service=estimation_service,
        food_log_service=FoodLogService(
            estimation_service=estimation_service,
            repository=food_log_repository,
        ),
        exercise_log_service=ExerciseLogService(
            estimation_service=estimation_service,
            repository=exercise_log_repository,
        ),
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
