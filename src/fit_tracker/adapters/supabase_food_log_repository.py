"""Supabase repository for food logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fit_tracker.domain.logs import FoodLogEntry, MealType
from fit_tracker.services.food_logs import FoodLogRepository

_FOOD_LOG_COLUMNS = (
    "id, user_id, description, meal_type, calories, protein, carbs, fat, fiber, "
    "sugar, sodium, confidence, ai_analysis, created_at, updated_at"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def create_food_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> FoodLogEntry:
        """Create a food log row owned by the user."""
        response = (
            self.client.table("food_logs")
            .insert({**payload, "user_id": str(user_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")
        return _parse_row(response.data[0])

    def list_food_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return the user's food logs in the time range, newest first."""
        response = (
            self.client.table("food_logs")
            .select(_FOOD_LOG_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("created_at", start.isoformat())
            .lt("created_at", end.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_food_log(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete a food log if it belongs to the user."""
        response = (
            self.client.table("food_logs")
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def _parse_row(row: dict[str, object]) -> FoodLogEntry:
    updated_raw = row.get("updated_at")
    return FoodLogEntry(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        description=str(row.get("description", "")),
        meal_type=MealType(row["meal_type"]),
        calories=int(row.get("calories") or 0),
        protein_g=float(row.get("protein") or 0.0),
        carbs_g=float(row.get("carbs") or 0.0),
        fat_g=float(row.get("fat") or 0.0),
        fiber_g=_optional_float(row.get("fiber")),
        sugar_g=_optional_float(row.get("sugar")),
        sodium_mg=_optional_float(row.get("sodium")),
        confidence=_optional_float(row.get("confidence")),
        ai_analysis=row.get("ai_analysis"),
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(updated_raw) if updated_raw else None,
    )
