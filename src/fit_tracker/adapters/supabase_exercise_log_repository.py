"""Supabase repository for exercise logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fit_tracker.domain.logs import ExerciseLogEntry, ExerciseType, Intensity
from fit_tracker.services.exercise_logs import ExerciseLogRepository

_EXERCISE_LOG_COLUMNS = (
    "id, user_id, description, exercise_type, duration_minutes, intensity, "
    "calories_burned, confidence, ai_analysis, created_at, updated_at"
)


@dataclass
class SupabaseExerciseLogRepository(ExerciseLogRepository):
    """Supabase implementation for exercise logs."""

    client: Client

    def create_exercise_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> ExerciseLogEntry:
        """Create an exercise log row owned by the user."""
        response = (
            self.client.table("exercise_logs")
            .insert({**payload, "user_id": str(user_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create exercise log")
        return _parse_row(response.data[0])

    def list_exercise_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[ExerciseLogEntry]:
        """Return the user's exercise logs in the time range, newest first."""
        response = (
            self.client.table("exercise_logs")
            .select(_EXERCISE_LOG_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("created_at", start.isoformat())
            .lt("created_at", end.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_exercise_log(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete an exercise log if it belongs to the user."""
        response = (
            self.client.table("exercise_logs")
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> ExerciseLogEntry:
    confidence = row.get("confidence")
    updated_raw = row.get("updated_at")
    return ExerciseLogEntry(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        description=str(row.get("description", "")),
        exercise_type=ExerciseType(row["exercise_type"]),
        duration_minutes=int(row["duration_minutes"]),
        intensity=Intensity(row["intensity"]),
        calories_burned=int(row.get("calories_burned") or 0),
        confidence=float(confidence) if confidence is not None else None,
        ai_analysis=row.get("ai_analysis"),
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(updated_raw) if updated_raw else None,
    )
