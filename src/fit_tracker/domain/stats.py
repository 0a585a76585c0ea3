"""Domain models for dashboard statistics."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class MacroTotals:
    """Summed calories and macros."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class DailySummary:
    """Calorie balance for a single day."""

    day: date
    consumed: int
    burned: int
    net: int
    calorie_goal: int
    remaining: int
    progress_percent: float
    intake: MacroTotals
    food_count: int
    exercise_count: int


@dataclass(frozen=True)
class MacroProgress:
    """Intake against a macro goal."""

    name: str
    intake_g: float
    goal_g: int
    percent: float


@dataclass(frozen=True)
class PeriodSummary:
    """Daily summaries and averages over a period."""

    daily: list[DailySummary]
    avg_consumed: float
    avg_burned: float
    avg_net: float


def day_bounds(day: date, timezone_name: str) -> tuple[datetime, datetime]:
    """Return the UTC start and end of a calendar day in a timezone."""
    tz = ZoneInfo(timezone_name)
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = start + timedelta(days=1)
    return start.astimezone(UTC), end.astimezone(UTC)


def local_day(moment: datetime, timezone_name: str) -> date:
    """Return the calendar day of a timestamp in a timezone."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(ZoneInfo(timezone_name)).date()


def to_utc(moment: datetime | None) -> datetime:
    """Return a UTC timestamp, defaulting to now and treating naive as UTC."""
    if moment is None:
        return datetime.now(tz=UTC)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def local_today(timezone_name: str) -> date:
    """Return today's date in a timezone."""
    return datetime.now(tz=UTC).astimezone(ZoneInfo(timezone_name)).date()
