"""Tests for settings and config helpers."""

import pytest
from pydantic import ValidationError

from fit_tracker.config import Settings, parse_allowed_origins
from tests.conftest import TEST_SUPABASE_KEY


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, ["*"]),
        ("", ["*"]),
        ("*", ["*"]),
        (
            "https://app.example.com/, http://localhost:5173",
            ["https://app.example.com", "http://localhost:5173"],
        ),
        (" , ", ["*"]),
    ],
)
def test_parse_allowed_origins(raw: str | None, expected: list[str]) -> None:
    assert parse_allowed_origins(raw) == expected


def test_settings_reject_placeholder_credentials() -> None:
    with pytest.raises(ValidationError):
        Settings(
            supabase_url="https://your-project.supabase.co",
            supabase_anon_key=TEST_SUPABASE_KEY,
            supabase_service_key=TEST_SUPABASE_KEY,
            openai_api_key="openai-key",
        )


def test_settings_defaults(settings: Settings) -> None:
    assert settings.openai_model == "gpt-5-mini"
    assert settings.default_calorie_goal == 2000
    assert settings.openai_store is False
