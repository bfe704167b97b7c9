"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from calorie_tracker.config import Settings


def test_settings_default_history_limit() -> None:
    settings = Settings(
        supabase_url="https://example.supabase.co", supabase_service_key="key"
    )

    assert settings.max_history_days == 31


@pytest.mark.parametrize("days", [0, 32])
def test_settings_reject_history_limit_outside_cap(days: int) -> None:
    with pytest.raises(ValidationError):
        Settings(
            supabase_url="https://example.supabase.co",
            supabase_service_key="key",
            max_history_days=days,
        )
