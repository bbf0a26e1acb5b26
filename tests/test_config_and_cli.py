"""Settings from env and the command-line summary."""
from datetime import timedelta

from conftest import make_record

from fitcooker_dashboard.config import DashboardSettings
from fitcooker_dashboard.dashboard.dashboard_example import format_summary
from fitcooker_dashboard.models.schema import ChefSummary, DashboardViewModel, UserStats
from fitcooker_dashboard.transform.recipes import to_view_model


def test_defaults(monkeypatch):
    for name in (
        "DASHBOARD_SECTION_LIMIT",
        "DASHBOARD_NEW_USER_WINDOW_HOURS",
        "DASHBOARD_POPULAR_MIN_RATING",
        "DASHBOARD_DEFAULT_USER_NAME",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = DashboardSettings.from_env()
    assert settings == DashboardSettings(section_limit=4, new_user_window_hours=24.0, popular_min_rating=4.0)
    assert settings.new_user_window == timedelta(hours=24)
    assert settings.default_user_name == "Chef"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DASHBOARD_SECTION_LIMIT", "6")
    monkeypatch.setenv("DASHBOARD_POPULAR_MIN_RATING", "4.5")
    monkeypatch.setenv("DASHBOARD_DEFAULT_USER_NAME", "Cozinheiro")
    settings = DashboardSettings.from_env()
    assert settings.section_limit == 6
    assert settings.popular_min_rating == 4.5
    assert settings.default_user_name == "Cozinheiro"


def test_invalid_env_falls_back_with_warning(monkeypatch, caplog):
    monkeypatch.setenv("DASHBOARD_SECTION_LIMIT", "four")
    assert DashboardSettings.from_env().section_limit == 4
    assert any("DASHBOARD_SECTION_LIMIT" in r.getMessage() for r in caplog.records)


def test_format_summary():
    vm = DashboardViewModel(
        user_name="Ana",
        is_new_user=True,
        stats=UserStats(recipe_count=2, follower_count=5, review_count=1, average_rating=None),
        own_recipes=[to_view_model(make_record("r1", title="Bolo"))],
        featured_chefs=[ChefSummary("c1", "Leo", None, 3, 90, 4.7)],
    )
    text = format_summary(vm)

    assert text.startswith("Welcome, Ana!")
    assert "rating=N/A" in text
    assert "01. Bolo  0 kcal/serving" in text
    assert "01. Leo  rating=4.7  followers=90" in text
    assert text.count("(empty)") == 2
