"""
Unit tests for settings loading and component configs.
"""

import pytest
from pydantic import ValidationError

from birdly_engine.config import Settings, get_settings
from birdly_engine.study.mastery_update import MasteryUpdateConfig
from birdly_engine.study.scheduler import PracticeScheduler, SchedulerConfig


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.intro_window == 0.5
        assert settings.graduation_threshold == 80.0
        assert settings.min_exposure_threshold == 20.0
        assert settings.max_grid_size == 10
        assert settings.max_size_rounds == 3

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BIRDLY_INTRO_WINDOW", "0.4")
        monkeypatch.setenv("BIRDLY_MIN_EXPOSURE_THRESHOLD", "30")
        settings = get_settings()
        assert settings.intro_window == 0.4
        assert settings.min_exposure_threshold == 30.0

    def test_invalid_value_rejected(self, monkeypatch):
        monkeypatch.setenv("BIRDLY_INTRO_WINDOW", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_settings_cached(self):
        assert get_settings() is get_settings()

    def test_grouped_dicts(self):
        settings = Settings()
        assert settings.get_scheduler_config()["primary_variant"] == "primary"
        assert settings.get_word_search_config()["attempts_per_size"] == 100


class TestComponentConfigs:
    def test_scheduler_config_from_settings(self, monkeypatch):
        monkeypatch.setenv("BIRDLY_GRADUATION_THRESHOLD", "70")
        config = SchedulerConfig.from_settings()
        assert config.graduation_threshold == 70.0

    def test_scheduler_defaults_to_settings(self, monkeypatch):
        monkeypatch.setenv("BIRDLY_INTRO_WINDOW", "0.25")
        assert PracticeScheduler().config.intro_window == 0.25

    def test_update_config_from_settings(self, monkeypatch):
        monkeypatch.setenv("BIRDLY_PENALTY_FLOOR", "2")
        assert MasteryUpdateConfig.from_settings().penalty_floor == 2.0

    def test_dataclass_defaults_match_settings(self):
        settings = Settings()
        assert SchedulerConfig() == SchedulerConfig.from_settings(settings)
        assert MasteryUpdateConfig() == MasteryUpdateConfig.from_settings(settings)

    def test_update_config_reads_every_value(self, monkeypatch):
        monkeypatch.setenv("BIRDLY_MIN_GAIN_SCALE", "0.5")
        monkeypatch.setenv("BIRDLY_PENALTY_BASE", "6")
        config = MasteryUpdateConfig.from_settings()
        assert config.min_gain_scale == 0.5
        assert config.penalty_base == 6.0
        assert set(Settings().get_mastery_update_config()) == set(vars(config))
