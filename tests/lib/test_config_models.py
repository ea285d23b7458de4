"""Tests for PageLibraryConfig."""

import os
from unittest.mock import patch

import pytest

from robotpages.models.config_models import PageLibraryConfig


class TestPageLibraryConfig:
    """Tests for PageLibraryConfig class."""

    def test_default_config(self):
        config = PageLibraryConfig()

        assert config.default_application == "Default"
        assert config.web_library == "Browser"
        assert config.presence_timeout == 5.0
        assert config.log_level == "INFO"
        assert config.warn_on_key_collision is True

    def test_from_kwargs_basic(self):
        config = PageLibraryConfig.from_kwargs(
            default_application="Blogger",
            web_library="SeleniumLibrary",
            log_level="debug",
        )

        assert config.default_application == "Blogger"
        assert config.web_library == "SeleniumLibrary"
        assert config.log_level == "DEBUG"

    def test_from_kwargs_ignores_none(self):
        config = PageLibraryConfig.from_kwargs(default_application=None, presence_timeout=None)
        assert config.default_application == "Default"
        assert config.presence_timeout == 5.0

    @pytest.mark.parametrize("value,expected", [
        ("2s", 2.0),
        ("500ms", 0.5),
        ("1 minute", 60.0),
        ("3", 3.0),
        (10, 10.0),
    ])
    def test_presence_timeout_formats(self, value, expected):
        config = PageLibraryConfig.from_kwargs(presence_timeout=value)
        assert config.presence_timeout == expected

    def test_env_var_syntax(self):
        with patch.dict(os.environ, {"APP_UNDER_TEST": "Pharmacy"}):
            assert PageLibraryConfig.from_kwargs(
                default_application="%{APP_UNDER_TEST}"
            ).default_application == "Pharmacy"
            assert PageLibraryConfig.from_kwargs(
                default_application="${APP_UNDER_TEST}"
            ).default_application == "Pharmacy"

    @pytest.mark.parametrize("value,expected", [
        ("False", False),
        ("no", False),
        ("true", True),
        (False, False),
        (1, True),
    ])
    def test_warn_on_key_collision_parsing(self, value, expected):
        config = PageLibraryConfig.from_kwargs(warn_on_key_collision=value)
        assert config.warn_on_key_collision is expected

    def test_from_yaml(self, tmp_path):
        config_file = tmp_path / "pages.yaml"
        config_file.write_text(
            "default_application: Pharmacy\n"
            "web_library: SeleniumLibrary\n"
            "presence_timeout: 750ms\n"
            "warn_on_key_collision: false\n"
        )

        config = PageLibraryConfig.from_yaml(str(config_file))

        assert config.default_application == "Pharmacy"
        assert config.web_library == "SeleniumLibrary"
        assert config.presence_timeout == 0.75
        assert config.warn_on_key_collision is False

    def test_from_empty_yaml(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert PageLibraryConfig.from_yaml(str(config_file)) == PageLibraryConfig()

    def test_to_dict(self):
        assert PageLibraryConfig().to_dict() == {
            "default_application": "Default",
            "web_library": "Browser",
            "presence_timeout": 5.0,
            "log_level": "INFO",
            "warn_on_key_collision": True,
        }
