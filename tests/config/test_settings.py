"""Tests for SurveySettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from surveyctl.config.settings import SurveySettings


class TestSurveySettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = SurveySettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.analysis.city == "Kyiv"
        assert settings.analysis.skip == 50
        assert settings.analysis.limit == 500
        assert settings.analysis.min_age == 25
        assert settings.analysis.max_age == 50
        assert settings.generator.seed is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = SurveySettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = SurveySettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "surveyctl.toml"
        toml.write_text('[analysis]\ncity = "Lviv"\nlimit = 100\n[generator]\nseed = 9\n')
        settings = SurveySettings.from_cli(start=tmp_path)
        assert settings.config_path == toml.resolve()
        assert settings.analysis.city == "Lviv"
        assert settings.analysis.limit == 100
        assert settings.analysis.skip == 50  # default preserved
        assert settings.generator.seed == 9

    def test_found_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "surveyctl.toml").write_text("[analysis]\nskip = 3\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = SurveySettings.from_cli(start=nested)
        assert settings.analysis.skip == 3

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "surveyctl.toml").write_text("")
        settings = SurveySettings.from_cli(start=tmp_path)
        assert settings.analysis.city == "Kyiv"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[analysis]\ncity = "Odesa"\n')
        settings = SurveySettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.analysis.city == "Odesa"
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "surveyctl.toml").write_text("[analysis\ncity = ")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            SurveySettings.from_cli(start=tmp_path)

    @pytest.mark.parametrize(
        ("toml", "fragment"),
        [
            ("[generator]\ncities = []\n", "generator.cities"),
            ("[generator]\nfirst_names = []\n", "generator.first_names"),
            ("[analysis]\ntop_groups = -1\n", "analysis.top_groups"),
            ("[analysis]\nsample_size = -3\n", "analysis.sample_size"),
        ],
    )
    def test_rejected_values_raise_click_exception(
        self, tmp_path: Path, toml: str, fragment: str
    ) -> None:
        (tmp_path / "surveyctl.toml").write_text(toml)
        with pytest.raises(click.ClickException, match="Invalid configuration") as exc_info:
            SurveySettings.from_cli(start=tmp_path)
        assert fragment in exc_info.value.message


class TestEnvOverrides:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "surveyctl.toml").write_text('[analysis]\ncity = "Lviv"\n')
        monkeypatch.setenv("SURVEYCTL_ANALYSIS__CITY", "Dnipro")
        settings = SurveySettings.from_cli(start=tmp_path)
        assert settings.analysis.city == "Dnipro"

    def test_cli_flag_overrides_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SURVEYCTL_QUIET", "true")
        settings = SurveySettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_invalid_env_value_raises_click_exception(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SURVEYCTL_ANALYSIS__TOP_GROUPS", "-2")
        with pytest.raises(click.ClickException, match="analysis.top_groups"):
            SurveySettings.from_cli(start=tmp_path)
