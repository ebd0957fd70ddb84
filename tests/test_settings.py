"""Tests for AdvisorySettings."""

import pytest

from chessrules.settings import AdvisorySettings


class TestAdvisorySettings:
    def test_defaults(self) -> None:
        settings = AdvisorySettings()
        assert settings.depth == 15
        assert settings.enabled

    def test_depth_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            AdvisorySettings(depth=0)


class TestFromEnv:
    def test_empty_environment(self) -> None:
        assert AdvisorySettings.from_env({}) == AdvisorySettings()

    def test_overrides(self) -> None:
        settings = AdvisorySettings.from_env(
            {"CHESSRULES_ORACLE_DEPTH": "20", "CHESSRULES_ORACLE_ENABLED": "off"}
        )
        assert settings == AdvisorySettings(depth=20, enabled=False)

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_truthy_values(self, value: str) -> None:
        assert AdvisorySettings.from_env({"CHESSRULES_ORACLE_ENABLED": value}).enabled

    def test_non_integer_depth(self) -> None:
        with pytest.raises(ValueError, match="CHESSRULES_ORACLE_DEPTH"):
            AdvisorySettings.from_env({"CHESSRULES_ORACLE_DEPTH": "deep"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHESSRULES_ORACLE_DEPTH", "9")
        assert AdvisorySettings.from_env().depth == 9
