import pytest

from nimengine.config import EngineConfig


def test_defaults() -> None:
    config = EngineConfig()
    assert config.initial_pile == 7
    assert config.max_depth == 7
    assert config.move_delay_ms == 800


def test_from_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NIM_INITIAL_PILE", "11")
    monkeypatch.setenv("NIM_MAX_DEPTH", "5")
    monkeypatch.setenv("NIM_MOVE_DELAY_MS", "0")

    config = EngineConfig.from_env()
    assert config == EngineConfig(initial_pile=11, max_depth=5, move_delay_ms=0)


def test_from_env_ignores_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NIM_MAX_DEPTH", " ")
    monkeypatch.delenv("NIM_INITIAL_PILE", raising=False)
    monkeypatch.delenv("NIM_MOVE_DELAY_MS", raising=False)
    assert EngineConfig.from_env() == EngineConfig()


def test_invalid_values_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(ValueError):
        EngineConfig(max_depth=0)
    with pytest.raises(ValueError):
        EngineConfig(initial_pile=0)

    monkeypatch.setenv("NIM_MAX_DEPTH", "deep")
    with pytest.raises(ValueError):
        EngineConfig.from_env()
