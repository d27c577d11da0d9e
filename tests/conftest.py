from pathlib import Path

import pytest

from hostfetch.config import RawConfiguration, default_raw_configuration
from hostfetch.sources import HostPropertySource

FAKE_VALUES = {
    "os": "TestOS 1.0",
    "kernel": "6.1.0-test",
    "cpu": "Test CPU (4) @ 3.00 GHz",
    "memory": "512 MiB / 2048 MiB",
}


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    for variable in (
        "HOSTFETCH_CONFIG_FILE",
        "HOSTFETCH_COLOR",
        "HOSTFETCH_PROPERTIES",
        "HOSTFETCH_LOG_LEVEL",
        "HOSTFETCH_LOG_FILE",
        "NO_COLOR",
    ):
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def builtin_raw() -> RawConfiguration:
    return default_raw_configuration()


@pytest.fixture
def fake_source() -> HostPropertySource:
    return HostPropertySource(readers={key: (lambda value=value: value) for key, value in FAKE_VALUES.items()})


@pytest.fixture
def user_config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "user" / "config.yaml"
    monkeypatch.setattr("hostfetch.cli.context.default_config_path", lambda: path)
    monkeypatch.setattr("hostfetch.cli.commands.config.default_config_path", lambda: path)
    return path
