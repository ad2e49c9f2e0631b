from pathlib import Path

import pytest

from roster.config.loader import load_config
from roster.config.models import RosterConfig


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "absent.yaml")

    assert config == RosterConfig()
    assert config.storage.backend == "file"
    assert config.storage.key == "students"
    assert config.logging.level == "INFO"


def test_loads_values(tmp_path: Path) -> None:
    path = tmp_path / "roster.yaml"
    path.write_text("storage:\n  backend: sqlite\n  key: roster\n  path: /var/roster\n")

    config = load_config(path)

    assert config.storage.backend == "sqlite"
    assert config.storage.key == "roster"
    assert config.storage.path == "/var/roster"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "roster.yaml"
    path.write_text("")
    assert load_config(path) == RosterConfig()


def test_env_selects_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("storage:\n  backend: memory\n")
    monkeypatch.setenv("ROSTER_CONFIG", str(path))

    assert load_config().storage.backend == "memory"


def test_data_dir_env_overrides_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROSTER_DATA_DIR", str(tmp_path / "data"))
    config = load_config(tmp_path / "absent.yaml")
    assert config.storage.path == str(tmp_path / "data")


def test_invalid_yaml_fails_fast(tmp_path: Path) -> None:
    path = tmp_path / "roster.yaml"
    path.write_text("storage: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)


def test_unknown_backend_fails_fast(tmp_path: Path) -> None:
    path = tmp_path / "roster.yaml"
    path.write_text("storage:\n  backend: cloud\n")
    with pytest.raises(ValueError, match="Config validation failed"):
        load_config(path)


def test_unknown_section_fails_fast(tmp_path: Path) -> None:
    path = tmp_path / "roster.yaml"
    path.write_text("metrics:\n  enabled: true\n")
    with pytest.raises(ValueError, match="Config validation failed"):
        load_config(path)


def test_repo_config_is_valid() -> None:
    config = load_config(Path(__file__).parents[2] / "roster.yaml")
    assert config.storage.key == "students"
