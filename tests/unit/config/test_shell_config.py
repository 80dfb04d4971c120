"""Unit tests for shell config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from minish.config import (
    ShellConfig,
    ShellConfigError,
    load_shell_config,
    resolve_search_path,
)


@pytest.mark.unit
def test_load_shell_config_defaults_when_missing(tmp_path: Path) -> None:
    """Missing config file should yield deterministic defaults."""
    config = load_shell_config(tmp_path / "missing.yaml")

    assert config.prompt == "$ "
    assert config.search_path is None
    assert config.locator.skip_unreadable_dirs is True
    assert config.execution.timeout_s is None


@pytest.mark.unit
def test_load_shell_config_reads_json_overrides(tmp_path: Path) -> None:
    """Config loader should parse explicit JSON overrides."""
    config_path = tmp_path / "config.json"
    config_path.write_text(
        (
            "{"
            '"prompt":"> ","search_path":"/opt/bin:/usr/bin",'
            '"locator":{"skip_unreadable_dirs":false},'
            '"execution":{"timeout_s":2.5}'
            "}"
        ),
        encoding="utf-8",
    )

    config = load_shell_config(config_path)

    assert config.prompt == "> "
    assert config.search_path == "/opt/bin:/usr/bin"
    assert config.locator.skip_unreadable_dirs is False
    assert config.execution.timeout_s == 2.5


@pytest.mark.unit
def test_load_shell_config_reads_yaml_payload(tmp_path: Path) -> None:
    """Config loader should parse YAML payloads."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.safe_dump({"execution": {"timeout_s": 10}}, sort_keys=False),
        encoding="utf-8",
    )

    config = load_shell_config(config_path)

    assert config.execution.timeout_s == 10


@pytest.mark.unit
def test_load_shell_config_empty_yaml_is_defaults(tmp_path: Path) -> None:
    """An empty YAML document yields defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_shell_config(config_path) == ShellConfig()


@pytest.mark.unit
def test_load_shell_config_rejects_invalid_json(tmp_path: Path) -> None:
    """Invalid JSON should raise deterministic shell config error."""
    config_path = tmp_path / "config.json"
    config_path.write_text("{not-json", encoding="utf-8")

    with pytest.raises(ShellConfigError, match="Invalid shell config JSON"):
        load_shell_config(config_path)


@pytest.mark.unit
def test_load_shell_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    """Invalid YAML should raise deterministic shell config error."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("prompt: [unclosed", encoding="utf-8")

    with pytest.raises(ShellConfigError, match="Invalid shell config YAML"):
        load_shell_config(config_path)


@pytest.mark.unit
def test_load_shell_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    """A list at the root is not a config object."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ShellConfigError, match="root must be an object"):
        load_shell_config(config_path)


@pytest.mark.unit
@pytest.mark.parametrize(
    "payload",
    [{"unknown": 1}, {"execution": {"timeout_s": 0}}],
)
def test_load_shell_config_rejects_invalid_fields(
    tmp_path: Path, payload: dict[str, object]
) -> None:
    """Unknown keys and non-positive timeouts fail validation."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump(payload), encoding="utf-8")

    with pytest.raises(ShellConfigError, match="Invalid shell config payload"):
        load_shell_config(config_path)


@pytest.mark.unit
def test_resolve_search_path_prefers_config_override() -> None:
    """Config search path wins over the environment."""
    config = ShellConfig(search_path="/cfg")

    assert resolve_search_path(config, {"PATH": "/env"}) == "/cfg"


@pytest.mark.unit
def test_resolve_search_path_falls_back_to_environment() -> None:
    """Without an override the PATH variable is used, or None when unset."""
    assert resolve_search_path(ShellConfig(), {"PATH": "/env"}) == "/env"
    assert resolve_search_path(ShellConfig(), {}) is None
