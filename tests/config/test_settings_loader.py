from __future__ import annotations

import re
import textwrap
from pathlib import Path
from typing import Iterator

import pytest

from filetools.base.file_io import write_yaml
from filetools.naming import generate_timestamped_name
from filetools.shared.loader import (
    configure,
    get_settings,
    load_config,
    load_logging_config,
    load_settings,
    load_yaml_resource,
)


def _write_config(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def restore_settings() -> Iterator[None]:
    yield
    configure(None)


def test_packaged_defaults() -> None:
    settings = load_settings()

    assert settings.logging.level == "INFO"
    assert settings.logging.use_rich is None
    assert settings.logging.log_dir is None
    assert settings.logging.file_prefix == "filetools"
    assert settings.naming.timestamp_format == "%d_%m_%Y_%Hh%Mm%Ss"
    assert settings.naming.utc is True


def test_packaged_resource_is_a_mapping() -> None:
    data = load_yaml_resource("config")

    assert set(data) == {"logging", "naming"}


def test_user_file_overrides_per_key(tmp_path: Path) -> None:
    cfg = _write_config(
        tmp_path,
        "filetools.yaml",
        """
        logging:
          level: debug
          use_rich: "no"
          log_dir: ~/ft-logs
        naming:
          utc: n
        """,
    )

    settings = load_settings(cfg)

    assert settings.logging.level == "DEBUG"
    assert settings.logging.use_rich is False
    assert settings.logging.log_dir == str(Path("~/ft-logs").expanduser())
    assert settings.logging.file_prefix == "filetools"
    assert settings.naming.utc is False
    assert settings.naming.timestamp_format == "%d_%m_%Y_%Hh%Mm%Ss"


def test_load_logging_config(tmp_path: Path) -> None:
    cfg = tmp_path / "written.yaml"
    write_yaml(cfg, {"logging": {"level": "WARNING", "file_prefix": "run"}})

    logging_cfg = load_logging_config(cfg)

    assert logging_cfg == {
        "level": "WARNING",
        "use_rich": None,
        "log_dir": None,
        "file_prefix": "run",
    }


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")
    assert load_config(None) == {}


def test_load_config_requires_mapping(tmp_path: Path) -> None:
    cfg = _write_config(tmp_path, "list.yaml", "- a\n- b\n")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(cfg)


@pytest.mark.parametrize(
    "content, message",
    [
        ("tasks:\n  x: 1\n", "unsupported sections"),
        ("logging:\n  colour: true\n", "unsupported keys"),
        ("logging:\n  level: LOUD\n", "field 'level'"),
        ("logging:\n  use_rich: sometimes\n", "field 'use_rich'"),
        ("naming:\n  utc: maybe\n", "field 'utc'"),
        ("naming:\n  timestamp_format: ''\n", "timestamp_format"),
        ("naming: [1, 2]\n", "must be a mapping"),
    ],
)
def test_invalid_settings_are_rejected(tmp_path: Path, content: str, message: str) -> None:
    cfg = _write_config(tmp_path, "bad.yaml", content)

    with pytest.raises(ValueError, match=re.escape(message)):
        load_settings(cfg)


def test_configure_changes_naming_defaults(tmp_path: Path, restore_settings: None) -> None:
    cfg = _write_config(
        tmp_path,
        "naming.yaml",
        """
        naming:
          timestamp_format: "%Y"
          utc: false
        """,
    )

    configure(cfg)

    assert get_settings().naming.timestamp_format == "%Y"
    assert re.fullmatch(r"build_\d{4}\.zip", str(generate_timestamped_name("build", "zip")))

    configure(None)
    assert get_settings().naming.timestamp_format == "%d_%m_%Y_%Hh%Mm%Ss"


def test_configure_validates_before_applying(tmp_path: Path, restore_settings: None) -> None:
    cfg = _write_config(tmp_path, "bad.yaml", "naming:\n  utc: maybe\n")

    with pytest.raises(ValueError):
        configure(cfg)

    assert get_settings().naming.utc is True
