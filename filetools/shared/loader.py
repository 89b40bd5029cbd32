"""
Shared configuration loading and validation helpers.

Provides:
 - `load_config`: basic YAML loader
 - `load_yaml_resource`: load YAML files packaged under filetools/configs/
 - `load_settings`: validated settings (packaged defaults + optional user file)
 - `get_settings` / `configure`: cached process-wide settings
 - `load_logging_config`: the logging section as a plain mapping
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from filetools.base.file_io import read_yaml


ConfigDict = Dict[str, Any]

DEFAULT_CONFIG_FILENAME = "config.yaml"
LOGGING_SECTION_KEY = "logging"
NAMING_SECTION_KEY = "naming"
CONFIGS_DIR = Path(__file__).resolve().parents[1] / "configs"

LOGGING_ALLOWED_KEYS = {"level", "use_rich", "log_dir", "file_prefix"}
NAMING_ALLOWED_KEYS = {"timestamp_format", "utc"}
SECTION_KEYS = {
    LOGGING_SECTION_KEY: LOGGING_ALLOWED_KEYS,
    NAMING_SECTION_KEY: NAMING_ALLOWED_KEYS,
}
LEVEL_NAMES = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

YES_VALUES = {"1", "true", "yes", "y", "on"}
NO_VALUES = {"0", "false", "no", "n", "off"}
AUTO_VALUES = {"auto", "default", ""}

_user_config_path: Optional[Path] = None


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    use_rich: Optional[bool] = None
    log_dir: Optional[str] = None
    file_prefix: str = "filetools"


@dataclass(frozen=True)
class NamingSettings:
    timestamp_format: str = "%d_%m_%Y_%Hh%Mm%Ss"
    utc: bool = True


@dataclass(frozen=True)
class Settings:
    logging: LoggingSettings
    naming: NamingSettings


def load_config(path: str | Path | None) -> Mapping[str, Any] | Dict[str, Any]:
    if not path:
        return {}

    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {cfg_path}")

    data = read_yaml(cfg_path)
    if not isinstance(data, Mapping):
        raise ValueError(f"Configuration root must be a mapping in {cfg_path}")

    return data


def load_yaml_resource(
    name: str | Path,
    *,
    config_dir: str | Path | None = None,
) -> Any:
    """
    Load a YAML file located under the packaged configs directory
    (or a caller-provided directory).
    """
    base = Path(config_dir).expanduser() if config_dir else CONFIGS_DIR
    candidate = Path(name)
    if not candidate.is_absolute():
        candidate = base / candidate
    if not candidate.suffix:
        candidate = candidate.with_suffix(".yaml")
    if not candidate.exists():
        raise FileNotFoundError(f"YAML resource not found: {candidate}")
    return read_yaml(candidate)


def _coerce_yes_no(value: object, key: str, source: str, *, allow_auto: bool = False) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if value is None:
        if allow_auto:
            return None
        raise ValueError(f"Configuration '{source}' field '{key}' must be a yes/no value.")
    text = str(value).strip().lower()
    if text in YES_VALUES:
        return True
    if text in NO_VALUES:
        return False
    if allow_auto and text in AUTO_VALUES:
        return None
    expected = "yes/no/auto" if allow_auto else "yes/no"
    raise ValueError(f"Configuration '{source}' field '{key}' must be {expected}, got {value!r}.")


def _normalize_level(value: Any, source: str) -> str:
    if isinstance(value, str) and value.strip().upper() in LEVEL_NAMES:
        return value.strip().upper()
    raise ValueError(
        f"Configuration '{source}' field 'level' must be one of: {', '.join(sorted(LEVEL_NAMES))}."
    )


def _normalize_optional_str(value: Any, key: str, source: str) -> Optional[str]:
    if value is None or value == "":
        return None
    if not isinstance(value, (str, Path)):
        raise ValueError(f"Configuration '{source}' field '{key}' must be a string.")
    return str(Path(value).expanduser()) if key == "log_dir" else str(value)


def _extract_sections(root: Mapping[str, Any], source: str) -> Dict[str, ConfigDict]:
    unknown = [key for key in root if key not in SECTION_KEYS]
    if unknown:
        raise ValueError(
            f"Configuration '{source}' contains unsupported sections: {', '.join(sorted(map(str, unknown)))}"
        )

    sections: Dict[str, ConfigDict] = {}
    for name, allowed in SECTION_KEYS.items():
        payload = root.get(name) or {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"'{name}' section must be a mapping in {source}")
        invalid = [key for key in payload if key not in allowed]
        if invalid:
            raise ValueError(
                f"'{name}' section contains unsupported keys in {source}: {', '.join(sorted(map(str, invalid)))}"
            )
        sections[name] = dict(payload)
    return sections


def _build_logging_settings(raw: Mapping[str, Any], source: str) -> LoggingSettings:
    defaults = LoggingSettings()
    return LoggingSettings(
        level=_normalize_level(raw.get("level", defaults.level), source),
        use_rich=_coerce_yes_no(raw.get("use_rich"), "use_rich", source, allow_auto=True),
        log_dir=_normalize_optional_str(raw.get("log_dir"), "log_dir", source),
        file_prefix=_normalize_optional_str(raw.get("file_prefix"), "file_prefix", source)
        or defaults.file_prefix,
    )


def _build_naming_settings(raw: Mapping[str, Any], source: str) -> NamingSettings:
    defaults = NamingSettings()
    fmt = raw.get("timestamp_format", defaults.timestamp_format)
    if not isinstance(fmt, str) or not fmt:
        raise ValueError(f"Configuration '{source}' field 'timestamp_format' must be a non-empty string.")
    utc = raw.get("utc", defaults.utc)
    return NamingSettings(
        timestamp_format=fmt,
        utc=bool(_coerce_yes_no(utc, "utc", source)),
    )


def load_settings(config_path: str | Path | None = None) -> Settings:
    """
    Build validated settings from the packaged defaults, overlaid section by
    section with the optional user configuration file.
    """
    packaged = load_yaml_resource(DEFAULT_CONFIG_FILENAME)
    if not isinstance(packaged, Mapping):
        raise ValueError(f"Packaged configuration root must be a mapping: {CONFIGS_DIR}")
    merged = _extract_sections(packaged, str(CONFIGS_DIR / DEFAULT_CONFIG_FILENAME))

    source = str(CONFIGS_DIR / DEFAULT_CONFIG_FILENAME)
    if config_path:
        source = str(Path(config_path).expanduser())
        overrides = _extract_sections(load_config(config_path), source)
        for name, payload in overrides.items():
            merged[name].update(payload)

    return Settings(
        logging=_build_logging_settings(merged[LOGGING_SECTION_KEY], source),
        naming=_build_naming_settings(merged[NAMING_SECTION_KEY], source),
    )


@lru_cache(maxsize=1)
def _cached_settings(config_path: Optional[Path]) -> Settings:
    return load_settings(config_path)


def get_settings() -> Settings:
    """Return the process-wide settings (packaged defaults unless `configure` was called)."""
    return _cached_settings(_user_config_path)


def configure(config_path: str | Path | None) -> Settings:
    """
    Point filetools at a user configuration file (None restores the packaged
    defaults). The file is validated immediately.
    """
    global _user_config_path
    resolved = Path(config_path).expanduser() if config_path else None
    settings = load_settings(resolved)
    _user_config_path = resolved
    _cached_settings.cache_clear()
    return settings


def load_logging_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    return asdict(load_settings(config_path).logging)
