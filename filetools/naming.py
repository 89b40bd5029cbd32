"""
filetools.naming

Functions that generate file / directory names.

 - generate_name("test", "pdf")              -> test.pdf
 - generate_timestamped_name("test", "pdf")  -> test_18_10_2026_09h15m02s.pdf
 - generate_random_name("pdf")               -> 00762527-012a-43c1-a673-cad9bc5eef64.pdf
 - generate_n_digit_name(5, 4, "pdf")        -> 0005.pdf

All functions are pure apart from the clock / random source and return a
single-component ``Path``.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from filetools.shared.loader import get_settings


def make_extension(ext: str) -> str:
    """Return ``.ext`` (leading dots in ``ext`` collapsed), or "" when empty."""
    ext = ext.lstrip(".")
    if not ext:
        return ""
    return f".{ext}"


def generate_name(name: str, ext: str) -> Path:
    """Join a name and an extension: ``generate_name("test", "json") -> test.json``."""
    return Path(f"{name}{make_extension(ext)}")


def generate_timestamped_name(
    name: str,
    ext: str,
    fmt: Optional[str] = None,
    *,
    utc: Optional[bool] = None,
) -> Path:
    """
    Generate ``{name}_{timestamp}.{ext}``, or ``{timestamp}.{ext}`` when
    ``name`` is empty.

    Args:
        name: Base name; may be empty.
        ext: Extension, with or without the leading dot; may be empty.
        fmt: strftime format. Defaults to the configured format
            (``%d_%m_%Y_%Hh%Mm%Ss`` out of the box).
        utc: Render UTC (True) or local time (False). Defaults to config (UTC).
    """
    settings = get_settings().naming
    if fmt is None:
        fmt = settings.timestamp_format
    if utc is None:
        utc = settings.utc

    now = datetime.now(timezone.utc) if utc else datetime.now()
    stamp = now.strftime(fmt)

    if not name:
        return Path(f"{stamp}{make_extension(ext)}")
    return Path(f"{name}_{stamp}{make_extension(ext)}")


def generate_random_name(ext: str) -> Path:
    """UUIDv4 name, e.g. ``b1faa2c3-d25c-43bb-b578-9f259d7aabaf.log``."""
    return Path(f"{uuid.uuid4()}{make_extension(ext)}")


generate_uuid4_name = generate_random_name


def generate_n_digit_name(number: int, width: int, ext: str) -> Path:
    """
    Zero-pad ``number`` to at least ``width`` digits, then add ``ext``.

    ``generate_n_digit_name(128, 6, "log") -> 000128.log``. Numbers wider than
    ``width`` are rendered in full.

    Raises:
        ValueError: If ``number`` or ``width`` is negative.
    """
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    return Path(f"{str(number).zfill(width)}{make_extension(ext)}")


__all__ = [
    "make_extension",
    "generate_name",
    "generate_timestamped_name",
    "generate_random_name",
    "generate_uuid4_name",
    "generate_n_digit_name",
]
