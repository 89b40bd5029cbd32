"""
filetools

Helpers for simple file / folder operations:
  - Creating directories (single, multiple, numeric ranges)
  - Checking whether paths contain a pattern or a component
  - Listing files / directories, flat or nested, optionally filtered
  - Generating names for files / directories

The blocking helpers are exported here (and from `filetools.sync`); the
``async`` versions with the same names live in `filetools.aio`.
"""

from filetools.base.errors import FiletoolsError, FtIOError, PreconditionError
from filetools.base.logging import get_logger, setup_logging
from filetools.filters import FtFilter, PathSegment, Pattern, Raw, matches_filter
from filetools.naming import (
    generate_n_digit_name,
    generate_name,
    generate_random_name,
    generate_timestamped_name,
    generate_uuid4_name,
)
from filetools.paths import has_component, is_subdir, path_contains
from filetools.sync import (
    create_multiple_directories,
    create_numeric_directories,
    ensure_directory,
    list_directories,
    list_directories_with_filter,
    list_files,
    list_files_with_filter,
    list_items,
    list_nested_directories,
    list_nested_directories_with_filter,
    list_nested_files,
    list_nested_files_with_filter,
)
from filetools.traversal import ItemKind

__version__ = "1.0.0"

__all__ = [
    # Errors
    "FiletoolsError",
    "FtIOError",
    "PreconditionError",

    # Logging
    "get_logger",
    "setup_logging",

    # Filters
    "FtFilter",
    "Raw",
    "PathSegment",
    "Pattern",
    "matches_filter",

    # Naming
    "generate_name",
    "generate_timestamped_name",
    "generate_random_name",
    "generate_uuid4_name",
    "generate_n_digit_name",

    # Predicates
    "path_contains",
    "has_component",
    "is_subdir",

    # Directory creation
    "ensure_directory",
    "create_multiple_directories",
    "create_numeric_directories",

    # Listing
    "ItemKind",
    "list_items",
    "list_files",
    "list_nested_files",
    "list_directories",
    "list_nested_directories",
    "list_files_with_filter",
    "list_nested_files_with_filter",
    "list_directories_with_filter",
    "list_nested_directories_with_filter",
]
