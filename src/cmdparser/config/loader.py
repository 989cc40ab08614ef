# topmark:header:start
#
#   project      : CmdParser
#   file         : loader.py
#   file_relpath : src/cmdparser/config/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load option tables and program metadata from TOML.

A table file declares the program and its options:

```toml
[program]
name = "fproc"
description = "File Processor - processes input files and generates output"
usage_args = "[FILE...]"

[[options]]
help = "Output file"
long = "output"
short = "o"
takes_argument = true
default = "test.c"
```

Parsing is done with `tomlkit` and the result is converted to plain
`ProgramMetadata` / `OptionDescriptor` values. Only the table *definition*
is read from files; option values always come from the argument vector.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cmdparser.config.logging import get_logger
from cmdparser.core.errors import CmdParserError, OptionTableError
from cmdparser.core.model import OptionDescriptor, ProgramMetadata, validate_option_table

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from cmdparser.config.logging import CmdParserLogger

TomlTable = dict[str, Any]

logger: CmdParserLogger = get_logger(__name__)

PROGRAM_KEY: Final[str] = "program"
OPTIONS_KEY: Final[str] = "options"

OPTION_KEYS: Final[frozenset[str]] = frozenset(
    {"help", "long", "short", "takes_argument", "default"}
)
PROGRAM_KEYS: Final[frozenset[str]] = frozenset({"name", "description", "usage_args"})


class TableConfigError(CmdParserError):
    """Raised when a TOML table file cannot be read or does not describe a valid table."""


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(obj, dict)


def _get_str(table: Mapping[str, Any], key: str, where: str) -> str | None:
    value = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise TableConfigError(f"{where}: '{key}' must be a string, got {type(value).__name__}")


def _get_bool(table: Mapping[str, Any], key: str, where: str) -> bool:
    value = table.get(key, False)
    if isinstance(value, bool):
        return value
    raise TableConfigError(f"{where}: '{key}' must be a boolean, got {type(value).__name__}")


def _check_keys(table: Mapping[str, Any], allowed: frozenset[str], where: str) -> None:
    unknown = sorted(set(table) - allowed)
    if unknown:
        raise TableConfigError(f"{where}: unknown key(s): {', '.join(unknown)}")


def option_from_dict(table: Mapping[str, Any], index: int = 0) -> OptionDescriptor:
    """Build one `OptionDescriptor` from an ``[[options]]`` entry.

    Args:
        table (Mapping[str, Any]): The entry's keys (``help``, ``long``, ``short``,
            ``takes_argument``, ``default``).
        index (int): Position of the entry, used in error messages.

    Returns:
        OptionDescriptor: The descriptor, with a fresh result slot.

    Raises:
        TableConfigError: If a key is unknown or has the wrong type.
    """
    where = f"options[{index}]"
    _check_keys(table, OPTION_KEYS, where)
    return OptionDescriptor(
        help_text=_get_str(table, "help", where) or "",
        long_name=_get_str(table, "long", where),
        short_name=_get_str(table, "short", where),
        takes_argument=_get_bool(table, "takes_argument", where),
        default_value=_get_str(table, "default", where),
    )


def metadata_from_dict(data: Mapping[str, Any], *, default_name: str = "prog") -> ProgramMetadata:
    """Build `ProgramMetadata` from a parsed TOML document.

    Args:
        data (Mapping[str, Any]): Parsed TOML content.
        default_name (str): Program name used when ``[program].name`` is absent.

    Returns:
        ProgramMetadata: The validated program metadata.

    Raises:
        TableConfigError: If the document is malformed or the resulting option table
            violates the table invariants.
    """
    program_any: Any = data.get(PROGRAM_KEY, {})
    if not is_toml_table(program_any):
        raise TableConfigError(f"'{PROGRAM_KEY}' must be a table")
    _check_keys(program_any, PROGRAM_KEYS, PROGRAM_KEY)

    options_any: Any = data.get(OPTIONS_KEY, [])
    if not isinstance(options_any, list):
        raise TableConfigError(f"'{OPTIONS_KEY}' must be an array of tables")

    options: list[OptionDescriptor] = []
    for index, entry in enumerate(cast("list[Any]", options_any)):
        if not is_toml_table(entry):
            raise TableConfigError(f"{OPTIONS_KEY}[{index}] must be a table")
        options.append(option_from_dict(entry, index))

    try:
        validate_option_table(options)
    except OptionTableError as exc:
        raise TableConfigError(str(exc)) from exc

    metadata = ProgramMetadata(
        prog_name=_get_str(program_any, "name", PROGRAM_KEY) or default_name,
        description=_get_str(program_any, "description", PROGRAM_KEY) or "",
        usage_args=_get_str(program_any, "usage_args", PROGRAM_KEY) or "",
        options=tuple(options),
    )
    logger.debug("loaded %d option(s) for %r", len(options), metadata.prog_name)
    return metadata


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        TableConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except (OSError, UnicodeDecodeError) as e:
        raise TableConfigError(f"cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        raise TableConfigError(f"invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    if not is_toml_table(data_any):
        raise TableConfigError(f"{path}: top level must be a table")
    return data_any


def load_metadata_toml(path: Path) -> ProgramMetadata:
    """Load `ProgramMetadata` from a TOML table file.

    The program name defaults to the file stem.

    Raises:
        TableConfigError: If the file cannot be loaded or describes an invalid table.
    """
    logger.debug("loading option table from %s", path)
    return metadata_from_dict(load_toml_dict(path), default_name=path.stem)
