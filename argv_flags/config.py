# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Schema file loader for Argv Flags.

Schemas can be declared in YAML, TOML or JSON instead of Python. Entries may sit at
the top level of the document or under a `flags` table:

    # cli.yaml
    flags:
      src:
        type: string
        flags: ["-s", "--src"]
        required: true
      exclude:
        type: array
        flags: ["--exclude"]
        default: []
      verbose:
        type: boolean
        flags: ["-v", "--verbose"]
        allowNo: false

Only the schema comes from the file. Flag values are always parsed from argv.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
)

from argv_flags.exceptions import SchemaError, SchemaFileError
from argv_flags.logger import logger
from argv_flags.parser.flag_spec import FlagSpec
from argv_flags.parser.flag_type import FlagType
from argv_flags.parser.schema import normalize_schema

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".toml", ".json")

RawDefault = StrictBool | StrictInt | StrictFloat | StrictStr | list[StrictStr] | None


class RawFlagSpec(BaseModel):
    """Raw flag entry as written in a schema file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: FlagType
    flags: list[StrictStr] = Field(min_length=1)
    required: StrictBool = False
    default: RawDefault = None
    allow_empty: StrictBool | None = Field(default=None, alias="allowEmpty")
    allow_no: StrictBool | None = Field(default=None, alias="allowNo")
    help: StrictStr = ""

    def to_flag_spec(self) -> FlagSpec:
        return FlagSpec(
            type=self.type,
            flags=tuple(self.flags),
            required=self.required,
            default=self.default,
            allow_empty=self.allow_empty,
            allow_no=self.allow_no,
            help=self.help,
        )


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    with path.open("r", encoding="UTF-8") as schema_file:
        try:
            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(schema_file)
            elif suffix == ".toml":
                return toml.load(schema_file)
            elif suffix == ".json":
                return json.load(schema_file)
        except (yaml.YAMLError, toml.TomlDecodeError, json.JSONDecodeError) as error:
            raise SchemaFileError(
                f"Could not parse schema file '{path}': {error}"
            ) from error
    raise SchemaFileError(
        f"Unsupported schema file format: '{suffix}'. "
        f"Expected one of: {', '.join(SUPPORTED_SUFFIXES)}"
    )


def _select_entries(document: Any, path: Path) -> dict[str, Any]:
    if not isinstance(document, dict):
        raise SchemaFileError(
            f"Schema file '{path}' must contain a mapping of flag entries.\n"
            "Example:\n"
            "flags:\n"
            "  name:\n"
            "    type: string\n"
            "    flags: ['--name']"
        )
    entries = document.get("flags")
    if isinstance(entries, dict) and "type" not in entries:
        return entries
    return document


def convert_entries(raw_entries: dict[str, Any]) -> dict[str, FlagSpec]:
    """
    Validate raw schema file entries into `FlagSpec` instances.

    Raises:
        SchemaFileError: If an entry is not a mapping or fails validation.
    """
    schema: dict[str, FlagSpec] = {}
    for key, entry in raw_entries.items():
        if not isinstance(entry, dict):
            raise SchemaFileError(f"Schema entry '{key}' must be a mapping.")
        try:
            schema[str(key)] = RawFlagSpec.model_validate(entry).to_flag_spec()
        except ValidationError as error:
            raise SchemaFileError(f"Invalid schema entry '{key}':\n{error}") from error
    return schema


def load_schema(file_path: Path | str) -> dict[str, FlagSpec]:
    """
    Load a flag schema from a YAML, TOML or JSON file.

    The loaded schema is validated with `normalize_schema()` before it is returned,
    so cross-entry problems such as duplicate flags surface here.

    Args:
        file_path (Path | str): Path to the schema file.

    Returns:
        dict[str, FlagSpec]: Result key → flag declaration, in file order.

    Raises:
        SchemaFileError: If the file is missing, unreadable, or invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise SchemaFileError(f"No such schema file: {file_path}")

    document = _read_document(path)
    schema = convert_entries(_select_entries(document, path))
    try:
        normalize_schema(schema)
    except SchemaError as error:
        raise SchemaFileError(f"Invalid schema in '{path}': {error}") from error

    logger.debug("Loaded %d flag entries from '%s'", len(schema), path)
    return schema
