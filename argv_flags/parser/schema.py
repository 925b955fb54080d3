# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Schema validation and normalization for Argv Flags.

A schema maps result keys to `FlagSpec` instances or raw mappings with the same
fields. `normalize_schema()` validates it once and builds two immutable tables:

- `flag_to_key`: every declared flag token → its schema key
- `specs`: every schema key → its `NormalizedSpec`

Any malformed entry raises `SchemaError` before a single token is scanned. These
faults are never reported as parse issues: the caller must fix the schema.

Example:
    schema = define_schema({
        "name": FlagSpec(type="string", flags=("-n", "--name"), required=True),
        "verbose": {"type": "boolean", "flags": ["--verbose"], "allowNo": False},
    })
    normalized = normalize_schema(schema)
    normalized.flag_to_key["-n"]  # "name"
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from argv_flags.exceptions import SchemaError
from argv_flags.parser.flag_spec import FlagSpec, NormalizedSpec
from argv_flags.parser.flag_type import FlagType
from argv_flags.parser.utils import is_finite_number

SchemaT = TypeVar("SchemaT", bound=Mapping[str, Any])

ENTRY_FIELDS = frozenset(field.name for field in fields(FlagSpec))
FIELD_ALIASES = {
    "allowEmpty": "allow_empty",
    "allowNo": "allow_no",
}


@dataclass(frozen=True)
class NormalizedSchema:
    """Immutable lookup tables built from a validated schema."""

    flag_to_key: Mapping[str, str]
    specs: Mapping[str, NormalizedSpec]

    def resolve(self, flag: str) -> NormalizedSpec | None:
        """Return the spec declaring `flag`, or None if no entry declares it."""
        key = self.flag_to_key.get(flag)
        if key is None:
            return None
        return self.specs[key]

    def __len__(self) -> int:
        return len(self.specs)


def define_schema(schema: SchemaT) -> SchemaT:
    """
    Return the schema unchanged.

    Exists to anchor a schema definition at its call site. Performs no validation:
    validation happens when the schema is parsed.
    """
    return schema


def _read_entry(key: str, raw: Any) -> dict[str, Any]:
    if isinstance(raw, FlagSpec):
        return {name: getattr(raw, name) for name in ENTRY_FIELDS}
    if not isinstance(raw, Mapping):
        raise SchemaError(f'Schema entry for "{key}" must be a FlagSpec or a mapping.')
    entry: dict[str, Any] = {}
    for name, value in raw.items():
        field_name = FIELD_ALIASES.get(name, name)
        if field_name not in ENTRY_FIELDS:
            raise SchemaError(f'Schema entry "{key}" has unknown field "{name}".')
        if field_name in entry:
            raise SchemaError(
                f'Schema entry "{key}" sets "{field_name}" more than once.'
            )
        entry[field_name] = value
    return entry


def _validate_type(key: str, raw_type: Any) -> FlagType:
    if isinstance(raw_type, FlagType):
        return raw_type
    if isinstance(raw_type, str):
        try:
            return FlagType(raw_type)
        except ValueError:
            pass
    valid = ", ".join(member.value for member in FlagType)
    raise SchemaError(
        f'Schema entry "{key}" has invalid type {raw_type!r}. Must be one of: {valid}'
    )


def _validate_flags(
    key: str, raw_flags: Any, flag_to_key: dict[str, str]
) -> tuple[str, ...]:
    if isinstance(raw_flags, (str, bytes)) or not isinstance(raw_flags, (list, tuple)):
        raise SchemaError(
            f'Schema entry "{key}" must declare its flags as a list of strings.'
        )
    if not raw_flags:
        raise SchemaError(f'Schema entry "{key}" must define at least one flag.')
    flags: list[str] = []
    for flag in raw_flags:
        if not isinstance(flag, str) or len(flag) < 2 or not flag.startswith("-"):
            raise SchemaError(f'Schema entry "{key}" has invalid flag {flag!r}.')
        if flag in flags:
            raise SchemaError(f'Schema entry "{key}" declares flag "{flag}" twice.')
        if flag in flag_to_key:
            existing = flag_to_key[flag]
            raise SchemaError(
                f'Flag "{flag}" is already assigned to "{existing}" '
                f'and cannot be reused by "{key}".'
            )
        flags.append(flag)
    return tuple(flags)


def _validate_default(key: str, default: Any, flag_type: FlagType) -> Any:
    if default is None:
        return None
    if flag_type == FlagType.STRING:
        if not isinstance(default, str):
            raise SchemaError(f'Schema entry "{key}" default must be a string.')
        return default
    elif flag_type == FlagType.BOOLEAN:
        if not isinstance(default, bool):
            raise SchemaError(f'Schema entry "{key}" default must be a boolean.')
        return default
    elif flag_type == FlagType.NUMBER:
        if not is_finite_number(default):
            raise SchemaError(f'Schema entry "{key}" default must be a finite number.')
        return default
    elif flag_type == FlagType.ARRAY:
        if not isinstance(default, (list, tuple)) or not all(
            isinstance(item, str) for item in default
        ):
            raise SchemaError(f'Schema entry "{key}" default must be a string array.')
        return tuple(default)
    assert False, f"Unhandled flag type: {flag_type}"


def _validate_option(key: str, name: str, value: Any, optional: bool = True) -> None:
    if value is None and optional:
        return
    if not isinstance(value, bool):
        raise SchemaError(
            f'Schema entry "{key}" option "{name}" must be a boolean, '
            f"got {type(value).__name__}."
        )


def _normalize_entry(
    key: Any, raw: Any, flag_to_key: dict[str, str]
) -> NormalizedSpec:
    if not isinstance(key, str):
        raise SchemaError(f"Schema keys must be strings, got {key!r}.")
    entry = _read_entry(key, raw)
    flag_type = _validate_type(key, entry.get("type"))
    flags = _validate_flags(key, entry.get("flags"), flag_to_key)

    required = entry.get("required", False)
    allow_empty = entry.get("allow_empty")
    allow_no = entry.get("allow_no")
    _validate_option(key, "required", required, optional=False)
    _validate_option(key, "allow_empty", allow_empty)
    _validate_option(key, "allow_no", allow_no)
    if allow_no is not None and flag_type != FlagType.BOOLEAN:
        raise SchemaError(
            f'Schema entry "{key}" sets allow_no, which only applies to boolean flags.'
        )
    if allow_empty is not None and flag_type not in (FlagType.STRING, FlagType.ARRAY):
        raise SchemaError(
            f'Schema entry "{key}" sets allow_empty, which only applies to '
            "string and array flags."
        )

    help_text = entry.get("help", "")
    if help_text is None:
        help_text = ""
    elif not isinstance(help_text, str):
        raise SchemaError(f'Schema entry "{key}" help must be a string.')

    default = _validate_default(key, entry.get("default"), flag_type)
    for flag in flags:
        flag_to_key[flag] = key
    return NormalizedSpec(
        key=key,
        type=flag_type,
        flags=flags,
        required=required,
        default=default,
        allow_empty=allow_empty is True,
        allow_no=allow_no is not False,
        help=help_text,
        long_flag=next((flag for flag in flags if flag.startswith("--")), None),
    )


def normalize_schema(schema: Any) -> NormalizedSchema:
    """
    Validate a schema and build its lookup tables.

    Args:
        schema (Mapping[str, FlagSpec | Mapping]): Result key → flag declaration.

    Returns:
        NormalizedSchema: Immutable flag → key and key → spec tables.

    Raises:
        SchemaError: If the schema or any of its entries is malformed.
    """
    if isinstance(schema, NormalizedSchema):
        return schema
    if not isinstance(schema, Mapping):
        raise SchemaError("Schema must be a mapping of keys to flag specs.")

    flag_to_key: dict[str, str] = {}
    specs: dict[str, NormalizedSpec] = {}
    for key, raw in schema.items():
        specs[key] = _normalize_entry(key, raw, flag_to_key)

    return NormalizedSchema(
        flag_to_key=MappingProxyType(flag_to_key),
        specs=MappingProxyType(specs),
    )
