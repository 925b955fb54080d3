# Argv Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Pydantic models for the published JSON shape of a parse result.

`to_json_result()` produces plain dicts. These models describe and validate that
shape for consumers that receive results over the wire, and export it as a JSON
Schema document with a stable `$id`.

Public Interface:
- `ParseIssueModel` / `ParseResultJsonModel`: The published models.
- `parse_result_json_schema()`: JSON Schema (draft 2020-12) for a result.
- `validate_json_result()`: Validate a decoded result dict.
"""
from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)

from argv_flags.parser.parser_types import IssueCode, IssueSeverity

RESULT_SCHEMA_ID = "https://schema.argv-flags.dev/parse-result.schema.json"
JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

JsonValue = StrictBool | StrictInt | StrictFloat | StrictStr | list[StrictStr] | None


class ParseIssueModel(BaseModel):
    """One diagnostic in a serialized parse result."""

    model_config = ConfigDict(extra="forbid")

    code: IssueCode
    severity: IssueSeverity
    message: StrictStr
    flag: StrictStr | None = None
    key: StrictStr | None = None
    value: StrictStr | None = None
    index: StrictInt | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_severity(self) -> ParseIssueModel:
        if self.severity != self.code.severity:
            raise ValueError(
                f"Issue code {self.code.value} must have severity "
                f"'{self.code.severity.value}'"
            )
        return self


class ParseResultJsonModel(BaseModel):
    """A serialized parse result, as produced by `to_json_result()`."""

    model_config = ConfigDict(extra="forbid", title="ParseResult")

    values: dict[str, JsonValue]
    present: dict[str, StrictBool]
    rest: list[StrictStr]
    unknown: list[StrictStr]
    issues: list[ParseIssueModel]
    ok: StrictBool

    @model_validator(mode="after")
    def validate_consistency(self) -> ParseResultJsonModel:
        if set(self.values) != set(self.present):
            raise ValueError("values and present must have the same keys")
        has_errors = any(
            issue.severity == IssueSeverity.ERROR for issue in self.issues
        )
        if self.ok == has_errors:
            raise ValueError("ok must be true exactly when no issue is an error")
        return self


def parse_result_json_schema() -> dict[str, Any]:
    """Return the JSON Schema document describing a serialized parse result."""
    schema = ParseResultJsonModel.model_json_schema()
    return {"$schema": JSON_SCHEMA_DIALECT, "$id": RESULT_SCHEMA_ID, **schema}


def validate_json_result(data: Any) -> ParseResultJsonModel:
    """
    Validate a decoded parse result.

    Raises:
        pydantic.ValidationError: If the data does not match the published shape.
    """
    return ParseResultJsonModel.model_validate(data)
