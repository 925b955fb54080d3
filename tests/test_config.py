import json
from pathlib import Path

import pytest

from argv_flags import FlagSpec, FlagType, SchemaFileError, load_schema, parse_args
from argv_flags.config import convert_entries

YAML_SCHEMA = """
flags:
  src:
    type: string
    flags: ["-s", "--src"]
    required: true
    help: Source directory.
  exclude:
    type: array
    flags: ["--exclude"]
    default: []
  verbose:
    type: boolean
    flags: ["-v", "--verbose"]
    allowNo: false
"""

TOML_SCHEMA = """
[jobs]
type = "number"
flags = ["-j", "--jobs"]
default = 2

[name]
type = "string"
flags = ["--name"]
allow_empty = true
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_load_yaml_schema(tmp_path):
    schema = load_schema(write(tmp_path, "cli.yaml", YAML_SCHEMA))
    assert list(schema) == ["src", "exclude", "verbose"]
    assert schema["src"] == FlagSpec(
        type=FlagType.STRING,
        flags=("-s", "--src"),
        required=True,
        help="Source directory.",
    )
    assert schema["exclude"].type == FlagType.ARRAY
    assert schema["verbose"].allow_no is False

    result = parse_args(schema, ["--src", "in", "--exclude", "a", "-v"])
    assert result.values == {"src": "in", "exclude": ["a"], "verbose": True}


def test_load_toml_schema(tmp_path):
    schema = load_schema(str(write(tmp_path, "cli.toml", TOML_SCHEMA)))
    assert schema["jobs"].default == 2
    assert schema["name"].allow_empty is True
    assert parse_args(schema, ["--name="]).values == {"jobs": 2, "name": ""}


def test_load_json_schema(tmp_path):
    document = {"n": {"type": "number", "flags": ["--n"], "required": True}}
    schema = load_schema(write(tmp_path, "cli.json", json.dumps(document)))
    assert schema["n"].required is True


def test_flags_key_used_as_entry(tmp_path):
    content = json.dumps({"flags": {"type": "array", "flags": ["--flags"]}})
    schema = load_schema(write(tmp_path, "cli.json", content))
    assert list(schema) == ["flags"]


def test_missing_file(tmp_path):
    with pytest.raises(SchemaFileError, match="No such schema file"):
        load_schema(tmp_path / "missing.yaml")


def test_bad_path_type():
    with pytest.raises(TypeError):
        load_schema(42)


def test_unsupported_suffix(tmp_path):
    with pytest.raises(SchemaFileError, match="Unsupported schema file format"):
        load_schema(write(tmp_path, "cli.ini", "[src]"))


def test_malformed_document(tmp_path):
    with pytest.raises(SchemaFileError, match="Could not parse"):
        load_schema(write(tmp_path, "cli.json", "{not json"))


def test_document_must_be_mapping(tmp_path):
    with pytest.raises(SchemaFileError, match="must contain a mapping"):
        load_schema(write(tmp_path, "cli.yaml", "- a\n- b\n"))


def test_entry_must_be_mapping(tmp_path):
    with pytest.raises(SchemaFileError, match="must be a mapping"):
        load_schema(write(tmp_path, "cli.yaml", "src: --src\n"))


@pytest.mark.parametrize(
    "entry",
    [
        {"type": "color", "flags": ["--x"]},
        {"type": "string", "flags": []},
        {"type": "string"},
        {"type": "string", "flags": ["--x"], "choices": ["a"]},
        {"type": "String", "flags": ["--x"]},
        {"type": "bool", "flags": ["--x"]},
        {"type": "boolean", "flags": ["--x"], "required": "yes"},
        {"type": "boolean", "flags": ["--x"], "allowNo": "off"},
        {"type": "string", "flags": ["--x"], "allowEmpty": 1},
        {"type": "string", "flags": [3]},
    ],
)
def test_invalid_entries(entry):
    with pytest.raises(SchemaFileError, match="Invalid schema entry 'x'"):
        convert_entries({"x": entry})


def test_cross_entry_errors_are_reported(tmp_path):
    content = json.dumps(
        {
            "a": {"type": "string", "flags": ["--same"]},
            "b": {"type": "string", "flags": ["--same"]},
        }
    )
    with pytest.raises(SchemaFileError, match="already assigned"):
        load_schema(write(tmp_path, "cli.json", content))


def test_option_type_errors_are_reported(tmp_path):
    content = json.dumps({"a": {"type": "string", "flags": ["--a"], "allowNo": True}})
    with pytest.raises(SchemaFileError, match="only applies to boolean flags"):
        load_schema(write(tmp_path, "cli.json", content))


def test_boolean_words_are_not_options(tmp_path):
    content = 'v: {type: boolean, flags: ["--v"], required: "yes", allowNo: "off"}\n'
    with pytest.raises(SchemaFileError, match="Invalid schema entry 'v'"):
        load_schema(write(tmp_path, "cli.yaml", content))
