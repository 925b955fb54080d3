import json

from argv_flags.parser import parse_args, to_json_result

SCHEMA = {
    "name": {"type": "string", "flags": ["--name"]},
    "items": {"type": "array", "flags": ["--items"]},
    "n": {"type": "number", "flags": ["--n"]},
}


def test_absent_values_are_null():
    data = to_json_result(parse_args(SCHEMA, []))
    assert data == {
        "values": {"name": None, "items": None, "n": None},
        "present": {"name": False, "items": False, "n": False},
        "rest": [],
        "unknown": [],
        "issues": [],
        "ok": True,
    }
    assert json.loads(json.dumps(data)) == data


def test_issues_are_plain_dicts():
    data = to_json_result(parse_args(SCHEMA, ["--n", "x", "--bogus"]))
    assert data["ok"] is False
    assert data["issues"] == [
        {
            "code": "INVALID_VALUE",
            "severity": "error",
            "message": "Invalid number value for --n: x.",
            "flag": "--n",
            "key": "n",
            "value": "x",
            "index": 1,
        },
        {
            "code": "UNKNOWN_FLAG",
            "severity": "error",
            "message": "Unknown flag --bogus.",
            "flag": "--bogus",
            "index": 2,
        },
    ]


def test_projection_is_a_copy():
    result = parse_args(SCHEMA, ["rest", "--items", "a"])
    data = to_json_result(result)
    data["values"]["items"].append("b")
    data["rest"].append("more")
    assert result.values["items"] == ["a"]
    assert result.rest == ["rest"]
