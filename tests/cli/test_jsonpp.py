"""CLI tests for jsonpp."""

import json
import subprocess
import sys
import warnings


def test_formats_each_stdin_line(invoke, sample_ndjson):
    res = invoke([], input_data=sample_ndjson)
    assert res.exit_code == 0
    assert res.stdout == (
        '{\n  "name": "Alice",\n  "age": 30\n}\n'
        '{\n  "name": "Bob",\n  "age": 25\n}\n'
    )
    assert res.stderr == ""


def test_documented_example(invoke):
    res = invoke([], input_data=b'{"a":1,"b":[2,3]}\n')
    assert res.exit_code == 0
    assert res.stdout == (
        "{\n"
        '  "a": 1,\n'
        '  "b": [\n'
        "    2,\n"
        "    3\n"
        "  ]\n"
        "}\n"
    )


def test_empty_stdin(invoke):
    res = invoke([], input_data=b"")
    assert res.exit_code == 0
    assert res.stdout == ""
    assert res.stderr == ""


def test_last_line_without_newline(invoke):
    res = invoke([], input_data=b"[1]\n[2]")
    assert res.exit_code == 0
    assert res.stdout == "[\n  1\n]\n[\n  2\n]"


def test_broken_line_reports_line_and_context(invoke):
    res = invoke([], input_data=b'{"x":1}\n{"y":2}\n{"a":}\n{"z":3}\n')
    assert res.exit_code == 1
    assert res.stdout == '{\n  "x": 1\n}\n{\n  "y": 2\n}\n'
    assert res.stderr == (
        "ERROR: Broken json on line 3, char 6: "
        "invalid character '}' looking for beginning of value\n"
        '  Context: {"a":}\n'
    )


def test_broken_second_line(invoke):
    res = invoke([], input_data=b'{"a":1}\n{"b":2,}\n')
    assert res.exit_code == 1
    assert res.stdout == '{\n  "a": 1\n}\n'
    assert "ERROR: Broken json on line 2, char 8:" in res.stderr


def test_context_is_elided_on_long_lines(invoke):
    line = b'{"key_one": 1, "key_two": 2, "key_three": x, "key_four": 4}\n'
    res = invoke([], input_data=line)
    assert res.exit_code == 1
    assert res.stderr.splitlines() == [
        "ERROR: Broken json on line 1, char 43: "
        "invalid character 'x' looking for beginning of value",
        '  Context: ... "key_three": x, "key_four": 4...',
    ]


def test_single_mode_joins_lines(invoke):
    res = invoke(["-s"], input_data=b'{\n"a":1\n}')
    assert res.exit_code == 0
    assert res.stdout == '{\n  "a": 1\n}'


def test_single_mode_reformats_pretty_input(invoke, tmp_path):
    pretty = tmp_path / "pretty.json"
    pretty.write_text('{\n    "a": [\n        1,\n        2\n    ]\n}\n')
    res = invoke(["--single", str(pretty)])
    assert res.exit_code == 0
    assert json.loads(res.stdout) == {"a": [1, 2]}
    assert res.stdout == '{\n  "a": [\n    1,\n    2\n  ]\n}'


def test_line_mode_rejects_pretty_input(invoke):
    res = invoke([], input_data=b'{\n  "a": 1\n}\n')
    assert res.exit_code == 1
    assert res.stderr.startswith(
        "ERROR: Broken json on line 1, char 2: unexpected end of JSON input"
    )


def test_indent_from_environment(invoke):
    res = invoke([], input_data=b"[[1]]\n", env={"JSONPP_INDENT": "\t"})
    assert res.exit_code == 0
    assert res.stdout == "[\n\t[\n\t\t1\n\t]\n]\n"


def test_empty_indent_environment_uses_default(invoke):
    res = invoke([], input_data=b"[1]\n", env={"JSONPP_INDENT": ""})
    assert res.stdout == "[\n  1\n]\n"


def test_output_is_byte_passthrough(invoke):
    doc = '{"n":1e5,"s":"caf\u00e9 \\u00e9"}\n'.encode("utf-8")
    res = invoke([], input_data=doc)
    assert res.exit_code == 0
    assert res.stdout_bytes == (
        b'{\n  "n": 1e5,\n  "s": "caf\xc3\xa9 \\u00e9"\n}\n'
    )


def test_files_in_argument_order(invoke, tmp_path):
    first = tmp_path / "first.json"
    first.write_bytes(b'{"first":true}\n')
    second = tmp_path / "second.json"
    second.write_bytes(b'{"second":true}\n')
    res = invoke([str(first), str(second)])
    assert res.exit_code == 0
    assert res.stdout == '{\n  "first": true\n}\n{\n  "second": true\n}\n'


def test_missing_file_is_reported_and_skipped(invoke, tmp_path):
    good = tmp_path / "good.json"
    good.write_bytes(b"[1]\n")
    missing = tmp_path / "missing.json"
    res = invoke([str(missing), str(good)])
    assert res.exit_code == 1
    assert res.stdout == "[\n  1\n]\n"
    assert res.stderr.startswith("ERROR: ")
    assert "No such file or directory" in res.stderr


def test_broken_file_stops_the_run(invoke, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_bytes(b'{"ok":1}\n{"broken"}\n')
    good = tmp_path / "good.json"
    good.write_bytes(b"[1]\n")
    res = invoke([str(bad), str(good)])
    assert res.exit_code == 1
    assert res.stdout == '{\n  "ok": 1\n}\n'
    assert "line 2, char 10" in res.stderr


def test_help(invoke):
    for flag in ("-help", "--help"):
        res = invoke([flag, "ignored.json"])
        assert res.exit_code == 0
        assert res.stdout == ""
        assert res.stderr == (
            "Usage: jsonpp [file]\n" "   or: $COMMAND | jsonpp\n"
        )


def test_help_strips_relative_program_path(cli_runner):
    from jsonpp.cli import cli

    res = cli_runner.invoke(cli, ["-help"], prog_name="./jsonpp")
    assert res.stderr.splitlines()[0] == "Usage: jsonpp [file]"


def test_unknown_option_is_usage_error(invoke):
    res = invoke(["--bogus"], input_data=b"[]\n")
    assert res.exit_code == 2
    assert res.stdout == ""


def test_module_entry_point_keeps_output_order():
    proc = subprocess.run(
        [sys.executable, "-m", "jsonpp"],
        input=b'{"a":1}\n{"b":\n',
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
    )
    assert proc.returncode == 1
    assert proc.stdout.decode().splitlines() == [
        "{",
        '  "a": 1',
        "}",
        "ERROR: Broken json on line 2, char 6: unexpected end of JSON input",
        '  Context: {"b":',
    ]


def test_streams_do_not_use_deprecated_click_api(invoke):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", DeprecationWarning)
        res = invoke([], input_data=b"[1]\n")
    assert [w for w in caught if "jsonpp" in w.filename] == []
    assert res.exit_code == 0
    assert res.stdout == "[\n  1\n]\n"
