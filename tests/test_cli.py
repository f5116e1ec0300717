import json

import pytest

from ninja_writer.cli import main, parse_args

MANIFEST = {
    "statements": [
        {
            "kind": "rule",
            "name": "cc",
            "command": "gcc -c $in -o $out",
            "builds": [{"outputs": ["foo.o"], "inputs": ["foo.c"]}],
        }
    ]
}

EXPECTED = "\nrule cc\n  command = gcc -c $in -o $out\n\nbuild foo.o: cc foo.c\n"


def write_manifest(tmp_path, data=None):
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps(MANIFEST if data is None else data), encoding="utf-8")
    return path


def test_defaults():
    args = parse_args(["manifest.json"])
    assert args.output == "build.ninja"
    assert args.stdout is False
    assert args.thread_safe is False
    assert args.verbose is False


def test_writes_output_file(tmp_path, capsys):
    manifest = write_manifest(tmp_path)
    output = tmp_path / "out.ninja"
    main([str(manifest), "-o", str(output)])
    assert output.read_text(encoding="utf-8") == EXPECTED
    assert "Wrote" in capsys.readouterr().out


def test_stdout(tmp_path, capsys):
    manifest = write_manifest(tmp_path)
    main([str(manifest), "--stdout", "--thread-safe"])
    assert capsys.readouterr().out == EXPECTED


def test_missing_manifest(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "missing.json"), "--stdout"])


def test_invalid_manifest(tmp_path):
    manifest = write_manifest(tmp_path, {"statements": [{"kind": "nonsense"}]})
    with pytest.raises(RuntimeError, match="Invalid manifest"):
        main([str(manifest), "--stdout"])


def test_unknown_rule(tmp_path):
    manifest = write_manifest(tmp_path, {"statements": [{"kind": "build", "rule": "cc", "outputs": ["a"]}]})
    with pytest.raises(RuntimeError, match="Failed to build"):
        main([str(manifest), "--stdout"])
