from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from docsim.cli import app

runner = CliRunner()


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_compare_writes_result(tmp_path: Path) -> None:
    orig = _write(tmp_path / "orig.txt", "a")
    copy = _write(tmp_path / "copy.txt", "a")
    output = tmp_path / "result.txt"

    result = runner.invoke(app, ["compare", str(orig), str(copy), str(output)])

    assert result.exit_code == 0, result.output
    assert "100.00" in result.output
    assert output.read_text(encoding="utf-8") == "100.00"


def test_compare_missing_input_exits_with_error(tmp_path: Path) -> None:
    copy = _write(tmp_path / "copy.txt", "a")
    output = tmp_path / "result.txt"

    result = runner.invoke(
        app, ["compare", str(tmp_path / "absent.txt"), str(copy), str(output)]
    )

    assert result.exit_code == 1
    assert not output.exists()


def test_compare_requires_three_arguments(tmp_path: Path) -> None:
    orig = _write(tmp_path / "orig.txt", "a")
    copy = _write(tmp_path / "copy.txt", "a")

    result = runner.invoke(app, ["compare", str(orig), str(copy)])

    assert result.exit_code == 2
    assert sorted(p.name for p in tmp_path.iterdir()) == ["copy.txt", "orig.txt"]


def test_compare_honours_config(tmp_path: Path) -> None:
    orig = _write(tmp_path / "orig.txt", "abc")
    copy = _write(tmp_path / "copy.txt", "abd")
    config = _write(tmp_path / "docsim.yaml", "decimals: 1\n")
    output = tmp_path / "result.txt"

    result = runner.invoke(
        app, ["compare", str(orig), str(copy), str(output), "--config", str(config)]
    )

    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8") == "66.7"


def test_inspect_prints_table(tmp_path: Path) -> None:
    orig = _write(tmp_path / "orig.txt", "ab")
    copy = _write(tmp_path / "copy.txt", "ba")

    result = runner.invoke(app, ["inspect", str(orig), str(copy)])

    assert result.exit_code == 0, result.output
    assert "distance" in result.output
    assert "50.00" in result.output
    assert "formatted" in result.output
    assert "output_path" not in result.output


def test_compare_undecodable_input_exits_with_error(tmp_path: Path) -> None:
    orig = tmp_path / "orig.txt"
    orig.write_bytes(b"\xff\xfe\xfa bad")
    copy = _write(tmp_path / "copy.txt", "a")
    output = tmp_path / "result.txt"

    result = runner.invoke(app, ["compare", str(orig), str(copy), str(output)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert not output.exists()


def test_inspect_undecodable_input_exits_with_error(tmp_path: Path) -> None:
    orig = tmp_path / "orig.txt"
    orig.write_bytes(b"\xff\xfe\xfa bad")
    copy = _write(tmp_path / "copy.txt", "a")

    result = runner.invoke(app, ["inspect", str(orig), str(copy)])

    assert result.exit_code == 1


def test_compare_unknown_encoding_is_bad_configuration(tmp_path: Path) -> None:
    orig = _write(tmp_path / "orig.txt", "a")
    copy = _write(tmp_path / "copy.txt", "a")
    config = _write(tmp_path / "docsim.yaml", "encoding: nope-codec\n")
    output = tmp_path / "result.txt"

    result = runner.invoke(
        app, ["compare", str(orig), str(copy), str(output), "--config", str(config)]
    )

    assert result.exit_code == 1
    assert "Bad configuration" in result.output
    assert not output.exists()
