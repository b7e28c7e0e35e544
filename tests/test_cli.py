"""Tests for the command line interface."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from jsdoc_hover.cli import main

SOURCE = """
/**
 * @callback onChange
 * @param {string} value - new value
 */
"""


def test_render_to_file(tmp_path: Path) -> None:
    """Test the render command writing an output file."""
    src = tmp_path / "field.js"
    src.write_text(SOURCE, encoding="utf-8")
    out = tmp_path / "docs" / "field.md"

    test_args = ["script_name", "render", str(src), "--output", str(out)]
    with patch.object(sys, "argv", test_args):
        ret = main()
        assert ret == 0

    md = out.read_text(encoding="utf-8")
    assert md.startswith("## onChange")
    assert "function onChange" in md
    assert "- **value** : `string` - new value" in md


def test_render_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test the render command printing Markdown."""
    src = tmp_path / "field.js"
    src.write_text("/** @class X */", encoding="utf-8")

    ret = main(["render", str(src), "--name", "Field", "--reference-path", "f.md"])
    assert ret == 0
    assert "class Field" in capsys.readouterr().out


def test_render_with_config(tmp_path: Path) -> None:
    """Test that the config file is honored."""
    src = tmp_path / "field.js"
    src.write_text("/** @class X */", encoding="utf-8")
    config = tmp_path / "config.yml"
    config.write_text("markdown:\n  code_language: ts\n", encoding="utf-8")
    out = tmp_path / "out.md"

    main(["--config", str(config), "render", str(src), "--output", str(out)])
    assert "```ts\nclass field" in out.read_text(encoding="utf-8")


def test_render_missing_source(tmp_path: Path) -> None:
    """Test that a missing source file exits with a message."""
    with pytest.raises(SystemExit, match="Source file not found"):
        main(["render", str(tmp_path / "nope.js")])


def test_hover_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test the hover command end to end."""
    (tmp_path / "field.js").write_text(SOURCE, encoding="utf-8")
    app = tmp_path / "app.js"
    app.write_text("import { Field } from './field';\n", encoding="utf-8")

    assert main(["hover", str(app), "Field"]) == 0
    assert "function onChange" in capsys.readouterr().out


def test_hover_command_no_docs(tmp_path: Path) -> None:
    """Test that a failed lookup exits with a message."""
    app = tmp_path / "app.js"
    app.write_text("", encoding="utf-8")
    with pytest.raises(SystemExit, match="No documentation found"):
        main(["hover", str(app), "Field"])


def test_render_undecodable_source(tmp_path: Path) -> None:
    """Test that a non UTF-8 source file exits with a message."""
    src = tmp_path / "legacy.js"
    src.write_bytes("/** caf\xe9 */".encode("latin-1"))
    with pytest.raises(SystemExit, match="Cannot read"):
        main(["render", str(src)])
