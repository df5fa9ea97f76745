"""
End to end tests of the command line front end, run in a subprocess
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest

# Integration Tests ----------------------------------------------------------------------------------------------------

pytestmark = pytest.mark.integration

ROOT = Path(__file__).resolve().parents[2]


def run(*args: str, stdin: str = "") -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "litprint", *args],
        input=stdin,
        capture_output=True,
        text=True,
        cwd=ROOT,
        timeout=60,
    )


class TestCommandLine:
    """Run python -m litprint the way a user would."""

    def test_stdin_to_stdout(self):
        result = run(stdin=json.dumps({"name": "Al", "tags": ["x"]}))
        assert result.returncode == 0
        assert result.stdout == "{\n    'name': 'Al',\n    'tags': [\n        'x',\n    ],\n}\n"

    def test_file_argument(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text(json.dumps([1, 2.5, None]), encoding="utf-8")
        result = run(str(path), "--indent", "2")
        assert result.returncode == 0
        assert result.stdout == "[\n  1,\n  2.5,\n  None,\n]\n"

    def test_output_is_python(self):
        document = {"z": {"nested": [True, False]}, "a": "it's"}
        result = run("--sort-keys", stdin=json.dumps(document))
        assert eval(result.stdout) == document

    def test_unreadable_input(self, tmp_path):
        result = run(str(tmp_path / "missing.json"))
        assert result.returncode == 1
        assert result.stdout == ""
        assert "cannot read" in result.stderr

    def test_usage_error(self):
        result = run("--indent", "wide")
        assert result.returncode == 2
        assert "usage: python -m litprint" in result.stderr

    def test_help(self):
        result = run("--help")
        assert result.returncode == 0
        assert "--sort-keys" in result.stdout
