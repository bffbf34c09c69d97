"""Tests for logging defaults and setup."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

import textsplice
from textsplice import chunkify
from textsplice.core.logging import setup_logging

pytestmark = pytest.mark.unit

SRC_DIR = str(Path(textsplice.__file__).resolve().parents[1])


def run_fresh(script):
    """Run ``script`` in a new interpreter where textsplice was never configured."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [SRC_DIR, env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-c", script],
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )


class TestLibraryDefaults:
    """Importing the package configures quiet logging on stderr."""

    def test_chunkify_writes_nothing_to_stdout(self):
        result = run_fresh(
            "from textsplice import ChunkError, chunkify\n"
            "chunkify('one two three four', 7)\n"
            "try:\n"
            "    chunkify('abcdefgh', 3)\n"
            "except ChunkError:\n"
            "    pass\n"
        )
        assert result.stdout == ""
        assert "chunkify.failed" in result.stderr
        assert "chunkify.start" not in result.stderr

    def test_existing_configuration_is_kept(self):
        result = run_fresh(
            "import structlog\n"
            "structlog.configure(processors=[structlog.processors.KeyValueRenderer()])\n"
            "from textsplice import chunkify\n"
            "chunkify('one two three four', 7)\n"
        )
        assert "chunkify.start" in result.stdout


class TestSetupLogging:
    def test_debug_events_go_to_stderr(self, capsys):
        setup_logging("plain", "debug")
        chunkify("one two three four", 7)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "chunkify.start" in captured.err

    def test_json_format(self, capsys):
        setup_logging("json", "warning")
        with pytest.raises(ValueError):
            chunkify("abcdefgh", 3)
        captured = capsys.readouterr()
        assert '"event": "chunkify.failed"' in captured.err
        assert '"level": "warning"' in captured.err

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="unknown log level"):
            setup_logging("plain", "chatty")
