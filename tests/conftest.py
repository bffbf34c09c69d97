"""Global test configuration for textsplice tests."""

import pytest

from textsplice.core.logging import configure_default_logging, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI invocations between tests."""
    yield
    configure_default_logging()


@pytest.fixture
def debug_logging():
    """Let debug and info events through for log assertions."""
    setup_logging("plain", "debug")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep stray TEXTSPLICE_* variables and config files out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("TEXTSPLICE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def corpus():
    """Strings spanning the scripts the chunker and spacing rules care about."""
    return [
        "one two three four",
        "Hello world. How are you today? Fine, thanks!",
        "  leading and trailing spaces  ",
        "日本語のテキストです。二つ目の文です。",
        "ภาษาไทยไม่มีการเว้นวรรคระหว่างคำ แต่มีระหว่างประโยค",
        "हिन्दी एक भाषा है। यह भारत में बोली जाती है।",
        "(mixed) «punctuation»... and — dashes; plus 3.14%!",
        "a𓃰b𓃰c",
        "e\u0301 n\u0303 \U0001F1EF\U0001F1F5 \U0001F469\u200d\U0001F469\u200d\U0001F467",
        "",
    ]
