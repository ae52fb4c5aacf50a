from __future__ import annotations

import sys
from typing import Any

import pytest

import authservice.__main__ as cli


class RecordingApp:
    def __init__(self) -> None:
        self.run_kwargs: dict[str, Any] = {}

    def run(self, **kwargs: Any) -> None:
        self.run_kwargs = kwargs


def test_main_defaults_to_local_non_debug_server(monkeypatch: pytest.MonkeyPatch) -> None:
    app = RecordingApp()
    monkeypatch.setattr(cli, "create_app", lambda: app)
    monkeypatch.setattr(sys, "argv", ["authservice"])

    cli.main()

    assert app.run_kwargs == {"host": "127.0.0.1", "port": 5000, "debug": False}


def test_main_passes_explicit_options(monkeypatch: pytest.MonkeyPatch) -> None:
    app = RecordingApp()
    monkeypatch.setattr(cli, "create_app", lambda: app)
    monkeypatch.setattr(sys, "argv", ["authservice", "--host", "0.0.0.0", "--port", "8080", "--debug"])

    cli.main()

    assert app.run_kwargs == {"host": "0.0.0.0", "port": 8080, "debug": True}
