"""Hooks fired once per push, after the outcome is known."""

from __future__ import annotations

import pluggy

PROJECT_NAME = "vaultpush"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class PushEvents:
    @hookspec
    def post_push(self, source: str, destination: str) -> None:
        """Every file under *source* now exists under *destination*."""

    @hookspec
    def push_failed(self, code: str, message: str) -> None:
        """The push ended with *code*; *message* is what the user saw."""
