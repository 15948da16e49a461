"""Scripted interactive front end for testing.

Feeds a fixed sequence of intents to the controller instead of reading
keys from a terminal, recording the snapshot after every step.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ...application.controller import Controller, ControllerSnapshot, StepResult
from ...domain.intents import Intent


@dataclass
class ScriptedInteractive:
    """Run a canned intent script; satisfies the RunInteractive protocol.

    Attributes:
        script: Intents to feed, in order. Processing stops at the first Quit.
        snapshots: Snapshot taken before the first intent and after each one.
        results: StepResult of every processed intent.
    """

    script: Iterable[Intent] = ()
    snapshots: list[ControllerSnapshot] = field(default_factory=list)
    results: list[StepResult] = field(default_factory=list)
    runs: int = 0

    def __call__(self, controller: Controller) -> None:
        self.runs += 1
        controller.refresh()
        self.snapshots.append(controller.snapshot())
        for intent in self.script:
            result = controller.handle(intent)
            self.results.append(result)
            self.snapshots.append(controller.snapshot())
            if result.quit:
                break


__all__ = ["ScriptedInteractive"]
