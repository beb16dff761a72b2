"""Notifiers — receivers of the engine's textual game events."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

log = logging.getLogger(__name__)


@runtime_checkable
class Notifier(Protocol):
    """Called synchronously, once per event, in registration order."""

    def receive(self, message: str) -> None: ...


class ConsoleNotifier:
    def receive(self, message: str) -> None:
        print(f"[GAME NOTICE] {message}")


@dataclass
class ListNotifier:
    """Collects messages into a list."""

    messages: list[str] = field(default_factory=list)

    def receive(self, message: str) -> None:
        self.messages.append(message)


@dataclass
class LoggingNotifier:
    """Forwards every event to a logger at *level*."""

    logger: logging.Logger = log
    level: int = logging.INFO

    def receive(self, message: str) -> None:
        self.logger.log(self.level, message)
