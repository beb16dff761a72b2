"""Tests for snakes_ladders.notify."""

import logging

from snakes_ladders.notify import ConsoleNotifier, ListNotifier, LoggingNotifier, Notifier


def test_console_notifier_prefixes(capsys):
    ConsoleNotifier().receive("Game initiated.")
    assert capsys.readouterr().out == "[GAME NOTICE] Game initiated.\n"


def test_list_notifier_keeps_order():
    n = ListNotifier()
    n.receive("a")
    n.receive("b")
    assert n.messages == ["a", "b"]


def test_logging_notifier(caplog):
    with caplog.at_level(logging.INFO):
        LoggingNotifier().receive("Game concluded. Winner: Alice")
    assert "Game concluded. Winner: Alice" in caplog.text


def test_notifiers_satisfy_protocol():
    for n in (ConsoleNotifier(), ListNotifier(), LoggingNotifier()):
        assert isinstance(n, Notifier)
