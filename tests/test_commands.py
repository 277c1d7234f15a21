import pytest

from status_clock.commands import (
    CommandRegistry,
    command_uri,
    parse_command_uri,
)
from status_clock.errors import UnknownCommandError


def test_execute_passes_arguments():
    registry = CommandRegistry()
    registry.register("clock.echo", lambda *args: args)

    assert registry.execute("clock.echo", 1, "two") == (1, "two")


def test_unknown_command_raises():
    registry = CommandRegistry()

    with pytest.raises(UnknownCommandError) as excinfo:
        registry.execute("clock.missing")

    assert str(excinfo.value) == "Unknown command: clock.missing"
    assert isinstance(excinfo.value, KeyError)


def test_dispose_unregisters():
    registry = CommandRegistry()
    subscription = registry.register("clock.noop", lambda: None)
    assert registry.has("clock.noop")

    subscription.dispose()

    assert not registry.has("clock.noop")
    assert registry.ids() == []


def test_stale_disposable_keeps_replacement():
    registry = CommandRegistry()
    first = registry.register("clock.run", lambda: "first")
    registry.register("clock.run", lambda: "second")

    first.dispose()

    assert registry.execute("clock.run") == "second"


def test_command_uri_round_trip_with_single_arg():
    uri = command_uri("statusClock.openSettings", "statusClock")

    assert uri == "command:statusClock.openSettings?%22statusClock%22"
    assert parse_command_uri(uri) == ("statusClock.openSettings", ["statusClock"])


def test_command_uri_without_args():
    assert command_uri("statusClock.openMenu") == "command:statusClock.openMenu"
    assert parse_command_uri("command:statusClock.openMenu") == ("statusClock.openMenu", [])


def test_parse_command_uri_with_argument_list():
    assert parse_command_uri('command:clock.add?[1,2]') == ("clock.add", [1, 2])


@pytest.mark.parametrize(
    "uri", ["https://example.com", "command:", "command:clock.run?%7Bbroken"]
)
def test_malformed_uri_raises(uri):
    with pytest.raises(UnknownCommandError):
        parse_command_uri(uri)


def test_dispatch_accepts_id_and_uri():
    registry = CommandRegistry()
    calls = []
    registry.register("clock.record", lambda *args: calls.append(args))

    registry.dispatch("  clock.record ")
    registry.dispatch("command:clock.record?%22x%22")

    assert calls == [(), ("x",)]
