from __future__ import annotations

from commandpalette.events import EventHook


def test_emit_reaches_subscribers_in_order() -> None:
    hook: EventHook[int] = EventHook()
    received: list[tuple[str, int]] = []
    hook.subscribe(lambda value: received.append(("a", value)))
    hook.subscribe(lambda value: received.append(("b", value)))

    hook.emit(7)

    assert received == [("a", 7), ("b", 7)]


def test_failing_callback_does_not_block_others() -> None:
    hook: EventHook[None] = EventHook()
    received: list[None] = []

    def explode(_: None) -> None:
        raise RuntimeError("boom")

    hook.subscribe(explode)
    hook.subscribe(received.append)

    hook.emit(None)

    assert received == [None]


def test_subscribing_during_dispatch_applies_to_next_emit() -> None:
    hook: EventHook[None] = EventHook()
    late: list[None] = []

    def add_late(_: None) -> None:
        hook.subscribe(late.append)

    unsubscribe = hook.subscribe(add_late)
    hook.emit(None)
    assert late == []

    unsubscribe()
    hook.emit(None)
    assert late == [None]


def test_unsubscribe_by_callback() -> None:
    hook: EventHook[None] = EventHook()
    received: list[None] = []
    hook.subscribe(received.append)

    assert hook.unsubscribe(received.append) is True
    assert hook.unsubscribe(received.append) is False
    assert len(hook) == 0
