from __future__ import annotations

from typing import Callable, Generic, TypeVar

from commandpalette.utils import get_logger


logger = get_logger(__name__)

T_co = TypeVar("T_co", covariant=True)


class EventHook(Generic[T_co]):
    """Synchronous observer list owned by a single publisher.

    Subscribers run in subscription order before :meth:`emit` returns. The
    subscriber list is snapshotted per dispatch, so subscribing or
    unsubscribing from inside a callback only affects later emits.
    """

    def __init__(self) -> None:
        self._subscribers: list[Callable[[T_co], None]] = []

    def subscribe(self, callback: Callable[[T_co], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:  # pragma: no cover - already unsubscribed
                pass

        return unsubscribe

    def unsubscribe(self, callback: Callable[[T_co], None]) -> bool:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            return False
        return True

    def emit(self, payload: T_co) -> None:
        for callback in list(self._subscribers):
            try:
                callback(payload)
            except Exception:  # noqa: BLE001 - callbacks should not break registry mutations
                logger.exception("Palette change callback failed")

    def __len__(self) -> int:
        return len(self._subscribers)


__all__ = ["EventHook"]
