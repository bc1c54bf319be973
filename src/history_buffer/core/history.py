"""Bounded, deduplicating history with a navigable cursor."""

from __future__ import annotations

from typing import Any, Generic, Optional, Tuple, TypeVar

from history_buffer.runtime import telemetry

from .navigation import HistoryNavigator
from .options import UNSET, HistoryOptions, InvalidConfigurationError, accept_all
from .state import HistoryState

T = TypeVar("T")


class History(Generic[T]):
    """Command-line style history buffer.

    Entries are kept oldest first. ``add`` drops entries the validator
    rejects, moves a re-added entry to the newest slot and evicts the oldest
    entry once ``max_size`` is reached. Every ``add`` leaves the cursor on the
    past-last slot, where ``current()`` yields the default value.

    Options may be given as a ``HistoryOptions``, a mapping, or keyword
    arguments::

        history = History(max_size=50, default_value="")
    """

    def __init__(
        self,
        options: HistoryOptions[T] | dict[str, Any] | None = None,
        *,
        name: str = "default",
        logger_name: Optional[str] = None,
        **settings: Any,
    ) -> None:
        self.name = name
        self._logger_name = logger_name
        self._options: HistoryOptions[T] = HistoryOptions(validate=accept_all)
        self._state: HistoryState[T] = HistoryState()
        self.move = HistoryNavigator(self._state)
        if options is None and settings:
            options = HistoryOptions.coerce(settings)
        elif settings:
            raise InvalidConfigurationError(
                "Pass options either positionally or as keywords, not both.",
                options=options,
            )
        self._apply(options, label="create")

    @property
    def options(self) -> HistoryOptions[T]:
        return self._options

    @property
    def max_size(self) -> int:
        assert self._options.max_size is not None
        return self._options.max_size

    def reconfigure(
        self, options: HistoryOptions[T] | dict[str, Any] | None = None
    ) -> None:
        """Apply the supplied fields of ``options``; keep the others.

        Entries and the cursor are left alone, so shrinking ``max_size`` only
        affects later insertions.
        """

        self._apply(options, label="reconfigure")

    def add(self, entry: T) -> None:
        state = self._state
        with telemetry.span(
            "history::add",
            logger_name=self._logger_name,
            component="history",
            metadata={"history": self.name},
        ) as handle:
            validate = self._options.validate or accept_all
            if not validate(entry):
                state.reset_cursor()
                handle.add_metadata("outcome", "rejected")
                self._event("history.rejected", size=state.size)
                return

            if self.max_size <= 0:
                state.reset_cursor()
                handle.add_metadata("outcome", "no_capacity")
                self._event("history.no_capacity", size=state.size)
                return

            kept = [
                item for item in state.entries if item is not entry and item != entry
            ]
            if len(kept) != state.size:
                self._event("history.deduplicated", removed=state.size - len(kept))
                state.entries[:] = kept

            if state.size >= self.max_size:
                state.entries.pop(0)
                self._event("history.evicted", size=state.size, max_size=self.max_size)

            state.entries.append(entry)
            state.reset_cursor()
            handle.add_metadata("size", state.size)

    def current(self) -> T | Any:
        if self._state.selected():
            return self._state.entries[self._state.cursor]
        return self.default_value

    @property
    def default_value(self) -> T | Any:
        value = self._options.default_value
        return None if value is UNSET else value

    def length(self) -> int:
        return self._state.size

    def __len__(self) -> int:
        return self._state.size

    def snapshot(self) -> Tuple[T, ...]:
        """Entries oldest first, detached from internal storage."""

        return tuple(self._state.entries)

    def __repr__(self) -> str:
        return (
            f"History(name={self.name!r}, size={self._state.size}, "
            f"max_size={self._options.max_size}, cursor={self._state.cursor})"
        )

    def _apply(self, options: object, *, label: str) -> None:
        with telemetry.span(
            f"history::{label}",
            logger_name=self._logger_name,
            component="history",
            metadata={"history": self.name},
        ):
            try:
                incoming = HistoryOptions.coerce(options).require()
            except InvalidConfigurationError as exc:
                self._event("history.invalid_options", level="warning", reason=str(exc))
                raise
            self._options = incoming.merged_into(self._options)

    def _event(self, name: str, *, level: str = "debug", **data: Any) -> None:
        telemetry.record_event(
            name,
            level=level,
            data={"history": self.name, **data},
            logger_name=self._logger_name,
        )


def create_history(
    options: HistoryOptions[T] | dict[str, Any] | None = None,
    *,
    name: str = "default",
    logger_name: Optional[str] = None,
) -> History[T]:
    """Build a ``History``; raises ``InvalidConfigurationError`` without ``max_size``."""

    return History(options, name=name, logger_name=logger_name)


__all__ = ["History", "create_history"]
