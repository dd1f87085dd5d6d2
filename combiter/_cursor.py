"""Shared state machine for the in-place enumerators.

Every enumerator owns a caller-supplied buffer and a private cursor. It moves
through ``NOT_STARTED -> IN_PROGRESS -> EXHAUSTED``. Subclasses provide three
hooks:

* ``_start()`` prepares the buffer and cursor before the first arrangement;
* ``_advance()`` writes the next arrangement into the buffer and returns
  ``True``, or returns ``False`` once the family is exhausted;
* ``_exhaust()`` establishes the post-enumeration buffer state. It only runs
  on natural exhaustion, never when the caller stops early.

A zero-length buffer is handled here: one empty arrangement, then exhausted,
with none of the hooks called.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from operator import index as as_index
from typing import Generic, Iterator, MutableSequence

from combiter.cbtypes import T
from combiter.config import ENUMERATION_CONFIG, EnumerationConfig
from combiter.errors import (
    BufferMutationError, ContractError, EnumerationStateError
)
from combiter.logging import get_logger

logger = get_logger(__name__)


class EnumerationState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    EXHAUSTED = "exhausted"


class BufferView(Sequence):
    """Read-only window onto the first ``length`` slots of a live buffer.

    No copy is taken: the view reflects whatever the enumerator last wrote.
    Slicing returns a tuple.
    """

    __slots__ = ("_buffer", "_length")

    def __init__(self, buffer: MutableSequence[T], length: int):
        self._buffer = buffer
        self._length = length

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, item):
        if isinstance(item, slice):
            return tuple(
                self._buffer[i] for i in range(*item.indices(self._length))
            )
        position = as_index(item)
        if position < 0:
            position += self._length
        if not 0 <= position < self._length:
            raise IndexError("BufferView index out of range")
        return self._buffer[position]

    def __iter__(self) -> Iterator[T]:
        buffer = self._buffer
        for i in range(self._length):
            yield buffer[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, str):
            return NotImplemented
        if len(other) != self._length:
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __repr__(self) -> str:
        return f"BufferView({list(self)!r})"


class Enumerator(ABC, Generic[T]):
    """Base class of the in-place enumerators.

    Drive it either with ``step()``/``current`` or as an iterator; the
    iterator yields the same ``BufferView`` object after every step.
    """

    def __init__(
        self,
        buffer: MutableSequence[T],
        length: int | None = None,
        config: EnumerationConfig | None = None,
    ):
        size = len(buffer)
        length = size if length is None else as_index(length)
        if not 0 <= length <= size:
            raise ContractError(
                f"length {length} outside buffer of size {size}"
            )
        self._buffer = buffer
        self._length = length
        self._config = ENUMERATION_CONFIG if config is None else config
        self._state = EnumerationState.NOT_STARTED
        self._view = BufferView(buffer, length)
        self._snapshot: list[T] | None = None
        self._emitted = 0

    @property
    def buffer(self) -> MutableSequence[T]:
        return self._buffer

    @property
    def length(self) -> int:
        return self._length

    @property
    def state(self) -> EnumerationState:
        return self._state

    @property
    def current(self) -> BufferView:
        """The arrangement produced by the last successful ``step()``."""
        if self._state is not EnumerationState.IN_PROGRESS:
            raise EnumerationStateError(
                f"no current arrangement: enumerator is {self._state.value}"
            )
        return self._view

    def step(self) -> bool:
        """Advance to the next arrangement.

        Returns:
            ``True`` if the buffer now holds a new arrangement, ``False`` once
            the enumeration is exhausted (and on every call after that).
        """
        if self._state is EnumerationState.EXHAUSTED:
            return False
        if self._state is EnumerationState.NOT_STARTED:
            if self._length:
                self._start()
            self._state = EnumerationState.IN_PROGRESS
            if self._config.log_progress:
                logger.debug(
                    "%s started over %d slot(s)",
                    type(self).__name__, self._length
                )
            found = not self._length or self._advance()
        else:
            self._verify_unchanged()
            found = bool(self._length) and self._advance()
        if not found:
            self._finish()
            return False
        self._emitted += 1
        if self._config.check_mutation:
            self._snapshot = list(self._view)
        return True

    def __iter__(self) -> "Enumerator[T]":
        return self

    def __next__(self) -> BufferView:
        if not self.step():
            raise StopIteration
        return self._view

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(length={self._length}, "
            f"state={self._state.value})"
        )

    def _finish(self) -> None:
        if self._length:
            self._exhaust()
        self._state = EnumerationState.EXHAUSTED
        self._snapshot = None
        if self._config.log_progress:
            logger.debug(
                "%s exhausted after %d arrangement(s)",
                type(self).__name__, self._emitted
            )

    def _verify_unchanged(self) -> None:
        if self._snapshot is None:
            return
        for position, (seen, now) in enumerate(zip(self._snapshot, self._view)):
            if not seen == now:
                raise BufferMutationError(
                    f"buffer slot {position} changed from {seen!r} to {now!r} "
                    "between steps"
                )

    @abstractmethod
    def _start(self) -> None:
        ...

    @abstractmethod
    def _advance(self) -> bool:
        ...

    def _exhaust(self) -> None:
        pass
