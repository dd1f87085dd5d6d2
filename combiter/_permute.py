"""In-place permutation enumerators.

``SimplePermutationEnumerator`` runs Heap's algorithm with an explicit stack
of per-depth counters. Each step is one swap and the buffer is left wherever
the last swap put it. The elements must be pairwise distinct.

``PermutationEnumerator`` handles repeated elements. Every position records
the first index holding an equal value (its *tag*), so equal elements share
a tag. Each depth counts the source index it takes from the saved initial
arrangement downwards. Equal elements are only ever placed in increasing
source order, which yields each distinct value sequence exactly once. The
last arrangement produced is the initial one, and the buffer is restored to
it on exhaustion.
"""

from typing import MutableSequence

from combiter._cursor import Enumerator
from combiter.cbtypes import EqT
from combiter.errors import DuplicateElementError


def _require_distinct(buffer: MutableSequence[EqT], length: int) -> None:
    for i in range(1, length):
        for j in range(i):
            if buffer[i] == buffer[j]:
                raise DuplicateElementError(
                    f"positions {j} and {i} hold equal elements "
                    f"({buffer[i]!r}); use each_permutation for multisets"
                )


class SimplePermutationEnumerator(Enumerator[EqT]):
    """All ``L!`` orderings of a buffer of distinct elements.

    The first arrangement is the buffer as supplied. Equal elements are
    rejected at the first step unless ``config.check_distinct`` is off, in
    which case some orderings repeat and others never appear.
    """

    def _start(self) -> None:
        if self._config.check_distinct:
            _require_distinct(self._buffer, self._length)
        # counters[d]: children of depth d visited so far
        self._counters = [0] * self._length
        self._depth = 0

    def _advance(self) -> bool:
        buffer, length, counters = self._buffer, self._length, self._counters
        depth = self._depth
        while True:
            width = length - depth
            if width >= 2 and counters[depth] < width:
                depth += 1
                counters[depth] = 0
            elif counters[depth] >= width:
                if not depth:
                    return False
                depth -= 1
                width += 1
                if counters[depth] < width - 1:
                    other = 0 if width % 2 else counters[depth]
                    last = width - 1
                    buffer[last], buffer[other] = buffer[other], buffer[last]
                counters[depth] += 1
            else:
                # single remaining slot, mark the leaf as visited
                counters[depth] = width + 1
                self._depth = depth
                return True

    def _exhaust(self) -> None:
        self._counters = None


class PermutationEnumerator(Enumerator[EqT]):
    """Every distinct ordering of a buffer that may hold equal elements.

    For value multiplicities ``m_1 .. m_k`` there are
    ``L! / (m_1! * ... * m_k!)`` arrangements. Only ``==`` is used on the
    elements. A full run leaves the buffer as it was before the first step.
    """

    def _start(self) -> None:
        buffer, length = self._buffer, self._length
        self._initial = [buffer[i] for i in range(length)]
        self._tags = [
            next(j for j in range(i + 1) if buffer[j] == buffer[i])
            for i in range(length)
        ]
        # sources[d]: index into _initial placed at d; length means none yet
        self._sources = [length] * length
        self._depth = 0

    def _advance(self) -> bool:
        buffer, length = self._buffer, self._length
        initial, tags, sources = self._initial, self._tags, self._sources
        depth = self._depth
        while depth < length:
            if not sources[depth]:
                sources[depth] = length
                if not depth:
                    return False
                depth -= 1
                continue
            sources[depth] -= 1
            source = sources[depth]
            tag = tags[source]
            for earlier in range(depth):
                if tags[sources[earlier]] == tag and sources[earlier] >= source:
                    break
            else:
                buffer[depth] = initial[source]
                depth += 1
                continue
            if sources[earlier] > source:
                # source would land after an equal element with a higher
                # index, so nothing below `earlier` is canonical
                for position in range(earlier + 1, depth + 1):
                    sources[position] = length
                depth = earlier
        self._depth = length - 1
        return True

    def _exhaust(self) -> None:
        buffer = self._buffer
        for position, value in enumerate(self._initial):
            buffer[position] = value
        self._initial = self._tags = self._sources = None
