"""Odometer enumerators over a half-open value range ``[min_value, max_value)``.

The buffer is a row of digits. Before the first arrangement every digit is set
to the sentinel ``max_value``, which lies outside the range. A digit counts
down through ``max_value - 1``, ``max_value - 2`` and so on while it stays at
or above ``min_value``, and the rightmost digit moves fastest. A digit that
would drop below ``min_value`` goes back to the sentinel and the carry moves
one digit to the left. A range whose width is not a whole number, such as
``[Fraction(0), Fraction(5, 2))``, therefore holds ``3/2`` and ``1/2`` only.
The enumeration ends when the leftmost digit overflows, leaving every slot at
the sentinel again.

The four variants differ only in what happens after a digit is decremented:

=======================  ==========  =======  =================================
class                    repetition  ordered  after decrementing digit ``i``
=======================  ==========  =======  =================================
CombinationEnumerator    yes         yes      move on to digit ``i + 1``
MultisetEnumerator       yes         no       cap digit ``i + 1`` at ``d[i]``
OrderedSubsetEnumerator  no          yes      retry ``i`` while ``d[i]`` repeats
SubsetEnumerator         no          no       cap digit ``i + 1`` below ``d[i]``
=======================  ==========  =======  =================================

So multisets come out non-increasing and subsets strictly decreasing.
"""

from abc import abstractmethod
from typing import MutableSequence

from combiter._cursor import Enumerator
from combiter.cbtypes import StepT
from combiter.config import EnumerationConfig
from combiter.errors import EmptyRangeError


class RangeEnumerator(Enumerator[StepT]):
    """Shared odometer for the four range families."""

    def __init__(
        self,
        buffer: MutableSequence[StepT],
        min_value: StepT,
        max_value: StepT,
        length: int | None = None,
        config: EnumerationConfig | None = None,
    ):
        super().__init__(buffer, length, config)
        if self._length and max_value <= min_value:
            raise EmptyRangeError(
                f"empty range [{min_value!r}, {max_value!r}) "
                f"for {self._length} slot(s)"
            )
        self._min = min_value
        self._max = max_value
        self._digit = 0

    @property
    def min_value(self) -> StepT:
        return self._min

    @property
    def max_value(self) -> StepT:
        return self._max

    def _start(self) -> None:
        self._reset_to_sentinel()
        self._digit = 0

    def _advance(self) -> bool:
        buffer, length = self._buffer, self._length
        lowest, sentinel = self._min, self._max
        digit = self._digit
        while digit < length:
            if buffer[digit] - 1 < lowest:
                buffer[digit] = sentinel
                if not digit:
                    return False
                digit -= 1
            else:
                buffer[digit] -= 1
                digit = self._after_decrement(digit)
        self._digit = length - 1
        return True

    def _exhaust(self) -> None:
        self._reset_to_sentinel()

    def _reset_to_sentinel(self) -> None:
        buffer, sentinel = self._buffer, self._max
        for i in range(self._length):
            buffer[i] = sentinel

    @abstractmethod
    def _after_decrement(self, digit: int) -> int:
        """Return the next digit to work on once ``digit`` was decremented."""


class CombinationEnumerator(RangeEnumerator[StepT]):
    """Every length-L tuple over the range; ``(MAX - MIN) ** L`` for an
    integer-wide range."""

    def _after_decrement(self, digit: int) -> int:
        return digit + 1


class MultisetEnumerator(RangeEnumerator[StepT]):
    """One non-increasing representative per multiset of size L."""

    def _after_decrement(self, digit: int) -> int:
        buffer = self._buffer
        following = digit + 1
        if following < self._length and buffer[digit] < buffer[following]:
            # lands on buffer[digit] after its own decrement
            buffer[following] = buffer[digit] + 1
        return following


class SubsetEnumerator(RangeEnumerator[StepT]):
    """One strictly decreasing representative per L-element subset.

    Yields nothing (beyond the empty subset for L == 0) when the range holds
    fewer than L values.
    """

    def _after_decrement(self, digit: int) -> int:
        buffer = self._buffer
        following = digit + 1
        if following < self._length and buffer[digit] < buffer[following]:
            buffer[following] = buffer[digit]
        return following


class OrderedSubsetEnumerator(RangeEnumerator[StepT]):
    """Every length-L sequence of pairwise distinct values from the range."""

    def _after_decrement(self, digit: int) -> int:
        buffer = self._buffer
        value = buffer[digit]
        for position in range(digit):
            if buffer[position] == value:
                return digit
        return digit + 1
