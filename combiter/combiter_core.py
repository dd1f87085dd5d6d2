from typing import Callable, MutableSequence, TypeVar

from combiter._cursor import Enumerator
from combiter._odometer import (
    CombinationEnumerator, MultisetEnumerator, OrderedSubsetEnumerator,
    SubsetEnumerator
)
from combiter._permute import PermutationEnumerator, SimplePermutationEnumerator
from combiter.cbtypes import EqT, StepT
from combiter.config import EnumerationConfig

E = TypeVar('E', bound=Enumerator)


def _cbwrap(
    cls: Callable[..., E],
    buffer: MutableSequence,
    *args,
    length: int | None,
    config: EnumerationConfig | None
) -> E:
    try:
        len(buffer)
    except TypeError:
        raise TypeError("Buffer must be a sized sequence")
    if not (
        hasattr(type(buffer), "__getitem__")
        and hasattr(type(buffer), "__setitem__")
    ):
        raise TypeError("Buffer must support item access and assignment")
    # range and length checks occur in the enumerator
    return cls(buffer, *args, length=length, config=config)


def each_combination(
    buffer: MutableSequence[StepT],
    min_value: StepT,
    max_value: StepT,
    length: int | None = None,
    config: EnumerationConfig | None = None,
) -> CombinationEnumerator[StepT]:
    return _cbwrap(
        CombinationEnumerator, buffer, min_value, max_value,
        length=length, config=config
    )


def each_multiset(
    buffer: MutableSequence[StepT],
    min_value: StepT,
    max_value: StepT,
    length: int | None = None,
    config: EnumerationConfig | None = None,
) -> MultisetEnumerator[StepT]:
    return _cbwrap(
        MultisetEnumerator, buffer, min_value, max_value,
        length=length, config=config
    )


def each_subset(
    buffer: MutableSequence[StepT],
    min_value: StepT,
    max_value: StepT,
    length: int | None = None,
    config: EnumerationConfig | None = None,
) -> SubsetEnumerator[StepT]:
    return _cbwrap(
        SubsetEnumerator, buffer, min_value, max_value,
        length=length, config=config
    )


def each_ordered_subset(
    buffer: MutableSequence[StepT],
    min_value: StepT,
    max_value: StepT,
    length: int | None = None,
    config: EnumerationConfig | None = None,
) -> OrderedSubsetEnumerator[StepT]:
    return _cbwrap(
        OrderedSubsetEnumerator, buffer, min_value, max_value,
        length=length, config=config
    )


def each_simple_permutation(
    buffer: MutableSequence[EqT],
    length: int | None = None,
    config: EnumerationConfig | None = None,
) -> SimplePermutationEnumerator[EqT]:
    return _cbwrap(
        SimplePermutationEnumerator, buffer, length=length, config=config
    )


def each_permutation(
    buffer: MutableSequence[EqT],
    length: int | None = None,
    config: EnumerationConfig | None = None,
) -> PermutationEnumerator[EqT]:
    return _cbwrap(PermutationEnumerator, buffer, length=length, config=config)
