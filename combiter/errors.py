"""Exceptions raised by the enumerators."""


class CombiterError(Exception):
    """Base class for all combiter errors."""


class EnumerationStateError(CombiterError, RuntimeError):
    """The enumerator was queried in a state where no arrangement is valid."""


class BufferMutationError(CombiterError, RuntimeError):
    """The buffer was modified by the caller between two steps."""


class ContractError(CombiterError, ValueError):
    """A caller-side precondition of an enumerator does not hold."""


class EmptyRangeError(ContractError):
    """``max_value <= min_value`` for a non-empty buffer."""


class DuplicateElementError(ContractError):
    """The simple permutation enumerator was handed equal elements."""
