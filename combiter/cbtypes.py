from typing import Protocol, TypeVar

T = TypeVar('T')


class SupportsEq(Protocol):
    def __eq__(self: T, other: T) -> bool:
        pass


class SupportsStep(Protocol):
    """Element type of the range enumerators: ordered, and closed under +/- 1."""

    def __lt__(self: T, other: T) -> bool:
        pass

    def __le__(self: T, other: T) -> bool:
        pass

    def __eq__(self: T, other: T) -> bool:
        pass

    def __add__(self: T, other: int) -> T:
        pass

    def __sub__(self: T, other: int) -> T:
        pass


EqT = TypeVar('EqT', bound=SupportsEq)
StepT = TypeVar('StepT', bound=SupportsStep)
