from combiter._cursor import BufferView, EnumerationState, Enumerator
from combiter._odometer import (
    CombinationEnumerator, MultisetEnumerator, OrderedSubsetEnumerator,
    RangeEnumerator, SubsetEnumerator
)
from combiter._permute import PermutationEnumerator, SimplePermutationEnumerator
from combiter.combiter_core import (
    each_combination, each_multiset, each_ordered_subset, each_permutation,
    each_simple_permutation, each_subset
)
from combiter.config import ENUMERATION_CONFIG, EnumerationConfig
from combiter.errors import (
    BufferMutationError, CombiterError, ContractError, DuplicateElementError,
    EmptyRangeError, EnumerationStateError
)
