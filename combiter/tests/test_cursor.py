import pytest

from combiter import (
    BufferMutationError, BufferView, ContractError, ENUMERATION_CONFIG,
    EnumerationConfig, EnumerationState, EnumerationStateError,
    each_combination, each_multiset, each_ordered_subset, each_permutation,
    each_simple_permutation, each_subset
)

ALL_FUNCS = (
    lambda buf, **kw: each_combination(buf, 0, 2, **kw),
    lambda buf, **kw: each_multiset(buf, 0, 2, **kw),
    lambda buf, **kw: each_subset(buf, 0, 3, **kw),
    lambda buf, **kw: each_ordered_subset(buf, 0, 3, **kw),
    each_simple_permutation,
    each_permutation,
)


@pytest.mark.parametrize("func", ALL_FUNCS)
def test_state_transitions(func):
    enum = func([0, 1])
    assert enum.state is EnumerationState.NOT_STARTED
    with pytest.raises(EnumerationStateError):
        enum.current
    assert enum.step()
    assert enum.state is EnumerationState.IN_PROGRESS
    assert len(enum.current) == 2
    while enum.step():
        pass
    assert enum.state is EnumerationState.EXHAUSTED
    with pytest.raises(EnumerationStateError):
        enum.current
    # stays exhausted, buffer untouched
    snapshot = list(enum.buffer)
    assert not enum.step()
    assert list(enum.buffer) == snapshot


@pytest.mark.parametrize("func", ALL_FUNCS)
def test_empty_buffer_single_arrangement(func):
    enum = func([])
    assert enum.step()
    assert tuple(enum.current) == ()
    assert not enum.step()
    assert not enum.step()


@pytest.mark.parametrize("func", ALL_FUNCS)
def test_iterator_yields_live_view(func):
    buf = [0, 1]
    enum = func(buf)
    assert iter(enum) is enum
    views = []
    for view in enum:
        assert list(view) == buf
        views.append(view)
    assert all(v is views[0] for v in views)


def test_buffer_view():
    buf = [4, 5, 6, 7]
    view = BufferView(buf, 3)
    assert len(view) == 3
    assert view[0] == 4 and view[-1] == 6
    assert view[1:] == (5, 6)
    assert view == [4, 5, 6]
    assert [4, 5, 6] == view
    assert view != [4, 5, 6, 7]
    assert list(view) == [4, 5, 6]
    assert 7 not in view
    with pytest.raises(IndexError):
        view[3]
    with pytest.raises(TypeError):
        view[0] = 1
    with pytest.raises(TypeError):
        hash(view)
    buf[0] = 9
    assert view[0] == 9
    assert repr(view) == "BufferView([9, 5, 6])"


@pytest.mark.parametrize("buf", ((0, 0), "ab", 17, (x for x in range(2))))
def test_buffer_type_rejected(buf):
    with pytest.raises(TypeError):
        each_combination(buf, 0, 2)


@pytest.mark.parametrize("length", (3, -1))
def test_length_out_of_bounds(length):
    with pytest.raises(ContractError):
        each_permutation([1, 2], length=length)


@pytest.mark.parametrize("length", ("2", 1.0))
def test_length_type_rejected(length):
    with pytest.raises(TypeError):
        each_subset([0, 0], 0, 3, length=length)


def test_contract_errors_are_value_errors():
    with pytest.raises(ValueError):
        each_combination([0], 1, 1)


def test_default_config():
    assert ENUMERATION_CONFIG.check_distinct
    assert not ENUMERATION_CONFIG.check_mutation
    assert ENUMERATION_CONFIG.log_progress


@pytest.mark.parametrize("func", ALL_FUNCS)
def test_mutation_guard(func):
    buf = [0, 1]
    enum = func(buf, config=EnumerationConfig(check_mutation=True))
    assert enum.step()
    buf[0] = 99
    with pytest.raises(BufferMutationError, match="slot 0"):
        enum.step()


def test_mutation_guard_quiet_without_changes():
    config = EnumerationConfig(check_mutation=True)
    enum = each_permutation([1, 2, 2], config=config)
    assert sum(1 for _ in enum) == 3


def test_repr():
    enum = each_combination([0, 0, 0], 0, 2)
    assert repr(enum) == "CombinationEnumerator(length=3, state=not_started)"
