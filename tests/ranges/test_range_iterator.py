import numpy as np
import pytest

from cursortools.contracts import ConditionKind, ContractViolation
from cursortools.core import IteratorCategory
from cursortools.ranges import RangeIterator, make_range_iterator

pytestmark = pytest.mark.unit


def test_advance_and_retreat():
    cursor = RangeIterator(4, 3)
    cursor.advance()
    assert cursor.value == 7
    cursor.retreat().retreat()
    assert cursor.value == 1


def test_is_random_access():
    assert RangeIterator(0, 1).category is IteratorCategory.RANDOM_ACCESS


def test_deref_materializes_dtype():
    value = RangeIterator(5, 1, np.int8).deref()
    assert type(value) is np.int8
    assert value == 5


def test_unsigned_retreat_cannot_underflow():
    cursor = RangeIterator(2, 2, np.uint8)
    cursor.retreat()
    assert cursor.value == 0
    with pytest.raises(ContractViolation) as excinfo:
        cursor.retreat()
    assert excinfo.value.kind is ConditionKind.PRECONDITION


def test_signed_retreat_goes_negative():
    cursor = RangeIterator(0, 5)
    cursor.retreat()
    assert cursor.value == -5


def test_jumps_scale_by_step():
    cursor = RangeIterator(10, -2)
    cursor += 3
    assert cursor.value == 4
    cursor -= 1
    assert cursor.value == 6
    assert (cursor + 2).value == 2
    assert (2 + cursor).value == 2
    assert (cursor - 2).value == 10
    # binary operators leave the operand alone
    assert cursor.value == 6


def test_unsigned_jump_cannot_underflow():
    cursor = RangeIterator(3, 1, np.uint16)
    assert (cursor - 3).value == 0
    with pytest.raises(ContractViolation):
        cursor - 4


def test_jump_requires_finite_offset():
    cursor = RangeIterator(0, 1)
    with pytest.raises(ContractViolation):
        cursor += float("inf")


def test_non_finite_construction_is_rejected():
    with pytest.raises(ContractViolation):
        RangeIterator(float("nan"), 1)


def test_indexing():
    cursor = RangeIterator(1, 4)
    assert cursor[0] == 1
    assert cursor[3] == 13
    assert cursor[-1] == -3


def test_distance_divides_by_step():
    assert RangeIterator(10, 2) - RangeIterator(4, 2) == 3
    assert RangeIterator(4, 2) - RangeIterator(10, 2) == -3
    assert RangeIterator(-8, -4) - RangeIterator(0, -4) == 2


def test_distance_type_is_signed():
    distance = RangeIterator(0, 1, np.uint32) - RangeIterator(5, 1, np.uint32)
    assert distance == -5
    assert np.dtype(type(distance)) == np.dtype(np.int64)


def test_distance_requires_equal_steps():
    with pytest.raises(ContractViolation) as excinfo:
        RangeIterator(10, 2) - RangeIterator(4, 1)
    assert excinfo.value.kind is ConditionKind.PRECONDITION


def test_equality_requires_value_and_step():
    assert RangeIterator(4, 2) == RangeIterator(4, 2)
    assert RangeIterator(4, 2) != RangeIterator(4, 1)
    assert RangeIterator(4, 2) != RangeIterator(6, 2)


def test_ordering():
    low, high = RangeIterator(1, 1), RangeIterator(2, 1)
    assert low < high
    assert low <= high
    assert high > low
    assert high >= low
    assert low <= RangeIterator(1, 1)


@pytest.mark.parametrize("op", ["__lt__", "__le__", "__gt__", "__ge__"])
def test_ordering_requires_equal_steps(op):
    with pytest.raises(ContractViolation):
        getattr(RangeIterator(1, 1), op)(RangeIterator(2, 2))


def test_ordering_unchecked_when_contracts_disabled(contracts_disabled):
    assert RangeIterator(1, 1) < RangeIterator(2, 2)


def test_cursor_sum():
    total = RangeIterator(3, 2) + RangeIterator(4, 2)
    assert total == RangeIterator(7, 2)
    with pytest.raises(ContractViolation):
        RangeIterator(3, 2) + RangeIterator(4, 1)


def test_copy_is_independent():
    cursor = make_range_iterator(0, 1, np.int32)
    duplicate = cursor.copy()
    cursor.advance()

    assert duplicate.value == 0
    assert duplicate.dtype == np.dtype(np.int32)


def test_cursors_are_unhashable():
    with pytest.raises(TypeError):
        hash(RangeIterator(0, 1))


def test_unsigned_offsets_are_subtracted():
    cursor = RangeIterator(0, 1)
    cursor += 5
    cursor -= np.uint64(2)
    assert cursor.value == 3
    assert (cursor - np.uint8(3)).value == 0


def test_deref_past_dtype_is_a_contract_violation():
    cursor = RangeIterator(127, 1, np.int8)
    assert cursor.deref() == 127
    cursor.advance()
    with pytest.raises(ContractViolation) as excinfo:
        cursor.deref()
    assert excinfo.value.kind is ConditionKind.PRECONDITION


def test_indexing_past_dtype_is_a_contract_violation():
    with pytest.raises(ContractViolation):
        RangeIterator(120, 1, np.int8)[10]
