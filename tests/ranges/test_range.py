import numpy as np
import pytest

from cursortools.contracts import ConditionKind, ContractViolation, configure
from cursortools.ranges import Range, make_range

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("begin, end, step", [
    (0, 10, 1),
    (0, 10, 3),
    (5, 2, -1),
    (10, 0, -3),
    (-5, 5, 2),
    (7, 8, 100),
])
def test_range_visits_every_lattice_point(begin, end, step):
    values = Range(begin, end, step)
    count = -(-(end - begin) // step)

    assert [int(v) for v in values] == [begin + k * step for k in range(count)]
    assert len(values) == count
    assert values.end() - values.begin() == count


def test_end_alone_counts_from_zero():
    assert Range(4) == Range(0, 4, 1)
    assert [int(v) for v in make_range(4)] == [0, 1, 2, 3]


def test_wrong_direction_step_is_rejected():
    with pytest.raises(ContractViolation) as excinfo:
        Range(5, 2, 1)
    assert excinfo.value.kind is ConditionKind.PRECONDITION


def test_reverse_range():
    assert [int(v) for v in Range(5, 2, -1)] == [5, 4, 3]


def test_zero_step_is_rejected():
    with pytest.raises(ContractViolation):
        Range(0, 5, 0)


@pytest.mark.parametrize("step", [0, 1, -1])
def test_empty_range_accepts_any_step(step):
    values = Range(3, 3, step)
    assert list(values) == []
    assert len(values) == 0
    assert values.begin() == values.end()


def test_end_cursor_sits_past_the_last_value():
    values = Range(0, 10, 3)
    assert values.end().value == 12
    assert values.end().step == 3


def test_restartable():
    values = Range(1, 20, 4)
    assert list(values) == list(values)
    assert values.begin() is not values.begin()


def test_begin_plus_k_equals_k_advances():
    values = Range(2, 50, 5)
    for k in range(len(values) + 1):
        walked = values.begin()
        for _ in range(k):
            walked.advance()
        assert values.begin() + k == walked


def test_indexing():
    values = Range(1, 10, 2)
    assert values[0] == 1
    assert values[4] == 9
    with pytest.raises(ContractViolation):
        values[5]


def test_accessors():
    values = Range(1, 10, 2, dtype="int16")
    assert values.begin_value == 1
    assert values.end_value == 10
    assert values.step == 2
    assert values.dtype == np.dtype(np.int16)


def test_dtype_from_numpy_arguments():
    values = Range(np.uint8(10))
    assert values.dtype == np.dtype(np.uint8)
    assert all(type(v) is np.uint8 for v in values)


def test_values_must_fit_dtype():
    with pytest.raises(ContractViolation):
        Range(0, 300, 1, dtype=np.uint8)
    with pytest.raises(ContractViolation):
        Range(3, 0, -1, dtype=np.uint8)


def test_default_dtype_comes_from_configuration(make_config):
    configure(make_config(DEFAULT_DTYPE="int16"))
    assert Range(3).dtype == np.dtype(np.int16)


def test_value_semantics():
    assert Range(0, 10, 2) == Range(0, 10, 2)
    assert Range(0, 10, 2) != Range(0, 10, 3)
    assert Range(0, 10, 2) != Range(0, 10, 2, dtype="int8")
    assert len({Range(5), Range(0, 5, 1)}) == 1


def test_distance_beyond_difference_type_is_a_contract_violation():
    values = Range(0, 2 ** 64 - 1, dtype=np.uint64)
    with pytest.raises(ContractViolation):
        values.end() - values.begin()
    assert Range(0, 10, dtype=np.uint64).end() - Range(0, 10, dtype=np.uint64).begin() == 10
