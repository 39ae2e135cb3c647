"""Tests for the violation records themselves."""

import pytest

pytestmark = [pytest.mark.unit, pytest.mark.contracts]

from cursortools.contracts import (
    ConditionKind,
    ContractViolation,
    NotImplementedViolation,
    NotReachableViolation,
)


def test_contract_violation_fields():
    e = ContractViolation("test_string", "precondition", "filename", 99)

    assert e.filename == "filename"
    assert e.line_number == 99
    assert e.condition == "test_string"
    assert e.kind is ConditionKind.PRECONDITION
    assert str(e) == "test_string failed precondition DBC test in filename:99"


def test_contract_violation_accepts_enum_kind():
    e = ContractViolation("x", ConditionKind.INTERMEDIATE, "f.py", 1)
    assert str(e) == "x failed intermediate DBC test in f.py:1"


def test_contract_violation_rejects_unknown_kind():
    with pytest.raises(ValueError):
        ContractViolation("x", "invariant", "f.py", 1)


def test_records_are_read_only():
    e = ContractViolation("x", "postcondition", "f.py", 1)
    with pytest.raises(AttributeError):
        e.kind = ConditionKind.PRECONDITION


def test_not_implemented_violation():
    e = NotImplementedViolation("message", "filename", 99)
    assert e.filename == "filename"
    assert e.line_number == 99
    assert e.message == "message"
    assert str(e) == "message not implemented at filename:99"


def test_not_reachable_violation():
    e = NotReachableViolation("filename", 99)
    assert e.filename == "filename"
    assert e.line_number == 99
    assert str(e) == "Logically unreachable code block reached at filename:99"


def test_all_signals_are_runtime_errors():
    for error in (
        ContractViolation("x", "precondition", "f", 1),
        NotImplementedViolation("m", "f", 1),
        NotReachableViolation("f", 1),
    ):
        assert isinstance(error, RuntimeError)
