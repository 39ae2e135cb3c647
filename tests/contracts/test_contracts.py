"""Tests for the design-by-contract layer.

These tests exercise the checks directly, as the adaptors use them.
"""

import logging

import pytest

pytestmark = [pytest.mark.unit, pytest.mark.contracts]

from cursortools.contracts import (
    ConditionKind,
    ContractViolation,
    CursorToolsError,
    NotImplementedViolation,
    NotReachableViolation,
    check,
    configure,
    contracts_enabled,
    ensure,
    get_config,
    not_implemented,
    not_reachable,
    require,
    require_static,
)
from cursortools.contracts.base import condition_text


class TestChecks:
    """require / check / ensure with contracts enabled."""

    def test_passing_conditions_do_not_raise(self):
        require(1 + 1 == 2)
        check(True)
        ensure(lambda: True)

    def test_require_raises_precondition(self):
        step = 0
        with pytest.raises(ContractViolation) as excinfo:
            require(step != 0)
        assert excinfo.value.kind is ConditionKind.PRECONDITION
        assert excinfo.value.condition == "step != 0"

    def test_check_raises_intermediate(self):
        with pytest.raises(ContractViolation) as excinfo:
            check(False)
        assert excinfo.value.kind is ConditionKind.INTERMEDIATE

    def test_ensure_raises_postcondition(self):
        with pytest.raises(ContractViolation) as excinfo:
            ensure([] == [1])
        assert excinfo.value.kind is ConditionKind.POSTCONDITION
        assert excinfo.value.condition == "[] == [1]"

    def test_violation_points_at_calling_line(self):
        with pytest.raises(ContractViolation) as excinfo:
            require(False)
        assert excinfo.value.filename == __file__
        assert excinfo.value.line_number == excinfo.tb.tb_lineno

    def test_lambda_condition_reports_its_body(self):
        values = [1, 2]
        with pytest.raises(ContractViolation) as excinfo:
            check(lambda: len(values) == 3)
        assert excinfo.value.condition == "len(values) == 3"

    def test_description_replaces_source_text(self):
        with pytest.raises(ContractViolation, match="members agree"):
            check(False, "members agree")

    def test_message_is_self_describing(self):
        with pytest.raises(ContractViolation) as excinfo:
            require(2 < 1)
        message = str(excinfo.value)
        assert message.startswith("2 < 1 failed precondition DBC test in ")
        assert message.endswith(f"{__file__}:{excinfo.value.line_number}")


class TestDisabledChecks:
    """Release configuration: checks are no-ops."""

    def test_flag_reflects_configuration(self, contracts_disabled):
        assert contracts_enabled() is False
        assert get_config().contracts.enabled is False

    def test_failing_conditions_are_ignored(self, contracts_disabled):
        require(False)
        check(False)
        ensure(False)

    def test_callable_conditions_are_not_evaluated(self, contracts_disabled):
        calls = []
        require(lambda: calls.append("evaluated"))
        assert calls == []

    def test_static_requirements_still_raise(self, contracts_disabled):
        with pytest.raises(ContractViolation) as excinfo:
            require_static(False, "random access")
        assert excinfo.value.kind is ConditionKind.PRECONDITION

    def test_stubs_still_raise(self, contracts_disabled):
        with pytest.raises(NotImplementedViolation):
            not_implemented("feature")
        with pytest.raises(NotReachableViolation):
            not_reachable()


class TestStubSignals:

    def test_not_implemented(self):
        with pytest.raises(NotImplementedViolation) as excinfo:
            not_implemented("bidirectional zip")
        error = excinfo.value
        assert error.message == "bidirectional zip"
        assert error.filename == __file__
        assert str(error) == f"bidirectional zip not implemented at {__file__}:{error.line_number}"
        assert isinstance(error, NotImplementedError)
        assert isinstance(error, CursorToolsError)

    def test_not_reachable(self):
        with pytest.raises(NotReachableViolation) as excinfo:
            not_reachable()
        error = excinfo.value
        assert str(error) == (
            f"Logically unreachable code block reached at {__file__}:{error.line_number}"
        )


class TestViolationLogging:

    def test_violation_logged_when_enabled(self, make_config, caplog):
        configure(make_config(LOG_VIOLATIONS=True, LOG_LEVEL="DEBUG"))
        with caplog.at_level(logging.DEBUG, logger="cursortools"):
            with pytest.raises(ContractViolation):
                require(False)
        assert "Contract violation" in caplog.text

    def test_violation_not_logged_by_default(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cursortools"):
            with pytest.raises(ContractViolation):
                require(False)
        assert "Contract violation" not in caplog.text


class TestConditionText:

    def test_extracts_first_argument(self):
        assert condition_text("    require(a < b, 'ordered')\n") == "a < b"

    def test_attribute_call(self):
        assert condition_text("contracts.check(x is None)") == "x is None"

    def test_unparseable_line_is_returned_stripped(self):
        assert condition_text("    require(\n") == "require("

    def test_missing_source(self):
        assert condition_text(None) == "<unknown condition>"


class TestConfigure:

    def test_applies_log_level(self, make_config):
        configure(make_config(LOG_LEVEL="DEBUG"))
        assert logging.getLogger("cursortools").level == logging.DEBUG

    def test_logs_contract_mode(self, make_config, caplog):
        with caplog.at_level(logging.INFO, logger="cursortools.contracts.base"):
            configure(make_config(DBC="off", LOG_LEVEL="INFO"))
        assert "Contract checks disabled" in caplog.text

    def test_returns_installed_config(self, make_config):
        config = make_config(DBC=False)
        assert configure(config) is config
        assert get_config() is config
