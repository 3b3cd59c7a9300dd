import pytest

from beancounter.core.exceptions import (
    BeanCounterError,
    ConfigurationError,
    InvariantViolationError,
    PegPositionError,
    SlotIndexError,
)


class TestBeanCounterError:
    """Test BeanCounterError base exception class."""

    def test_creation_basic(self):
        exc = BeanCounterError("Test error message")

        assert str(exc) == "Test error message"
        assert exc.details == {}

    def test_with_details(self):
        details = {"key1": "value1", "key2": 42}
        exc = BeanCounterError("Test error message", details=details)

        assert exc.details == details

    def test_none_details_defaults_to_empty(self):
        assert BeanCounterError("message", details=None).details == {}


class TestConfigurationError:
    def test_key_and_message(self):
        exc = ConfigurationError("machine.slot_count", "must be >= 1")

        assert exc.config_key == "machine.slot_count"
        assert str(exc) == "Configuration error for 'machine.slot_count': must be >= 1"

    def test_message_only(self):
        exc = ConfigurationError("Missing required config key: 'machine'")

        assert exc.config_key == "configuration"
        assert "Missing required config key" in str(exc)

    def test_no_arguments(self):
        exc = ConfigurationError()
        assert str(exc) == "Configuration error for 'configuration': Invalid configuration"

    def test_inheritance(self):
        assert isinstance(ConfigurationError("x"), BeanCounterError)


class TestIndexErrors:
    def test_slot_index_error(self):
        exc = SlotIndexError(12, 10)

        assert isinstance(exc, IndexError)
        assert isinstance(exc, BeanCounterError)
        assert exc.index == 12
        assert exc.details == {"index": 12, "slot_count": 10}
        assert "12" in str(exc)

    def test_peg_position_error_with_column(self):
        exc = PegPositionError(1, 2, rows=3)

        assert isinstance(exc, IndexError)
        assert exc.details == {"row": 1, "rows": 3, "column": 2}
        assert "(1, 2)" in str(exc)

    def test_peg_position_error_row_only(self):
        exc = PegPositionError(5, rows=3)

        assert exc.column is None
        assert "Row 5" in str(exc)

    def test_catch_as_index_error(self):
        with pytest.raises(IndexError):
            raise SlotIndexError(-1, 4)


def test_invariant_violation_error():
    exc = InvariantViolationError("conservation", "counted 3 beans, expected 4", {"total": 4})

    assert exc.invariant == "conservation"
    assert exc.details == {"total": 4}
    assert str(exc) == "Invariant 'conservation' violated: counted 3 beans, expected 4"
