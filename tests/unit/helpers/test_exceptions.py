"""Unit tests for cdepgraph.helpers.exceptions module.

Tests custom exception classes.
"""

import pytest

from cdepgraph.helpers.exceptions import ConfigError, DotReadError, GraphWriteError, TemplateError

ALL_ERRORS = [DotReadError, TemplateError, GraphWriteError, ConfigError]


class TestExceptions:
    """Tests for the cross-layer exception classes."""

    @pytest.mark.unit
    @pytest.mark.parametrize("error_cls", ALL_ERRORS)
    def test_is_exception(self, error_cls) -> None:
        """Each error should be an Exception subclass."""
        assert issubclass(error_cls, Exception)

    @pytest.mark.unit
    @pytest.mark.parametrize("error_cls", ALL_ERRORS)
    def test_stores_message(self, error_cls) -> None:
        """Each error should keep the message it was raised with."""
        with pytest.raises(error_cls, match="File not found: a.dot"):
            raise error_cls("File not found: a.dot")

    @pytest.mark.unit
    def test_errors_are_distinct(self) -> None:
        """Catching one error type should not swallow the others."""
        with pytest.raises(TemplateError):
            try:
                raise TemplateError("bad template")
            except DotReadError:
                pytest.fail("TemplateError caught as DotReadError")
