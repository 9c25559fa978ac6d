"""Tests for domain enumerations."""

import pytest

from searchctx_core.models.enums import ContextIdErrorKind


class TestContextIdErrorKind:
    def test_values(self) -> None:
        assert set(ContextIdErrorKind) == {
            ContextIdErrorKind.INVALID_IDENTIFIER,
            ContextIdErrorKind.CORRUPT_PAYLOAD,
            ContextIdErrorKind.TRAILING_DATA,
            ContextIdErrorKind.ENCODING_FAILED,
        }

    def test_string_value(self) -> None:
        assert ContextIdErrorKind.TRAILING_DATA == "TRAILING_DATA"
        assert str(ContextIdErrorKind.TRAILING_DATA) == "TRAILING_DATA"

    def test_from_string(self) -> None:
        assert ContextIdErrorKind("CORRUPT_PAYLOAD") is ContextIdErrorKind.CORRUPT_PAYLOAD

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            ContextIdErrorKind("INVALID")
