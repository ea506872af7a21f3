"""Unit tests for API request models."""

import pytest
from pydantic import ValidationError

from api.models import ExecuteRequest, InputRequest, InterruptRequest


class TestExecuteRequest:
    """Tests for ExecuteRequest."""

    def test_keeps_line_verbatim(self):
        assert ExecuteRequest(line="  ls   -a ").line == "  ls   -a "

    def test_line_required(self):
        with pytest.raises(ValidationError):
            ExecuteRequest()

    def test_line_must_be_string(self):
        with pytest.raises(ValidationError):
            ExecuteRequest(line=["ls"])


class TestInterruptRequest:
    """Tests for InterruptRequest."""

    def test_line_optional(self):
        assert InterruptRequest().line is None

    def test_explicit_line(self):
        assert InterruptRequest(line="cat x").line == "cat x"


class TestInputRequest:
    """Tests for InputRequest."""

    def test_text_required(self):
        with pytest.raises(ValidationError):
            InputRequest()

    def test_empty_text_allowed(self):
        assert InputRequest(text="").text == ""
