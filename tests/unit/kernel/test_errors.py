"""Unit tests for the tree-context error hierarchy."""

from __future__ import annotations

import json

import pytest

from tree_context.config.validation import ConfigError
from tree_context.kernel.errors import (
    BaseError,
    ContextClosedError,
    InvalidTimeoutError,
    TreeContextError,
)


# ---------------------------------------------------------------------------
# BaseError
# ---------------------------------------------------------------------------


class TestBaseError:
    def test_default_code(self) -> None:
        err = BaseError("boom")
        assert err.code == "base_error"
        assert err.message == "boom"
        assert err.detail == {}

    def test_custom_code_and_detail(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        assert err.code == "custom"
        assert err.detail == {"k": 1}

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("boom", detail={"k": "v"})))
        assert payload == {"code": "base_error", "message": "boom", "detail": {"k": "v"}}

    def test_repr(self) -> None:
        assert repr(BaseError("boom")) == "BaseError(code='base_error', message='boom')"


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


class TestHierarchy:
    @pytest.mark.parametrize(
        "err",
        [
            ContextClosedError("ctx-1", "spawn a task"),
            InvalidTimeoutError(-1),
            ConfigError("bad"),
        ],
    )
    def test_all_are_tree_context_errors(self, err: BaseError) -> None:
        assert isinstance(err, TreeContextError)
        assert isinstance(err, BaseError)

    def test_context_closed_error_fields(self) -> None:
        err = ContextClosedError("ctx-1", "spawn a task")
        assert err.code == "context_closed"
        assert err.label == "ctx-1"
        assert err.operation == "spawn a task"
        assert err.to_dict()["detail"] == {"context": "ctx-1", "operation": "spawn a task"}
        assert "ctx-1" in err.message

    def test_invalid_timeout_error_fields(self) -> None:
        err = InvalidTimeoutError(-3)
        assert err.code == "invalid_timeout"
        assert err.value == -3
        assert err.detail == {"value": "-3"}
