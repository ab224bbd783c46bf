"""Fuzz test harnesses for redact-core.

These tests use Hypothesis to throw malformed, cyclic and deeply nested
payloads at the redaction pipeline. None of them may raise.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from redact_core.errors import handle_error
from redact_core.redaction import (
    CIRCULAR_REFERENCE,
    MAX_DEPTH_EXCEEDED,
    RedactionConfig,
    Redactor,
    redact_sensitive_data,
    scrub_string,
)
from redact_core.types import Environment

any_keys = st.one_of(st.text(max_size=20), st.integers(), st.booleans(), st.none())

any_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(),
    st.text(max_size=100),
    st.binary(max_size=50),
)

any_trees = st.recursive(
    any_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=6),
        st.tuples(children, children),
        st.dictionaries(any_keys, children, max_size=6),
    ),
    max_leaves=50,
)


def _contains(value, sentinel) -> bool:
    if value == sentinel:
        return True
    if isinstance(value, dict):
        return any(_contains(v, sentinel) for v in value.values())
    if isinstance(value, (list, tuple)):
        return any(_contains(v, sentinel) for v in value)
    return False


@pytest.mark.fuzz
class TestRedactorFuzzing:
    """Fuzz tests for the recursive redactor."""

    @given(any_trees)
    @settings(max_examples=200, deadline=5000)
    def test_fuzz_001_arbitrary_trees(self, data):
        """FUZZ-001: Redact arbitrary nested values."""
        redact_sensitive_data(data)

    @given(st.dictionaries(st.text(max_size=20), any_scalars, max_size=8), st.text(max_size=20))
    @settings(max_examples=100, deadline=5000)
    def test_fuzz_002_self_reference(self, data, key):
        """FUZZ-002: A mapping containing itself terminates."""
        data[key] = data
        result = redact_sensitive_data(data)
        assert isinstance(result, dict)

    @given(st.lists(any_scalars, max_size=8))
    @settings(max_examples=100, deadline=5000)
    def test_fuzz_003_list_cycle(self, items):
        """FUZZ-003: A list containing itself terminates."""
        wrapper = {"items": items}
        items.append(wrapper)
        result = redact_sensitive_data(wrapper)
        assert _contains(result, CIRCULAR_REFERENCE)

    @given(st.integers(min_value=1, max_value=50), st.integers(min_value=1, max_value=20))
    @settings(max_examples=100, deadline=5000)
    def test_fuzz_004_depth(self, depth, max_depth):
        """FUZZ-004: Nesting beyond max_depth is cut off."""
        data: dict = {"leaf": "value"}
        for _ in range(depth):
            data = {"child": data}

        result = Redactor(RedactionConfig(max_depth=max_depth)).redact(data)

        assert _contains(result, MAX_DEPTH_EXCEEDED) == (depth >= max_depth)

    @given(st.text(max_size=2000))
    @settings(max_examples=100, deadline=5000)
    def test_fuzz_005_long_strings(self, value):
        """FUZZ-005: Scrub long random strings."""
        scrub_string(value, "notes")


@pytest.mark.fuzz
class TestErrorHandlerFuzzing:
    """Fuzz tests for error handling."""

    @given(
        st.text(max_size=200),
        st.sampled_from([ValueError, RuntimeError, KeyError, TypeError]),
        st.sampled_from(list(Environment)),
    )
    @settings(max_examples=100, deadline=5000)
    def test_fuzz_006_arbitrary_exceptions(self, message, exc_type, environment):
        """FUZZ-006: Any exception produces a well-formed response."""
        response = handle_error(exc_type(message), environment)

        body = response.to_dict()
        assert body["success"] is False
        assert body["error"]["status_code"] == 500
