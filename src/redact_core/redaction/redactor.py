"""Recursive redaction of arbitrary JSON-like values."""

from collections.abc import Mapping
from typing import Any

from .classifier import Classification, classify_field
from .config import RedactionConfig
from .patterns import (
    ARRAY_ELEMENT_MAX_LENGTH,
    ARRAY_ELEMENT_PREFIX,
    CIRCULAR_REFERENCE,
    MAX_DEPTH_EXCEEDED,
    REDACTED,
)
from .scrubber import scrub_string


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


class Redactor:
    """Redacts sensitive data before it is logged or returned.

    The walk builds new containers and never mutates its input. Cycles are
    detected by container identity within a single ``redact`` call; a
    container seen a second time becomes ``[CIRCULAR_REFERENCE]``.
    """

    REDACTED = REDACTED

    def __init__(self, config: RedactionConfig | None = None) -> None:
        """Initialize redactor with configuration.

        Args:
            config: Redaction configuration (defaults to RedactionConfig())
        """
        self._config = config or RedactionConfig()

    @property
    def config(self) -> RedactionConfig:
        """Active configuration."""
        return self._config

    def redact(self, data: Any) -> Any:
        """Recursively redact sensitive data.

        Args:
            data: Data to redact (dict, list, tuple or scalar)

        Returns:
            Redacted copy; top-level scalars are returned unchanged
        """
        if not self._config.enabled:
            return data
        return self._walk(data, None, set(), 0)

    def _walk(self, value: Any, field_name: str | None, visited: set[int], depth: int) -> Any:
        if not _is_container(value):
            return value

        if id(value) in visited:
            return CIRCULAR_REFERENCE
        if depth >= self._config.max_depth:
            return MAX_DEPTH_EXCEEDED
        visited.add(id(value))

        if isinstance(value, Mapping):
            return self._walk_mapping(value, visited, depth)

        items = [self._redact_element(item, visited, depth) for item in value]
        return tuple(items) if isinstance(value, tuple) else items

    def _redact_element(self, item: Any, visited: set[int], depth: int) -> Any:
        if _is_container(item):
            return self._walk(item, None, visited, depth + 1)
        if isinstance(item, str) and (
            len(item) > ARRAY_ELEMENT_MAX_LENGTH or ARRAY_ELEMENT_PREFIX.match(item)
        ):
            return REDACTED
        return item

    def _walk_mapping(
        self, value: Mapping[Any, Any], visited: set[int], depth: int
    ) -> dict[Any, Any]:
        result: dict[Any, Any] = {}
        for key, field_value in value.items():
            classification = classify_field(key)

            if classification == Classification.EXACT_SENSITIVE:
                if isinstance(field_value, Mapping):
                    # Keep the safe parts of e.g. a "credentials" object
                    result[key] = self._walk(field_value, None, visited, depth + 1)
                else:
                    result[key] = REDACTED
            elif classification == Classification.PATTERN_SENSITIVE:
                result[key] = REDACTED
            elif _is_container(field_value):
                result[key] = self._walk(field_value, str(key), visited, depth + 1)
            elif isinstance(field_value, str):
                result[key] = scrub_string(field_value, str(key))
            else:
                result[key] = field_value
        return result


_default_redactor = Redactor()


def redact_sensitive_data(value: Any, config: RedactionConfig | None = None) -> Any:
    """Return a copy of value with secrets removed.

    Args:
        value: Any JSON-compatible value
        config: Optional redaction configuration (defaults apply otherwise)

    Returns:
        Redacted copy, safe to log or serialize into a response
    """
    redactor = _default_redactor if config is None else Redactor(config)
    return redactor.redact(value)
