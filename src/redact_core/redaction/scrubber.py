"""Secret scrubbing for free-form string values."""

from .classifier import Classification, classify_field
from .patterns import CONNECTION_STRING, REDACTED, STRING_PATTERNS, URL_CREDENTIALS

# A replacement can expose a match for an earlier pass (an email glued to a
# card number, say), so passes repeat until the string is stable.
MAX_SCRUB_ROUNDS = 8


def _scrub_once(value: str, keep_emails: bool) -> str:
    result = value
    if "://" in result and "@" in result:
        if CONNECTION_STRING.match(result):
            return REDACTED
        result = URL_CREDENTIALS.apply(result)

    for pattern in STRING_PATTERNS:
        if keep_emails and pattern.name == "email":
            continue
        result = pattern.apply(result)
    return result


def scrub_string(value: str, field_name: str = "") -> str:
    """Redact secrets embedded in a string value.

    Passes run in a fixed order, each on the output of the previous one.
    The URL pass runs first because a connection string is replaced as a
    whole, which no later, narrower pass may contradict.

    Args:
        value: String to scrub
        field_name: Name of the field holding the value

    Returns:
        Scrubbed string (unchanged for safe fields)
    """
    if classify_field(field_name) == Classification.SAFE:
        return value

    keep_emails = "email" in str(field_name).lower()
    result = value
    for _ in range(MAX_SCRUB_ROUNDS):
        scrubbed = _scrub_once(result, keep_emails)
        if scrubbed == result:
            break
        result = scrubbed
    return result
