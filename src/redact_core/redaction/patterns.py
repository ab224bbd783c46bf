"""Pattern tables for field classification and string scrubbing.

All tables are built once at import time and never mutated. Field-name
patterns are matched against the lower-cased field name.
"""

import re
from dataclasses import dataclass

REDACTED = "[REDACTED]"
CIRCULAR_REFERENCE = "[CIRCULAR_REFERENCE]"
MAX_DEPTH_EXCEEDED = "[MAX_DEPTH_EXCEEDED]"
JWT_REDACTED = "[JWT_REDACTED]"
CARD_REDACTED = "[CARD_REDACTED]"
SSN_REDACTED = "[SSN_REDACTED]"
EMAIL_REDACTED = "[EMAIL_REDACTED]"


@dataclass(frozen=True)
class RedactionPattern:
    """Pattern-based redaction rule."""

    name: str
    regex: re.Pattern[str]
    replacement: str

    @classmethod
    def from_string(
        cls, name: str, pattern: str, replacement: str, flags: int = 0
    ) -> "RedactionPattern":
        """Create from string pattern."""
        return cls(name=name, regex=re.compile(pattern, flags), replacement=replacement)

    def apply(self, text: str) -> str:
        """Replace every match in text."""
        return self.regex.sub(self.replacement, text)


# Whole-name matches (after lower-casing) that always carry a secret
EXACT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "password",
        "token",
        "secret",
        "key",
        "apikey",
        "api_key",
        "authorization",
        "credential",
        "credentials",
        "private",
        "confidential",
        "ssn",
        "socialsecuritynumber",
        "creditcard",
        "cc",
        "cvv",
        "passport",
        "driverlicense",
        "bankaccount",
        "routingnumber",
        "accesstoken",
        "refreshtoken",
        "sessiontoken",
        "jwt",
        "bearer",
        "oauth",
        "clientid",
        "clientsecret",
        "databaseurl",
        "connectionstring",
        "webhooksecret",
        "encryptionkey",
        "signingkey",
        "salt",
        "hash",
        "pin",
        "securitycode",
        "totp",
        "mfa",
        "twofactor",
    }
)

# Structural/identity fields exempt from string-content scrubbing
SAFE_FIELD_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern)
    for pattern in (
        r"userid|username|email",
        r"^user$",
        r"id$",
        r"name$",
        r"type$",
        r"status$",
        r"role$",
        r"level$",
        r"created|updated|timestamp|date|time",
        r"(count|size|length|format|version)$",
        r"config|setting|option|flag|enabled|active|visible|public",
        r"description|title|label|category|tag|metadata",
    )
)

# Ordered: compound terms first, broad catch-alls last
SENSITIVE_FIELD_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern)
    for pattern in (
        r"^(password|token|secret|key|credential|api|auth|private|confidential|ssn|credit"
        r"|cvv|passport|bank|routing|account|jwt|bearer|oauth|webhook|encryption|signing"
        r"|access|refresh|session|client|database|connection)$",
        r"auth.*token",
        r"access.*token",
        r"refresh.*token",
        r"session.*token",
        r"api.*key",
        r"webhook.*secret",
        r"encryption.*key",
        r"signing.*key",
        r"client.*secret",
        r"database.*url",
        r"connection.*string",
        # Over-matches (e.g. "keyboard"); over-redaction is the accepted failure mode
        r"auth",
        r"key",
        r"secret",
        r"token",
    )
)

URL_CREDENTIALS = RedactionPattern.from_string(
    "url_credentials",
    r"//[^\s:/@]*:[^\s/@]*@",
    f"//{REDACTED}:{REDACTED}@",
)

# Schemes whose URLs are connection strings; these are replaced wholesale
CONNECTION_STRING = re.compile(
    r"^\s*(postgres(ql)?|mysql|mariadb|mongodb(\+srv)?|rediss?|amqps?|mssql|sqlserver"
    r"|oracle|sqlite|cockroachdb|clickhouse)(\+[\w-]+)?://",
    re.IGNORECASE,
)

# Applied in order after the URL credential pass
STRING_PATTERNS: tuple[RedactionPattern, ...] = (
    RedactionPattern.from_string(
        "key_value",
        r"(password|secret|key|token)=[^&\s]+",
        rf"\1={REDACTED}",
        re.IGNORECASE,
    ),
    RedactionPattern.from_string(
        "jwt",
        r"eyJ[A-Za-z0-9_-]+\.eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+",
        JWT_REDACTED,
    ),
    RedactionPattern.from_string(
        "card",
        r"\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{4}\b",
        CARD_REDACTED,
    ),
    RedactionPattern.from_string(
        "ssn",
        r"\b\d{3}-\d{2}-\d{4}\b",
        SSN_REDACTED,
    ),
    RedactionPattern.from_string(
        "email",
        r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}",
        EMAIL_REDACTED,
    ),
    RedactionPattern.from_string(
        "prefixed_token",
        r"(sk_|pk_|Bearer )[A-Za-z0-9_-]{15,}",
        rf"\1{REDACTED}",
    ),
    RedactionPattern.from_string(
        "long_token",
        r"[A-Za-z0-9_-]{35,}",
        REDACTED,
    ),
)

# Array elements carry no field name, so only these cheap checks apply
ARRAY_ELEMENT_PREFIX = re.compile(r"^(sk_|pk_|Bearer)")
ARRAY_ELEMENT_MAX_LENGTH = 30

DATABASE_ERROR_PATTERNS: tuple[RedactionPattern, ...] = (
    RedactionPattern.from_string(
        "password", r"(password)=[^\s&]+", rf"\1={REDACTED}", re.IGNORECASE
    ),
    RedactionPattern.from_string("secret", r"(secret)=[^\s&]+", rf"\1={REDACTED}", re.IGNORECASE),
    RedactionPattern.from_string("key", r"(key)=[^\s&]+", rf"\1={REDACTED}", re.IGNORECASE),
    RedactionPattern.from_string("user", r"(user)=[^\s&]+", rf"\1={REDACTED}", re.IGNORECASE),
    RedactionPattern.from_string(
        "url_credentials",
        r"//[^\s:/@]*:[^\s/@]*@",
        f"//{REDACTED}:{REDACTED}@",
        re.IGNORECASE,
    ),
    RedactionPattern.from_string(
        "for_user", r"(for user)=\w+", rf"\1={REDACTED}", re.IGNORECASE
    ),
)
