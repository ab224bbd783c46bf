"""Redaction configuration."""

from dataclasses import dataclass

# Highest accepted max_depth; the walk recurses once per level and must stay
# well inside the interpreter's recursion limit
MAX_DEPTH_LIMIT = 128


@dataclass(frozen=True)
class RedactionConfig:
    """Redaction configuration."""

    enabled: bool = True
    # Containers nested deeper than this are replaced by a sentinel
    max_depth: int = 100

    def __post_init__(self) -> None:
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )

    @classmethod
    def default(cls) -> "RedactionConfig":
        """Create default redaction config."""
        return cls()
