"""ValidationResult value object - outcome of metric validation."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating body metrics.

    Attributes:
        errors: Violation messages in field order (weight, height, age,
            body fat); empty when the input is valid
    """

    errors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        """True when no constraint was violated."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.valid
