"""Resource limits for untrusted SVG input.

This module provides configurable limits that keep a single oversized or
malicious upload from exhausting memory while it is parsed and copied.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_MAX_INPUT_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_ELEMENTS = 100000


@dataclass
class ResourceLimits:
    """Resource limits for SVG parsing.

    These limits constrain:
    - Input size in bytes (prevents memory exhaustion while parsing)
    - Element count (bounds the cost of detection and the per-call deep copy)

    Limits can be configured via environment variables or constructor parameters.
    Constructor parameters take precedence over environment variables.

    Environment variables:
        SVGRECOLOR_MAX_INPUT_SIZE: Maximum input size in bytes
            (default: 10485760 = 10MB)
        SVGRECOLOR_MAX_ELEMENTS: Maximum number of elements (default: 100000)

    Example:
        >>> limits = ResourceLimits.default()
        >>> limits = ResourceLimits(max_input_size=1024 * 1024, max_elements=5000)
        >>> limits = ResourceLimits(max_elements=0)  # No element limit
    """

    max_input_size: int = DEFAULT_MAX_INPUT_SIZE
    max_elements: int = DEFAULT_MAX_ELEMENTS

    @classmethod
    def default(cls) -> "ResourceLimits":
        """Create ResourceLimits with values from environment variables.

        Raises:
            ValueError: If an environment variable is not a valid integer.

        Note:
            Negative values are treated as 0 (disabled limit) with a warning logged.
        """

        def parse_env_int(key: str, default: int) -> int:
            value_str = os.environ.get(key)
            if value_str is None:
                return default

            try:
                value = int(value_str)
            except ValueError as e:
                raise ValueError(
                    f"Environment variable {key}={value_str!r} is not a valid integer"
                ) from e

            if value < 0:
                logger.warning(
                    f"Environment variable {key}={value} is negative, "
                    f"treating as 0 (disabled limit). "
                    f"Consider using ResourceLimits.unlimited() instead."
                )
                return 0

            return value

        return cls(
            max_input_size=parse_env_int(
                "SVGRECOLOR_MAX_INPUT_SIZE", DEFAULT_MAX_INPUT_SIZE
            ),
            max_elements=parse_env_int("SVGRECOLOR_MAX_ELEMENTS", DEFAULT_MAX_ELEMENTS),
        )

    @classmethod
    def unlimited(cls) -> "ResourceLimits":
        """Create ResourceLimits with all limits disabled.

        Warning:
            Only use this for trusted input in controlled environments.
        """
        return cls(max_input_size=0, max_elements=0)

    def is_input_size_limited(self) -> bool:
        """Check if input size limit is enabled."""
        return self.max_input_size > 0

    def is_element_count_limited(self) -> bool:
        """Check if element count limit is enabled."""
        return self.max_elements > 0

    def check_input_size(self, size: int) -> str | None:
        """Return a diagnostic if the input size exceeds the limit."""
        if self.is_input_size_limited() and size > self.max_input_size:
            return (
                f"Input size {size} bytes exceeds limit of "
                f"{self.max_input_size} bytes"
            )
        return None

    def check_element_count(self, count: int) -> str | None:
        """Return a diagnostic if the element count exceeds the limit."""
        if self.is_element_count_limited() and count > self.max_elements:
            return f"Element count {count} exceeds limit of {self.max_elements}"
        return None
