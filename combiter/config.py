"""Configuration for combiter enumerators."""

from dataclasses import dataclass


@dataclass
class EnumerationConfig:
    """Runtime contract checks and diagnostics for enumerators."""

    # Scan the buffer for equal elements before a simple permutation starts
    check_distinct: bool = True

    # Snapshot the buffer after every arrangement and compare on the next step
    check_mutation: bool = False

    # Debug records when an enumeration starts and when it is exhausted
    log_progress: bool = True


# Global configuration instance
ENUMERATION_CONFIG = EnumerationConfig()
