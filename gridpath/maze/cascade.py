"""Cascading error filtering for maze parse errors."""

from typing import List

from .models import ParseError


# Cascade level constants
FATAL = 0  # Nothing to parse - stop all downstream checks
CRITICAL = 1  # Grid shape errors
HIGH = 2  # Unknown characters
MEDIUM = 3  # Start/goal count errors


def filter_cascading_errors(
    errors: List[ParseError],
    max_errors: int = 5
) -> List[ParseError]:
    """
    Filter out cascading errors based on hierarchy.

    Filtering rules:
    - Level 0 (FATAL) present → Show ONLY Level 0 errors
    - Level 1 (CRITICAL) present → Show Level 1 + Level 3
    - Level 2 (HIGH) present → Show Level 2 + Level 3
    - Otherwise → Show all errors

    Args:
        errors: List of parse errors to filter
        max_errors: Maximum number of errors to return (default 5)

    Returns:
        Filtered list of errors, limited to max_errors
    """
    if not errors:
        return errors

    by_level: dict[int, List[ParseError]] = {}
    for err in errors:
        by_level.setdefault(err.cascade_level, []).append(err)

    result: List[ParseError] = []

    if FATAL in by_level:
        result = by_level[FATAL]

    # A ragged grid usually drags a pile of character errors along with it
    elif CRITICAL in by_level:
        result = by_level[CRITICAL].copy()
        if MEDIUM in by_level:
            result.extend(by_level[MEDIUM])

    elif HIGH in by_level:
        result = by_level[HIGH].copy()
        if MEDIUM in by_level:
            result.extend(by_level[MEDIUM])

    else:
        result = errors.copy()

    if len(result) > max_errors:
        kept = result[:max_errors - 1]
        num_hidden = len(result) - len(kept)

        kept.append(ParseError(
            code="ADDITIONAL_ERRORS",
            message=f"... and {num_hidden} more error{'s' if num_hidden > 1 else ''}",
            cascade_level=result[0].cascade_level
        ))
        return kept

    return result
