"""Unit-step sweeps over float bounds."""

from __future__ import annotations

from collections.abc import Iterator


def unit_steps(start: float, stop: float, inclusive: bool = False) -> Iterator[float]:
    """Yield start, start + 1, ... while below stop (or equal, if inclusive).

    Values accumulate by repeated addition so that non-integral bounds
    produce the same offsets on every call.
    """
    value = start
    while value <= stop if inclusive else value < stop:
        yield value
        value += 1.0
