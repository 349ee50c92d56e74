"""
Action primitives.

Primitives are the building blocks the entry routine awaits:
- wait: Non-blocking delay for a number of milliseconds
"""

from delayaction.primitives.wait import wait

__all__ = [
    "wait",
]
