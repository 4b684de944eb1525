"""
Utilities Package - Common helpers shared across lifecycle-actions.
"""

from lifecycle_actions.utils.datetime import (
    utc_now,
    milliseconds_since,
)

__all__ = [
    "utc_now",
    "milliseconds_since",
]
