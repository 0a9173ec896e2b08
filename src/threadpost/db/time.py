"""Time utilities for persisted timestamps."""

import time


def unix_now() -> int:
    """Return the current time as whole seconds since the epoch."""
    return int(time.time())
