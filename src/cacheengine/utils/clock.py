"""Wall clock sources."""

import time


class SystemClock:
    """Wall clock returning milliseconds since epoch."""

    def __call__(self) -> int:
        return int(time.time() * 1000)
