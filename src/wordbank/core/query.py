"""
Keeping only the newest query's result.

Search-as-you-type issues a request per pause in typing. Responses can
arrive out of order, so every request carries a sequence token and only
the holder of the latest token may publish its result.
"""

import asyncio
import itertools
from typing import Any, Awaitable, Callable


class LatestQueryGuard:
    def __init__(self):
        self._counter = itertools.count(1)
        self._latest = 0
        self.result: Any = None

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        """Start a new query. Every earlier token becomes stale."""
        self._latest = next(self._counter)
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest

    def apply(self, token: int, result: Any) -> bool:
        """Publish `result` if `token` is still the latest. Returns whether it was."""
        if not self.is_current(token):
            return False
        self.result = result
        return True


class Debouncer:
    """Run the last call after `delay` seconds of quiet.

    Calls superseded while waiting, or whose work finishes after a newer
    call was issued, return None and leave `guard.result` untouched.
    """

    def __init__(self, delay: float = 0.3, guard: LatestQueryGuard | None = None):
        self.delay = delay
        self.guard = guard or LatestQueryGuard()

    async def run(self, fn: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        token = self.guard.issue()
        await asyncio.sleep(self.delay)
        if not self.guard.is_current(token):
            return None

        result = await fn(*args, **kwargs)
        if not self.guard.apply(token, result):
            return None
        return result
