"""
Simulated I/O latency.

Service operations sleep for a fixed delay so callers experience the
store as a remote backend. Delays are scaled by settings.latency_scale;
a scale of 0 skips the sleep entirely.
"""
import asyncio
from functools import wraps

# Base delays in seconds
READ_ONE = 0.08
READ_MANY = 0.12
WRITE = 0.12
CREATE = 0.15
STATS = 0.1
MATCH = 0.2
ANALYTICS = 0.5


class Latency:
    def __init__(self, scale: float = 1.0):
        self.scale = scale

    async def pause(self, seconds: float) -> None:
        delay = seconds * self.scale
        if delay > 0:
            await asyncio.sleep(delay)


def simulated(seconds: float):
    """
    Decorate an async service method taking the store as its first
    argument; sleeps store.latency before running the method.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(self, store, *args, **kwargs):
            await store.latency.pause(seconds)
            return await func(self, store, *args, **kwargs)

        return wrapper

    return decorator
