"""
Small helpers shared by the line-break experiments.
"""
import cProfile
import functools
import os
import pstats
import sys
from typing import Callable, Optional, TextIO

PROFILE_ENV_VAR = 'LINEBREAK_PROFILE'
TRUTHY = ('1', 'true', 'yes', 'on')


def profiling_enabled() -> bool:
    """
    Returns True if the LINEBREAK_PROFILE environment variable asks for
        profiling.
    """
    return os.environ.get(PROFILE_ENV_VAR, '').strip().lower() in TRUTHY


def profile(enabled:Optional[bool]=None, sort:str='cumulative', limit:int=20, stream:Optional[TextIO]=None):
    """
    Decorator factory that runs the decorated function under cProfile and
        prints the stats once it returns (or raises).

    enabled: True/False to always/never profile. If None, LINEBREAK_PROFILE is
        checked every time the function is called.

    sort: The pstats key to sort the report by.

    limit: How many rows of the report to print.

    stream: Where to print the report. Defaults to whatever sys.stderr is at
        the time of the call.
    """
    def decorator(func:Callable) -> Callable:

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            on = profiling_enabled() if enabled is None else enabled
            if not on:
                return func(*args, **kwargs)

            out = sys.stderr if stream is None else stream
            profiler = cProfile.Profile()
            try:
                return profiler.runcall(func, *args, **kwargs)
            finally:
                print(f'-- profile of {func.__qualname__} --', file=out)
                stats = pstats.Stats(profiler, stream=out)
                stats.sort_stats(sort).print_stats(limit)

        return wrapper

    return decorator
