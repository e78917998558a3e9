"""
Tier chains - run ordered fallback attempts until one produces a value.

Several components degrade through a fixed list of strategies:

    classifier:  LLM            -> "chat"
    parser:      LLM            -> rule-based parser
    media:       video search   -> search-results URL
    resolver:    known table    -> shortcuts -> deep directory search

Each strategy is an attempt function that returns a value on success or
``None`` (NEXT_TIER) to hand over to the next one. The first non-None
value wins and later attempts are never called.
"""

import logging
from typing import Awaitable, Callable, Iterable, Optional, TypeVar

logger = logging.getLogger("astra.core.tiers")

T = TypeVar("T")

# Returned by an attempt to mean "no result, try the next tier"
NEXT_TIER = None


def first_success(attempts: Iterable[Callable[[], Optional[T]]]) -> Optional[T]:
    """
    Run synchronous attempts in order and return the first non-None value.
    
    Returns None when every attempt passes.
    """
    for attempt in attempts:
        result = attempt()
        if result is not NEXT_TIER:
            logger.debug(f"Tier {getattr(attempt, '__name__', attempt)!s} produced a result")
            return result
    return None


async def first_success_async(
    attempts: Iterable[Callable[[], Awaitable[Optional[T]]]],
) -> Optional[T]:
    """Async counterpart of first_success."""
    for attempt in attempts:
        result = await attempt()
        if result is not NEXT_TIER:
            logger.debug(f"Tier {getattr(attempt, '__name__', attempt)!s} produced a result")
            return result
    return None
