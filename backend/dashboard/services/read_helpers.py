"""Read Helpers — concurrent composition of independent store reads.

Invariants:
    - gather_reads starts every read before awaiting any of them
    - It returns only after ALL reads have settled, then raises the first failure
      (in argument order) if any read failed; no partial results escape
    - Results come back in argument order

Design Decisions:
    - return_exceptions=True then re-raise: siblings are not left running
      unobserved when one read fails early
"""

import asyncio
from typing import Any, Awaitable


async def gather_reads(*reads: Awaitable[Any]) -> list[Any]:
    """Run independent reads concurrently; all settle, first error wins."""
    results = await asyncio.gather(*reads, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)
