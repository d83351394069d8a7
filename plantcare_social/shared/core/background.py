"""
Detached side-effect jobs.

Jobs scheduled after a request's primary write has committed (notification
fan-out) run through run_detached, which is their error sink: failures are
logged with traceback and never reach the request that triggered them.
"""

import logging
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)


async def run_detached(job_name: str, func: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> None:
    try:
        await func(*args, **kwargs)
    except Exception:
        logger.exception(f"Background job '{job_name}' failed")
    else:
        logger.debug(f"Background job '{job_name}' completed")
