import logging
from contextlib import contextmanager

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class FetchFailed(Exception):
    """An endpoint could not produce its data. The message is safe to show clients."""


@contextmanager
def fetch_failure(message: str):
    """Turn any error raised inside the block into FetchFailed(message)."""
    try:
        yield
    except FetchFailed:
        raise
    except Exception as e:
        raise FetchFailed(message) from e


async def fetch_failed_handler(request: Request, exc: FetchFailed) -> JSONResponse:
    cause = exc.__cause__ or exc
    logger.error(
        "%s (%s)", exc, request.url.path,
        exc_info=(type(cause), cause, cause.__traceback__),
    )
    return JSONResponse({"error": str(exc)}, status_code=500)
