from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from dojo.bootstrap import resolve_dependencies
from dojo.container import Container
from dojo.routes import build_index_router, build_warrior_router

logger = logging.getLogger(__name__)


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    logger.debug(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000,
    )
    return response


def create_app(container: Container | None = None) -> FastAPI:
    """Build the FastAPI application with routes wired to ``container``.

    Falls back to the process-wide container from ``resolve_dependencies``.
    """
    if container is None:
        container = resolve_dependencies()

    app = FastAPI(title="dojo")
    app.state.container = container
    app.middleware("http")(log_requests)
    app.include_router(build_index_router(container))
    app.include_router(build_warrior_router(container))
    return app
