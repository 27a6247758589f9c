from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from dojo.container import Container
from dojo.markers import Injected
from dojo.settings import Settings


def greet(settings: Injected[Settings]) -> str:
    return settings.greeting


def build_index_router(container: Container) -> APIRouter:
    router = APIRouter(tags=["index"])
    router.add_api_route(
        "/",
        container.inject(greet),
        methods=["GET"],
        response_class=PlainTextResponse,
    )
    return router
