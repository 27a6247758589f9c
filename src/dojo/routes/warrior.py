from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from dojo.container import Container
from dojo.interfaces import Warrior
from dojo.markers import Injected


class ActionResponse(BaseModel):
    action: str


def fight(warrior: Injected[Warrior]) -> ActionResponse:
    return ActionResponse(action=warrior.fight())


def sneak(warrior: Injected[Warrior]) -> ActionResponse:
    return ActionResponse(action=warrior.sneak())


def build_warrior_router(container: Container) -> APIRouter:
    """Expose the bound warrior's moves under ``/warrior``."""
    router = APIRouter(prefix="/warrior", tags=["warrior"])
    router.add_api_route(
        "/fight",
        container.inject(fight),
        methods=["GET"],
        response_model=ActionResponse,
    )
    router.add_api_route(
        "/sneak",
        container.inject(sneak),
        methods=["GET"],
        response_model=ActionResponse,
    )
    return router
