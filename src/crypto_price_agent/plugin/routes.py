from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from fastapi import APIRouter


@dataclass(frozen=True)
class RouteSpec:
    name: str
    path: str
    handler: Callable[..., Any]
    method: str = "GET"
    tags: list[str] = field(default_factory=list)


async def hello_world_route() -> dict[str, str]:
    return {"message": "Hello World!"}


def build_routes() -> list[RouteSpec]:
    return [RouteSpec(name="helloworld", path="/helloworld", handler=hello_world_route)]


def build_router(routes: Sequence[RouteSpec], prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    for route in routes:
        router.add_api_route(
            route.path,
            route.handler,
            methods=[route.method.upper()],
            name=route.name,
            tags=route.tags or ["plugin"],
        )
    return router
