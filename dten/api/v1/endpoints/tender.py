"""
Регистрация маршрутов тендеров

Каждый маршрут делегирует запрос одноименной операции внешнего
контроллера, передавая объекты request и response без изменений.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Tuple

from fastapi import APIRouter, Request, Response
from fastapi.dependencies.utils import is_coroutine_callable
from starlette.concurrency import run_in_threadpool

from dten.utils.logger import setup_logger

logger = setup_logger(__name__)

Operation = Callable[[Request, Response], Any]


class TenderHandler(Protocol):
    """Внешний контроллер тендеров"""

    def get_tender(self, request: Request, response: Response) -> Any: ...

    def add_tender(self, request: Request, response: Response) -> Any: ...

    def get_all_tenders(self, request: Request, response: Response) -> Any: ...


@dataclass(frozen=True)
class Route:
    """Привязка HTTP метода и шаблона пути к операции контроллера"""
    method: str
    path: str
    name: str
    operation: Operation


def build_routes(handler: TenderHandler) -> Tuple[Route, ...]:
    """Построить таблицу маршрутов для контроллера, не изменяя роутер"""
    return (
        Route("GET", "/get_tender/{id}", "get_tender", handler.get_tender),
        Route("GET", "/add_tender/{tender}", "add_tender", handler.add_tender),
        Route("GET", "/get_all_tenders", "get_all_tenders", handler.get_all_tenders),
        # Route("GET", "/change_holder/{holder}", "change_holder", handler.change_holder),
    )


def _delegate(operation: Operation):
    """Эндпоинт, передающий request и response операции контроллера"""

    async def endpoint(request: Request, response: Response):
        if is_coroutine_callable(operation):
            return await operation(request, response)
        return await run_in_threadpool(operation, request, response)

    return endpoint


def register_routes(
        router: APIRouter,
        handler: TenderHandler,
        routes: Optional[Tuple[Route, ...]] = None
) -> Tuple[Route, ...]:
    """
    Зарегистрировать маршруты тендеров на роутере

    Повторная регистрация не дедуплицируется: Starlette перебирает
    маршруты в порядке добавления, поэтому обслуживает первый.
    """
    if routes is None:
        routes = build_routes(handler)

    for route in routes:
        router.add_api_route(
            route.path,
            _delegate(route.operation),
            methods=[route.method],
            name=route.name
        )
        logger.info(f"Зарегистрирован маршрут {route.method} {route.path} -> {route.name}")

    return routes
