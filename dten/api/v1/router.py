from fastapi import APIRouter

from dten.api.v1.endpoints.tender import TenderHandler, register_routes


def create_api_router(handler: TenderHandler) -> APIRouter:
    """Собрать роутер API для контроллера тендеров"""
    api_router = APIRouter()

    tender_router = APIRouter()
    register_routes(tender_router, handler)

    # Подключаем роутеры
    api_router.include_router(
        tender_router,
        tags=["tender"]
    )

    return api_router
