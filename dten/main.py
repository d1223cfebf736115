import argparse
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dten.api.v1.endpoints.tender import TenderHandler
from dten.api.v1.router import create_api_router
from dten.core.handler_loader import HandlerLoadError, load_handler
from dten.core.settings import Settings, settings
from dten.models.api import ErrorResponse, HealthCheckResponse
from dten.utils.logger import setup_logger

logger = setup_logger(__name__)


def create_app(handler: TenderHandler, app_settings: Settings = settings) -> FastAPI:
    """Создать приложение FastAPI с маршрутами тендеров"""

    app = FastAPI(
        title=app_settings.APP_TITLE,
        version=app_settings.APP_VERSION,
        debug=app_settings.DEBUG_MODE
    )

    api_router = create_api_router(handler)
    app.include_router(api_router, prefix=app_settings.API_PREFIX)

    tender_paths = [app_settings.API_PREFIX + route.path for route in api_router.routes]

    @app.get("/health", response_model=HealthCheckResponse)
    async def health_check():
        """Проверка работоспособности сервиса"""
        return HealthCheckResponse(status="ok", routes=tender_paths)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Ошибка обработки запроса {request.method} {request.url.path}: {exc}", exc_info=exc)
        error = ErrorResponse(error="Внутренняя ошибка сервера", detail=str(exc))
        return JSONResponse(status_code=500, content=error.model_dump(mode="json"))

    return app


def main(argv: Optional[List[str]] = None) -> int:
    """Запуск сервиса маршрутов тендеров"""

    parser = argparse.ArgumentParser(
        description="HTTP маршруты тендеров поверх внешнего контроллера"
    )

    parser.add_argument(
        '--handler', '-H',
        type=str,
        default=settings.TENDER_HANDLER,
        help='Контроллер тендеров: "package.module" или "package.module:attr"'
    )

    parser.add_argument(
        '--host',
        type=str,
        default=settings.HOST,
        help=f'Адрес для прослушивания (по умолчанию: {settings.HOST})'
    )

    parser.add_argument(
        '--port', '-p',
        type=int,
        default=settings.PORT,
        help=f'Порт для прослушивания (по умолчанию: {settings.PORT})'
    )

    args = parser.parse_args(argv)

    try:
        handler = load_handler(args.handler)
    except HandlerLoadError as e:
        logger.error(f"Ошибка конфигурации: {e}")
        return 1

    app = create_app(handler)

    server_config = settings.get_server_config()
    server_config.update(host=args.host, port=args.port)

    logger.info(f"Запуск сервера на {args.host}:{args.port}")
    uvicorn.run(app, **server_config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
