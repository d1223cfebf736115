import importlib
import inspect
from typing import Any, List

from dten.utils.logger import setup_logger

logger = setup_logger(__name__)

# Операции, которые обязан предоставить контроллер
HANDLER_OPERATIONS = ('get_tender', 'add_tender', 'get_all_tenders')


class HandlerLoadError(ValueError):
    """Контроллер тендеров не удалось загрузить"""


def load_handler(path: str) -> Any:
    """
    Загрузить контроллер тендеров по строке импорта

    Поддерживаются форматы "package.module" (модуль с функциями) и
    "package.module:attr" (объект или класс; класс создается без аргументов).
    """
    if not path or not path.strip():
        raise HandlerLoadError("Не указан контроллер тендеров")

    module_name, _, attr_path = path.strip().partition(':')

    try:
        handler = importlib.import_module(module_name)
    except ImportError as e:
        raise HandlerLoadError(f"Не удалось импортировать модуль '{module_name}': {e}") from e

    if attr_path:
        for attr in attr_path.split('.'):
            try:
                handler = getattr(handler, attr)
            except AttributeError as e:
                raise HandlerLoadError(f"Атрибут '{attr_path}' не найден в модуле '{module_name}'") from e

    if inspect.isclass(handler):
        handler = handler()

    missing = missing_operations(handler)
    if missing:
        raise HandlerLoadError(
            f"Контроллер '{path}' не реализует операции: {', '.join(missing)}"
        )

    logger.info(f"Загружен контроллер тендеров: {path}")
    return handler


def missing_operations(handler: Any) -> List[str]:
    """Список операций, которых нет у контроллера"""
    return [
        name for name in HANDLER_OPERATIONS
        if not callable(getattr(handler, name, None))
    ]
