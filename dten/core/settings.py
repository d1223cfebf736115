"""
Централизованные настройки сервиса маршрутов тендеров
"""

import os
from dotenv import load_dotenv
from pathlib import Path

# Загружаем переменные окружения из .env файла
load_dotenv()


class Settings:
    """Основные настройки"""

    # Пути
    BASE_DIR = Path(__file__).parent.parent
    LOG_DIR = Path(os.getenv('LOG_DIR', 'logs'))

    # Приложение
    APP_TITLE = os.getenv('APP_TITLE', 'DTen Tender API')
    APP_VERSION = os.getenv('APP_VERSION', '0.1.0')
    API_PREFIX = os.getenv('API_PREFIX', '')

    # Сервер
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', 8000))

    # Внешний контроллер тендеров: "package.module" или "package.module:attr"
    TENDER_HANDLER = os.getenv('TENDER_HANDLER', '')

    # Логирование
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Режим отладки
    DEBUG_MODE = os.getenv('DEBUG_MODE', 'False').lower() == 'true'

    @classmethod
    def get_server_config(cls):
        """Получить конфигурацию для uvicorn"""
        return {
            'host': cls.HOST,
            'port': cls.PORT,
            'log_level': cls.LOG_LEVEL.lower()
        }


# Для удобства импорта
settings = Settings()
