"""Общие фикстуры: контроллер, записывающий вызовы, и тестовый клиент"""

from collections import defaultdict

import pytest
from fastapi.testclient import TestClient

from dten.main import create_app


class RecordingHandler:
    """Контроллер, запоминающий каждый вызов операции"""

    def __init__(self, tag: str = "default"):
        self.tag = tag
        self.calls = defaultdict(list)

    def _record(self, name, request, response):
        self.calls[name].append((request, response))
        return {
            "operation": name,
            "handler": self.tag,
            "path_params": dict(request.path_params),
        }

    async def get_tender(self, request, response):
        return self._record("get_tender", request, response)

    async def add_tender(self, request, response):
        return self._record("add_tender", request, response)

    async def get_all_tenders(self, request, response):
        return self._record("get_all_tenders", request, response)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def client(handler):
    app = create_app(handler)
    return TestClient(app, raise_server_exceptions=False)
