from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorResponse(BaseModel):
    """Модель ошибки"""
    error: str
    detail: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)


class HealthCheckResponse(BaseModel):
    """Ответ healthcheck"""
    status: str
    routes: List[str] = Field(
        default_factory=list,
        description="Зарегистрированные маршруты тендеров"
    )
    timestamp: datetime = Field(default_factory=datetime.now)
