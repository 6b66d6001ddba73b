"""Конфигурация клиента AI-репетитора."""

import os
from dataclasses import dataclass
from typing import Optional

from .models import get_model_config


@dataclass
class TutorConfig:
    """Параметры OpenAI-совместимого API, который объясняет решение."""

    api_url: str = "http://localhost:1234"
    model_preset: str = "production"
    model: Optional[str] = None
    api_key: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    timeout: float = 30.0

    # Тексты на случай сбоя (репетитор никогда не пробрасывает ошибку)
    empty_response_message: str = "I'm sorry, I had trouble calculating that. Please try again."
    offline_message: str = (
        "The AI Tutor is currently offline. Please check your network connection "
        "or try a different problem."
    )

    def __post_init__(self):
        preset = get_model_config(self.model_preset)
        if self.model is None:
            self.model = preset["model_name"]
        if self.temperature is None:
            self.temperature = preset["temperature"]
        if self.max_tokens is None:
            self.max_tokens = preset["max_tokens"]
        if self.api_key is None:
            self.api_key = os.environ.get("TUTOR_API_KEY")
