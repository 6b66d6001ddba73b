"""
Клиент AI-репетитора, объясняющего решение задачи по шагам
"""

from concurrent.futures import Future, ThreadPoolExecutor

import requests

from base.utils import get_tutor_system_prompt
from config import TutorConfig
from dc_circuit.circuit import Circuit, SolvedResult, Target
from dc_circuit.prompt import create_tutor_prompt


class TutorClient:
    """
    Клиент для OpenAI-совместимого API: POST /v1/chat/completions

    Любой сбой сети или API превращается в текст-заглушку: состояние игры
    от ответа репетитора не зависит.
    """

    def __init__(self, config: TutorConfig = None, session: requests.Session = None):
        """
        Инициализация клиента

        Args:
            config: Адрес API, модель и тексты-заглушки
            session: HTTP-сессия (по умолчанию новая requests.Session)
        """
        self.config = config or TutorConfig()
        self.api_url = self.config.api_url.rstrip('/')
        self.session = session or requests.Session()
        if self.config.api_key:
            self.session.headers["Authorization"] = f"Bearer {self.config.api_key}"
        self._executor = None

    def explain(self, circuit: Circuit, result: SolvedResult, target: Target) -> str:
        """
        Запрашивает объяснение решения

        Args:
            circuit: Цепь текущей задачи
            result: Правильные значения
            target: Искомая величина

        Returns:
            Текст объяснения или заглушка при ошибке
        """
        payload = {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": get_tutor_system_prompt()},
                {"role": "user", "content": create_tutor_prompt(circuit, result, target)}
            ],
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
            "stream": False
        }

        try:
            response = self.session.post(
                f"{self.api_url}/v1/chat/completions",
                json=payload,
                timeout=self.config.timeout
            )
            response.raise_for_status()

            content = response.json()["choices"][0]["message"]["content"]
            text = self._content_text(content)
            if text is None:
                print(f"❌ Неожиданный формат ответа репетитора: {type(content).__name__}")
                return self.config.offline_message
            return text or self.config.empty_response_message

        except requests.exceptions.RequestException as e:
            print(f"❌ Ошибка API репетитора: {e}")
            return self.config.offline_message
        except (KeyError, IndexError, TypeError, ValueError) as e:
            print(f"❌ Ошибка обработки ответа репетитора: {e}")
            return self.config.offline_message

    @staticmethod
    def _content_text(content):
        """Текст сообщения: строка или список частей {"type": "text", "text": ...}

        Returns:
            Текст без пробелов по краям или None, если формат неизвестен
        """
        if content is None:
            return ""
        if isinstance(content, str):
            return content.strip()
        if isinstance(content, list):
            parts = []
            for part in content:
                if not isinstance(part, dict) or part.get("type") != "text":
                    continue
                if not isinstance(part.get("text"), str):
                    return None
                parts.append(part["text"])
            return "".join(parts).strip()
        return None

    def explain_async(self, circuit: Circuit, result: SolvedResult, target: Target) -> "Future[str]":
        """Запускает explain в фоне; вызывающий не обязан ждать результат"""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="tutor")
        return self._executor.submit(self.explain, circuit, result, target)

    def health_check(self) -> bool:
        """
        Проверяет доступность сервера

        Returns:
            True если сервер доступен
        """
        try:
            response = self.session.get(f"{self.api_url}/v1/models", timeout=5)
            return response.status_code == 200
        except requests.exceptions.RequestException:
            return False

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None
        self.session.close()
