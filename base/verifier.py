"""Базовый модуль для проверки ответов.

Этот модуль содержит абстрактный класс Verifier, который определяет интерфейс
для проверки ответа ученика, и результат проверки Feedback.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Feedback:
    """Результат проверки ответа.
    
    Attributes:
        is_correct: Ответ в пределах допустимой погрешности
        message: Текст для ученика
    """
    is_correct: bool
    message: str


class Verifier(ABC):
    """Класс для верификатора ответов
    
    Все верификаторы должны наследоваться от этого класса.
    """
    
    def __init__(self) -> None:
        """Инициализирует верификатор"""
        pass
    
    @abstractmethod
    def check_answer(self, submitted_text: str, target: Any, result: Any) -> Feedback:
        """Проверяет ответ ученика
        
        Метод не должен выбрасывать исключений: любой некорректный ввод
        считается неправильным ответом.
        
        Args:
            submitted_text: Введенный учеником текст
            target: Какую величину нужно было найти
            result: Результат расчета цепи с правильными значениями
        
        Returns:
            Feedback с флагом правильности и сообщением
            
        Raises:
            NotImplementedError: Если метод не реализован в подклассе
        """
        raise NotImplementedError("Verifier.check_answer() не реализован")
