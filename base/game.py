"""Базовый модуль для игровой логики.

Этот модуль содержит абстрактный класс Game, который определяет интерфейс
для обучающих игр: новая задача, проверка ответа, объяснение.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional
from base.verifier import Verifier, Feedback
from base.data import Problem


class Game(ABC):
    """Базовый абстрактный класс для игры.
    
    Attributes:
        name: Название игры
        verifier: Экземпляр верификатора для проверки ответов
        problem: Текущая задача (None до первой генерации)
    """
    
    def __init__(self, name: str, verifier: Callable[[], Verifier]) -> None:
        """Инициализирует игру с названием и верификатором.
        
        Args:
            name: Название игры
            verifier: Фабрика верификатора (будет вызвана один раз)
        """
        self.name: str = name
        self.verifier: Verifier = verifier()
        self.problem: Optional[Problem] = None

    @abstractmethod
    def new_problem(self) -> Problem:
        """Генерирует новую задачу и сбрасывает состояние предыдущей.
        
        Raises:
            NotImplementedError: Если метод не реализован в подклассе
        """
        raise NotImplementedError("Game.new_problem() не реализован")
    
    def verify(self, submitted_text: str) -> Feedback:
        """Проверяет ответ на текущую задачу через верификатор.
        
        Args:
            submitted_text: Введенный учеником текст
        
        Returns:
            Feedback с флагом правильности и сообщением
        """
        if self.problem is None:
            self.new_problem()
        return self.verifier.check_answer(submitted_text, self.problem.target, self.problem.result)
