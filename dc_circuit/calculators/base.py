"""Базовый класс для калькуляторов ответов."""

from abc import ABC, abstractmethod
from base.utils import format_value
from dc_circuit.circuit import SolvedResult


class AnswerCalculator(ABC):
    """Базовый абстрактный класс для калькуляторов ответов.
    
    Определяет интерфейс для получения ответа на вопрос определенного типа
    из уже решенной цепи. Все калькуляторы должны наследоваться от этого класса.
    
    Attributes:
        precision: Количество знаков после запятой при выводе ответа
    """
    
    def __init__(self, precision: int = 2):
        """Инициализирует калькулятор.
        
        Args:
            precision: Количество знаков после запятой
        """
        self.precision = precision
    
    @abstractmethod
    def calculate(self, result: SolvedResult) -> float:
        """Вычисляет ответ для заданного типа вопроса.
        
        Значение не округляется: округление только при выводе.
        
        Args:
            result: Результат расчета цепи
        
        Returns:
            Вычисленное значение ответа
        """
        raise NotImplementedError("AnswerCalculator.calculate() не реализован")
    
    def format_result(self, value: float) -> str:
        """Форматирует значение с заданной точностью.
        
        Args:
            value: Значение для форматирования
        
        Returns:
            Строка вида "20.00"
        """
        return format_value(value, self.precision)
