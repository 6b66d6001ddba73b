"""Калькулятор напряжения источника."""

from .base import AnswerCalculator
from dc_circuit.circuit import SolvedResult


class VoltageCalculator(AnswerCalculator):
    """Вычисляет напряжение на всей цепи."""
    
    def calculate(self, result: SolvedResult) -> float:
        """Вычисляет напряжение: V = I × R_eq.
        
        Без деления на отдельные резисторы это всегда напряжение источника.
        
        Args:
            result: Результат расчета цепи
        
        Returns:
            Напряжение в вольтах
        """
        return result.total_current * result.total_resistance
