"""Калькулятор общего тока."""

from .base import AnswerCalculator
from dc_circuit.circuit import SolvedResult


class CurrentCalculator(AnswerCalculator):
    """Возвращает общий ток, вытекающий из источника."""
    
    def calculate(self, result: SolvedResult) -> float:
        """Общий ток по закону Ома: I = V / R_eq (уже посчитан решателем)."""
        return result.total_current
