"""Калькулятор эквивалентного сопротивления."""

from .base import AnswerCalculator
from dc_circuit.circuit import SolvedResult


class EquivalentResistanceCalculator(AnswerCalculator):
    """Возвращает эквивалентное сопротивление цепи."""
    
    def calculate(self, result: SolvedResult) -> float:
        return result.total_resistance
