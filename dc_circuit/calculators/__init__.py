"""Калькуляторы ответов для задач по DC цепям.

Содержит калькуляторы:
- Эквивалентное сопротивление цепи
- Общий ток источника
- Напряжение (V = I × R_eq)
"""

from dc_circuit.circuit import Target
from .base import AnswerCalculator
from .current import CurrentCalculator
from .voltage import VoltageCalculator
from .equivalent_resistance import EquivalentResistanceCalculator


def get_calculator_registry(precision=2):
    """Создает реестр калькуляторов для всех типов вопросов.
    
    Args:
        precision: Количество знаков после запятой при выводе
    
    Returns:
        Словарь {Target: calculator_instance}
    """
    return {
        Target.EQUIVALENT_RESISTANCE: EquivalentResistanceCalculator(precision),
        Target.TOTAL_CURRENT: CurrentCalculator(precision),
        Target.VOLTAGE: VoltageCalculator(precision),
    }


__all__ = [
    "AnswerCalculator",
    "CurrentCalculator", 
    "VoltageCalculator",
    "EquivalentResistanceCalculator",
    "get_calculator_registry"
]
