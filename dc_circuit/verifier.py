"""Модуль проверки ответов ученика.

Содержит DCCircuitVerifier: сравнивает введенное число с правильным
значением с абсолютной погрешностью.
"""

import math
from base.verifier import Verifier, Feedback
from base.utils import parse_number
from dc_circuit.circuit import SolvedResult, Target
from dc_circuit.calculators import get_calculator_registry
from config import VerifierConfig


class DCCircuitVerifier(Verifier):
    """Верификатор ответов для задач по DC цепям.
    
    Ответ правильный, если |ответ - правильное значение| < atol. Погрешность
    абсолютная, а не относительная: ученик считает вручную и округляет.
    
    Attributes:
        atol: Абсолютная погрешность (строгое неравенство)
        precision: Количество знаков после запятой в сообщении
    """
    
    def __init__(self, config: VerifierConfig = None) -> None:
        super().__init__()
        self.config = config or VerifierConfig()
        self.atol: float = self.config.absolute_tolerance
        self.precision: int = self.config.answer_precision
        self.calculators = get_calculator_registry(self.precision)
    
    def check_answer(self, submitted_text: str, target: Target, result: SolvedResult) -> Feedback:
        """Проверяет ответ ученика.
        
        Нечисловой ввод разбирается в NaN и просто попадает в ветку
        "неправильно", исключения не выбрасываются.
        
        Args:
            submitted_text: Введенный учеником текст
            target: Искомая величина
            result: Результат расчета цепи
        
        Returns:
            Feedback с флагом правильности и сообщением
        """
        calculator = self.calculators[target]
        target_value = calculator.calculate(result)
        submitted_value = parse_number(submitted_text)

        # NaN не проходит ни одно сравнение
        if not math.isnan(submitted_value) and abs(submitted_value - target_value) < self.atol:
            return Feedback(is_correct=True, message=self.config.correct_message)

        return Feedback(
            is_correct=False,
            message=self.config.incorrect_template.format(
                value=calculator.format_result(target_value)
            ),
        )


def check_answer(submitted_text: str, target: Target, result: SolvedResult) -> Feedback:
    """Проверяет ответ верификатором с настройками по умолчанию."""
    return DCCircuitVerifier().check_answer(submitted_text, target, result)
