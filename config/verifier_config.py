"""Конфигурация для проверки ответов."""

from dataclasses import dataclass


@dataclass
class VerifierConfig:
    # Абсолютная погрешность: ученик считает вручную и округляет
    absolute_tolerance: float = 0.5
    answer_precision: int = 2  # Знаков после запятой в сообщениях

    # Тексты обратной связи
    correct_message: str = "Excellent! You've mastered Ohm's Law for this circuit."
    incorrect_template: str = "Not quite. The correct answer was approximately {value}."
