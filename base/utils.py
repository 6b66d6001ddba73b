"""Модуль общих утилит для всего проекта.

Содержит унифицированные функции для разбора ответа ученика, форматирования
чисел и системный промпт репетитора.
"""

import math
import re

# Ведущее число строки, как его читает parseFloat в браузере
_LEADING_NUMBER = re.compile(r'^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')


def parse_number(text: str) -> float:
    """Разбирает ответ ученика как число с плавающей точкой.
    
    Пробелы по краям игнорируются, берется ведущее число строки
    ("20.3 Ohm" -> 20.3). Если числа нет, возвращается NaN: такое значение
    никогда не совпадет с правильным ответом.
    
    Args:
        text: Введенный учеником текст
    
    Returns:
        Число или NaN
        
    Example:
        >>> parse_number(" 20.3 ")
        20.3
        >>> math.isnan(parse_number("abc"))
        True
    """
    if text is None:
        return math.nan

    match = _LEADING_NUMBER.match(str(text).strip())
    if not match:
        return math.nan
    return float(match.group(0))


def format_value(value: float, precision: int = 2) -> str:
    """Форматирует значение для вывода (округление только здесь)."""
    return f"{value:.{precision}f}"


def get_tutor_system_prompt() -> str:
    """Возвращает системный промпт для AI-репетитора.
    
    Returns:
        Текст системного промпта на английском языке
    """
    return (
        "You are a helpful, encouraging high school physics tutor. "
        "Your goal is to explain DC circuits simply. "
        "You always use clear, numbered steps and never provide over-complicated technical jargon."
    )
