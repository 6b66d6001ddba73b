"""Модуль данных задачи.

Содержит класс Problem: цепь, результат расчета и вопрос одного раунда.
"""

import json
from typing import Any, Dict


class Problem:
    """Одна задача для ученика.
    
    Создается целиком при каждом новом раунде и не изменяется.
    
    Attributes:
        circuit: Описание цепи (топология, напряжение, резисторы)
        result: Правильные значения (эквивалентное сопротивление, ток)
        target: Какую величину нужно найти
        question: Текст вопроса для ученика
    """
    
    def __init__(self, circuit: Any, result: Any, target: Any, question: str = "") -> None:
        self.circuit = circuit
        self.result = result
        self.target = target
        self.question = question
        
    def to_json(self) -> Dict[str, Any]:
        """Преобразует объект в словарь.
        
        Returns:
            Словарь с полями circuit, result, target, question
        """
        return {
            "circuit": self.circuit.to_json(),
            "result": self.result.to_json(),
            "target": self.target.value,
            "question": self.question
        }
    
    def to_json_str(self) -> str:
        """Преобразует объект в JSON строку.
        
        Returns:
            JSON строка с данными объекта
        """
        return json.dumps(self.to_json(), ensure_ascii=False)
