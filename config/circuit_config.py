"""Конфигурация для генерации цепей."""

from dataclasses import dataclass
from typing import List


@dataclass
class CircuitConfig:
    """Конфигурация для генерации электрических цепей."""

    # Параметры генерации (границы включительно)
    voltage_range: tuple = (5, 24)
    resistance_range: tuple = (10, 59)
    resistor_draws: int = 3  # Всегда три розыгрыша, даже для параллельной цепи

    # Что спрашиваем у ученика: "ohms", "amps" (и "volts", если включить)
    question_targets: List[str] = None
    default_topology: str = "series"

    def __post_init__(self):
        if self.question_targets is None:
            self.question_targets = ["ohms", "amps"]
