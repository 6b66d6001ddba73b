"""Модель данных задачи: топология, резисторы, цепь и результат расчёта.

Все объекты неизменяемые: при новой задаче цепь создаётся заново целиком,
а не модифицируется.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple


class InvalidCircuitError(ValueError):
    """Цепь нарушает контракт: неверное число резисторов или R, V <= 0."""


class Topology(Enum):
    """Три фиксированных шаблона цепи."""

    SERIES = "series"
    PARALLEL = "parallel"
    # Один резистор последовательно с параллельной парой двух оставшихся
    COMBINATION = "combination"

    @property
    def required_resistors(self) -> int:
        return 2 if self is Topology.PARALLEL else 3


class Target(Enum):
    """Величина, которую должен найти ученик."""

    EQUIVALENT_RESISTANCE = "ohms"
    TOTAL_CURRENT = "amps"
    VOLTAGE = "volts"

    @property
    def unit(self) -> str:
        return _TARGET_UNITS[self]


_TARGET_UNITS = {
    Target.EQUIVALENT_RESISTANCE: "Ω",
    Target.TOTAL_CURRENT: "A",
    Target.VOLTAGE: "V",
}


@dataclass(frozen=True)
class Resistor:
    """Резистор с устойчивым идентификатором и подписью для схемы."""

    id: str
    label: str
    resistance: float  # Ом

    def __post_init__(self):
        if not self.resistance > 0:
            raise InvalidCircuitError(
                f"Сопротивление {self.label} должно быть положительным, получено {self.resistance}"
            )


@dataclass(frozen=True)
class Circuit:
    """Описание цепи, которое получают решатель и рендерер.

    Attributes:
        topology: Шаблон цепи
        voltage: Напряжение источника в вольтах
        resistors: Упорядоченные резисторы. Для COMBINATION первый стоит
                   последовательно, второй и третий образуют параллельную пару
    """

    topology: Topology
    voltage: float
    resistors: Tuple[Resistor, ...]

    def __post_init__(self):
        # Принимаем любой итерируемый объект, но храним кортеж
        object.__setattr__(self, "resistors", tuple(self.resistors))

        if not isinstance(self.topology, Topology):
            raise InvalidCircuitError(f"Неизвестная топология: {self.topology!r}")
        if not self.voltage > 0:
            raise InvalidCircuitError(f"Напряжение должно быть положительным, получено {self.voltage}")

        expected = self.topology.required_resistors
        if len(self.resistors) != expected:
            raise InvalidCircuitError(
                f"Цепь {self.topology.value} требует {expected} резистора, получено {len(self.resistors)}"
            )

    @property
    def labels(self) -> List[str]:
        return [r.label for r in self.resistors]

    @property
    def resistances(self) -> List[float]:
        return [r.resistance for r in self.resistors]

    def to_json(self) -> Dict[str, Any]:
        """Описание цепи для рендерера: топология, напряжение, резисторы."""
        return {
            "type": self.topology.value,
            "voltage": self.voltage,
            "resistors": [
                {"id": r.id, "label": r.label, "resistance": r.resistance}
                for r in self.resistors
            ],
        }


@dataclass(frozen=True)
class SolvedResult:
    """Результат расчёта цепи.

    Attributes:
        total_resistance: Эквивалентное сопротивление, Ом
        total_current: Ток источника, А
        voltages: Падение напряжения на каждом резисторе {label: V}
        currents: Ток через каждый резистор {label: A}
    """

    total_resistance: float
    total_current: float
    voltages: Mapping[str, float] = field(default_factory=dict)
    currents: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        # Копия только для чтения: словарь вызывающего не разделяется с результатом
        object.__setattr__(self, "voltages", MappingProxyType(dict(self.voltages)))
        object.__setattr__(self, "currents", MappingProxyType(dict(self.currents)))

    def __hash__(self):
        return hash((
            self.total_resistance,
            self.total_current,
            tuple(sorted(self.voltages.items())),
            tuple(sorted(self.currents.items())),
        ))

    def value_for(self, target: Target) -> float:
        """Значение, с которым сравнивается ответ ученика."""
        from dc_circuit.calculators import get_calculator_registry

        return get_calculator_registry()[target].calculate(self)

    def to_json(self) -> Dict[str, Any]:
        return {
            "totalResistance": self.total_resistance,
            "totalCurrent": self.total_current,
            "voltages": dict(self.voltages),
            "currents": dict(self.currents),
        }
