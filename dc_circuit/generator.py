"""Генератор задач: цепь, правильные значения и искомая величина"""

import math
import random
from typing import List, Optional, Tuple

from dc_circuit.circuit import Circuit, Resistor, SolvedResult, Target, Topology
from dc_circuit.solver import CircuitSolver
from config import CircuitConfig


def draw_integer(rng, low: int, high: int) -> int:
    """Равномерное целое из [low, high]: floor(random * n) + low"""
    return math.floor(rng.random() * (high - low + 1)) + low


class CircuitGenerator:
    """Генератор цепей трех шаблонов: последовательная, параллельная, смешанная.

    Случайность приходит снаружи (объект с методом random(), например
    random.Random(seed)), поэтому генерация воспроизводима в тестах.
    """
    
    def __init__(self, config: CircuitConfig = None, solver: CircuitSolver = None):
        self.config = config or CircuitConfig()
        self.solver = solver or CircuitSolver()
        self.question_targets: List[Target] = [Target(t) for t in self.config.question_targets]
    
    def generate_circuit(self, topology: Topology, rng=None) -> Circuit:
        """Генерирует цепь заданной топологии"""
        rng = rng or random.Random()

        voltage = draw_integer(rng, *self.config.voltage_range)

        # Всегда три розыгрыша, чтобы путь генерации не зависел от топологии
        resistors = []
        for i in range(self.config.resistor_draws):
            resistors.append(Resistor(
                id=f"r{i + 1}",
                label=f"R{i + 1}",
                resistance=draw_integer(rng, *self.config.resistance_range),
            ))

        if topology is Topology.PARALLEL:
            # Третий резистор отбрасывается
            resistors = resistors[:2]
        # SERIES и COMBINATION: все три, для COMBINATION R1 последовательно, R2 || R3

        return Circuit(topology=topology, voltage=voltage, resistors=tuple(resistors))

    def choose_target(self, rng=None) -> Target:
        """Выбирает искомую величину (по умолчанию сопротивление или ток)"""
        rng = rng or random.Random()
        index = math.floor(rng.random() * len(self.question_targets))
        return self.question_targets[index]

    def generate_problem(self, topology: Topology, rng=None) -> Tuple[Circuit, SolvedResult, Target]:
        """Генерирует цепь, решает ее и выбирает вопрос. Не может завершиться ошибкой."""
        rng = rng or random.Random()
        circuit = self.generate_circuit(topology, rng)
        result = self.solver.solve(circuit)
        target = self.choose_target(rng)
        return circuit, result, target


def generate_problem(
    topology: Topology,
    rng=None,
    config: Optional[CircuitConfig] = None
) -> Tuple[Circuit, SolvedResult, Target]:
    """Генерирует задачу генератором с заданной конфигурацией."""
    return CircuitGenerator(config).generate_problem(topology, rng)
