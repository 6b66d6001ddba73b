"""Метод узловых потенциалов для шаблонных цепей.

Независимая проверка формул свёртки: строим матрицу проводимостей G
и решаем систему G * V = I через numpy.
"""

import numpy as np
from typing import Dict, List, Tuple

from dc_circuit.circuit import Circuit, InvalidCircuitError, Topology

SOURCE_NODE = "A"  # Плюс источника
GROUND_NODE = "B"  # Минус источника, потенциал 0

Branch = Tuple[str, str, float, str]  # (node1, node2, resistance, label)


def circuit_branches(circuit: Circuit) -> List[Branch]:
    """Раскладывает шаблон цепи на ветви между узлами"""
    resistors = circuit.resistors

    if circuit.topology is Topology.SERIES:
        # Цепочка A-N1-N2-...-B
        nodes = [SOURCE_NODE] + [f"N{i + 1}" for i in range(len(resistors) - 1)] + [GROUND_NODE]
        return [
            (nodes[i], nodes[i + 1], r.resistance, r.label)
            for i, r in enumerate(resistors)
        ]
    if circuit.topology is Topology.PARALLEL:
        # Все резисторы между A и B
        return [(SOURCE_NODE, GROUND_NODE, r.resistance, r.label) for r in resistors]
    if circuit.topology is Topology.COMBINATION:
        head, *pair = resistors
        branches = [(SOURCE_NODE, "N1", head.resistance, head.label)]
        branches.extend(("N1", GROUND_NODE, r.resistance, r.label) for r in pair)
        return branches

    raise InvalidCircuitError(f"Неизвестная топология: {circuit.topology!r}")


class NodalAnalyzer:
    """Решает шаблонные цепи методом узловых потенциалов"""

    def solve(self, circuit: Circuit) -> Dict[str, float]:
        """
        Решает цепь и возвращает потенциалы узлов

        Args:
            circuit: Объект Circuit с цепью

        Returns:
            Словарь {node: voltage}, включая источник и землю
        """
        branches = circuit_branches(circuit)
        potentials = {SOURCE_NODE: float(circuit.voltage), GROUND_NODE: 0.0}

        # Неизвестны только внутренние узлы: потенциалы A и B заданы источником
        unknown = sorted({n for (n1, n2, _, _) in branches for n in (n1, n2)} - set(potentials))
        if not unknown:
            return potentials

        index = {node: i for i, node in enumerate(unknown)}
        n = len(unknown)

        # Матрица проводимостей G и вектор токов I
        G = np.zeros((n, n))
        I = np.zeros(n)

        for (n1, n2, R, label) in branches:
            if not R > 0:
                raise InvalidCircuitError(f"{label}: сопротивление должно быть > 0")
            G_val = 1.0 / R
            for node, other in ((n1, n2), (n2, n1)):
                if node not in index:
                    continue
                i = index[node]
                G[i, i] += G_val
                if other in index:
                    G[i, index[other]] -= G_val
                else:
                    # Известный потенциал переносим в правую часть
                    I[i] += G_val * potentials[other]

        voltages = np.linalg.solve(G, I)
        for node, i in index.items():
            potentials[node] = float(voltages[i])
        return potentials

    def branch_currents(self, circuit: Circuit) -> Dict[str, float]:
        """Ток через каждый резистор {label: A}"""
        potentials = self.solve(circuit)
        return {
            label: abs(potentials[n1] - potentials[n2]) / R
            for (n1, n2, R, label) in circuit_branches(circuit)
        }

    def source_current(self, circuit: Circuit) -> float:
        """Ток, вытекающий из источника (сумма токов ветвей у узла A)"""
        potentials = self.solve(circuit)
        total_current = 0.0
        for (n1, n2, R, _) in circuit_branches(circuit):
            if n1 == SOURCE_NODE:
                total_current += (potentials[n1] - potentials[n2]) / R
            elif n2 == SOURCE_NODE:
                total_current += (potentials[n2] - potentials[n1]) / R
        return total_current
