import numpy as np
from typing import Dict, Iterable, Tuple

from dc_circuit.circuit import Circuit, InvalidCircuitError, SolvedResult, Topology


def series_resistance(values: Iterable[float]) -> float:
    """Последовательное соединение: сопротивления складываются"""
    return float(np.sum(np.asarray(list(values), dtype=float)))


def parallel_resistance(values: Iterable[float]) -> float:
    """Параллельное соединение: складываются проводимости 1/R

    Формула работает для любого количества ветвей.
    """
    resistances = np.asarray(list(values), dtype=float)
    return float(1.0 / np.sum(1.0 / resistances))


class CircuitSolver:
    """Решает цепи по формулам свёртки (эквивалентного преобразования)"""

    def solve(self, circuit: Circuit) -> SolvedResult:
        """
        Вычисляет эквивалентное сопротивление, общий ток и токи/напряжения
        на каждом резисторе

        Args:
            circuit: Объект Circuit с цепью

        Returns:
            SolvedResult без округления (округление только при выводе)

        Raises:
            InvalidCircuitError: если сопротивление не положительное
        """
        for resistor in circuit.resistors:
            if not resistor.resistance > 0:
                raise InvalidCircuitError(f"{resistor.label}: сопротивление должно быть > 0")

        if circuit.topology is Topology.SERIES:
            total_resistance, voltages, currents = self._reduce_series(circuit)
        elif circuit.topology is Topology.PARALLEL:
            total_resistance, voltages, currents = self._reduce_parallel(circuit)
        elif circuit.topology is Topology.COMBINATION:
            total_resistance, voltages, currents = self._reduce_combination(circuit)
        else:
            raise InvalidCircuitError(f"Неизвестная топология: {circuit.topology!r}")

        return SolvedResult(
            total_resistance=total_resistance,
            total_current=circuit.voltage / total_resistance,  # Закон Ома
            voltages=voltages,
            currents=currents,
        )

    def _reduce_series(self, circuit: Circuit) -> Tuple[float, Dict[str, float], Dict[str, float]]:
        total_resistance = series_resistance(circuit.resistances)
        current = circuit.voltage / total_resistance

        # Ток одинаков везде, напряжение делится пропорционально R
        currents = {r.label: current for r in circuit.resistors}
        voltages = {r.label: current * r.resistance for r in circuit.resistors}
        return total_resistance, voltages, currents

    def _reduce_parallel(self, circuit: Circuit) -> Tuple[float, Dict[str, float], Dict[str, float]]:
        total_resistance = parallel_resistance(circuit.resistances)

        # Напряжение одинаково на всех ветвях
        voltages = {r.label: float(circuit.voltage) for r in circuit.resistors}
        currents = {r.label: circuit.voltage / r.resistance for r in circuit.resistors}
        return total_resistance, voltages, currents

    def _reduce_combination(self, circuit: Circuit) -> Tuple[float, Dict[str, float], Dict[str, float]]:
        head, *pair = circuit.resistors
        pair_resistance = parallel_resistance(r.resistance for r in pair)
        total_resistance = head.resistance + pair_resistance
        current = circuit.voltage / total_resistance

        pair_voltage = current * pair_resistance
        voltages = {head.label: current * head.resistance}
        currents = {head.label: current}
        for r in pair:
            voltages[r.label] = pair_voltage
            currents[r.label] = pair_voltage / r.resistance
        return total_resistance, voltages, currents


def solve(circuit: Circuit) -> SolvedResult:
    """Решает цепь решателем по умолчанию."""
    return CircuitSolver().solve(circuit)
