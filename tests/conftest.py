"""Конфигурация pytest."""

import pytest
import sys
import os

import matplotlib
matplotlib.use("Agg")  # Без дисплея

# Добавляем корневую папку в путь
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class SequenceRandom:
    """Источник случайности с заранее заданной последовательностью."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


@pytest.fixture
def sequence_rng():
    """Фабрика детерминированных источников случайности."""
    return SequenceRandom


@pytest.fixture
def series_circuit():
    """Последовательная цепь 12 В: 10 + 20 + 30 Ом."""
    from dc_circuit.circuit import Circuit, Resistor, Topology
    return Circuit(
        topology=Topology.SERIES,
        voltage=12.0,
        resistors=(
            Resistor("r1", "R1", 10.0),
            Resistor("r2", "R2", 20.0),
            Resistor("r3", "R3", 30.0),
        ),
    )


@pytest.fixture
def parallel_circuit():
    """Параллельная цепь 10 В: 10 || 10 Ом."""
    from dc_circuit.circuit import Circuit, Resistor, Topology
    return Circuit(
        topology=Topology.PARALLEL,
        voltage=10.0,
        resistors=(Resistor("r1", "R1", 10.0), Resistor("r2", "R2", 10.0)),
    )


@pytest.fixture
def combination_circuit():
    """Смешанная цепь 10 В: 10 + (20 || 20) Ом."""
    from dc_circuit.circuit import Circuit, Resistor, Topology
    return Circuit(
        topology=Topology.COMBINATION,
        voltage=10.0,
        resistors=(
            Resistor("r1", "R1", 10.0),
            Resistor("r2", "R2", 20.0),
            Resistor("r3", "R3", 20.0),
        ),
    )
