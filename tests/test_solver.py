"""Тесты формул свёртки и физической корректности."""

import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dc_circuit.circuit import Circuit, InvalidCircuitError, Resistor, Topology
from dc_circuit.solver import CircuitSolver, parallel_resistance, series_resistance, solve


class TestReductionFormulas:
    """Тесты вспомогательных формул."""
    
    def test_series_resistance(self):
        assert series_resistance([10.0, 20.0, 30.0]) == 60.0
    
    def test_parallel_resistance_two_branches(self):
        assert parallel_resistance([10.0, 10.0]) == 5.0
    
    def test_parallel_resistance_generalizes(self):
        """Формула работает для N ветвей: 1/(1/4 + 1/6 + 1/12) = 2 Ом."""
        assert parallel_resistance([4.0, 6.0, 12.0]) == pytest.approx(2.0)
    
    def test_returns_python_float(self):
        assert type(series_resistance([1, 2])) is float
        assert type(parallel_resistance([1, 2])) is float


class TestCircuitSolver:
    """Тесты решателя."""
    
    def setup_method(self):
        """Настройка перед каждым тестом."""
        self.solver = CircuitSolver()
    
    def test_series(self, series_circuit):
        """R_eq = R1 + R2 + R3, I = V / R_eq."""
        result = self.solver.solve(series_circuit)
        assert result.total_resistance == pytest.approx(60.0)
        assert result.total_current == pytest.approx(12.0 / 60.0)
    
    def test_parallel(self, parallel_circuit):
        """10 || 10 = 5 Ом ровно, I = 10 / 5 = 2 А."""
        result = self.solver.solve(parallel_circuit)
        assert result.total_resistance == 5.0
        assert result.total_current == 2.0
    
    def test_combination(self, combination_circuit):
        """10 + (20 || 20) = 20 Ом ровно."""
        result = self.solver.solve(combination_circuit)
        assert result.total_resistance == 20.0
        assert result.total_current == 0.5
    
    def test_ohm_law_every_topology(self, series_circuit, parallel_circuit, combination_circuit):
        """I = V / R_eq для всех топологий."""
        for circuit in (series_circuit, parallel_circuit, combination_circuit):
            result = self.solver.solve(circuit)
            assert result.total_current == pytest.approx(circuit.voltage / result.total_resistance)
    
    def test_no_internal_rounding(self):
        """Решатель не округляет: 1/(1/30 + 1/40) = 17.142857..."""
        circuit = Circuit(
            Topology.PARALLEL, 9,
            (Resistor("r1", "R1", 30), Resistor("r2", "R2", 40)),
        )
        result = self.solver.solve(circuit)
        assert result.total_resistance == pytest.approx(120.0 / 7.0, rel=1e-12)
        assert result.total_resistance != round(result.total_resistance, 2)
    
    def test_idempotent(self, combination_circuit):
        """Повторное решение дает тот же результат."""
        assert self.solver.solve(combination_circuit) == self.solver.solve(combination_circuit)
        assert solve(combination_circuit) == self.solver.solve(combination_circuit)
        assert hash(solve(combination_circuit)) == hash(solve(combination_circuit))


class TestBreakdown:
    """Тесты токов и напряжений на отдельных резисторах."""
    
    def setup_method(self):
        self.solver = CircuitSolver()
    
    def test_series_breakdown(self, series_circuit):
        """Ток одинаков, сумма падений равна напряжению источника (KVL)."""
        result = self.solver.solve(series_circuit)
        assert set(result.currents.values()) == {result.total_current}
        assert result.voltages["R1"] == pytest.approx(2.0)
        assert result.voltages["R3"] == pytest.approx(6.0)
        assert sum(result.voltages.values()) == pytest.approx(12.0)
    
    def test_parallel_breakdown(self, parallel_circuit):
        """Напряжение одинаково, токи ветвей складываются (KCL)."""
        result = self.solver.solve(parallel_circuit)
        assert result.voltages == {"R1": 10.0, "R2": 10.0}
        assert result.currents == {"R1": 1.0, "R2": 1.0}
        assert sum(result.currents.values()) == pytest.approx(result.total_current)
    
    def test_combination_breakdown(self, combination_circuit):
        """R1 несет весь ток, пара делит его поровну."""
        result = self.solver.solve(combination_circuit)
        assert result.currents["R1"] == pytest.approx(0.5)
        assert result.voltages["R1"] == pytest.approx(5.0)
        assert result.voltages["R2"] == pytest.approx(5.0)
        assert result.voltages["R3"] == pytest.approx(5.0)
        assert result.currents["R2"] + result.currents["R3"] == pytest.approx(result.currents["R1"])


class TestContract:
    """Тесты нарушения контракта."""
    
    def test_non_positive_resistance_rejected(self, parallel_circuit):
        """Вырожденная цепь (обход проверки конструктора) отвергается решателем."""
        bad = Resistor("r1", "R1", 10.0)
        object.__setattr__(bad, "resistance", 0.0)
        circuit = Circuit(Topology.PARALLEL, 10.0, (Resistor("r2", "R2", 10.0), Resistor("r3", "R3", 10.0)))
        object.__setattr__(circuit, "resistors", (bad, circuit.resistors[1]))
        
        with pytest.raises(InvalidCircuitError):
            CircuitSolver().solve(circuit)
