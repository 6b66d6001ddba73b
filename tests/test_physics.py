"""Тесты физической корректности: формулы свёртки против метода узловых потенциалов."""

import random
import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dc_circuit.circuit import Topology
from dc_circuit.generator import CircuitGenerator
from dc_circuit.nodal import GROUND_NODE, SOURCE_NODE, NodalAnalyzer, circuit_branches
from dc_circuit.solver import CircuitSolver


class TestNodalAnalysis:
    """Тесты метода узловых потенциалов."""
    
    def setup_method(self):
        """Настройка для физических тестов."""
        self.analyzer = NodalAnalyzer()
        self.solver = CircuitSolver()
    
    def test_branches_series(self, series_circuit):
        """Последовательная цепь: цепочка A-N1-N2-B."""
        branches = circuit_branches(series_circuit)
        assert [(n1, n2) for n1, n2, _, _ in branches] == [("A", "N1"), ("N1", "N2"), ("N2", "B")]
    
    def test_branches_combination(self, combination_circuit):
        """Смешанная цепь: R1 до узла N1, пара между N1 и землей."""
        branches = circuit_branches(combination_circuit)
        assert branches[0][:2] == ("A", "N1")
        assert all(b[:2] == ("N1", "B") for b in branches[1:])
    
    def test_potentials_series(self, series_circuit):
        """12 В на 10/20/30 Ом: N1 = 10 В, N2 = 6 В."""
        potentials = self.analyzer.solve(series_circuit)
        assert potentials[SOURCE_NODE] == 12.0
        assert potentials[GROUND_NODE] == 0.0
        assert potentials["N1"] == pytest.approx(10.0)
        assert potentials["N2"] == pytest.approx(6.0)
    
    def test_parallel_has_no_internal_nodes(self, parallel_circuit):
        """В параллельной цепи нет внутренних узлов."""
        potentials = self.analyzer.solve(parallel_circuit)
        assert set(potentials) == {SOURCE_NODE, GROUND_NODE}
        assert self.analyzer.source_current(parallel_circuit) == pytest.approx(2.0)
    
    def test_branch_currents_match_breakdown(self, combination_circuit):
        """Токи ветвей совпадают с разбивкой решателя."""
        currents = self.analyzer.branch_currents(combination_circuit)
        result = self.solver.solve(combination_circuit)
        for label, current in result.currents.items():
            assert currents[label] == pytest.approx(current)
    
    @pytest.mark.parametrize("topology", list(Topology))
    def test_closed_form_matches_nodal(self, topology):
        """Общий ток по формулам совпадает с током источника по МУП."""
        generator = CircuitGenerator()
        rng = random.Random(2024)
        for _ in range(20):
            circuit = generator.generate_circuit(topology, rng)
            result = self.solver.solve(circuit)
            nodal_current = self.analyzer.source_current(circuit)
            
            assert nodal_current == pytest.approx(result.total_current, rel=1e-9)
            assert circuit.voltage / nodal_current == pytest.approx(result.total_resistance, rel=1e-9)
