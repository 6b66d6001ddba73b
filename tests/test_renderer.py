"""Тесты рисования схемы."""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dc_circuit.renderer import render_circuit, schematic_layout


class TestSchematicLayout:
    """Тесты расположения элементов."""
    
    def test_series_layout(self, series_circuit):
        layout = schematic_layout(series_circuit)
        
        assert len(layout["resistors"]) == 3
        assert len(layout["wires"]) == 1
        assert layout["battery"]["label"] == "12V"
        assert layout["resistors"][0]["label"] == "R1: 10Ω"
        assert [r["vertical"] for r in layout["resistors"]] == [False, True, False]
    
    def test_parallel_layout(self, parallel_circuit):
        layout = schematic_layout(parallel_circuit)
        
        assert len(layout["resistors"]) == 2
        assert all(r["vertical"] for r in layout["resistors"])
        assert len(layout["wires"]) == 2  # Контур и перемычка
    
    def test_combination_layout(self, combination_circuit):
        """Один последовательный резистор на контуре и два параллельных."""
        layout = schematic_layout(combination_circuit)
        resistors = layout["resistors"]
        
        assert not resistors[0]["vertical"]
        assert resistors[1]["vertical"] and resistors[2]["vertical"]
        assert resistors[1]["x"] != resistors[2]["x"]
        assert len(layout["wires"]) == 2


class TestRenderCircuit:
    """Тесты сохранения PNG."""
    
    def test_render_to_file(self, combination_circuit, tmp_path):
        path = tmp_path / "schematic.png"
        fig = render_circuit(combination_circuit, str(path))
        try:
            assert path.exists()
            assert path.stat().st_size > 0
        finally:
            plt.close(fig)
    
    def test_render_without_file(self, parallel_circuit):
        fig = render_circuit(parallel_circuit)
        try:
            texts = [t.get_text() for t in fig.axes[0].texts]
            assert "R1: 10Ω" in texts
            assert "10V" in texts
        finally:
            plt.close(fig)
