"""Рисование принципиальной схемы цепи через matplotlib.

Холст 500x300 с осью y вниз: батарея слева, резисторы на контуре
и на внутренней перемычке в зависимости от топологии.
"""

from typing import Any, Dict, List, Optional, Tuple

import matplotlib.pyplot as plt

from dc_circuit.circuit import Circuit, InvalidCircuitError, Topology

CANVAS_WIDTH = 500
CANVAS_HEIGHT = 300

BACKGROUND_COLOR = "#0f172a"
WIRE_COLOR = "#475569"
RESISTOR_COLOR = "white"
BATTERY_COLOR = "#ff0000"

# Внешний контур общий для всех схем
_LOOP = [(100, 50), (400, 50), (400, 250), (100, 250), (100, 50)]

# Зигзаг резистора относительно его центра
_ZIGZAG = [(-20, 0), (-15, -10), (-5, 10), (5, -10), (15, 10), (20, 0)]

# Позиции резисторов: (x, y, вертикально)
_RESISTOR_SLOTS = {
    Topology.SERIES: [(250, 50, False), (400, 150, True), (250, 250, False)],
    Topology.PARALLEL: [(250, 150, True), (400, 150, True)],
    Topology.COMBINATION: [(200, 50, False), (300, 150, True), (400, 150, True)],
}

# Внутренние перемычки (параллельные ветви)
_BRANCH_WIRES = {
    Topology.SERIES: [],
    Topology.PARALLEL: [[(250, 50), (250, 250)]],
    Topology.COMBINATION: [[(300, 50), (300, 250)]],
}


def schematic_layout(circuit: Circuit) -> Dict[str, Any]:
    """Расположение элементов схемы.

    Returns:
        Словарь с ключами battery (x, y, voltage), resistors (список позиций
        с подписью) и wires (ломаные линии)
    """
    if circuit.topology not in _RESISTOR_SLOTS:
        raise InvalidCircuitError(f"Неизвестная топология: {circuit.topology!r}")

    slots = _RESISTOR_SLOTS[circuit.topology]
    resistors = []
    for (x, y, vertical), resistor in zip(slots, circuit.resistors):
        resistors.append({
            "id": resistor.id,
            "label": f"{resistor.label}: {resistor.resistance:g}Ω",
            "x": x,
            "y": y,
            "vertical": vertical,
        })

    return {
        "battery": {"x": 100, "y": 150, "label": f"{circuit.voltage:g}V"},
        "resistors": resistors,
        "wires": [list(_LOOP)] + [list(w) for w in _BRANCH_WIRES[circuit.topology]],
    }


def _zigzag_points(x: float, y: float, vertical: bool) -> Tuple[List[float], List[float]]:
    if vertical:
        # Поворот на 90 градусов: (dx, dy) -> (-dy, dx)
        points = [(x - dy, y + dx) for dx, dy in _ZIGZAG]
    else:
        points = [(x + dx, y + dy) for dx, dy in _ZIGZAG]
    xs, ys = zip(*points)
    return list(xs), list(ys)


def render_circuit(circuit: Circuit, output_path: Optional[str] = None):
    """Рисует схему и при необходимости сохраняет PNG.

    Закрывать фигуру (plt.close) должен вызывающий.
    """
    layout = schematic_layout(circuit)

    fig, ax = plt.subplots(figsize=(10, 6))
    fig.patch.set_facecolor(BACKGROUND_COLOR)
    ax.set_facecolor(BACKGROUND_COLOR)

    for wire in layout["wires"]:
        xs, ys = zip(*wire)
        ax.plot(xs, ys, color=WIRE_COLOR, linewidth=6, solid_capstyle="round", zorder=1)

    for resistor in layout["resistors"]:
        x, y, vertical = resistor["x"], resistor["y"], resistor["vertical"]
        # Разрыв провода под резистором
        if vertical:
            ax.plot([x, x], [y - 20, y + 20], color=BACKGROUND_COLOR, linewidth=8, zorder=2)
        else:
            ax.plot([x - 20, x + 20], [y, y], color=BACKGROUND_COLOR, linewidth=8, zorder=2)
        xs, ys = _zigzag_points(x, y, vertical)
        ax.plot(xs, ys, color=RESISTOR_COLOR, linewidth=3, zorder=3)

        text_x, text_y = (x + 30, y) if vertical else (x, y - 30)
        ax.text(text_x, text_y, resistor["label"], color=RESISTOR_COLOR, fontsize=14,
                fontweight="bold", ha="left" if vertical else "center", va="center", zorder=4)

    battery = layout["battery"]
    bx, by = battery["x"], battery["y"]
    ax.plot([bx, bx], [by - 25, by + 25], color=BACKGROUND_COLOR, linewidth=8, zorder=2)
    ax.plot([bx - 10, bx - 10], [by - 15, by + 15], color=BATTERY_COLOR, linewidth=5, zorder=3)
    ax.plot([bx + 10, bx + 10], [by - 25, by + 25], color=BATTERY_COLOR, linewidth=5, zorder=3)
    ax.text(bx, by + 50, battery["label"], color=BATTERY_COLOR, fontsize=16,
            fontweight="bold", ha="center", va="center", zorder=4)

    ax.set_xlim(0, CANVAS_WIDTH)
    ax.set_ylim(CANVAS_HEIGHT, 0)  # Ось y вниз, как на холсте
    ax.set_aspect("equal")
    ax.axis("off")
    fig.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, facecolor=fig.get_facecolor(), bbox_inches="tight")
        print(f"📊 Схема сохранена в {output_path}")

    return fig
