"""Модуль задач по цепям постоянного тока.

Содержит классы для генерации, решения и проверки задач на эквивалентное
сопротивление и общий ток.
"""

from dc_circuit.circuit import (
    Circuit,
    InvalidCircuitError,
    Resistor,
    SolvedResult,
    Target,
    Topology,
)
from dc_circuit.solver import CircuitSolver, solve
from dc_circuit.generator import CircuitGenerator, generate_problem
from dc_circuit.verifier import DCCircuitVerifier, check_answer
from dc_circuit.prompt import create_question_prompt, create_tutor_prompt
from dc_circuit.tutor import TutorClient
from dc_circuit.game import DCCircuitGame

__all__ = [
    "Circuit",
    "InvalidCircuitError",
    "Resistor",
    "SolvedResult",
    "Target",
    "Topology",
    "CircuitSolver",
    "solve",
    "CircuitGenerator",
    "generate_problem",
    "DCCircuitVerifier",
    "check_answer",
    "create_question_prompt",
    "create_tutor_prompt",
    "TutorClient",
    "DCCircuitGame",
]
