"""Модуль реализации игры по анализу DC цепей.

Содержит класс DCCircuitGame: сессия ученика с текущей задачей, ответом,
обратной связью и объяснением репетитора.
"""

import random
from typing import Optional

from base.game import Game
from base.data import Problem
from base.verifier import Feedback
from dc_circuit.circuit import Topology
from dc_circuit.generator import CircuitGenerator
from dc_circuit.solver import CircuitSolver
from dc_circuit.verifier import DCCircuitVerifier
from dc_circuit.prompt import create_question_prompt
from dc_circuit.tutor import TutorClient
from config import CircuitConfig, VerifierConfig


class DCCircuitGame(Game):
    """Игра для анализа цепей постоянного тока.
    
    Задача заменяется целиком при запросе новой задачи или смене топологии,
    вместе с ней сбрасываются ответ, обратная связь и объяснение.
    
    Attributes:
        generator: Генератор задач
        solver: Решатель цепей
        tutor: Клиент AI-репетитора (опционально)
        topology: Выбранная топология
        user_answer: Последний введенный ответ
        feedback: Результат последней проверки
        explanation: Последнее объяснение репетитора
    """
    
    def __init__(
        self,
        config: CircuitConfig = None,
        verifier_config: VerifierConfig = None,
        tutor: Optional[TutorClient] = None,
        rng: Optional[random.Random] = None,
        topology: Optional[Topology] = None
    ) -> None:
        verifier_config = verifier_config or VerifierConfig()
        super().__init__("DC Circuit Master", lambda: DCCircuitVerifier(verifier_config))
        self.config = config or CircuitConfig()
        self.verifier_config = verifier_config
        self.solver: CircuitSolver = CircuitSolver()
        self.generator: CircuitGenerator = CircuitGenerator(self.config, self.solver)
        self.tutor = tutor
        self.rng = rng or random.Random()
        self.topology: Topology = topology or Topology(self.config.default_topology)

        self.user_answer: str = ""
        self.feedback: Optional[Feedback] = None
        self.explanation: str = ""
    
    def new_problem(self) -> Problem:
        """Генерирует новую задачу для выбранной топологии.
        
        Returns:
            Новый объект Problem
        """
        circuit, result, target = self.generator.generate_problem(self.topology, self.rng)
        self.problem = Problem(
            circuit=circuit,
            result=result,
            target=target,
            question=create_question_prompt(target)
        )
        self._reset_round()
        return self.problem
    
    def select_topology(self, topology: Topology) -> Problem:
        """Меняет топологию и сразу выдает новую задачу."""
        self.topology = topology
        return self.new_problem()
    
    def submit_answer(self, submitted_text: str) -> Feedback:
        """Проверяет ответ ученика и запоминает обратную связь.
        
        Args:
            submitted_text: Введенный учеником текст
        
        Returns:
            Feedback с флагом правильности и сообщением
        """
        self.feedback = self.verify(submitted_text)
        self.user_answer = submitted_text
        return self.feedback
    
    def request_explanation(self) -> str:
        """Запрашивает объяснение у репетитора для текущей задачи."""
        if self.problem is None:
            self.new_problem()
        if self.tutor is None:
            self.tutor = TutorClient()

        self.explanation = self.tutor.explain(
            self.problem.circuit, self.problem.result, self.problem.target
        )
        return self.explanation
    
    @property
    def question(self) -> str:
        if self.problem is None:
            self.new_problem()
        return self.problem.question
    
    def _reset_round(self) -> None:
        self.user_answer = ""
        self.feedback = None
        self.explanation = ""
