"""
Консольная версия DC Circuit Master

Основные функции:
- Генерация задачи выбранной топологии
- Проверка ответа
- Схема в PNG и объяснение AI-репетитора по запросу
"""

import argparse
import random
import sys
from pathlib import Path

# Добавляем текущую папку в путь
sys.path.append(str(Path(__file__).parent))

from dc_circuit.circuit import Topology
from dc_circuit.game import DCCircuitGame
from dc_circuit.prompt import describe_circuit
from dc_circuit.tutor import TutorClient
from config import CircuitConfig, VerifierConfig, TutorConfig


def show_problem(game: DCCircuitGame, render_path: str = None):
    """Показывает цепь и вопрос текущей задачи."""
    problem = game.problem
    print(f"\n--- {game.topology.value.upper()} ---")
    print(f"🔌 {describe_circuit(problem.circuit)}")
    print(f"❓ {problem.question}")

    if render_path:
        import matplotlib.pyplot as plt
        from dc_circuit.renderer import render_circuit

        fig = render_circuit(problem.circuit, render_path)
        plt.close(fig)


def show_feedback(game: DCCircuitGame, answer: str):
    """Проверяет ответ и печатает обратную связь."""
    feedback = game.submit_answer(answer)
    mark = "✅" if feedback.is_correct else "❌"
    print(f"{mark} {feedback.message}")


def show_explanation(game: DCCircuitGame):
    print("\n🤖 Объяснение репетитора:")
    print("=" * 60)
    print(game.request_explanation())
    print("=" * 60)


def interactive(game: DCCircuitGame, render_path: str = None):
    """Простой цикл: ответ, new, explain, series/parallel/combination, quit."""
    commands = "number | new | explain | series | parallel | combination | quit"
    show_problem(game, render_path)
    while True:
        try:
            unit = game.problem.target.unit
            line = input(f"\n[{commands}] ({unit}) > ").strip()
        except EOFError:
            break

        if line in ("quit", "exit", "q"):
            break
        if line == "new":
            game.new_problem()
            show_problem(game, render_path)
        elif line == "explain":
            show_explanation(game)
        elif line in {t.value for t in Topology}:
            game.select_topology(Topology(line))
            show_problem(game, render_path)
        elif line:
            show_feedback(game, line)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="DC Circuit Master: задачи на закон Ома")
    parser.add_argument("--topology", choices=[t.value for t in Topology], default=None,
                        help="Топология цепи (по умолчанию из CircuitConfig)")
    parser.add_argument("--seed", type=int, default=None, help="Seed для воспроизводимости")
    parser.add_argument("--answer", default=None, help="Проверить этот ответ")
    parser.add_argument("--render", default=None, metavar="PATH", help="Сохранить схему в PNG")
    parser.add_argument("--explain", action="store_true", help="Запросить объяснение у репетитора")
    parser.add_argument("--tutor-url", default=None, help="URL OpenAI-совместимого API")
    parser.add_argument("--interactive", action="store_true", help="Интерактивный режим")
    return parser.parse_args(argv)


def main(argv=None):
    """Главная функция консольной версии."""
    args = parse_args(argv)

    circuit_config = CircuitConfig()
    tutor_config = TutorConfig(api_url=args.tutor_url) if args.tutor_url else TutorConfig()
    topology = Topology(args.topology) if args.topology else None

    tutor = TutorClient(tutor_config)
    game = DCCircuitGame(
        circuit_config,
        VerifierConfig(),
        tutor=tutor,
        rng=random.Random(args.seed),
        topology=topology
    )

    try:
        game.new_problem()

        if args.interactive:
            interactive(game, args.render)
            return

        show_problem(game, args.render)
        if args.answer is not None:
            show_feedback(game, args.answer)
        if args.explain:
            show_explanation(game)
    finally:
        tutor.close()


if __name__ == "__main__":
    main()
