from dc_circuit.circuit import Circuit, SolvedResult, Target, Topology

_TOPOLOGY_NAMES = {
    Topology.SERIES: "SERIES",
    Topology.PARALLEL: "PARALLEL",
    Topology.COMBINATION: "COMBINATION",
}

_QUESTION_LABELS = {
    Target.EQUIVALENT_RESISTANCE: "RESISTANCE (Ω)",
    Target.TOTAL_CURRENT: "CURRENT (A)",
    Target.VOLTAGE: "VOLTAGE (V)",
}


def create_question_prompt(target: Target) -> str:
    """
    Создает текст вопроса для ученика

    Args:
        target: Искомая величина

    Returns:
        Вопрос на английском языке
    """
    return f"Analyze the circuit. What is the TOTAL {_QUESTION_LABELS[target]} of the entire system?"


def describe_circuit(circuit: Circuit) -> str:
    """Однострочное описание цепи для консоли"""
    resistor_list = ", ".join(f"{r.label}={r.resistance:g}Ω" for r in circuit.resistors)

    if circuit.topology is Topology.SERIES:
        return f"Series circuit with battery V={circuit.voltage:g}V and resistors: {resistor_list}"
    if circuit.topology is Topology.PARALLEL:
        return f"Parallel circuit with battery V={circuit.voltage:g}V and resistors: {resistor_list}"
    head, *pair = circuit.labels
    return (
        f"Combination circuit with battery V={circuit.voltage:g}V and resistors: {resistor_list} "
        f"({head} in series with {' || '.join(pair)})"
    )


def create_tutor_prompt(circuit: Circuit, result: SolvedResult, target: Target) -> str:
    """
    Создает промпт для AI-репетитора

    Ответ репетитора не разбирается и не проверяется: это текст для показа.

    Args:
        circuit: Цепь текущей задачи
        result: Правильные значения
        target: Искомая величина

    Returns:
        Промпт на английском языке с четырьмя шагами решения
    """
    resistor_list = ", ".join(f"{r.label}={r.resistance:g}Ω" for r in circuit.resistors)

    prompt = f"""The student needs help finding the TOTAL {target.value.upper()} for this {_TOPOLOGY_NAMES[circuit.topology]} circuit.

CIRCUIT PARAMETERS:
- Battery: {circuit.voltage:g}V
- Resistors: {resistor_list}
- Calculated Total Resistance (Req): {result.total_resistance:.2f}Ω
- Calculated Total Current (Itot): {result.total_current:.2f}A

Please provide the solution in exactly 4 numbered steps:
1. GIVEN: List the known values relevant to the problem.
2. FORMULA: State the specific physics formula used (e.g., Ohm's Law or Resistance combination).
3. CALCULATION: Show the simple math of plugging the numbers in.
4. RESULT: The final answer with units.

Keep the language very simple, like a high school tutor. Avoid complex markdown, just use basic text and numbers."""

    return prompt
