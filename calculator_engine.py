"""
Motor de cálculo de la calculadora.

Este módulo provee la clase CalculatorEngine, que evalúa expresiones
aritméticas y da formato al resultado para mostrarlo. Está diseñado
como módulo independiente de la interfaz gráfica.

Contrato de interfaz:
    - evaluate(expression: str) -> str
    - EvaluationError si la expresión no puede evaluarse
"""

from formula_evaluator import FormulaEvaluator
from formula_tokens import EvaluationError

__all__ = ["CalculatorEngine", "EvaluationError"]


class CalculatorEngine:
    """Evalúa expresiones con + - * / ^ y paréntesis."""

    def __init__(self, display_digits: int = 6):
        self._evaluator = FormulaEvaluator()
        self._display_digits = max(1, display_digits)

    @property
    def display_digits(self) -> int:
        return self._display_digits

    # ── Evaluación principal ─────────────────────────────────────

    def evaluate_value(self, expression: str) -> float:
        """Evalúa la expresión y devuelve el valor numérico sin formato."""
        return self._evaluator.evaluate(expression)

    def evaluate(self, expression: str) -> str:
        """Evalúa la expresión y devuelve el resultado como cadena.

        Raises:
            EvaluationError: expresión vacía o mal formada, división por
                cero o resultado no real.
        """
        return self.format_result(self.evaluate_value(expression))

    # ── Formato del resultado ────────────────────────────────────

    def format_result(self, value: float) -> str:
        return f"{value:.{self._display_digits}g}"
