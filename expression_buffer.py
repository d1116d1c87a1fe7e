"""Texto editable de la calculadora, independiente del toolkit gráfico."""

import logging

from calculator_engine import CalculatorEngine, EvaluationError

logger = logging.getLogger(__name__)


class ExpressionBuffer:
    """Acumula lo que el usuario teclea y lo sustituye por el resultado.

    La interfaz solo traduce botones y teclas a estas operaciones.
    """

    ALLOWED_CHARS = frozenset("0123456789+-*/.()^")

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else CalculatorEngine()
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    def append(self, char: str) -> bool:
        if char not in self.ALLOWED_CHARS:
            return False
        self._text += char
        return True

    def backspace(self):
        self._text = self._text[:-1]

    def clear(self):
        self._text = ""

    def submit(self) -> bool:
        """Evalúa el contenido; con éxito lo reemplaza por el resultado, si no lo vacía."""
        try:
            result = self.engine.evaluate(self._text)
        except EvaluationError as exc:
            logger.debug("Expresión descartada %r: %s", self._text, exc)
            self._text = ""
            return False

        logger.debug("%r = %s", self._text, result)
        self._text = result
        return True
