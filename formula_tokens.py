"""Tipos compartidos del motor de expresiones: tokens y error de evaluación."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class EvaluationError(ValueError):
    """La expresión no pudo evaluarse.

    Cubre división por cero, potencias sin resultado real, operandos
    faltantes o sobrantes y expresiones vacías. El mensaje solo sirve
    para el log: quien llama trata todos los fallos igual.
    """


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True)
class Operator:
    symbol: str

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class LeftParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class RightParen:
    def __str__(self) -> str:
        return ")"


Token = Union[Number, Operator, LeftParen, RightParen]


def format_tokens(tokens) -> str:
    """Representación compacta de una secuencia de tokens, separada por espacios."""
    return " ".join(str(tok) for tok in tokens)
