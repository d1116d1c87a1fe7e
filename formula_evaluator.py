"""Conversión a notación postfija y evaluación de expresiones para la calculadora."""

import logging
import math

from formula_lexer import tokenize
from formula_tokens import EvaluationError, LeftParen, Number, Operator, RightParen

logger = logging.getLogger(__name__)

PRECEDENCE = {
    "^": 4,
    "*": 3,
    "/": 3,
    "+": 2,
    "-": 2,
}
RIGHT_ASSOCIATIVE = {"^"}


def precedence(symbol: str) -> int:
    return PRECEDENCE.get(symbol, 0)


def to_postfix(tokens) -> list:
    """Reordena tokens infijos en notación postfija (algoritmo shunting-yard).

    No rechaza entradas mal formadas: un ')' sin pareja se ignora y un
    '(' sin cerrar acaba en la salida al vaciar la pila.
    """
    output = []
    ops = []

    for tok in tokens:
        if isinstance(tok, Number):
            output.append(tok)
        elif isinstance(tok, Operator):
            while ops and isinstance(ops[-1], Operator):
                top = precedence(ops[-1].symbol)
                current = precedence(tok.symbol)
                if top > current or (
                    top == current and tok.symbol not in RIGHT_ASSOCIATIVE
                ):
                    output.append(ops.pop())
                else:
                    break
            ops.append(tok)
        elif isinstance(tok, LeftParen):
            ops.append(tok)
        elif isinstance(tok, RightParen):
            while ops and not isinstance(ops[-1], LeftParen):
                output.append(ops.pop())
            if ops:
                ops.pop()

    while ops:
        output.append(ops.pop())
    return output


def apply_operator(a: float, b: float, symbol: str) -> float:
    """Calcula ``a symbol b``; solo devuelve resultados finitos.

    Raises:
        EvaluationError: división por cero, potencia sin resultado real
            o desbordamiento, también si algún operando no es finito.
    """
    if not (math.isfinite(a) and math.isfinite(b)):
        raise EvaluationError("Operando no finito")

    if symbol == "+":
        result = a + b
    elif symbol == "-":
        result = a - b
    elif symbol == "*":
        result = a * b
    elif symbol == "/":
        if b == 0:
            raise EvaluationError("División por cero")
        result = a / b
    elif symbol == "^":
        try:
            result = math.pow(a, b)
        except ValueError as exc:
            raise EvaluationError(f"Potencia sin resultado real: {a:g}^{b:g}") from exc
        except OverflowError as exc:
            raise EvaluationError("Resultado demasiado grande") from exc
    else:
        raise EvaluationError(f"Operador desconocido: {symbol}")

    if not math.isfinite(result):
        raise EvaluationError("Resultado no finito")
    return result


def eval_postfix(tokens) -> float:
    """Evalúa una secuencia postfija con una pila de valores.

    Raises:
        EvaluationError: faltan operandos, sobran operandos, la pila
            queda vacía o falla una operación.
    """
    stack = []

    for tok in tokens:
        if isinstance(tok, Number):
            # Un literal demasiado largo para un float llega como inf
            if not math.isfinite(tok.value):
                raise EvaluationError("Literal numérico fuera de rango")
            stack.append(tok.value)
        elif isinstance(tok, Operator):
            if len(stack) < 2:
                raise EvaluationError(f"Faltan operandos para '{tok.symbol}'")
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operator(a, b, tok.symbol))
        # Los paréntesis sin cerrar que quedaron en la salida se ignoran

    if not stack:
        raise EvaluationError("Expresión vacía")
    if len(stack) > 1:
        raise EvaluationError(f"Sobran operandos: {len(stack)} valores en la pila")

    result = stack[0]
    if not math.isfinite(result):
        raise EvaluationError("Resultado no finito")
    return result


class FormulaEvaluator:
    """Encadena las tres etapas: texto → tokens → postfija → número."""

    def evaluate(self, expression: str) -> float:
        tokens = tokenize(expression)
        postfix = to_postfix(tokens)
        try:
            return eval_postfix(postfix)
        except EvaluationError as exc:
            logger.debug("No se pudo evaluar %r: %s", expression, exc)
            raise


def evaluate(expression: str) -> float:
    """Evalúa ``expression`` y devuelve un ``float`` finito.

    Raises:
        EvaluationError: si la expresión no puede evaluarse.
    """
    return FormulaEvaluator().evaluate(expression)
