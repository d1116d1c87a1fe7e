"""Análisis léxico: convierte el texto de la expresión en tokens."""

import re

from formula_tokens import LeftParen, Number, Operator, RightParen

OPERATOR_SYMBOLS = "+-*/^"

# Parte entera, punto opcional y decimales opcionales. Sin signo ni exponente.
_NUMBER_RE = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")
_NUMBER_START = "0123456789."


def tokenize(expression: str) -> list:
    """Devuelve la lista de tokens de ``expression``.

    Nunca falla: los espacios se saltan y cualquier carácter no
    reconocido se descarta en silencio. Los errores de estructura
    aparecen más tarde, al evaluar.
    """
    tokens = []
    i = 0
    while i < len(expression):
        c = expression[i]

        if c.isspace():
            i += 1
            continue

        if c in _NUMBER_START:
            match = _NUMBER_RE.match(expression, i)
            if match is None:
                # Un '.' aislado no forma número
                i += 1
                continue
            tokens.append(Number(float(match.group())))
            i = match.end()
            continue

        if c in OPERATOR_SYMBOLS:
            tokens.append(Operator(c))
        elif c == "(":
            tokens.append(LeftParen())
        elif c == ")":
            tokens.append(RightParen())
        i += 1

    return tokens
