from calculator_engine import CalculatorEngine, EvaluationError
from formula_evaluator import evaluate, to_postfix
from formula_lexer import tokenize
from formula_tokens import format_tokens
import sys


def _fails(expr: str) -> bool:
	try:
		evaluate(expr)
	except EvaluationError:
		return True
	return False


def _value(expr: str):
	try:
		return evaluate(expr)
	except EvaluationError:
		return None


def inspect_expression(expr: str, *, digits: int = 6) -> None:
	"""Imprime tokens, orden postfijo y resultado de una expresión."""
	tokens = tokenize(expr)
	postfix = to_postfix(tokens)

	print("Expression inspection")
	print(f"expr:     {expr!r}")
	print(f"tokens:   {format_tokens(tokens) or '(none)'}")
	print(f"postfix:  {format_tokens(postfix) or '(none)'}")

	try:
		result = CalculatorEngine(display_digits=digits).evaluate(expr)
	except EvaluationError as exc:
		print(f"result:   FAIL ({exc})")
		return

	print(f"result:   {result}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	checks.append(("2+3 adds", _value("2+3") == 5))
	checks.append(("2+3*4 respects precedence", _value("2+3*4") == 14))
	checks.append(("(2+3)*4 parentheses override precedence", _value("(2+3)*4") == 20))
	checks.append(("2^3^2 is right-associative", _value("2^3^2") == 512))
	checks.append(("10-4-3 is left-associative", _value("10-4-3") == 3))
	checks.append(("8/4/2 is left-associative", _value("8/4/2") == 1))

	checks.append(("10/0 fails", _fails("10/0")))
	checks.append(("empty input fails", _fails("")))
	checks.append(("whitespace-only input fails", _fails("   ")))
	checks.append(("1 2 fails with leftover operands", _fails("1 2")))
	checks.append(("lone + fails with missing operands", _fails("+")))
	checks.append(("leading minus is not unary", _fails("-3")))
	checks.append(("negative base with fractional exponent fails", _fails("(0-8)^0.5")))
	checks.append(("zero to a negative power fails", _fails("0^(0-1)")))
	checks.append(("overflowing power fails", _fails("10^400")))
	checks.append(("overlong literal cannot vanish under division", _fails("1/" + "9" * 400)))
	checks.append(("overlong literal cannot vanish under power", _fails("9" * 400 + "^0")))

	checks.append(("(1+2 drains stray left paren", _value("(1+2") == 3))
	checks.append(("1+2) ignores stray right paren", _value("1+2)") == 3))
	checks.append(("letters are dropped", _value("2a+b3") == 5))
	checks.append(("lone dot is skipped", _value(". 7") == 7))
	checks.append(("re-evaluation is idempotent", _value("1.5*(2+2)^2") == _value("1.5*(2+2)^2")))

	engine = CalculatorEngine()
	for expr, expected in (
		("1/3", "0.333333"),
		("2^0.5", "1.41421"),
		("1234567*10", "1.23457e+07"),
		("7/2", "3.5"),
		("6/2", "3"),
	):
		expected_actual.append((expr, expected, engine.evaluate(expr)))

	for expr, expected, actual in expected_actual:
		checks.append((f"{expr} displays as {expected}", expected == actual))

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "2^3^2"
	#   python regression_checks.py --inspect "1/3" --digits 12
	if "--inspect" in sys.argv:
		try:
			expr = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing expression after --inspect")

		def _read_int(flag: str, default: int) -> int:
			if flag not in sys.argv:
				return default
			idx = sys.argv.index(flag)
			try:
				return int(sys.argv[idx + 1])
			except (ValueError, IndexError):
				raise SystemExit(f"Invalid value for {flag}")

		inspect_expression(expr, digits=_read_int("--digits", 6))
	else:
		run_regressions()
