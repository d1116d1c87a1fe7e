"""Punto de entrada de la calculadora."""

import logging
import os
import tkinter as tk

from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp


DISPLAY_DIGITS = 6
WINDOW_GEOMETRY = "400x500"
LOG_LEVEL = os.environ.get("WUMBO_LOG_LEVEL", "WARNING").upper()


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    engine = CalculatorEngine(display_digits=DISPLAY_DIGITS)
    CalculatorApp(root, engine=engine)
    root.mainloop()


if __name__ == "__main__":
    main()
