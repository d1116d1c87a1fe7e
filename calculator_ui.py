"""
Interfaz gráfica de la calculadora.

Usa tkinter. La interfaz solo enruta botones y teclas hacia un
ExpressionBuffer y muestra su contenido; toda la lógica de edición y
evaluación vive fuera de aquí.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from expression_buffer import ExpressionBuffer

logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════
#  Widget: campo de expresión con scroll lateral
# ═════════════════════════════════════════════════════════════════

class ExpressionDisplay:
    """Entry de solo lectura que siempre enseña el final del texto."""

    SCROLL_UNITS = 1        # caracteres por pulsación de flecha

    def __init__(self, parent, **kw):
        self._var = tk.StringVar(value="")
        self._entry = tk.Entry(parent, textvariable=self._var,
                               state="readonly", **kw)

    @property
    def widget(self):
        return self._entry

    def set_text(self, text: str):
        self._var.set(text)
        self._entry.after(0, self._scroll_to_end)

    def get_text(self) -> str:
        return self._var.get()

    def scroll(self, direction: int):
        self._entry.xview_scroll(direction * self.SCROLL_UNITS, "units")

    def _scroll_to_end(self):
        self._entry.icursor(tk.END)
        self._entry.xview_moveto(1.0)


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E1E",
        "display_bg": "#323232",
        "display_fg": "#FFFFFF",
        "num":        "#505050",
        "num_fg":     "#C8C8C8",
        "op":         "#505050",
        "op_fg":      "#C8C8C8",
        "special":    "#969696",
        "special_fg": "#1E1E1E",
        "equals":     "#969696",
        "equals_fg":  "#1E1E1E",
    }

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  tipo_color: "num", "op", "special", "equals"

    KEYPAD = [
        [("1", "insert:1", "num"), ("2", "insert:2", "num"),
         ("3", "insert:3", "num"), ("/", "insert:/", "op")],

        [("4", "insert:4", "num"), ("5", "insert:5", "num"),
         ("6", "insert:6", "num"), ("x", "insert:*", "op")],

        [("7", "insert:7", "num"), ("8", "insert:8", "num"),
         ("9", "insert:9", "num"), ("-", "insert:-", "op")],

        [("0", "insert:0", "num"), ("(", "insert:(", "op"),
         (")", "insert:)", "op"),  (".", "insert:.", "num")],

        [("+", "insert:+", "op"),  ("C", "clear", "special"),
         ("=", "equals", "equals"), ("^", "insert:^", "op")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Wumbo Calculator")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.buffer = ExpressionBuffer(engine)

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()

        self.root.focus_set()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_display = tkfont.Font(family="DejaVu Sans Mono", size=22)
        self._f_btn     = tkfont.Font(family="DejaVu Sans", size=18)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["bg"], padx=20, pady=40)
        frame.pack(fill="x")

        self.display = ExpressionDisplay(
            frame,
            font=self._f_display, fg=self.C["display_fg"],
            readonlybackground=self.C["display_bg"],
            relief="flat", bd=0, takefocus=0,
        )
        self.display.widget.pack(fill="x", ipady=12)

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=14, pady=(0, 14))

        cols = max(len(row) for row in self.KEYPAD)
        for c in range(cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            for c, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    takefocus=0,
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=c, sticky="nsew", padx=5, pady=5)

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Return>", lambda _e: self._on_key("equals"))
        self.root.bind("<KP_Enter>", lambda _e: self._on_key("equals"))
        self.root.bind("<BackSpace>", lambda _e: self._on_key("backspace"))
        self.root.bind("<Escape>", lambda _e: self.root.destroy())
        self.root.bind("<Left>", lambda _e: self.display.scroll(-1))
        self.root.bind("<Right>", lambda _e: self.display.scroll(1))
        self.root.bind("<Key>", self._on_text_input)

    # ── Acciones ─────────────────────────────────────────────────

    def _on_text_input(self, event):
        if event.char and self.buffer.append(event.char):
            self._refresh()

    def _on_key(self, action: str):
        if action == "clear":
            self.buffer.clear()
        elif action == "backspace":
            self.buffer.backspace()
        elif action == "equals":
            if not self.buffer.submit():
                logger.debug("No se pudo evaluar la expresión; campo vaciado")
        elif action.startswith("insert:"):
            self.buffer.append(action[7:])
        self._refresh()

    def _refresh(self):
        self.display.set_text(self.buffer.text)
