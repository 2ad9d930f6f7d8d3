# apps/gui/grid.py
"""
Graphical grid for the solver (tkinter).

Layout:
- Top: scoring strategy selector (only enabled before the first attempt)
- Middle: one row of letter buttons per attempt; clicking a letter of the
  current row cycles grey -> yellow -> green
- Buttons beside the current row: Next, Undo, Not a word
- Bottom: Reset

Usage:
    python -m apps.gui.grid
"""

from __future__ import annotations

import tkinter as tk
from tkinter import messagebox, ttk

from wordler import Session, SessionState
from wordler.render import cell_color
from wordler.strategies import REGISTRY

BG = "#121213"
TEXT = "#ffffff"


class WordlerApp:
    def __init__(self, master: tk.Tk, session: Session):
        self.master = master
        self.session = session
        self.master.title("Wordler")
        self.master.configure(bg=BG)
        self.master.resizable(False, False)

        self.names = {self._strategy_name(sid): sid for sid in session.strategy_ids}
        self.strategy_var = tk.StringVar(value=session.strategy.name)

        top = tk.Frame(master, bg=BG)
        top.pack(fill=tk.X, padx=12, pady=(12, 6))
        tk.Label(top, text="Scoring function", bg=BG, fg=TEXT).pack(side=tk.LEFT)
        self.strategy_box = ttk.Combobox(top, textvariable=self.strategy_var,
                                         values=list(self.names), state="readonly", width=36)
        self.strategy_box.pack(side=tk.LEFT, padx=(8, 0))
        self.strategy_box.bind("<<ComboboxSelected>>", self._on_strategy)

        self.grid_frame = tk.Frame(master, bg=BG)
        self.grid_frame.pack(padx=12, pady=6)

        tk.Button(master, text="Reset", command=self._on_reset).pack(pady=(6, 12))

        self.redraw()

    def _strategy_name(self, strategy_id: str) -> str:
        return REGISTRY[strategy_id].name

    # ---- drawing ----

    def redraw(self) -> None:
        for child in self.grid_frame.winfo_children():
            child.destroy()

        locked = self.session.state is not SessionState.NO_ATTEMPTS
        self.strategy_box.configure(state="disabled" if locked else "readonly")
        self.strategy_var.set(self.session.strategy.name)

        rows = self.session.attempts
        for r, attempt in enumerate(rows):
            is_current = attempt is self.session.current
            for c, cell in enumerate(attempt):
                btn = tk.Button(
                    self.grid_frame, text=cell.letter, width=2,
                    font=("Courier", 18, "bold"),
                    bg=cell_color(cell), fg=TEXT, activebackground=cell_color(cell),
                    state=tk.NORMAL if is_current else tk.DISABLED,
                    disabledforeground=TEXT,
                    command=lambda pos=c: self._on_cell(pos),
                )
                btn.grid(row=r, column=c, padx=2, pady=2)
            if is_current:
                col = len(attempt)
                tk.Button(self.grid_frame, text="Next", command=self._on_next).grid(
                    row=r, column=col, padx=(8, 2))
                if self.session.history:
                    tk.Button(self.grid_frame, text="Undo", command=self._on_undo).grid(
                        row=r, column=col + 1, padx=2)
                tk.Button(self.grid_frame, text="Not a word", command=self._on_not_a_word).grid(
                    row=r, column=col + 2, padx=2)

        if self.session.state is SessionState.OUT_OF_CANDIDATES:
            tk.Label(self.grid_frame, text="I'm out of ideas", bg=BG, fg=TEXT).grid(
                row=len(rows), column=0, columnspan=self.session.word_length, pady=6)
            if self.session.history:
                tk.Button(self.grid_frame, text="Undo", command=self._on_undo).grid(
                    row=len(rows), column=self.session.word_length, padx=(8, 2))

    # ---- events ----

    def _on_cell(self, position: int) -> None:
        self.session.cycle(position)
        self.redraw()

    def _on_next(self) -> None:
        self.session.next()
        self.redraw()

    def _on_undo(self) -> None:
        self.session.undo()
        self.redraw()

    def _on_not_a_word(self) -> None:
        self.session.not_a_word()
        self.redraw()

    def _on_reset(self) -> None:
        self.session.reset()
        self.redraw()

    def _on_strategy(self, _event=None) -> None:
        sid = self.names[self.strategy_var.get()]
        if sid != self.session.strategy.id:
            self.session.set_strategy(sid)
        self.redraw()


def main():
    """Launch the solver window over the bundled dictionary."""
    root = tk.Tk()
    try:
        session = Session.default()
    except (FileNotFoundError, ValueError) as e:
        messagebox.showerror("Error", f"Failed to load the word list: {e}")
        root.destroy()
        return
    WordlerApp(root, session)
    root.mainloop()


if __name__ == "__main__":
    main()
