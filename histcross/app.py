"""The main window: title screen, level selection and the crossword screen."""

from __future__ import annotations

import argparse
import os
import tkinter as tk
from pathlib import Path
from tkinter import messagebox
from typing import Callable, Optional, Sequence

from histcross.crosswordview import CrosswordView
from histcross.fields import create_input_field
from histcross.loader import CrosswordLoadError, load_crossword

WINDOW_TITLE = "Исторический кроссворд"
WINDOW_SIZE = "800x600"
DEFAULT_DATA_DIR = Path("resources") / "data"
LEVELS = (
    (1, "Уровень 1: Легкий"),
    (2, "Уровень 2: Средний"),
    (3, "Уровень 3: Сложный"),
)


def level_path(level: int, data_dir: str | os.PathLike) -> Path:
    """Return the path of the JSON file for a level."""
    return Path(data_dir) / f"level{level}.json"


class LevelSelect(tk.Frame):
    """A screen with one button per difficulty level and a back button."""

    def __init__(
        self,
        master: tk.Misc,
        on_level_selected: Callable[[int], None],
        on_back: Callable[[], None],
    ) -> None:
        super().__init__(master)
        tk.Label(
            self,
            text="Выберите уровень сложности",
            font=("TkDefaultFont", 20, "bold"),
        ).pack(side=tk.TOP, fill=tk.X)
        for level, caption in LEVELS:
            tk.Button(
                self,
                text=caption,
                command=lambda level=level: on_level_selected(level),
            ).pack(side=tk.TOP, fill=tk.X)
        tk.Button(self, text="Назад", command=on_back).pack(
            side=tk.BOTTOM, fill=tk.X
        )


class MainWindow:
    """Switches between the title screen, level selection and a crossword."""

    def __init__(self, root: tk.Tk, data_dir: str | os.PathLike) -> None:
        self.root = root
        self.data_dir = Path(data_dir)
        root.title(WINDOW_TITLE)
        root.geometry(WINDOW_SIZE)

        self._current: Optional[tk.Frame] = None
        self._main_screen = self._build_main_screen()
        self._level_select = LevelSelect(
            root,
            on_level_selected=self.load_crossword,
            on_back=self.show_main_screen,
        )
        self._crossword_view: Optional[CrosswordView] = None
        self.show_main_screen()

    def _build_main_screen(self) -> tk.Frame:
        screen = tk.Frame(self.root)
        tk.Frame(screen).pack(fill=tk.BOTH, expand=True)
        tk.Label(
            screen, text=WINDOW_TITLE, font=("TkDefaultFont", 24, "bold")
        ).pack(fill=tk.X)
        tk.Frame(screen).pack(fill=tk.BOTH, expand=True)
        tk.Button(screen, text="Начать", command=self.show_level_select).pack(
            fill=tk.X
        )
        tk.Button(screen, text="Выход", command=self.root.destroy).pack(fill=tk.X)
        tk.Frame(screen).pack(fill=tk.BOTH, expand=True)
        return screen

    def _show(self, screen: tk.Frame) -> None:
        if self._current is not None and self._current is not screen:
            self._current.pack_forget()
        screen.pack(fill=tk.BOTH, expand=True)
        self._current = screen

    def show_main_screen(self) -> None:
        """Show the title screen."""
        self._show(self._main_screen)

    def show_level_select(self) -> None:
        """Show the level selection screen."""
        self._show(self._level_select)

    def load_crossword(self, level: int) -> None:
        """Load a level and show it, or warn if it cannot be loaded."""
        try:
            crossword = load_crossword(level_path(level, self.data_dir))
        except CrosswordLoadError:
            messagebox.showwarning(
                "Ошибка", "Не удалось загрузить кроссворд", parent=self.root
            )
            return

        if self._crossword_view is not None:
            if self._current is self._crossword_view:
                self._current = None
            self._crossword_view.destroy()

        self._crossword_view = CrosswordView(
            self.root,
            crossword,
            field_factory=create_input_field,
            on_back=self.show_level_select,
        )
        self._show(self._crossword_view)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the crossword game window."""
    parser = argparse.ArgumentParser(prog="histcross", description=WINDOW_TITLE)
    parser.add_argument(
        "data_dir",
        nargs="?",
        default=str(DEFAULT_DATA_DIR),
        help="directory holding level1.json, level2.json and level3.json",
    )
    args = parser.parse_args(argv)
    root = tk.Tk()
    MainWindow(root, args.data_dir)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())