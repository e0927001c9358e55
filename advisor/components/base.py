from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..app import BlackjackAdvisorGUI
    from ..state import GameState

class BaseFrame(ttk.Frame):
    def __init__(self, master: tk.Widget, app: 'BlackjackAdvisorGUI', **kwargs: Any):
        super().__init__(master, **kwargs)
        self.app = app
        self._setup_ui()

    @property
    def state(self) -> 'GameState':
        # The app may swap in a freshly loaded state, so always read through it.
        return self.app.state

    def _setup_ui(self) -> None:
        raise NotImplementedError

    def refresh(self) -> None:
        """Called when state changes to update UI."""
        pass
