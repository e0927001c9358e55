from __future__ import annotations
import tkinter as tk
from typing import TYPE_CHECKING
from .base import BaseFrame
from ..theme import Theme

if TYPE_CHECKING:
    from ..app import BlackjackAdvisorGUI

class StrategyFrame(BaseFrame):
    def _setup_ui(self):
        # Recommended action - BIG
        ba_frame = tk.Frame(self, bg=Theme.BEST_ACTION_BG, highlightthickness=1,
                            highlightbackground=Theme.BEST_ACTION_BORDER)
        ba_frame.pack(fill="x", pady=(0, 6))

        self.action_var = tk.StringVar(value="Add cards to get recommendations")
        self.action_label = tk.Label(ba_frame, textvariable=self.action_var,
                                     font=("Segoe UI", 18, "bold"), bg=Theme.BEST_ACTION_BG,
                                     fg=Theme.ACCENT_COLOR, anchor="w", padx=10, pady=10)
        self.action_label.pack(fill="both")

        info = tk.Frame(self, bg=Theme.INFO_PANEL_BG)
        info.pack(fill="x", pady=(0, 4))

        self.details_var = tk.StringVar(value="")
        self.ins_var = tk.StringVar(value="")
        self.split_var = tk.StringVar(value="")

        tk.Label(info, textvariable=self.details_var, bg=Theme.INFO_PANEL_BG, fg=Theme.TEXT_COLOR,
                 anchor="w", justify="left").pack(fill="x", padx=8, pady=2)
        self.ins_label = tk.Label(info, textvariable=self.ins_var, bg=Theme.INFO_PANEL_BG,
                                  fg=Theme.TEXT_COLOR, anchor="w", justify="left",
                                  font=("Segoe UI", 11, "bold"))
        self.ins_label.pack(fill="x", padx=8, pady=2)
        tk.Label(info, textvariable=self.split_var, bg=Theme.INFO_PANEL_BG, fg=Theme.TEXT_COLOR,
                 anchor="w", justify="left").pack(fill="x", padx=8, pady=2)

    def refresh(self):
        rec = self.app.current_recommendation()
        self.action_var.set(rec.message)
        self.action_label.configure(fg=Theme.ACTION_COLORS.get(rec.action.value, Theme.ACCENT_COLOR))
        self.details_var.set(rec.details)

        if rec.insurance:
            self.ins_var.set(f"{rec.insurance.message}: {rec.insurance.details}")
            self.ins_label.configure(fg=Theme.ACTION_COLORS[rec.insurance.action.value])
        else:
            self.ins_var.set("")

        lines = []
        for i, split_rec in enumerate(self.app.split_recommendations()):
            if split_rec is None:
                result = self.state.split_hands[i].result
                lines.append(f"Hand {i + 1}: settled ({result.value})")
            else:
                lines.append(f"Hand {i + 1}: {split_rec.message} - {split_rec.details}")
        self.split_var.set("\n".join(lines))
