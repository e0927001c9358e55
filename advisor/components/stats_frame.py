from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import TYPE_CHECKING
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure
from .base import BaseFrame
from ..theme import Theme

if TYPE_CHECKING:
    from ..app import BlackjackAdvisorGUI

OUTCOME_BARS = (("Wins", "wins", "#2e8b57"), ("Losses", "losses", "#e55353"), ("Pushes", "pushes", "#f6c945"))


class StatsFrame(BaseFrame):
    def _setup_ui(self):
        header = ttk.Frame(self)
        header.pack(fill="x")

        self.summary_var = tk.StringVar(value="Games: 0 | Win rate: 0.0% | Net: $0.00")
        ttk.Label(header, textvariable=self.summary_var).pack(side="left")

        ttk.Button(header, text="Save & Reset", command=self.app.reset_stats).pack(side="right", padx=4)

        self.fig = Figure(figsize=(7, 3), dpi=100)
        self.fig.patch.set_facecolor(Theme.PANEL_BG)
        grid = self.fig.add_gridspec(2, 3)
        self.ax_net = self.fig.add_subplot(grid[0, :2])
        self.ax_win = self.fig.add_subplot(grid[1, :2], sharex=self.ax_net)
        self.ax_outcomes = self.fig.add_subplot(grid[:, 2])

        self.canvas = FigureCanvasTkAgg(self.fig, master=self)
        self.canvas.get_tk_widget().pack(fill="both", expand=True, pady=4)
        self.canvas.get_tk_widget().configure(bg=Theme.PANEL_BG)

    def _reset_axis(self, ax, label: str) -> None:
        ax.clear()
        ax.set_facecolor(Theme.DARK_BG)
        ax.set_ylabel(label, color=Theme.TEXT_COLOR)
        ax.tick_params(colors=Theme.TEXT_COLOR, labelsize=8)
        ax.grid(color=Theme.AXIS_GRID, linestyle="--", linewidth=0.5, alpha=0.5)
        for spine in ax.spines.values():
            spine.set_color(Theme.TEXT_COLOR)

    def refresh(self):
        s = self.state.stats
        self.summary_var.set(f"Games: {s.games_played} | W/L/P: {s.wins}/{s.losses}/{s.pushes} | "
                             f"Win rate: {s.win_rate:.1f}% | Net: ${s.total_profit:,.2f} | "
                             f"Bankroll: ${self.state.bankroll:,.2f}")

        self._reset_axis(self.ax_net, "Net $")
        self._reset_axis(self.ax_win, "Win %")
        self._reset_axis(self.ax_outcomes, "Hands")

        if s.history:
            games = [point.get("game", i + 1) for i, point in enumerate(s.history)]
            profits = [point.get("profit", 0.0) for point in s.history]
            self.ax_net.plot(games, profits, color=Theme.PROFIT_LINE)
            self.ax_net.axhline(0, color=Theme.MUTED_TEXT, linewidth=0.8)
            self.ax_net.fill_between(games, profits, 0, where=[p < 0 for p in profits],
                                     color="#e55353", alpha=0.25, interpolate=True)
            self.ax_win.plot(games, [point.get("win_rate", 0.0) for point in s.history],
                             color=Theme.ACCENT_COLOR)
            self.ax_win.set_ylim(0, 100)

        labels = [label for label, _, _ in OUTCOME_BARS]
        counts = [getattr(s, attr) for _, attr, _ in OUTCOME_BARS]
        self.ax_outcomes.bar(labels, counts, color=[color for _, _, color in OUTCOME_BARS])

        self.fig.tight_layout()
        self.canvas.draw_idle()
