from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import TYPE_CHECKING, Any, Dict, List
from .base import BaseFrame

if TYPE_CHECKING:
    from ..app import BlackjackAdvisorGUI

COLUMNS = (
    ("datetime", "Saved", 170),
    ("gamesPlayed", "Games", 60),
    ("wins", "Wins", 50),
    ("losses", "Losses", 60),
    ("pushes", "Pushes", 60),
    ("winRate", "Win %", 60),
    ("totalProfit", "Profit", 90),
)


class HistoryFrame(BaseFrame):
    """Archived session snapshots with delete, clear, export and import."""

    def _setup_ui(self):
        self.summary_var = tk.StringVar(value="No saved sessions")
        ttk.Label(self, textvariable=self.summary_var).pack(anchor="w", pady=(0, 4))

        self.tree = ttk.Treeview(self, columns=[c for c, _, _ in COLUMNS], show="headings", height=10)
        for key, heading, width in COLUMNS:
            self.tree.heading(key, text=heading)
            self.tree.column(key, width=width, anchor="e" if key != "datetime" else "w")
        self.tree.pack(fill="both", expand=True)

        ctrl = ttk.Frame(self)
        ctrl.pack(fill="x", pady=4)
        ttk.Button(ctrl, text="Refresh", command=self.app.load_history).pack(side="left", padx=2)
        ttk.Button(ctrl, text="Delete Selected", command=self._delete_selected).pack(side="left", padx=2)
        ttk.Button(ctrl, text="Clear All", command=self.app.clear_history).pack(side="left", padx=2)
        ttk.Button(ctrl, text="Import...", command=self.app.import_history).pack(side="right", padx=2)
        ttk.Button(ctrl, text="Export...", command=self.app.export_history).pack(side="right", padx=2)

    def _delete_selected(self):
        for item in self.tree.selection():
            self.app.delete_history_record(int(item))

    def show(self, records: List[Dict[str, Any]], summary: Dict[str, Any]) -> None:
        self.tree.delete(*self.tree.get_children())
        for r in records:
            values = []
            for key, _, _ in COLUMNS:
                value = r.get(key, "")
                if key == "totalProfit" and isinstance(value, (int, float)):
                    value = f"{value:+,.2f}"
                elif key == "winRate":
                    value = f"{value}%"
                values.append(value)
            self.tree.insert("", tk.END, iid=str(r.get("id")), values=values)

        if summary["totalRecords"]:
            self.summary_var.set(
                f"{summary['totalRecords']} sessions | {summary['totalGames']} games | "
                f"Win rate: {summary['overallWinRate']}% | Profit: ${summary['totalProfit']:,.2f} | "
                f"{summary['oldestRecord']} - {summary['newestRecord']}")
        else:
            self.summary_var.set("No saved sessions")
