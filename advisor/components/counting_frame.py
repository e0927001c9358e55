from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import TYPE_CHECKING
from .base import BaseFrame
from ..counting import CardCounter
from ..theme import Theme

if TYPE_CHECKING:
    from ..app import BlackjackAdvisorGUI

class CountingFrame(BaseFrame):
    def _setup_ui(self):
        info = tk.Frame(self, bg=Theme.INFO_PANEL_BG)
        info.pack(fill="x", pady=(0, 4))

        self.cnt_var = tk.StringVar(value="Running: +0 | True: +0.0")
        self.bet_var = tk.StringVar(value="Suggested bet: 1x")
        tk.Label(info, textvariable=self.cnt_var, bg=Theme.INFO_PANEL_BG, fg=Theme.TEXT_COLOR,
                 anchor="w").pack(fill="x", padx=8, pady=2)
        self.bet_label = tk.Label(info, textvariable=self.bet_var, bg=Theme.INFO_PANEL_BG,
                                  fg=Theme.TEXT_COLOR, anchor="w")
        self.bet_label.pack(fill="x", padx=8, pady=2)

        row1 = ttk.Frame(self)
        row1.pack(fill="x", pady=4)

        def add_spin(parent, label, from_, to_, getter, setter, width=6, increment=1, is_float=False):
            ttk.Label(parent, text=label).pack(side="left", padx=(4, 2))
            var_type = tk.DoubleVar if is_float else tk.IntVar
            var = var_type(value=getter())

            def on_change(*_):
                try:
                    setter(var.get())
                except tk.TclError:
                    return
                self.app.on_state_change()
            var.trace_add("write", on_change)

            spin = tk.Spinbox(parent, from_=from_, to=to_, width=width,
                              increment=increment, textvariable=var)
            self.app.style_entry(spin)
            spin.pack(side="left", padx=2)
            return var

        self.decks_var = add_spin(row1, "Decks:", 1, 12,
                                  lambda: self.state.card_counting.initial_decks, self.app.set_decks)
        ttk.Button(row1, text="Recount", command=self.app.reset_count).pack(side="left", padx=8)

        row2 = ttk.Frame(self)
        row2.pack(fill="x", pady=4)
        ttk.Button(row2, text="-", width=3, command=lambda: self.app.adjust_bet(-1)).pack(side="left", padx=(4, 0))
        self.current_bet_var = add_spin(row2, "Bet:", 1, 100000,
                                        lambda: self.state.current_bet, self.app.set_bet)
        ttk.Button(row2, text="+", width=3, command=lambda: self.app.adjust_bet(1)).pack(side="left")
        ttk.Checkbutton(row2, text="Use suggested bet", variable=self.app.use_suggested_var,
                        command=self.app.on_state_change).pack(side="left", padx=8)
        self.bankroll_var = add_spin(row2, "Bankroll ($):", 0, 10000000,
                                     lambda: self.state.bankroll, self.app.set_bankroll,
                                     width=10, increment=50, is_float=True)

        # Round results
        res = ttk.Frame(self)
        res.pack(fill="x", pady=(8, 4))
        buttons = (
            ("Win", "#2e8b57", "#f7f7f7", "#3fa76e", self.app.record_win),
            ("Push", "#f6c945", "#1f1a00", "#ffd75a", self.app.record_push),
            ("Loss", "#e55353", "#ffffff", "#f06b6b", self.app.record_loss),
            ("Cash Out", "#ff9f43", "#1f1a00", "#ffb870", self.app.record_surrender),
        )
        for col, (text, bg, fg, active, command) in enumerate(buttons):
            tk.Button(res, text=text, bg=bg, fg=fg, activebackground=active, activeforeground=fg,
                      width=10, command=command).grid(row=0, column=col, padx=2, pady=2)

        ttk.Button(res, text="New Hand", command=self.app.new_hand).grid(row=0, column=4, padx=(12, 2))
        ttk.Button(res, text="Clear All", command=self.app.confirm_clear_all).grid(row=0, column=5, padx=2)

    def _sync(self, var: tk.Variable, value) -> None:
        try:
            if var.get() == value:
                return
        except tk.TclError:
            pass
        var.set(value)

    def refresh(self):
        cc = self.state.card_counting
        tc = CardCounter.true_count(cc)
        self.cnt_var.set(f"Running: {cc.running_count:+d} | True: {tc:+.1f} | "
                         f"Decks left: {CardCounter.decks_remaining(cc):.1f} | Dealt: {cc.cards_dealt}")

        suggestion = CardCounter.suggested_bet(tc)
        self.bet_var.set(f"Suggested bet: {suggestion.multiplier}x ({suggestion.label}) | "
                         f"Effective: ${self.app.effective_bet():.2f}")
        self.bet_label.configure(fg=Theme.TIER_COLORS[suggestion.tier.value])

        self._sync(self.decks_var, cc.initial_decks)
        self._sync(self.current_bet_var, self.state.current_bet)
        self._sync(self.bankroll_var, round(self.state.bankroll, 2))
