from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import TYPE_CHECKING, Dict, List
from .base import BaseFrame
from ..constants import RANKS
from ..hand_utils import HandUtils
from ..state import HandTarget

if TYPE_CHECKING:
    from ..app import BlackjackAdvisorGUI

class HandsFrame(BaseFrame):
    def _setup_ui(self):
        # Two columns: Player and Dealer
        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=1)
        self.listboxes: List[tk.Listbox] = []
        self._split_mode = None

        # --- Player Side ---
        p_frame = ttk.Frame(self)
        p_frame.grid(row=0, column=0, sticky="nsew", padx=5, pady=5)

        self.p_summary = tk.StringVar(value="Player: 0")
        ttk.Label(p_frame, textvariable=self.p_summary).pack(anchor="w")

        p_ctrl = ttk.Frame(p_frame)
        p_ctrl.pack(fill="x", pady=2)
        ttk.Button(p_ctrl, text="Split", command=self.app.split).pack(side="left", padx=2)
        ttk.Button(p_ctrl, text="Double", command=self.app.double_down).pack(side="left", padx=2)
        ttk.Button(p_ctrl, text="Clear Player",
                   command=lambda: self.app.clear_hand(HandTarget.player())).pack(side="left", padx=2)

        self.notebook = ttk.Notebook(p_frame)
        self.notebook.pack(fill="both", expand=True, pady=4)

        ttk.Label(p_frame, text="Click rank to add. Shift/Right-click removes.").pack(anchor="w")
        self.p_buttons = self._create_card_grid(p_frame, "player")

        # --- Dealer Side ---
        d_frame = ttk.Frame(self)
        d_frame.grid(row=0, column=1, sticky="nsew", padx=5, pady=5)

        self.d_summary = tk.StringVar(value="Dealer: 0")
        ttk.Label(d_frame, textvariable=self.d_summary).pack(anchor="w")

        self.d_listbox = tk.Listbox(d_frame, height=6)
        self.app.style_listbox(self.d_listbox)
        self.d_listbox.pack(fill="both", pady=4)

        d_ctrl = ttk.Frame(d_frame)
        d_ctrl.pack(fill="x", pady=2)
        ttk.Button(d_ctrl, text="Remove Selected",
                   command=lambda: self.app.remove_selected_card(HandTarget.dealer())).pack(fill="x", pady=1)
        ttk.Button(d_ctrl, text="Clear Dealer",
                   command=lambda: self.app.clear_hand(HandTarget.dealer())).pack(fill="x", pady=1)

        ttk.Label(d_frame, text="First card is up-card.").pack(anchor="w", pady=(6, 0))
        self.d_buttons = self._create_card_grid(d_frame, "dealer")

        # --- Typed entry ---
        entry_row = ttk.Frame(self)
        entry_row.grid(row=1, column=0, columnspan=2, sticky="ew", padx=5, pady=(0, 5))
        ttk.Label(entry_row, text="Cards (e.g. Kd 6h T):").pack(side="left")
        self.entry_var = tk.StringVar()
        entry = tk.Entry(entry_row, textvariable=self.entry_var, width=24)
        self.app.style_entry(entry)
        entry.pack(side="left", padx=4, fill="x", expand=True)
        entry.bind("<Return>", lambda e: self._submit_entry(HandTarget.player()))
        ttk.Button(entry_row, text="To Player",
                   command=lambda: self._submit_entry(HandTarget.player())).pack(side="left", padx=2)
        ttk.Button(entry_row, text="To Dealer",
                   command=lambda: self._submit_entry(HandTarget.dealer())).pack(side="left", padx=2)

    def _submit_entry(self, target: HandTarget):
        if self.app.enter_cards(target, self.entry_var.get()):
            self.entry_var.set("")

    def _create_card_grid(self, parent, side) -> Dict[str, tk.Button]:
        frame = ttk.Frame(parent)
        frame.pack(fill="x")
        buttons = {}
        for i, rank in enumerate(RANKS):
            btn = self.app.create_dark_button(frame, text="", width=5)
            row, col = divmod(i, 7)
            btn.grid(row=row, column=col, padx=2, pady=2, sticky="ew")

            btn.bind("<Button-1>", lambda e, r=rank, s=side: self.app.add_card(self._target(s), r))
            btn.bind("<Shift-Button-1>", lambda e, r=rank, s=side: self.app.remove_rank(self._removal_target(s), r))
            btn.bind("<Button-3>", lambda e, r=rank, s=side: self.app.remove_rank(self._removal_target(s), r))
            buttons[rank] = btn
            frame.columnconfigure(col, weight=1)
        return buttons

    def _target(self, side: str) -> HandTarget:
        # Player cards in a split round go to the next hand in line.
        return HandTarget.dealer() if side == "dealer" else HandTarget.player()

    def _removal_target(self, side: str) -> HandTarget:
        if side == "dealer":
            return HandTarget.dealer()
        if self.state.is_split:
            return HandTarget.split(self.active_split_index())
        return HandTarget.player()

    def active_split_index(self) -> int:
        try:
            return self.notebook.index("current")
        except tk.TclError:
            return 0

    def _player_hands(self) -> List[List[str]]:
        if self.state.is_split:
            return [h.cards for h in self.state.split_hands]
        return [self.state.player_cards]

    def _rebuild_tabs(self):
        for tab in self.notebook.tabs():
            self.notebook.forget(tab)
        self.listboxes = []

        count = len(self.state.split_hands) if self.state.is_split else 1
        for i in range(count):
            frame = ttk.Frame(self.notebook)
            frame.columnconfigure(0, weight=1)

            lb = tk.Listbox(frame, height=6)
            self.app.style_listbox(lb)
            lb.grid(row=0, column=0, sticky="nsew")

            ctrl = ttk.Frame(frame)
            ctrl.grid(row=1, column=0, sticky="ew", pady=2)
            if self.state.is_split:
                target = HandTarget.split(i)
                ttk.Button(ctrl, text="Clear",
                           command=lambda t=target: self.app.clear_hand(t)).pack(side="right")
                ttk.Button(ctrl, text="Remove Sel",
                           command=lambda t=target: self.app.remove_selected_card(t)).pack(side="right", padx=4)
                ttk.Button(ctrl, text="Double",
                           command=lambda idx=i: self.app.double_down_split(idx)).pack(side="left")
                for label, outcome in (("Win", "win"), ("Push", "push"), ("Loss", "loss"),
                                       ("Cash Out", "surrender")):
                    ttk.Button(ctrl, text=label,
                               command=lambda idx=i, o=outcome: self.app.record_split_result(idx, o)
                               ).pack(side="left", padx=1)
                title = f"Hand {i + 1}"
            else:
                ttk.Button(ctrl, text="Remove Sel",
                           command=lambda: self.app.remove_selected_card(HandTarget.player())).pack(side="right")
                title = "Hand"
            self.notebook.add(frame, text=title)
            self.listboxes.append(lb)

    def refresh(self):
        mode = (self.state.is_split, len(self.state.split_hands))
        if mode != self._split_mode or len(self.notebook.tabs()) != len(self.listboxes):
            self._rebuild_tabs()
            self._split_mode = mode

        self.refresh_listboxes()
        self.refresh_buttons()
        self.refresh_summaries()

    def refresh_listboxes(self):
        for lb, hand in zip(self.listboxes, self._player_hands()):
            lb.delete(0, tk.END)
            for card in hand:
                lb.insert(tk.END, card)

        self.d_listbox.delete(0, tk.END)
        for card in self.state.dealer_cards:
            self.d_listbox.insert(tk.END, card)

    def refresh_buttons(self):
        if self.state.is_split:
            idx = min(self.active_split_index(), len(self.state.split_hands) - 1)
            active_hand = self.state.split_hands[idx].cards
        else:
            active_hand = self.state.player_cards
        for rank, btn in self.p_buttons.items():
            btn.configure(text=f"{self.app.get_card_face(rank)}\n({active_hand.count(rank)})")

        for rank, btn in self.d_buttons.items():
            btn.configure(text=f"{self.app.get_card_face(rank)}\n({self.state.dealer_cards.count(rank)})")

    def refresh_summaries(self):
        if self.state.is_split:
            for i, hand in enumerate(self.state.split_hands):
                label = f"Hand {i + 1} ({HandUtils.describe(hand.cards)})"
                if hand.doubled:
                    label += " x2"
                if hand.result:
                    label += f" - {hand.result.value}"
                try:
                    self.notebook.tab(i, text=label)
                except tk.TclError:
                    pass
            self.p_summary.set(f"Split: {len(self.state.split_hands)} hands")
        else:
            cards = self.state.player_cards
            doubled = " (doubled)" if self.state.is_doubled else ""
            self.p_summary.set(f"Player: {HandUtils.describe(cards)} ({len(cards)} cards){doubled}")

        d_hand = self.state.dealer_cards
        self.d_summary.set(f"Dealer: {HandUtils.describe(d_hand)} ({len(d_hand)} cards)")
