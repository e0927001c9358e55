# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from typing import List, Optional

from . import betting, game_logic
from .components.counting_frame import CountingFrame
from .components.hands_frame import HandsFrame
from .components.history_frame import HistoryFrame
from .components.stats_frame import StatsFrame
from .components.strategy_frame import StrategyFrame
from .constants import CARD_ICONS, DECK_SIZE, HISTORY_FILE, STATE_FILE
from .counting import CardCounter
from .hand_utils import HandUtils
from .history import HistoryImportError, StatsHistoryStore
from .ledger import RoundLedger
from .persistence import load_state, save_state
from .state import GameState, HandKind, HandTarget
from .strategy import Recommendation, StrategyEngine
from .theme import Theme

log = logging.getLogger(__name__)


class BlackjackAdvisorGUI:
    def __init__(self, root: tk.Tk, state_file=STATE_FILE, history_file=HISTORY_FILE):
        self.root = root
        self.root.title("Blackjack Strategy Advisor")
        self.root.geometry("1000x820")

        self.state_file = state_file
        self.state: GameState = load_state(state_file)
        self.history = StatsHistoryStore(history_file)
        self.engine = StrategyEngine()
        self.use_suggested_var = tk.BooleanVar(value=False)

        self._apply_theme()
        self._build_main_ui()

        self.root.protocol("WM_DELETE_WINDOW", self.on_close)
        self.root.bind("<Button-2>", self.paste_cards)

        self.on_state_change()  # Initial refresh
        self.load_history()

    def _build_main_ui(self):
        tabs = ttk.Notebook(self.root)
        tabs.pack(fill="both", expand=True)

        # Scrollable play tab
        play_tab = ttk.Frame(tabs)
        tabs.add(play_tab, text="Play")
        canvas = tk.Canvas(play_tab, bg=Theme.DARK_BG, highlightthickness=0)
        scrollbar = ttk.Scrollbar(play_tab, orient="vertical", command=canvas.yview)
        scroll_frame = ttk.Frame(canvas)

        scroll_frame.bind("<Configure>", lambda e: canvas.configure(scrollregion=canvas.bbox("all")))
        window_id = canvas.create_window((0, 0), window=scroll_frame, anchor="nw")
        canvas.bind("<Configure>", lambda e: canvas.itemconfigure(window_id, width=e.width))
        canvas.configure(yscrollcommand=scrollbar.set)

        canvas.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")

        pad = {'padx': 10, 'pady': 5}

        sf = ttk.LabelFrame(scroll_frame, text="Strategy")
        sf.pack(fill="x", **pad)
        self.strategy_ui = StrategyFrame(sf, self)
        self.strategy_ui.pack(fill="both", expand=True)

        hf = ttk.LabelFrame(scroll_frame, text="Hands")
        hf.pack(fill="x", **pad)
        self.hands_ui = HandsFrame(hf, self)
        self.hands_ui.pack(fill="both", expand=True)

        cf = ttk.LabelFrame(scroll_frame, text="Count & Betting")
        cf.pack(fill="x", **pad)
        self.counting_ui = CountingFrame(cf, self)
        self.counting_ui.pack(fill="both", expand=True)

        self.status_var = tk.StringVar()
        tk.Label(scroll_frame, textvariable=self.status_var, fg="gray", bg=Theme.DARK_BG,
                 anchor="w").pack(fill="x", **pad)

        stf = ttk.LabelFrame(scroll_frame, text="Session Stats")
        stf.pack(fill="both", expand=True, **pad)
        self.stats_ui = StatsFrame(stf, self)
        self.stats_ui.pack(fill="both", expand=True)

        history_tab = ttk.Frame(tabs)
        tabs.add(history_tab, text="History")
        self.history_ui = HistoryFrame(history_tab, self)
        self.history_ui.pack(fill="both", expand=True, **pad)

        canvas.bind_all("<MouseWheel>", lambda e: canvas.yview_scroll(int(-1*(e.delta/120)), "units"))

    # --- THEME HELPERS ---
    def _apply_theme(self):
        self.root.configure(bg=Theme.DARK_BG)
        style = ttk.Style()
        if "clam" in style.theme_names():
            style.theme_use("clam")

        style.configure("TFrame", background=Theme.PANEL_BG)
        style.configure("TLabelframe", background=Theme.PANEL_BG, foreground=Theme.TEXT_COLOR)
        style.configure("TLabelframe.Label", background=Theme.PANEL_BG, foreground=Theme.TEXT_COLOR)
        style.configure("TLabel", background=Theme.PANEL_BG, foreground=Theme.TEXT_COLOR)
        style.configure("TButton", background=Theme.BUTTON_BG, foreground=Theme.TEXT_COLOR)
        style.map("TButton", background=[("active", Theme.BUTTON_ACTIVE_BG)])
        style.configure("TNotebook", background=Theme.PANEL_BG)
        style.configure("TCheckbutton", background=Theme.PANEL_BG, foreground=Theme.TEXT_COLOR)
        style.map("TCheckbutton", background=[("active", Theme.PANEL_BG)])
        style.configure("Treeview", background=Theme.PANEL_BG, fieldbackground=Theme.PANEL_BG,
                        foreground=Theme.TEXT_COLOR)

    def create_dark_button(self, parent, **kwargs):
        cnf = {
            "bg": Theme.BUTTON_BG, "fg": Theme.TEXT_COLOR,
            "activebackground": Theme.BUTTON_ACTIVE_BG, "activeforeground": Theme.TEXT_COLOR,
            "relief": tk.RAISED, "borderwidth": 1
        }
        cnf.update(kwargs)
        return tk.Button(parent, **cnf)

    def style_entry(self, widget: tk.Widget):
        widget.configure(bg=Theme.BUTTON_BG, fg=Theme.TEXT_COLOR, insertbackground=Theme.TEXT_COLOR,
                         highlightthickness=0, relief=tk.SOLID, borderwidth=1)

    def style_listbox(self, widget: tk.Listbox):
        widget.configure(bg=Theme.PANEL_BG, fg=Theme.TEXT_COLOR, selectbackground=Theme.ACCENT_COLOR,
                         highlightthickness=0, relief=tk.SOLID, borderwidth=1)

    # --- LOGIC ---

    def on_state_change(self):
        """Propagate state changes to all UI components and persist."""
        if not all(hasattr(self, name) for name in ("strategy_ui", "hands_ui", "counting_ui", "stats_ui")):
            return
        self.hands_ui.refresh()
        self.strategy_ui.refresh()
        self.counting_ui.refresh()
        self.stats_ui.refresh()
        self._save_state()

    def get_card_face(self, rank: str) -> str:
        return f"{CARD_ICONS.get(rank, '')} {rank}"

    def current_recommendation(self) -> Recommendation:
        cards = self.state.player_cards
        if self.state.is_split:
            idx = min(self.hands_ui.active_split_index(), len(self.state.split_hands) - 1)
            cards = self.state.split_hands[idx].cards
        return self.engine.recommend(cards, self.state.dealer_up_card, self.state.card_counting)

    def split_recommendations(self) -> List[Optional[Recommendation]]:
        recs = []
        for hand in self.state.split_hands:
            if hand.settled:
                recs.append(None)
            else:
                recs.append(self.engine.recommend(hand.cards, self.state.dealer_up_card,
                                                  self.state.card_counting))
        return recs

    def effective_bet(self) -> int:
        return betting.effective_bet(self.state, self.use_suggested_var.get())

    def _cards_for(self, target: HandTarget) -> List[str]:
        if target.kind is HandKind.DEALER:
            return self.state.dealer_cards
        if target.kind is HandKind.SPLIT and 0 <= target.index < len(self.state.split_hands):
            return self.state.split_hands[target.index].cards
        return self.state.player_cards

    def _listbox_for(self, target: HandTarget) -> Optional[tk.Listbox]:
        if target.kind is HandKind.DEALER:
            return self.hands_ui.d_listbox
        idx = target.index if target.kind is HandKind.SPLIT else 0
        return self.hands_ui.listboxes[idx] if idx < len(self.hands_ui.listboxes) else None

    def add_card(self, target: HandTarget, rank: str):
        game_logic.add_card(self.state, target, rank)
        self.on_state_change()

    def enter_cards(self, target: HandTarget, text: str) -> bool:
        """Add every card code in ``text`` to ``target``. Nothing is added if any code is unreadable."""
        ranks, rejected = HandUtils.parse_cards(text)
        if rejected:
            self.status_var.set(f"Unrecognised cards: {' '.join(rejected)}")
            return False
        if not ranks:
            return False
        for rank in ranks:
            game_logic.add_card(self.state, target, rank)
        self.status_var.set(f"Added {' '.join(ranks)}")
        self.on_state_change()
        return True

    def paste_cards(self, event=None):
        # Middle click pastes clipboard cards into the player hand; entries keep their own paste
        if event is not None and isinstance(event.widget, (tk.Entry, tk.Spinbox)):
            return
        try:
            text = self.root.clipboard_get()
        except tk.TclError:
            self.status_var.set("Clipboard is empty.")
            return
        self.enter_cards(HandTarget.player(), text)

    def remove_rank(self, target: HandTarget, rank: str):
        # Remove last instance
        cards = self._cards_for(target)
        for i in reversed(range(len(cards))):
            if cards[i] == rank:
                game_logic.remove_card(self.state, target, i)
                break
        self.on_state_change()

    def remove_selected_card(self, target: HandTarget):
        lb = self._listbox_for(target)
        if lb is None:
            return
        for i in reversed(lb.curselection()):
            game_logic.remove_card(self.state, target, i)
        self.on_state_change()

    def clear_hand(self, target: HandTarget):
        game_logic.clear_hand(self.state, target)
        self.on_state_change()

    def split(self):
        if not game_logic.split_hand(self.state):
            self.status_var.set("Only an unsplit pair can be split.")
        self.on_state_change()

    def double_down(self):
        if not game_logic.double_down(self.state):
            self.status_var.set("Double needs exactly two cards in an unsplit hand.")
        self.on_state_change()

    def double_down_split(self, hand_index: int):
        if not game_logic.double_down_split(self.state, hand_index):
            self.status_var.set(f"Hand {hand_index + 1} cannot be doubled.")
        self.on_state_change()

    def adjust_bet(self, amount: int):
        betting.adjust_bet(self.state, amount)
        self.on_state_change()

    def set_bet(self, amount: int):
        betting.set_bet(self.state, int(amount))

    def set_bankroll(self, amount: float):
        betting.set_bankroll(self.state, float(amount))

    def set_decks(self, decks: int):
        if decks < 1:
            return
        cc = self.state.card_counting
        cc.initial_decks = int(decks)
        cc.total_cards = cc.initial_decks * DECK_SIZE

    def reset_count(self):
        CardCounter.reset(self.state.card_counting)
        self.status_var.set("Count reset for a new shoe.")
        self.on_state_change()

    def _record(self, label: str, recorder, *args):
        profit_before = self.state.stats.total_profit
        recorder(self.state, *args)
        delta = self.state.stats.total_profit - profit_before
        self.status_var.set(f"Recorded {label}. Profit: {delta:+.2f}")
        self.on_state_change()

    def _single_hand_only(self) -> bool:
        if self.state.is_split:
            self.status_var.set("Record split hands individually.")
            return False
        return True

    def record_win(self):
        if self._single_hand_only():
            self._record("win", RoundLedger.record_win, self.effective_bet())

    def record_loss(self):
        if self._single_hand_only():
            self._record("loss", RoundLedger.record_loss, self.effective_bet())

    def record_push(self):
        if self._single_hand_only():
            self._record("push", RoundLedger.record_push)

    def record_surrender(self):
        if self._single_hand_only():
            self._record("surrender", RoundLedger.record_surrender, self.effective_bet())

    def record_split_result(self, hand_index: int, outcome: str):
        self._record(f"{outcome} for hand {hand_index + 1}", RoundLedger.record_split_result,
                     hand_index, outcome, self.effective_bet())

    def new_hand(self):
        game_logic.new_hand(self.state)
        self.on_state_change()

    def confirm_clear_all(self):
        if messagebox.askyesno("Reset", "Clear everything? Statistics are reset without saving to history."):
            game_logic.clear_all(self.state)
            self.use_suggested_var.set(False)
            self.on_state_change()

    def reset_stats(self):
        if not messagebox.askyesno("Reset", "Reset session stats? The current stats are saved to history."):
            return
        if self.state.stats.games_played > 0:
            try:
                self.history.add(self.state.stats)
            except (OSError, ValueError) as e:
                log.error("Failed to save statistics: %s", e)
                messagebox.showwarning("History", "Failed to save statistics to history. Stats will still be reset.")
        game_logic.reset_stats(self.state)
        self.on_state_change()
        self.load_history()

    # --- HISTORY ---
    def load_history(self):
        try:
            self.history_ui.show(self.history.list_records(), self.history.summary())
        except (OSError, ValueError) as e:
            log.error("Failed to read history from %s: %s", self.history.path, e)
            self.status_var.set(f"History unavailable: {e}")

    def delete_history_record(self, record_id: int):
        try:
            self.history.delete(record_id)
        except (OSError, ValueError) as e:
            log.error("Failed to delete history record %s: %s", record_id, e)
        self.load_history()

    def clear_history(self):
        if not messagebox.askyesno("History", "Delete all saved sessions?"):
            return
        try:
            self.history.clear()
        except (OSError, ValueError) as e:
            log.error("Failed to clear history: %s", e)
        self.load_history()

    def export_history(self):
        path = filedialog.asksaveasfilename(defaultextension=".json", filetypes=[("JSON", "*.json")])
        if not path:
            return
        try:
            count = self.history.export_to(path)
        except (OSError, ValueError) as e:
            messagebox.showerror("Export", f"Failed to export records: {e}")
            return
        self.status_var.set(f"Exported {count} records.")

    def import_history(self):
        path = filedialog.askopenfilename(filetypes=[("JSON", "*.json")])
        if not path:
            return
        try:
            count = self.history.import_from(path)
        except (OSError, HistoryImportError) as e:
            messagebox.showerror("Import", f"Failed to import records: {e}")
            return
        self.status_var.set(f"Imported {count} records.")
        self.load_history()

    # --- PERSISTENCE ---
    def _save_state(self):
        try:
            save_state(self.state, self.state_file)
        except OSError as e:
            log.error("Failed to save state: %s", e)

    def on_close(self):
        self._save_state()
        self.root.destroy()
