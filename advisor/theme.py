# -*- coding: utf-8 -*-
"""Theme constants."""

class Theme:
    DARK_BG = "#1e1e1e"
    PANEL_BG = "#252526"
    BUTTON_BG = "#3a3d41"
    BUTTON_ACTIVE_BG = "#005a9e"
    TEXT_COLOR = "#f3f3f3"
    MUTED_TEXT = "#9aa0a6"
    ACCENT_COLOR = "#0a84ff"
    BEST_ACTION_BG = "#111a2c"
    BEST_ACTION_BORDER = "#1f6feb"
    INFO_PANEL_BG = "#1b2233"
    ACTION_COLORS = {
        "stand": "#f6c945",
        "hit": "#4caf50",
        "double": "#3ea4ff",
        "split": "#b388ff",
        "surrender": "#ff9f43",
        "blackjack": "#f6c945",
        "bust": "#e55353",
        "insurance": "#3ea4ff",
        "no-insurance": "#e57373",
        "wait": "#c2c8d3",
    }
    TIER_COLORS = {
        "negative": "#e57373",
        "low": "#f6c945",
        "slightly positive": "#a5d6a7",
        "positive": "#81c784",
        "good": "#66bb6a",
        "very good": "#43a047",
        "excellent": "#2e7d32",
    }
    PROFIT_LINE = "#66ff99"
    AXIS_GRID = "#444444"
