# -*- coding: utf-8 -*-
"""Interactive Blackjack strategy advisor."""

from __future__ import annotations

import logging
import tkinter as tk

from advisor.app import BlackjackAdvisorGUI


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root = tk.Tk()
    BlackjackAdvisorGUI(root)
    root.mainloop()


if __name__ == "__main__":
    main()
