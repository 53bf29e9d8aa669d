"""Checkersbot: Gradio web app entry point."""

import logging

import gradio as gr

from checkersbot.ui.board_component import CLICK_JS
from checkersbot.ui.play_tab import build_play_tab

RULES_MD = """
### Rules
- You play White and move first; the bot plays Black.
- Pieces move one square diagonally forward onto an empty dark square.
- Capture by jumping an adjacent enemy piece onto the empty square behind it.
  A turn is a single move or a single jump.
- Capturing is compulsory: if any of your pieces can capture, you must capture.
- A piece reaching the far rank becomes a king and moves in all four diagonals.
- You win when the bot has no pieces left or no legal move.
"""

with gr.Blocks(title="Checkersbot") as demo:
    gr.Markdown("# Checkersbot")
    gr.Markdown("8x8 draughts against a bot from random play up to alpha-beta search.")

    with gr.Tab("Play"):
        build_play_tab()

    with gr.Tab("Rules"):
        gr.Markdown(RULES_MD)

    # Bind board click handler JS on page load
    demo.load(fn=None, js=CLICK_JS)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demo.launch(theme=gr.themes.Soft())
