"""Play tab: human (White) vs bot (Black) with interactive SVG board."""

from __future__ import annotations

import logging
import random as _random
from dataclasses import dataclass, field
from typing import Optional

import gradio as gr

from checkersbot.agent.policy import (
    DEFAULT_RATING,
    DIFFICULTY_PRESETS,
    BotAgent,
    Tier,
    nearest_preset,
    search_depth,
    tier_for_rating,
)
from checkersbot.game.board import format_square, parse_coordinate
from checkersbot.game.rules import Move
from checkersbot.game.state import CheckersGameState
from checkersbot.game.types import Side, Square
from checkersbot.ui.board_component import render_board_svg

logger = logging.getLogger(__name__)

HUMAN_SIDE = Side.WHITE

TIER_DESCRIPTIONS: dict[Tier, str] = {
    Tier.RANDOM: "Plays random legal moves.",
    Tier.BASIC: "Grabs captures and promotions when it sees them.",
    Tier.INTERMEDIATE: "Ranks moves by a heuristic and picks among the best few.",
    Tier.ADVANCED: "Looks ahead with alpha-beta search.",
}


@dataclass
class GameSession:
    """Per-tab game state held in gr.State."""

    game: CheckersGameState = field(default_factory=CheckersGameState)
    rating: int = DEFAULT_RATING
    selected: Optional[Square] = None
    rng: _random.Random = field(default_factory=_random.Random)

    @property
    def agent(self) -> BotAgent:
        return BotAgent(self.rating, self.rng)

    def reset(self, rating: Optional[int] = None) -> None:
        self.game = CheckersGameState()
        self.selected = None
        if rating is not None:
            self.rating = rating

    @property
    def targets(self) -> list[Square]:
        if self.selected is None:
            return []
        return [m.destination for m in self.game.moves_from(self.selected)]

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty if game is not over."""
        g = self.game
        if not g.is_over:
            return ""
        return "You win!" if g.winner is HUMAN_SIDE else "Bot wins!"

    @property
    def status_text(self) -> str:
        g = self.game
        if g.is_over:
            return f"Game over: {self.game_over_banner} ({g.winner})"
        if g.current_player is HUMAN_SIDE:
            if any(m.is_capture for m in g.legal_moves()):
                return "Your turn (White). You must capture."
            return "Your turn (White)"
        return "Bot is thinking... (Black)"

    @property
    def score_text(self) -> str:
        board = self.game.board
        lines = []
        for label, side in (("You (White)", Side.WHITE), ("Bot (Black)", Side.BLACK)):
            line = f"{label}: {board.count(side)} pieces"
            kings = board.king_count(side)
            if kings:
                line += f" ({kings} kings)"
            lines.append(line)
        return "\n".join(lines)

    @property
    def difficulty_text(self) -> str:
        tier = tier_for_rating(self.rating)
        text = f"{nearest_preset(self.rating)} ({self.rating} ELO): {TIER_DESCRIPTIONS[tier]}"
        if tier is Tier.ADVANCED:
            text += f" Depth {search_depth(self.rating)}."
        return text


def _make_board_html(session: GameSession) -> str:
    clickable = (
        not session.game.is_over
        and session.game.current_player is HUMAN_SIDE
    )
    return render_board_svg(
        session.game,
        clickable=clickable,
        selected=session.selected,
        targets=session.targets,
        game_over_message=session.game_over_banner,
    )


def _outputs(session: GameSession, status: Optional[str] = None):
    return (
        _make_board_html(session),
        status if status is not None else session.status_text,
        session.score_text,
        session,
        "",  # clear coord input
    )


def _bot_reply(session: GameSession) -> Optional[Move]:
    """Let the bot play if it is Black's turn."""
    game = session.game
    if game.is_over or game.current_player is HUMAN_SIDE:
        return None
    move = session.agent.select_move(game)
    if move is None:
        # Blocked bot; the session normally detects this first
        game.resign()
        return None
    game.apply_move(move)
    return move


def _handle_square_click(coord_text: str, session: GameSession):
    """Select a piece, or move the selected piece and let the bot respond."""
    game = session.game
    if game.is_over:
        return _outputs(session)

    if game.current_player is not HUMAN_SIDE:
        return _outputs(session, "Wait, it's the bot's turn.")

    square = parse_coordinate(coord_text)
    if square is None:
        return _outputs(session, f"Invalid coordinate: '{coord_text}'. Use format like C3.")

    # Move to a highlighted destination
    if session.selected is not None:
        for move in game.moves_from(session.selected):
            if move.destination == square:
                session.selected = None
                game.apply_move(move)
                bot_move = _bot_reply(session)
                status = session.status_text
                if bot_move is not None and not game.is_over:
                    status = f"Bot played {bot_move}. {status}"
                return _outputs(session, status)

    piece = game.board.get(square)
    if piece is not None and piece.side is HUMAN_SIDE:
        if square in game.selectable_squares():
            session.selected = square
            return _outputs(session)
        session.selected = None
        logger.debug("Rejected selection of %s", format_square(square))
        if any(m.is_capture for m in game.legal_moves()):
            return _outputs(session, "A capture is available: you must capture.")
        return _outputs(session, f"{format_square(square)} has no legal moves.")

    session.selected = None
    return _outputs(session)


def _new_game(preset: str, session: GameSession):
    rating = DIFFICULTY_PRESETS.get(preset, DEFAULT_RATING)
    session.reset(rating=rating)
    return (
        _make_board_html(session),
        session.status_text,
        session.score_text,
        session,
        session.difficulty_text,
    )


def _resign(session: GameSession):
    if not session.game.is_over and session.game.current_player is HUMAN_SIDE:
        session.selected = None
        session.game.resign()
    return _outputs(session)


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    initial = GameSession()
    session_state = gr.State(initial)

    with gr.Row():
        # Left: board
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=_make_board_html(initial),
                label="Board",
            )
        # Right: controls
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value=initial.status_text,
                label="Status",
                interactive=False,
                lines=2,
            )
            score_text = gr.Textbox(
                value=initial.score_text,
                label="Pieces",
                interactive=False,
                lines=2,
            )

            gr.Markdown("### New Game")
            preset_choice = gr.Radio(
                choices=list(DIFFICULTY_PRESETS.keys()),
                value=nearest_preset(DEFAULT_RATING),
                label="Bot difficulty",
            )
            difficulty_info = gr.Textbox(
                value=initial.difficulty_text,
                label="Difficulty",
                interactive=False,
                lines=2,
            )
            new_game_btn = gr.Button("New Game", variant="primary")
            resign_btn = gr.Button("Resign", variant="stop")

            gr.Markdown("### Enter Square")
            coord_input = gr.Textbox(
                label="Square (e.g. C3)",
                placeholder="C3",
                elem_id="coord-input",
                lines=1,
            )
            coord_submit = gr.Button(
                "Submit",
                elem_id="coord-submit",
            )

    board_outputs = [board_html, status_text, score_text, session_state]

    coord_submit.click(
        fn=_handle_square_click,
        inputs=[coord_input, session_state],
        outputs=board_outputs + [coord_input],
    )

    new_game_btn.click(
        fn=_new_game,
        inputs=[preset_choice, session_state],
        outputs=board_outputs + [difficulty_info],
    )

    resign_btn.click(
        fn=_resign,
        inputs=[session_state],
        outputs=board_outputs + [coord_input],
    )
