"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from typing import Iterable, Optional

from checkersbot.game.board import BOARD_SIZE, COL_LABELS, format_square
from checkersbot.game.state import CheckersGameState
from checkersbot.game.types import Side, Square

# Layout constants
CELL_SIZE = 60
MARGIN = 30
BOARD_PX = MARGIN * 2 + CELL_SIZE * BOARD_SIZE
PIECE_RADIUS = 23
TARGET_RADIUS = 9

# Colors
LIGHT_SQUARE = "#EBD5B3"
DARK_SQUARE = "#8B5A2B"
LABEL_COLOR = "#4A3728"
WHITE_PIECE = "#F5F5F5"
WHITE_STROKE = "#888"
BLACK_PIECE = "#2B2B2B"
BLACK_STROKE = "#000"
KING_MARK = "#F2C94C"
LAST_MOVE_COLOR = "rgba(231, 76, 60, 0.45)"
SELECTED_COLOR = "rgba(74, 222, 128, 0.55)"
TARGET_COLOR = "rgba(74, 222, 128, 0.9)"

BANNER_COLORS = {
    "You win!": "#4ADE80",
    "Bot wins!": "#F87171",
}


def _origin(square: Square) -> tuple[int, int]:
    """Top-left SVG pixel of a square (row 0 at the top)."""
    return MARGIN + square.col * CELL_SIZE, MARGIN + square.row * CELL_SIZE


def _center(square: Square) -> tuple[int, int]:
    x, y = _origin(square)
    return x + CELL_SIZE // 2, y + CELL_SIZE // 2


def _click_target(square: Square) -> str:
    x, y = _origin(square)
    coord = format_square(square)
    return (
        f'<rect x="{x}" y="{y}" width="{CELL_SIZE}" height="{CELL_SIZE}" '
        f'fill="transparent" class="board-click" '
        f'data-coord="{coord}" style="cursor:pointer">'
        f'<title>{coord}</title></rect>'
    )


def render_board_svg(
    game_state: CheckersGameState,
    clickable: bool = True,
    selected: Optional[Square] = None,
    targets: Iterable[Square] = (),
    game_over_message: str = "",
) -> str:
    """Render the board as an SVG string.

    When clickable, pieces that may move this turn and the `targets` of the
    selected piece get invisible click targets carrying their coordinate.
    """
    targets = list(targets)
    parts: list[str] = []

    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{BOARD_PX}" height="{BOARD_PX}" '
        f'viewBox="0 0 {BOARD_PX} {BOARD_PX}" '
        f'id="checkers-board">'
    )
    parts.append(f'<rect width="{BOARD_PX}" height="{BOARD_PX}" fill="{LIGHT_SQUARE}" rx="4"/>')

    # Squares
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            x, y = _origin(Square(r, c))
            fill = DARK_SQUARE if (r + c) % 2 == 1 else LIGHT_SQUARE
            parts.append(f'<rect x="{x}" y="{y}" width="{CELL_SIZE}" height="{CELL_SIZE}" fill="{fill}"/>')

    # File labels (bottom) and rank labels (left)
    for c in range(BOARD_SIZE):
        x, _ = _center(Square(0, c))
        parts.append(
            f'<text x="{x}" y="{BOARD_PX - 10}" text-anchor="middle" '
            f'font-size="14" font-family="monospace" fill="{LABEL_COLOR}">'
            f'{COL_LABELS[c]}</text>'
        )
    for r in range(BOARD_SIZE):
        _, y = _center(Square(r, 0))
        parts.append(
            f'<text x="{MARGIN // 2}" y="{y + 5}" text-anchor="middle" '
            f'font-size="14" font-family="monospace" fill="{LABEL_COLOR}">'
            f'{BOARD_SIZE - r}</text>'
        )

    # Last move and selection highlights
    last = game_state.last_move
    if last is not None:
        for sq in (last.origin, last.destination):
            x, y = _origin(sq)
            parts.append(
                f'<rect x="{x}" y="{y}" width="{CELL_SIZE}" height="{CELL_SIZE}" '
                f'fill="{LAST_MOVE_COLOR}"/>'
            )
    if selected is not None:
        x, y = _origin(selected)
        parts.append(
            f'<rect x="{x}" y="{y}" width="{CELL_SIZE}" height="{CELL_SIZE}" '
            f'fill="{SELECTED_COLOR}" class="selected"/>'
        )

    # Pieces
    for square, piece in game_state.board.pieces():
        cx, cy = _center(square)
        if piece.side is Side.WHITE:
            fill, stroke = WHITE_PIECE, WHITE_STROKE
        else:
            fill, stroke = BLACK_PIECE, BLACK_STROKE
        parts.append(
            f'<circle cx="{cx}" cy="{cy}" r="{PIECE_RADIUS}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="2"/>'
        )
        if piece.king:
            parts.append(
                f'<circle cx="{cx}" cy="{cy}" r="{PIECE_RADIUS // 2}" '
                f'fill="none" stroke="{KING_MARK}" stroke-width="3" class="king"/>'
            )

    # Destination markers
    for sq in targets:
        cx, cy = _center(sq)
        parts.append(
            f'<circle cx="{cx}" cy="{cy}" r="{TARGET_RADIUS}" '
            f'fill="{TARGET_COLOR}" class="move-target"/>'
        )

    # Click targets
    if clickable and not game_state.is_over:
        for sq in sorted(game_state.selectable_squares()):
            parts.append(_click_target(sq))
        for sq in targets:
            parts.append(_click_target(sq))

    if game_over_message:
        color = BANNER_COLORS.get(game_over_message, "#FFFFFF")
        mid = BOARD_PX // 2
        parts.append(
            f'<rect x="0" y="{mid - 35}" width="{BOARD_PX}" height="70" '
            f'fill="rgba(0, 0, 0, 0.65)"/>'
        )
        parts.append(
            f'<text x="{mid}" y="{mid + 12}" text-anchor="middle" '
            f'font-size="34" font-weight="bold" font-family="sans-serif" '
            f'fill="{color}">{game_over_message}</text>'
        )

    parts.append("</svg>")
    return "\n".join(parts)


# JavaScript that handles clicks on the SVG and writes the coordinate to
# a hidden Gradio Textbox, then triggers the submit button.
CLICK_JS = """
() => {
    if (window._checkersClickBound) return;
    window._checkersClickBound = true;

    document.addEventListener('click', function(e) {
        const cell = e.target.closest('.board-click');
        if (!cell) return;
        const coord = cell.getAttribute('data-coord');
        if (!coord) return;

        const container = document.querySelector('#coord-input textarea, #coord-input input');
        if (container) {
            // Native setter so Gradio notices the change
            const proto = container.tagName === "TEXTAREA"
                ? window.HTMLTextAreaElement.prototype
                : window.HTMLInputElement.prototype;
            const nativeSetter = Object.getOwnPropertyDescriptor(proto, "value")?.set;
            if (nativeSetter) {
                nativeSetter.call(container, coord);
            } else {
                container.value = coord;
            }
            container.dispatchEvent(new Event('input', { bubbles: true }));
            const btn = document.querySelector('#coord-submit');
            if (btn) btn.click();
        }
    });
}
"""
