from __future__ import annotations

from typing import Iterator, Mapping, Optional

from .types import Piece, Side, Square

BOARD_SIZE = 8

# Column labels A-H, left to right. Ranks run 8 (row 0) down to 1 (row 7).
COL_LABELS = "ABCDEFGH"

# Rows each side fills at the start of a game
BLACK_START_ROWS = range(0, 3)
WHITE_START_ROWS = range(BOARD_SIZE - 3, BOARD_SIZE)


def is_on_grid(square: Square) -> bool:
    return 0 <= square.row < BOARD_SIZE and 0 <= square.col < BOARD_SIZE


def is_dark(square: Square) -> bool:
    """Only dark squares are playable."""
    return (square.row + square.col) % 2 == 1


def parse_coordinate(text: str) -> Optional[Square]:
    """Parse a coordinate string like 'A3' or 'h8' into a Square.

    Column is a letter A-H, rank is a number 1-8 (rank 1 is row 7).
    Returns None if the string is invalid.
    """
    text = text.strip().upper()
    if len(text) != 2:
        return None
    col_char, rank_char = text[0], text[1]
    if col_char not in COL_LABELS or not rank_char.isdigit():
        return None
    rank = int(rank_char)
    if not (1 <= rank <= BOARD_SIZE):
        return None
    return Square(BOARD_SIZE - rank, COL_LABELS.index(col_char))


def format_square(square: Square) -> str:
    """Format a Square as a coordinate string like 'A3'."""
    return f"{COL_LABELS[square.col]}{BOARD_SIZE - square.row}"


def _index(square: Square) -> int:
    return square.row * BOARD_SIZE + square.col


_LIGHT_INDICES = tuple(
    _index(Square(r, c))
    for r in range(BOARD_SIZE)
    for c in range(BOARD_SIZE)
    if (r + c) % 2 == 0
)


class Board:
    """Immutable 8x8 draughts board.

    Cells are stored row-major in a flat tuple. Transforms go through
    with_changes(), which returns a new Board and leaves this one untouched.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: tuple[Optional[Piece], ...]) -> None:
        assert len(cells) == BOARD_SIZE * BOARD_SIZE, "Board needs 64 cells"
        assert all(cells[i] is None for i in _LIGHT_INDICES), "Light squares must stay empty"
        self._cells = cells

    @classmethod
    def empty(cls) -> Board:
        return cls((None,) * (BOARD_SIZE * BOARD_SIZE))

    @classmethod
    def from_pieces(cls, pieces: Mapping[Square, Piece]) -> Board:
        cells: list[Optional[Piece]] = [None] * (BOARD_SIZE * BOARD_SIZE)
        for square, piece in pieces.items():
            assert is_on_grid(square), f"{square} is off the grid"
            assert is_dark(square), f"{format_square(square)} is a light square"
            cells[_index(square)] = piece
        return cls(tuple(cells))

    def get(self, square: Square) -> Optional[Piece]:
        return self._cells[_index(square)]

    def is_empty(self, square: Square) -> bool:
        return self._cells[_index(square)] is None

    def with_changes(self, changes: Mapping[Square, Optional[Piece]]) -> Board:
        """Return a copy of this board with the given squares overwritten."""
        cells = list(self._cells)
        for square, piece in changes.items():
            cells[_index(square)] = piece
        return Board(tuple(cells))

    def pieces(self, side: Optional[Side] = None) -> Iterator[tuple[Square, Piece]]:
        """Yield (square, piece) pairs in row-major order, optionally for one side."""
        for i, piece in enumerate(self._cells):
            if piece is None:
                continue
            if side is not None and piece.side is not side:
                continue
            yield Square(*divmod(i, BOARD_SIZE)), piece

    def count(self, side: Side) -> int:
        return sum(1 for _ in self.pieces(side))

    def king_count(self, side: Side) -> int:
        return sum(1 for _, piece in self.pieces(side) if piece.king)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __str__(self) -> str:
        symbols = {
            (Side.WHITE, False): "w",
            (Side.WHITE, True): "W",
            (Side.BLACK, False): "b",
            (Side.BLACK, True): "B",
        }
        lines = []
        for row in range(BOARD_SIZE):
            line = ""
            for col in range(BOARD_SIZE):
                piece = self.get(Square(row, col))
                line += "." if piece is None else symbols[(piece.side, piece.king)]
            lines.append(line)
        return "\n".join(lines)


def initial_board() -> Board:
    """Starting position: black on rows 0-2, white on rows 5-7, dark squares only."""
    pieces: dict[Square, Piece] = {}
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            square = Square(row, col)
            if not is_dark(square):
                continue
            if row in BLACK_START_ROWS:
                pieces[square] = Piece(Side.BLACK)
            elif row in WHITE_START_ROWS:
                pieces[square] = Piece(Side.WHITE)
    return Board.from_pieces(pieces)
