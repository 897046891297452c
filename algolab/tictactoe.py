"""Tic-tac-toe against an opponent that chooses moves by best-first (A*) search."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

SIZE = 3
EMPTY = " "
HUMAN = "X"
AI = "O"
WIN_SCORE = 100

Board = tuple[tuple[str, ...], ...]
Move = tuple[int, int]


def _lines() -> Iterator[tuple[Move, ...]]:
    for i in range(SIZE):
        yield tuple((i, j) for j in range(SIZE))
        yield tuple((j, i) for j in range(SIZE))
    yield tuple((k, k) for k in range(SIZE))
    yield tuple((k, SIZE - 1 - k) for k in range(SIZE))


_LINES = tuple(_lines())


def _freeze(board: Sequence[Sequence[str]]) -> Board:
    frozen = tuple(tuple(row) for row in board)
    if len(frozen) != SIZE or any(len(row) != SIZE for row in frozen):
        raise ValueError(f"board must be {SIZE}x{SIZE}")
    return frozen


def _place(board: Board, move: Move, mark: str) -> Board:
    row, col = move
    return tuple(
        tuple(mark if (r, c) == (row, col) else cell for c, cell in enumerate(line))
        if r == row
        else line
        for r, line in enumerate(board)
    )


def evaluate(board: Sequence[Sequence[str]]) -> int:
    """Score a board: +100 when X has a line, -100 when O has one, else 0."""
    for line in _LINES:
        a, b, c = (board[r][col] for r, col in line)
        if a == b == c and a != EMPTY:
            return WIN_SCORE if a == HUMAN else -WIN_SCORE
    return 0


def count_empty(board: Sequence[Sequence[str]]) -> int:
    """Number of unoccupied cells."""
    return sum(cell == EMPTY for row in board for cell in row)


def is_terminal(board: Sequence[Sequence[str]]) -> bool:
    """True when someone has won or the board is full."""
    return evaluate(board) != 0 or count_empty(board) == 0


@dataclass
class SearchNode:
    """A position in the search, with path cost g and heuristic h."""

    board: Board
    g: int
    is_max: bool
    move: Optional[Move]
    h: int = field(init=False)

    def __post_init__(self) -> None:
        self.board = _freeze(self.board)
        self.h = evaluate(self.board)

    def f(self) -> int:
        """Total cost: moves made so far plus the heuristic score."""
        return self.g + self.h


def a_star_move(board: Sequence[Sequence[str]]) -> Optional[Move]:
    """Pick O's move leading to the cheapest reachable O win, or None if there is none."""
    root = SearchNode(_freeze(board), 0, True, None)
    order = itertools.count()
    heap = [(root.f(), next(order), root)]
    best: Optional[Move] = None
    min_f: Optional[int] = None

    while heap:
        _, _, current = heapq.heappop(heap)
        if current.h != 0 or count_empty(current.board) == 0:
            if current.h == -WIN_SCORE and (min_f is None or current.f() < min_f):
                best = current.move
                min_f = current.f()
            continue

        mark = AI if current.is_max else HUMAN
        for r, row in enumerate(current.board):
            for c, cell in enumerate(row):
                if cell != EMPTY:
                    continue
                child = SearchNode(
                    _place(current.board, (r, c), mark),
                    current.g + 1,
                    not current.is_max,
                    (r, c) if current.is_max else current.move,
                )
                heapq.heappush(heap, (child.f(), next(order), child))

    return best


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render the board with '.' for empty cells, surrounded by blank lines."""
    rows = "".join(
        "".join(f"{'.' if cell == EMPTY else cell} " for cell in row) + "\n"
        for row in board
    )
    return "\n" + rows + "\n"


def _parse_move(raw: str, board: list[list[str]]) -> Optional[Move]:
    parts = raw.split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        return None
    if board[row][col] != EMPTY:
        return None
    return row, col


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play an interactive game: the human is X and moves first."""
    board = [[EMPTY] * SIZE for _ in range(SIZE)]
    human_turn = True

    while True:
        print(format_board(board), end="")
        if is_terminal(board):
            break

        if human_turn:
            try:
                raw = input("Enter your move (row col): ")
            except EOFError:
                return 1
            move = _parse_move(raw, board)
            if move is None:
                print("Invalid move!")
                continue
            row, col = move
            board[row][col] = HUMAN
        else:
            print("AI (O) is thinking...")
            move = a_star_move(board)
            if move is not None:
                row, col = move
                board[row][col] = AI
        human_turn = not human_turn

    print(format_board(board), end="")
    result = evaluate(board)
    if result == WIN_SCORE:
        print("You win!")
    elif result == -WIN_SCORE:
        print("AI wins!")
    else:
        print("It's a draw!")
    return 0