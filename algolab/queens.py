"""N-queens by backtracking, stopping at the first solution."""

from __future__ import annotations

from typing import Optional, Sequence


def solve_n_queens(n: int) -> Optional[list[int]]:
    """Column of the queen in each row for the first solution found, or None."""
    if n < 0:
        raise ValueError("n must not be negative")

    columns: list[int] = []
    used_cols: set[int] = set()
    used_anti: set[int] = set()
    used_main: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            anti, main_diag = row - col, row + col
            if col in used_cols or anti in used_anti or main_diag in used_main:
                continue
            columns.append(col)
            used_cols.add(col)
            used_anti.add(anti)
            used_main.add(main_diag)
            if place(row + 1):
                return True
            columns.pop()
            used_cols.discard(col)
            used_anti.discard(anti)
            used_main.discard(main_diag)
        return False

    return columns if place(0) else None


def format_solution(columns: Sequence[int]) -> str:
    """Render a solution with 'Q' for queens and '.' for empty squares."""
    n = len(columns)
    rows = "".join(
        "".join("Q " if c == col else ". " for c in range(n)) + "\n" for col in columns
    )
    return rows + "-" * 20 + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for N and print the first placement of N queens."""
    try:
        raw = input("Enter the value of N (number of queens): ")
    except EOFError:
        return 1
    try:
        n = int(raw.strip())
        solution = solve_n_queens(n)
    except ValueError:
        print("Invalid value for N.")
        return 1
    if solution is None:
        print(f"No solution exists for N = {n}")
    else:
        print(format_solution(solution), end="")
    return 0