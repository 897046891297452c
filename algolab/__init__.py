"""Small runnable classic algorithms: graph traversal, shortest paths, spanning trees, job scheduling, N-queens, selection sort, a tic-tac-toe opponent and a keyword chatbot."""

__version__ = "0.1.0"
__all__ = [
    "chatbot",
    "dijkstra",
    "jobs",
    "kruskal",
    "prim",
    "queens",
    "selection_sort",
    "tictactoe",
    "traversal",
]