# algolab

A set of small, self-contained classic algorithms. Each one is a module that
you can import and a command that you can run.

| Module | What it does | Command |
| --- | --- | --- |
| `algolab.tictactoe` | Tic-tac-toe against an opponent that picks its moves by A* search | `algolab-tictactoe` |
| `algolab.traversal` | Depth-first and breadth-first traversal of an adjacency matrix | `algolab-traversal` |
| `algolab.dijkstra` | Shortest distances from a source vertex | `algolab-dijkstra` |
| `algolab.jobs` | Greedy job sequencing with deadlines for the most profit | `algolab-jobs` |
| `algolab.kruskal` | Minimum spanning tree with Kruskal's algorithm and a disjoint set | `algolab-kruskal` |
| `algolab.queens` | First solution to the N-queens problem by backtracking | `algolab-queens` |
| `algolab.prim` | Minimum spanning tree with Prim's algorithm | `algolab-prim` |
| `algolab.chatbot` | A keyword-driven customer-support chatbot | `algolab-chatbot` |
| `algolab.selection_sort` | Selection sort of numbers typed in | `algolab-sort` |

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algolab.traversal import bfs, dfs, format_traversal
from algolab.dijkstra import dijkstra
from algolab.jobs import Job, schedule_jobs
from algolab.kruskal import Edge, kruskal_mst
from algolab.prim import prim_mst
from algolab.queens import solve_n_queens, format_solution
from algolab.selection_sort import selection_sort
from algolab.chatbot import respond

graph = [
    [0, 1, 1, 0, 0],
    [1, 0, 0, 1, 0],
    [1, 0, 0, 0, 1],
    [0, 1, 0, 0, 0],
    [0, 0, 1, 0, 0],
]
dfs(graph, 0)   # [0, 1, 3, 2, 4]
bfs(graph, 0)   # [0, 1, 2, 3, 4]
format_traversal("BFS", bfs(graph, 0))  # 'BFS: 0 --> 1 --> 2 --> 3 --> 4 --> NULL'

weighted = [
    [0, 10, 0, 0, 5],
    [0, 0, 1, 0, 2],
    [0, 0, 0, 4, 0],
    [7, 0, 6, 0, 0],
    [0, 3, 9, 2, 0],
]
dijkstra(weighted, 0)  # [0, 8, 9, 7, 5]; math.inf for an unreachable vertex

schedule = schedule_jobs([
    Job("j1", 15, 2), Job("j2", 27, 3), Job("j3", 10, 3),
    Job("j4", 100, 3), Job("j5", 150, 4),
])
schedule.job_ids       # ['j1', 'j2', 'j4', 'j5']
schedule.total_profit  # 292

kruskal_mst(5, [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5),
                Edge(1, 3, 15), Edge(2, 3, 4)])
# [Edge(u=2, v=3, weight=4), Edge(u=0, v=3, weight=5), Edge(u=0, v=1, weight=10)]

prim_mst([
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
])  # [None, 0, 1, 0, 1] -- the parent of each vertex, None for the root

columns = solve_n_queens(4)   # [1, 3, 0, 2]; None when there is no solution
print(format_solution(columns))

selection_sort([5, 2, 9, 1])  # [1, 2, 5, 9]
respond("When is my delivery?")
# 'Delivery usually takes 3 to 5 business days depending on your location.'
```

In an adjacency matrix a zero means there is no edge, and any other value is
the weight of the edge.

Errors are raised as `ValueError`: a matrix that is not square, a start or
source vertex out of range, an edge whose vertex is out of range
(`kruskal_mst`), a graph that is not connected (`prim_mst`), or a negative `n`
(`solve_n_queens`).

For tic-tac-toe, `algolab.tictactoe` offers `evaluate` (+100 when X has a line,
-100 when O has one, otherwise 0), `count_empty`, `is_terminal`,
`a_star_move` and `format_board`. Boards are 3x3 grids of `"X"`, `"O"` and
`" "`.

## Running the commands

```
algolab-traversal [--start N]   # DFS and BFS order of a sample graph from node N (default 0)
algolab-dijkstra [--source N]   # table of distances from vertex N (default 0) of a sample graph
algolab-jobs                    # the chosen sample jobs and the total profit
algolab-kruskal                 # edges of a minimum spanning tree of a sample graph
algolab-prim                    # edges of a minimum spanning tree of a sample graph
algolab-queens                  # asks for N and prints the first board found
algolab-sort                    # asks for a count and the numbers, prints them sorted
algolab-tictactoe               # you play X and move first, the computer plays O
algolab-chatbot                 # type "bye" or "exit" to leave
```

In tic-tac-toe, give each move as a row and a column from 0 to 2, for example
`1 1` for the centre. A move outside the board or onto a taken cell is
rejected and asked for again.

## What it does not do

- The graph, job and spanning-tree commands always work on their built-in
  sample data; to run them on your own data, call the functions from Python.
- The tic-tac-toe opponent only looks for moves that can lead to a win for O.
  When it finds none, it does not move and the turn passes back to you.
- The chatbot matches a fixed set of keywords and keeps no memory between
  messages.