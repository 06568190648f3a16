"""10x10 grid of randomly placed X and O cells, as a string."""
import os
import sys
from typing import List

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from elmish_random import Generator, boolean, list_


def to_string_grid(grid: List[List[bool]]) -> str:
    return "".join(
        "".join("X" if cell else "O" for cell in row) + "\n"
        for row in grid
    )


def build_grid(size: int = 10) -> Generator[str]:
    return list_(size, list_(size, boolean())).map(to_string_grid)


def main() -> None:
    bool_rows = list_(10, boolean())
    bool_grid = list_(10, bool_rows)
    grid = bool_grid.map(to_string_grid)

    for _ in range(10):
        print(grid.next() + "\n")
        print(build_grid().next() + "\n")


if __name__ == "__main__":
    main()
