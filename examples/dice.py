"""Roll three dice and sum them."""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from elmish_random import Generator, int_, list_


def build_dice_sum(dice: int = 3, sides: int = 6) -> Generator[int]:
    """Sum of `dice` rolls of a `sides`-sided die."""
    return list_(dice, int_(1, sides)).map(sum)


def main() -> None:
    die = int_(1, 6)
    set_of_dice = list_(3, die)
    sum_of_set = set_of_dice.map(sum)

    # same thing in one line
    sum_of_set_2 = build_dice_sum()

    for _ in range(10):
        print(sum_of_set.next())
        print(sum_of_set_2.next())


if __name__ == "__main__":
    main()
