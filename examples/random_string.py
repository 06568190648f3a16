"""Random alphanumeric strings, of fixed and of random length."""
import os
import string
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from elmish_random import Generator, int_, list_

CHARS = string.ascii_lowercase + string.ascii_uppercase + string.digits


def build_fixed_string(length: int) -> Generator[str]:
    return (
        list_(length, int_(0, len(CHARS) - 1))
        .map(lambda indexes: "".join(CHARS[i] for i in indexes))
    )


def build_random_string(min_length: int = 1, max_length: int = 24) -> Generator[str]:
    """Draw a length first, then a string of that length."""
    return int_(min_length, max_length).then(build_fixed_string)


def main() -> None:
    fixed = build_fixed_string(10)
    for _ in range(10):
        print(f"Fixed length:  {fixed.next()}")

    varying = build_random_string()
    for _ in range(10):
        print(f"Random length: {varying.next()}")


if __name__ == "__main__":
    main()
