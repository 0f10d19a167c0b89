"""Small demonstration of creating, filling and reshaping a tensor."""

from __future__ import annotations

import argparse
import itertools
from typing import Sequence

from adamant.tensor import Tensor


def main(argv: Sequence[str] | None = None) -> int:
    """Create a 2x3 tensor, fill it, reshape it to 3x2 and print each step."""
    parser = argparse.ArgumentParser(description="Demonstrate basic tensor operations.")
    parser.parse_args(argv)

    tensor = Tensor((2, 3))
    print(f"New tensor: {tensor!r}")

    for i, j in itertools.product(range(2), range(3)):
        tensor.set((i, j), float(i * 3 + j))
    print(f"Filled tensor: {tensor!r}")

    reshaped = tensor.reshape((3, 2))
    print(f"Reshaped tensor: {reshaped!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())