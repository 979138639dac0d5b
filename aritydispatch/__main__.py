"""Runs the `Foo.bar` handler family on a few canned argument lists."""

import logging
import sys

from .demo import Foo
from .dispatcher import UnsupportedArity
from .numeric import plus_one
from .types import Int


def main() -> int:
    logging.basicConfig(stream=sys.stdout, format="%(message)s", level=logging.INFO)
    logger = logging.getLogger("aritydispatch")

    print(f"aritydispatch [python] {plus_one(Int(1))}")

    foo = Foo()
    print(foo.bar(8))

    for xs in ([4, 5, 6, 7], [4], [8, 9]):
        print(foo.bar_apply_to(xs))

    print(foo.bar_1(2))
    print(foo.bar_2(2, 3))
    print(foo.bar_2_va(2, 3, 4))

    print(foo.bar(2))
    print(foo.bar(2, 3))
    print(foo.bar(2, 3, 4))

    try:
        print(foo.bar())
    except UnsupportedArity as error:
        logger.error(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
