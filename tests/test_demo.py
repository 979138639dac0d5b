import io
import logging
import unittest
from contextlib import redirect_stdout
from aritydispatch import UnsupportedArity
from aritydispatch.__main__ import main
from aritydispatch.demo import Foo


class TestDemo(unittest.TestCase):
    logger = logging.getLogger(__name__)
    logging.basicConfig(
        format="%(module)s %(levelname)s: %(message)s",
        # level=logging.INFO,
    )

    def setUp(self) -> None:
        self.foo = Foo()

    def test_bar(self) -> None:
        self.assertEqual("Bar_1", self.foo.bar(8))
        self.assertEqual("Bar_2", self.foo.bar(2, 3))
        self.assertEqual("Bar_2_VA", self.foo.bar(2, 3, 4))
        self.assertEqual("Bar_2_VA", self.foo.bar(4, 5, 6, 7))

    def test_dispatcher_shared_by_instances(self) -> None:
        self.assertIs(Foo._bar, Foo()._bar)
        self.assertEqual(["bar_1", "bar_2", "bar_2_va"], [h.name for h in Foo._bar.handlers])
        self.assertEqual("Bar_2_VA", Foo().bar_2_va(2, 3, 4))

    def test_bar_zero_arguments(self) -> None:
        with self.assertRaises(UnsupportedArity) as context:
            self.foo.bar()
        self.assertEqual(0, context.exception.arity)
        self.assertIn("0", str(context.exception))

    def test_bar_apply_to(self) -> None:
        for xs in [[8], [2, 3], [2, 3, 4], [4, 5, 6, 7]]:
            self.assertEqual(self.foo.bar(*xs), self.foo.bar_apply_to(xs))
        with self.assertRaises(UnsupportedArity):
            self.foo.bar_apply_to([])

    def test_diagnostics(self) -> None:
        with self.assertLogs("aritydispatch.demo", level="INFO") as logs:
            self.foo.bar(8)
            self.foo.bar(2, 3)
            self.foo.bar(4, 5, 6, 7)
        self.assertEqual(["8", "2 3", "4 5 [6 7]"], [r.getMessage() for r in logs.records])

    def test_main(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out), self.assertLogs("aritydispatch", level="INFO") as logs:
            status = main()
        self.assertEqual(1, status)
        lines = out.getvalue().splitlines()
        self.assertEqual("aritydispatch [python] 2.0", lines[0])
        self.assertEqual(
            ["Bar_1", "Bar_2_VA", "Bar_1", "Bar_2", "Bar_1", "Bar_2", "Bar_2_VA", "Bar_1", "Bar_2", "Bar_2_VA"],
            lines[1:],
        )
        self.assertIn("Invalid arity: 0", logs.records[-1].getMessage())


if __name__ == "__main__":
    unittest.main()
