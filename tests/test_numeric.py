import logging
import unittest
from aritydispatch import Float, Int, Seq, Str, TypeMismatch, double, long, plus_one


class TestNumeric(unittest.TestCase):
    logger = logging.getLogger(__name__)
    logging.basicConfig(
        format="%(module)s %(levelname)s: %(message)s",
        # level=logging.INFO,
    )

    def test_plus_one(self) -> None:
        result = plus_one(1)
        self.assertIsInstance(result, float)
        self.assertEqual(2.0, result)
        self.assertEqual(2.5, plus_one(1.5))
        self.assertEqual(2.0, plus_one(Int(1)))
        self.assertEqual(2.5, plus_one(Float(1.5)))

    def test_double(self) -> None:
        self.assertEqual(3.0, double(3))
        self.assertIsInstance(double(3), float)
        self.assertEqual(-0.25, double(-0.25))
        self.assertEqual(7.0, double(Int(7)))
        self.assertEqual(0.5, double(Float(0.5)))

    def test_long(self) -> None:
        self.assertEqual(3, long(3))
        self.assertEqual(3, long(3.9))
        self.assertEqual(-3, long(-3.9))
        self.assertEqual(42, long(Int(42)))
        self.assertEqual(2, long(Float(2.5)))

    def test_long_wraps_to_64_bit(self) -> None:
        self.assertEqual(-(1 << 63), long(1 << 63))
        self.assertEqual((1 << 63) - 1, long((1 << 63) - 1))
        self.assertEqual(0, long(1 << 64))

    def test_long_non_finite(self) -> None:
        for value in [float("nan"), float("inf"), float("-inf"), Float(float("nan"))]:
            self.assertEqual(-(1 << 63), long(value))

    def test_double_out_of_range(self) -> None:
        with self.assertRaises(TypeMismatch) as context:
            double(10**400)
        self.assertEqual(10**400, context.exception.value)
        with self.assertRaises(TypeMismatch):
            plus_one(Int(-(10**400)))

    def test_long_result_is_int(self) -> None:
        self.assertIsInstance(long(Int(5)), int)
        self.assertIsInstance(long(2.5), int)

    def test_type_mismatch(self) -> None:
        for value in ["1", None, [1], True, Str("1"), Seq(())]:
            with self.assertRaises(TypeMismatch) as context:
                double(value)
            self.assertIs(value, context.exception.value)
            with self.assertRaises(TypeMismatch):
                long(value)
            with self.assertRaises(TypeMismatch):
                plus_one(value)

    def test_type_mismatch_is_type_error(self) -> None:
        with self.assertRaises(TypeError):
            double("x")


if __name__ == "__main__":
    unittest.main()
