import unittest

from converter_controller import ConverterController
from ipconv import Notation


class TestConverterController(unittest.TestCase):

    def test_convert_from_groups_binary_by_default(self):
        controller = ConverterController()
        ok, results = controller.convert_from(Notation.DOTTED_DECIMAL, "192.168.1.1")
        self.assertTrue(ok)
        self.assertEqual(results[Notation.BINARY], "11000000.10101000.00000001.00000001")
        self.assertEqual(results[Notation.DOTTED_HEX], "c0.a8.01.01")

    def test_flat_binary_display(self):
        controller = ConverterController(binary_display="flat")
        ok, results = controller.convert_from(Notation.DECIMAL, "3232235777")
        self.assertTrue(ok)
        self.assertEqual(results[Notation.BINARY], "11000000101010000000000100000001")

    def test_surrounding_whitespace_is_stripped(self):
        controller = ConverterController()
        ok, results = controller.convert_from(Notation.DOTTED_HEX, "  C0.A8.01.01\n")
        self.assertTrue(ok)
        self.assertEqual(results[Notation.DOTTED_DECIMAL], "192.168.1.1")

    def test_failure_returns_message_and_stores_nothing(self):
        controller = ConverterController()
        ok, message = controller.convert_from(Notation.DOTTED_DECIMAL, "256.0.0.1")
        self.assertFalse(ok)
        self.assertIn("octet out of [0,255]", message)
        self.assertEqual(controller.get_history(), [])
        self.assertEqual(controller.last_results, {})

    def test_empty_input_is_rejected(self):
        controller = ConverterController()
        ok, message = controller.convert_from(Notation.BINARY, "   ")
        self.assertFalse(ok)
        self.assertIn("输入为空", message)

    def test_failure_keeps_previous_results(self):
        controller = ConverterController()
        controller.convert_from(Notation.DOTTED_DECIMAL, "10.0.0.1")
        ok, _ = controller.convert_from(Notation.DOTTED_DECIMAL, "1.2.3")
        self.assertFalse(ok)
        self.assertEqual(controller.last_results[Notation.DOTTED_DECIMAL], "10.0.0.1")

    def test_convert_to_others_excludes_source(self):
        controller = ConverterController()
        ok, results = controller.convert_to_others(Notation.DOTTED_OCTAL, "300.250.001.001")
        self.assertTrue(ok)
        self.assertNotIn(Notation.DOTTED_OCTAL, results)
        self.assertEqual(len(results), 4)

    def test_history_is_bounded_and_newest_first(self):
        controller = ConverterController(history_size=2)
        for dotted in ("1.1.1.1", "2.2.2.2", "3.3.3.3"):
            controller.convert_from(Notation.DOTTED_DECIMAL, dotted)
        history = controller.get_history()
        self.assertEqual([e['input'] for e in history], ["3.3.3.3", "2.2.2.2"])
        self.assertEqual(len(controller.get_history(limit=1)), 1)

    def test_clear_history(self):
        controller = ConverterController()
        controller.convert_from(Notation.DOTTED_DECIMAL, "1.1.1.1")
        ok, _ = controller.clear_history()
        self.assertTrue(ok)
        self.assertEqual(controller.get_history(), [])

    def test_format_results_uses_notation_order(self):
        controller = ConverterController(binary_display="flat")
        _, results = controller.convert_from(Notation.DECIMAL, "0")
        self.assertEqual(controller.format_results(results), [
            "dotted: 0.0.0.0",
            "binary: " + "0" * 32,
            "hex: 00.00.00.00",
            "octal: 000.000.000.000",
            "decimal: 0",
        ])


if __name__ == "__main__":
    unittest.main()
