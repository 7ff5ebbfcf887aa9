import contextlib
import io
import unittest

from app.pagekit.layout.sequence import ELLIPSIS
from app.pagekit.main import bootstrap_state, format_markers, main, run_cli_smoke


class TestMainCli(unittest.TestCase):
    def test_format_markers(self):
        self.assertEqual(
            format_markers([1, 2, ELLIPSIS, 5, 6, 7, ELLIPSIS, 10, 11], 6),
            "1 2 ... 5 [6] 7 ... 10 11",
        )

    def test_bootstrap_state_clamps_selected(self):
        state = bootstrap_state(count=5, selected=9)
        self.assertEqual(state.selected, 5)
        self.assertTrue(state.initialized)

    def test_run_cli_smoke_walks_steps(self):
        state = bootstrap_state(count=11, selected=6, boundary_count=2, middle_count=3)
        with contextlib.redirect_stdout(io.StringIO()):
            lines = run_cli_smoke(state, ["next", "last"])
        self.assertEqual(
            lines,
            [
                "1 2 ... 5 [6] 7 ... 10 11",
                "1 2 ... 6 [7] 8 9 10 11",
                "1 2 ... 6 7 8 9 10 [11]",
            ],
        )

    def test_main_prints_sequence(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(["--count", "11", "--selected", "6"])
        self.assertEqual(code, 0)
        self.assertIn("1 2 ... 5 [6] 7 ... 10 11", out.getvalue())

    def test_main_derives_count_from_items(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(["--items", "37", "--page-size", "10", "--navigate", "last"])
        self.assertIn("Pages: 4", out.getvalue())
        self.assertIn("1 2 3 [4]", out.getvalue())
        self.assertIn("Items 1-10 of 37", out.getvalue())
        self.assertIn("Items 31-37 of 37", out.getvalue())

    def test_main_with_no_items_has_one_page(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(["--items", "0"])
        self.assertEqual(code, 0)
        self.assertIn("Pages: 1", out.getvalue())
        self.assertIn("No items", out.getvalue())

    def test_main_rejects_zero_page_size(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                main(["--items", "10", "--page-size", "0"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("page_size must be > 0", err.getvalue())

    def test_count_runs_print_no_item_ranges(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(["--count", "3"])
        self.assertNotIn("Items", out.getvalue())

    def test_main_rejects_count_with_items(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--count", "3", "--items", "10"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
