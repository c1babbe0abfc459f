import io
import re
import unittest
from unittest.mock import patch

from rich.console import Console

from sprig.__main__ import main
from sprig.config.paths import PathsConfig
from sprig.config.top import TopConfig
from sprig.console import logger
from sprig.console.logger import SPRIG_THEME


def strip_ansi(text: str) -> str:
    return re.compile(r'\x1b\[[0-9;]*m').sub('', text)


class _Analysis:
    def __init__(self) -> None:
        self.seen: list[object] = []

    def top(self, config: TopConfig) -> None:
        self.seen.append(config)

    def dominators(self, config: object) -> None:
        self.seen.append(config)

    def paths(self, config: PathsConfig) -> None:
        self.seen.append(config)


class TestMain(unittest.TestCase):
    def setUp(self) -> None:
        self.output = io.StringIO()
        console = Console(file=self.output, force_terminal=False, width=120, theme=SPRIG_THEME)
        patcher = patch.object(logger, "console", console)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_describes_valid_request(self) -> None:
        code = main(["top", "a.wasm", "-n", "3"])
        self.assertEqual(code, 0)
        output = strip_ansi(self.output.getvalue())
        self.assertIn("top", output)
        self.assertIn("a.wasm", output)
        self.assertIn("number:", output)

    def test_dispatches_to_analysis(self) -> None:
        analysis = _Analysis()
        code = main(["top", "a.wasm", "--retained"], analysis=analysis)
        self.assertEqual(code, 0)
        self.assertEqual(len(analysis.seen), 1)
        self.assertTrue(analysis.seen[0].retained)

    def test_option_error_returns_two(self) -> None:
        code = main(["top", "a.wasm", "-f", "bogus"])
        self.assertEqual(code, 2)
        output = strip_ansi(self.output.getvalue())
        self.assertIn("bogus", output)
        self.assertIn("usage:", output)

    def test_missing_input_returns_two(self) -> None:
        self.assertEqual(main(["paths"]), 2)

    def test_warns_on_empty_paths(self) -> None:
        code = main(["paths", "a.wasm"])
        self.assertEqual(code, 0)
        self.assertIn("No functions given", strip_ansi(self.output.getvalue()))

    def test_analysis_runtime_error_returns_one(self) -> None:
        class _Failing(_Analysis):
            def top(self, config: TopConfig) -> None:
                raise RuntimeError("engine crashed")

        self.assertEqual(main(["top", "a.wasm"], analysis=_Failing()), 1)


if __name__ == "__main__":
    unittest.main()
