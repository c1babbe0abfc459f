"""
request_test provides tests for YAML/JSON request loading.
"""
from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from sprig.command import DominatorsCommand, PathsCommand, TopCommand
from sprig.config import U32_MAX
from sprig.config.output import FileDestination, OutputFormat, StdoutDestination
from sprig.config.request import config_from_payload, load_command
from sprig.errors import MalformedArgument, MissingRequiredInput, UnrecognizedFormat


class RequestTest(unittest.TestCase):
    """
    RequestTest provides tests for request files.
    """

    def _write(self, tmp: str, name: str, text: str) -> Path:
        path = Path(tmp) / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_load_yaml_paths_request(self) -> None:
        """
        test loading a YAML paths request with overrides.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(
                tmp,
                "r.yml",
                "\n".join(
                    [
                        "mode: paths",
                        "input: ./bin.wasm",
                        "functions: [foo, bar]",
                        "max_depth: 2",
                        "output_format: json",
                        "output_destination: paths.json",
                    ]
                ),
            )
            command = load_command(path)

        self.assertIsInstance(command, PathsCommand)
        self.assertEqual(command.config.functions, ("foo", "bar"))
        self.assertEqual(command.config.max_depth, 2)
        self.assertEqual(command.config.max_paths, 10)
        self.assertIs(command.config.output_format, OutputFormat.JSON)
        self.assertEqual(
            command.config.output_destination,
            FileDestination(path=Path("paths.json")),
        )

    def test_load_json_top_request_uses_defaults(self) -> None:
        """
        test that omitted fields take the usual defaults.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(
                tmp, "r.json", json.dumps({"mode": "top", "input": "a.wasm"})
            )
            command = load_command(path)

        self.assertIsInstance(command, TopCommand)
        self.assertEqual(command.config.effective_number, U32_MAX)
        self.assertFalse(command.config.retained)
        self.assertEqual(command.config.output_destination, StdoutDestination())

    def test_dominators_payload(self) -> None:
        """
        test validating a mapping directly.
        """
        config = config_from_payload(
            {"mode": "dominators", "input": "a.wasm", "max_rows": 12}
        )
        self.assertEqual(config.summary()["max rows"], "12")

    def test_unrecognized_format_is_unwrapped(self) -> None:
        """
        test that a bad format raises UnrecognizedFormat, not ValidationError.
        """
        with self.assertRaises(UnrecognizedFormat) as ctx:
            _ = config_from_payload(
                {"mode": "top", "input": "a.wasm", "output_format": "yaml"}
            )
        self.assertEqual(ctx.exception.token, "yaml")

    def test_unknown_field_is_malformed(self) -> None:
        """
        test that a typo in a field name is rejected.
        """
        with self.assertRaises(MalformedArgument):
            _ = config_from_payload({"mode": "top", "input": "a", "numbr": 3})

    def test_negative_limit_is_malformed(self) -> None:
        """
        test that a negative limit surfaces as MalformedArgument.
        """
        with self.assertRaises(MalformedArgument):
            _ = config_from_payload({"mode": "dominators", "input": "a", "max_depth": -1})

    def test_unknown_and_missing_mode(self) -> None:
        """
        test the mode key.
        """
        with self.assertRaises(MalformedArgument):
            _ = config_from_payload({"mode": "garbage", "input": "a"})
        with self.assertRaises(MalformedArgument):
            _ = config_from_payload({"input": "a"})

    def test_missing_input(self) -> None:
        """
        test that a request without input cannot become a command.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, "r.yaml", "mode: dominators\nmax_depth: 3\n")
            with self.assertRaises(MissingRequiredInput):
                _ = load_command(path)

    def test_empty_input_is_malformed(self) -> None:
        """
        test that an empty input string is rejected, not read as ".".
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, "r.yml", "mode: top\ninput: ''\n")
            with self.assertRaises(MalformedArgument):
                _ = load_command(path)

    def test_unsupported_suffix_and_empty_file(self) -> None:
        """
        test file-level failures.
        """
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(MalformedArgument):
                _ = load_command(self._write(tmp, "r.toml", "mode = 'top'"))
            with self.assertRaises(MalformedArgument):
                _ = load_command(self._write(tmp, "r.yml", ""))
            with self.assertRaises(MalformedArgument):
                _ = load_command(self._write(tmp, "list.yml", "- top\n"))

    def test_dominators_command_type(self) -> None:
        """
        test that a dominators request becomes a DominatorsCommand.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, "r.yml", "mode: dominators\ninput: x.wasm\n")
            self.assertIsInstance(load_command(path), DominatorsCommand)


if __name__ == "__main__":
    unittest.main()
