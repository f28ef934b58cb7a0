"""End-to-end tests for the build pipeline (generate + main)."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json

import pytest

from keycode_gen.build import generate, main
from keycode_gen.declarations.style import StyleConfig

EXPECTED_EXAMPLE = """\
/** Example Codes */
export type ExampleKeyCode =
  // The foo key
  | "FooBar"
  | "BazQux";
export type KeyCode = ExampleKeyCode;
"""

EXPECTED_MULTI_TABLE = """\
/** Alphanumeric Section - Writing System Keys */
export type WritingSystemTableKeyCode =
  // {`~} on a US keyboard.
  // This is the {半角/全角/漢字} key on Japanese keyboards.
  | "Backquote"
  // Used for both the US {\\|} & the UK {#~} key.
  | "Backslash"
  | "IntlRo";
/** Function Section */
export type FunctionTableKeyCode =
  // {Esc} or {⎋}.
  | "Escape"
  | "F1"
  // {function} key.
  | "Fn";
export type KeyCode = WritingSystemTableKeyCode | FunctionTableKeyCode;
"""


class TestGenerate:

    def test_example_round_trip(self, example_document):
        assert generate(example_document, StyleConfig()) == EXPECTED_EXAMPLE

    def test_multi_table_document(self, multi_table_document):
        assert generate(multi_table_document, StyleConfig()) == EXPECTED_MULTI_TABLE

    def test_section_order_follows_document(self, multi_table_document):
        output = generate(multi_table_document, StyleConfig())
        assert output.index("WritingSystemTableKeyCode =") < output.index("FunctionTableKeyCode =")

    def test_deterministic(self, multi_table_document):
        style = StyleConfig.model_validate({"singleQuote": True})
        assert generate(multi_table_document, style) == generate(multi_table_document, style)

    def test_single_quote_style(self, example_document):
        output = generate(example_document, StyleConfig.model_validate({"singleQuote": True}))
        assert "| 'FooBar'" in output

    def test_decoded_line_break_stays_in_comment(self):
        document = 'BEGIN_CODE_TABLE s "S" CODE KeyA one&#10;two CODE KeyB END_CODE_TABLE'
        lines = generate(document, StyleConfig()).splitlines()
        assert "  // one two" in lines
        assert "two" not in lines

    def test_section_description_not_normalized(self):
        document = 'BEGIN_CODE_TABLE s "Keys &amp; KEYCAP" CODE KeyA END_CODE_TABLE'
        assert "/** Keys &amp; KEYCAP */" in generate(document, StyleConfig())


class TestMain:

    def test_writes_output(self, tmp_path, example_document):
        source = tmp_path / "index-source.txt"
        source.write_text(example_document, encoding="utf-8")
        style = tmp_path / ".prettierrc"
        style.write_text(json.dumps({"printWidth": 80}), encoding="utf-8")
        output = tmp_path / "index.d.ts"

        main(["--source", str(source), "--style", str(style), "--output", str(output)])

        assert output.read_text(encoding="utf-8") == EXPECTED_EXAMPLE

    def test_malformed_input_writes_nothing(self, tmp_path):
        source = tmp_path / "index-source.txt"
        source.write_text("no tables at all", encoding="utf-8")
        output = tmp_path / "index.d.ts"

        with pytest.raises(SystemExit) as excinfo:
            main(["--source", str(source), "--style", str(tmp_path / "missing"), "--output", str(output)])

        assert excinfo.value.code == 1
        assert not output.exists()

    def test_crlf_written_verbatim(self, tmp_path, example_document):
        source = tmp_path / "index-source.txt"
        source.write_text(example_document, encoding="utf-8")
        style = tmp_path / ".prettierrc"
        style.write_text(json.dumps({"endOfLine": "crlf"}), encoding="utf-8")
        output = tmp_path / "index.d.ts"

        main(["--source", str(source), "--style", str(style), "--output", str(output)])

        assert output.read_bytes().count(b"\r\n") == 6

    def test_malformed_style_json_exits_cleanly(self, tmp_path, example_document):
        source = tmp_path / "index-source.txt"
        source.write_text(example_document, encoding="utf-8")
        style = tmp_path / ".prettierrc"
        style.write_text("{printWidth: 80", encoding="utf-8")
        output = tmp_path / "index.d.ts"

        with pytest.raises(SystemExit) as excinfo:
            main(["--source", str(source), "--style", str(style), "--output", str(output)])

        assert excinfo.value.code == 1
        assert not output.exists()

    def test_invalid_style_option_exits_cleanly(self, tmp_path, example_document):
        source = tmp_path / "index-source.txt"
        source.write_text(example_document, encoding="utf-8")
        style = tmp_path / ".prettierrc"
        style.write_text(json.dumps({"printWidth": "wide"}), encoding="utf-8")
        output = tmp_path / "index.d.ts"

        with pytest.raises(SystemExit) as excinfo:
            main(["--source", str(source), "--style", str(style), "--output", str(output)])

        assert excinfo.value.code == 1
        assert not output.exists()
