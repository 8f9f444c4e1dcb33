# -*- coding: utf-8 -*-
"""
Unit Tests for the Translation File Parser

Tests for TranslationFileParser and the parser.core entry points.
"""

import pytest

from conftest import MULTILINE_SOURCE, MULTILINE_TARGET
from parser import TranslationFileParser, parse_text, parse_lines, parse_file, parse_table
from simloc_enums import EntryKind
from simloc_exceptions import LocaleLoadError, ParseError, UnterminatedBlockError


class TestSingleLineEntries:
    """Tests for "source" => "target" lines."""

    def test_simple_pair(self):
        """Test the most basic entry."""
        entries = parse_text('"Hello" => "Merhaba"')

        assert len(entries) == 1
        assert entries[0].source == "Hello"
        assert entries[0].target == "Merhaba"
        assert entries[0].kind == EntryKind.SINGLE_LINE
        assert entries[0].line_number == 1

    def test_backslash_n_is_literal(self):
        """Test that \\n is kept as two characters."""
        entries = parse_text(r'"a\nb" => "c\nd"')

        assert entries[0].source == "a\\nb"
        assert entries[0].target == "c\\nd"
        assert "\n" not in entries[0].source

    def test_escaped_quote(self):
        """Test that \\" becomes a literal quote and does not close the phrase."""
        entries = parse_text(r'"Say \"hi\"" => "\"Selam\" de"')

        assert entries[0].source == 'Say "hi"'
        assert entries[0].target == '"Selam" de'

    def test_whitespace_around_arrow(self):
        """Test flexible spacing."""
        entries = parse_text('  "A"=>"B"\n\t"C"    =>   "D"  ')

        assert [e.as_pair() for e in entries] == [("A", "B"), ("C", "D")]

    def test_empty_phrases(self):
        """Test that empty strings are accepted."""
        entries = parse_text('"" => ""')
        assert entries[0].as_pair() == ("", "")

    def test_unicode_content(self):
        """Test non-ASCII phrases."""
        entries = parse_text('"Hello" => "مرحبًا"')
        assert entries[0].target == "مرحبًا"

    def test_line_numbers(self):
        """Test line numbers skip blanks and comments correctly."""
        entries = parse_text('// header\n\n"A" => "B"\n"C" => "D"\n')
        assert [e.line_number for e in entries] == [3, 4]


class TestRawBlocks:
    """Tests for #"..."# blocks."""

    def test_verbatim_content(self):
        """Test newlines, quotes and \\n are preserved."""
        text = '#"first "line"\n\nthird \\n line"#\n=>\n#"birinci\nikinci"#'
        entries = parse_text(text)

        assert len(entries) == 1
        assert entries[0].source == 'first "line"\n\nthird \\n line'
        assert entries[0].target == "birinci\nikinci"
        assert entries[0].kind == EntryKind.RAW_BLOCK
        assert entries[0].is_multiline

    def test_inline_raw_pair(self):
        """Test #"X"# => #"Y"# on one line."""
        entries = parse_text('#"X"# => #"Y"#')
        assert entries[0].as_pair() == ("X", "Y")

    def test_comment_like_text_inside_block(self):
        """Test that // inside a raw block is content, not a comment."""
        entries = parse_text('#"see http://example.com"#\n=>\n#"// not a comment"#')

        assert entries[0].source == "see http://example.com"
        assert entries[0].target == "// not a comment"

    def test_sample_file(self, tr_tr_text):
        """Test the documented Turkish example."""
        entries = parse_text(tr_tr_text)

        assert [e.source for e in entries] == [
            "Hello", "How are you?", "This is a long text", MULTILINE_SOURCE,
        ]
        assert entries[3].target == MULTILINE_TARGET
        assert entries[3].line_number == 5

    def test_inner_quote_hash_is_content(self):
        """Test that a "# inside the block does not close it."""
        entries = parse_text('#"use "#tag" here"#\n=>\n#"x"#')

        assert entries[0].source == 'use "#tag" here'
        assert entries[0].target == "x"

    def test_close_before_arrow_and_comment(self):
        """Test closing "# followed by spaces and => or a comment."""
        entries = parse_text('#"a "# b"#   => #"c"#  // note')
        assert entries[0].as_pair() == ('a "# b', "c")

    def test_crlf_is_normalized(self):
        """Test Windows line endings inside raw blocks."""
        entries = parse_text('#"a\r\nb"#\r\n=>\r\n#"c\r\nd"#\r\n')
        assert entries[0].as_pair() == ("a\nb", "c\nd")

    def test_bom_is_dropped(self):
        """Test a leading UTF-8 BOM."""
        entries = parse_text('\ufeff"Hello" => "Merhaba"')
        assert entries[0].source == "Hello"


class TestMixedFiles:
    """Tests for files mixing both syntaxes."""

    def test_all_entries_in_order(self, mixed_text):
        entries = parse_text(mixed_text)

        assert [e.as_pair() for e in entries] == [
            ("Hello", "Merhaba"),
            ('Line one\nLine "two".', 'Satır bir\nSatır "iki".'),
            ("Bye", "Hoşça kal"),
            ("inline", "satır içi"),
        ]
        assert [e.kind for e in entries] == [
            EntryKind.SINGLE_LINE, EntryKind.RAW_BLOCK,
            EntryKind.SINGLE_LINE, EntryKind.RAW_BLOCK,
        ]

    def test_empty_and_comment_only_files(self):
        """Test files without entries."""
        assert parse_text("") == []
        assert parse_text("\n\n   \n// nothing here\n") == []

    def test_parser_is_reusable(self, mixed_text):
        """Test that a parser instance resets between files."""
        parser = TranslationFileParser()
        first = parser.parse(mixed_text)
        second = parser.parse('"A" => "B"')

        assert len(first) == 4
        assert len(second) == 1


class TestParseFailures:
    """Malformed content fails the whole file."""

    def test_unterminated_raw_block(self):
        text = '"Hello" => "Merhaba"\n#"never\nclosed'
        with pytest.raises(UnterminatedBlockError) as exc_info:
            parse_text(text)

        assert exc_info.value.line_number == 2
        assert exc_info.value.line_content == '#"never'

    def test_missing_closing_quote(self):
        with pytest.raises(ParseError) as exc_info:
            parse_text('"A" => "B"\n"Hello => "Merhaba')
        assert exc_info.value.line_number == 2

    def test_missing_arrow(self):
        with pytest.raises(ParseError, match="Missing '=>'"):
            parse_text('"Hello" "Merhaba"')

    def test_missing_target(self):
        with pytest.raises(ParseError, match="Missing target"):
            parse_text('"Hello" =>')

    def test_dangling_arrow(self):
        with pytest.raises(ParseError, match="without a source"):
            parse_text('=> "Merhaba"')

    def test_quoted_entry_split_across_lines(self):
        with pytest.raises(ParseError, match="one line"):
            parse_text('"Hello"\n=> "Merhaba"')

    def test_mixed_syntax_in_one_entry(self):
        with pytest.raises(ParseError, match="same syntax"):
            parse_text('"Hello" => #"Merhaba"#')

    def test_two_entries_on_one_line(self):
        with pytest.raises(ParseError, match="one entry per line") as exc_info:
            parse_text('"Z" => "Y"\n"A" => "B" "C" => "D"')
        assert exc_info.value.line_number == 2

    def test_entry_after_raw_block_on_same_line(self):
        with pytest.raises(ParseError, match="one entry per line"):
            parse_text('#"X"# => #"Y"# "A" => "B"')

    def test_raw_close_inside_text_only(self):
        """A "# that is never at a line end leaves the block open."""
        with pytest.raises(UnterminatedBlockError):
            parse_text('#"abc"#def')

    def test_stray_characters(self):
        with pytest.raises(ParseError, match="Unexpected character"):
            parse_text('Hello => Merhaba')

    def test_single_slash_is_not_a_comment(self):
        with pytest.raises(ParseError):
            parse_text('/ not a comment')


class TestParserCore:
    """Tests for the module-level helpers."""

    def test_parse_lines(self):
        entries = parse_lines(['"A" => "B"\n', '"C" => "D"\r\n'])
        assert [e.as_pair() for e in entries] == [("A", "B"), ("C", "D")]

    def test_parse_file(self, localization_dir):
        entries = parse_file(localization_dir / "ar_QA")
        assert entries[0].as_pair() == ("Hello", "مرحبًا")

    def test_parse_file_missing(self, tmp_path):
        with pytest.raises(LocaleLoadError) as exc_info:
            parse_file(tmp_path / "xx_XX")
        assert exc_info.value.locale_id == "xx_XX"

    def test_parse_file_not_utf8(self, tmp_path):
        path = tmp_path / "bad"
        path.write_bytes(b'"\xff\xfe" => "x"')
        with pytest.raises(LocaleLoadError):
            parse_file(path)

    def test_parse_table(self):
        table = parse_table("tr_TR", '"Hello" => "Merhaba"')
        assert table.locale_id == "tr_TR"
        assert table["Hello"] == "Merhaba"
