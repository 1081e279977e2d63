"""
Tests for JSON tokenization and parsing.
"""
import pytest

from syntax.json.json_lexer import JSONLexer
from syntax.json.json_parser import JSONParser
from syntax.lexer import TokenType


def lex(code):
    lexer = JSONLexer()
    lexer.lex(None, code)
    return list(lexer._tokens)


def parse(code):
    parser = JSONParser()
    parser.parse(None, code)
    tokens = []
    while True:
        token = parser.get_next_token()
        if token is None:
            break

        tokens.append(token)

    return tokens


class TestJSONLexer:
    """Test JSON tokens."""

    @pytest.mark.parametrize("number", ['0', '-1', '3.25', '-1.5e3', '2E+10'])
    def test_valid_numbers(self, number):
        """Test numbers that follow the JSON grammar."""
        tokens = lex(number)
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[0].value == number

    @pytest.mark.parametrize("number", ['01', '1.', '-'])
    def test_invalid_numbers(self, number):
        """Test numbers that break the JSON grammar."""
        tokens = lex(number)
        assert tokens[0].type == TokenType.ERROR

    def test_literals(self):
        """Test the literal names."""
        tokens = lex('true false null')
        assert [t.type for t in tokens] == [TokenType.KEYWORD] * 3

    def test_unknown_word(self):
        """Test that other words are errors."""
        tokens = lex('nope')
        assert tokens[0].type == TokenType.ERROR
        assert tokens[0].value == 'nope'

    def test_strings(self):
        """Test strings with valid escapes."""
        tokens = lex('"a\\n\\u00e9"')
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.STRING

    def test_invalid_escape(self):
        """Test that an invalid escape makes the string an error."""
        tokens = lex('"bad \\x"')
        assert tokens[0].type == TokenType.ERROR

    def test_unterminated_string(self):
        """Test that a string without a closing quote is an error."""
        tokens = lex('"open')
        assert tokens[0].type == TokenType.ERROR
        assert tokens[0].value == '"open'


class TestJSONParser:
    """Test key detection."""

    def test_object_keys(self):
        """Test that strings followed by a colon are keys."""
        tokens = parse('{"a": 1, "b": [true, "c"]}')
        types = [(t.value, t.type) for t in tokens if t.type != TokenType.OPERATOR]
        assert types == [
            ('"a"', TokenType.JSON_KEY),
            ('1', TokenType.NUMBER),
            ('"b"', TokenType.JSON_KEY),
            ('true', TokenType.KEYWORD),
            ('"c"', TokenType.STRING),
        ]
