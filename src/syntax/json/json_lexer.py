from dataclasses import dataclass
from typing import Callable

from syntax.lexer import Lexer, LexerState, Token, TokenType


@dataclass
class JSONLexerState(LexerState):
    """
    State information for the JSON lexer.  JSON has no multi-line constructs.
    """


class JSONLexer(Lexer):
    """
    Lexer for JSON.

    This lexer handles JSON-specific syntax including strings, numbers,
    the literal names and structural elements.  Anything outside the JSON
    grammar is reported as an ERROR token.
    """

    _LITERALS = ('true', 'false', 'null')
    _ESCAPES = '"\\/bfnrt'

    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> JSONLexerState:
        """
        Lex all the tokens in the input.

        Args:
            prev_lexer_state: Optional previous lexer state
            input_str: The input string to parse

        Returns:
            Updated lexer state
        """
        self._input = input_str
        self._input_len = len(input_str)
        self._inner_lex()
        return JSONLexerState()

    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        if self._is_whitespace(ch):
            return self._read_whitespace

        if ch == '"':
            return self._read_string

        if ch in '{}[],:':
            return self._read_punctuation

        if ch == '-' or self._is_digit(ch):
            return self._read_number

        return self._read_literal

    def _read_string(self) -> None:
        """
        Read a JSON string.  Invalid escapes and unterminated strings are errors.
        """
        start = self._position
        self._position += 1
        while self._position < self._input_len:
            ch = self._input[self._position]
            if ch == '"':
                self._position += 1
                self._add_token(TokenType.STRING, start)
                return

            if ch == '\\':
                if not self._read_escape():
                    self._add_token(TokenType.ERROR, start)
                    return

                continue

            self._position += 1

        self._add_token(TokenType.ERROR, start)

    def _read_escape(self) -> bool:
        """
        Consume an escape sequence at the current position.

        Returns:
            True if the escape sequence is valid
        """
        next_ch = self._input[self._position + 1] if self._position + 1 < self._input_len else ''
        if next_ch and next_ch in self._ESCAPES:
            self._position += 2
            return True

        if next_ch == 'u':
            hex_digits = self._input[self._position + 2:self._position + 6]
            if len(hex_digits) == 4 and all(self._is_hex_digit(d) for d in hex_digits):
                self._position += 6
                return True

        self._position = min(self._position + 2, self._input_len)
        return False

    def _read_number(self) -> None:
        """
        Read a JSON number: optional minus, integer part, fraction and exponent.
        """
        start = self._position
        if self._input[self._position] == '-':
            self._position += 1

        # A leading zero must not be followed by another digit
        if self._input.startswith('0', self._position) and self._position + 1 < self._input_len \
                and self._is_digit(self._input[self._position + 1]):
            self._position += 2
            self._add_token(TokenType.ERROR, start)
            return

        valid = self._read_digits()
        if valid and self._input.startswith('.', self._position):
            self._position += 1
            valid = self._read_digits()

        if valid and self._position < self._input_len and self._input[self._position] in 'eE':
            self._position += 1
            if self._position < self._input_len and self._input[self._position] in '+-':
                self._position += 1

            valid = self._read_digits()

        self._add_token(TokenType.NUMBER if valid else TokenType.ERROR, start)

    def _read_digits(self) -> bool:
        """
        Read a sequence of digits.

        Returns:
            True if at least one digit was read
        """
        start = self._position
        while self._position < self._input_len and self._is_digit(self._input[self._position]):
            self._position += 1

        return self._position > start

    def _read_literal(self) -> None:
        """
        Read one of the literal names true, false or null.
        """
        start = self._position
        self._position += 1
        while self._position < self._input_len and self._is_letter(self._input[self._position]):
            self._position += 1

        value = self._input[start:self._position]
        self._add_token(TokenType.KEYWORD if value in self._LITERALS else TokenType.ERROR, start)

    def _read_punctuation(self) -> None:
        start = self._position
        self._position += 1
        self._add_token(TokenType.OPERATOR, start)

    def _add_token(self, token_type: TokenType, start: int) -> None:
        self._tokens.append(Token(type=token_type, value=self._input[start:self._position], start=start))
