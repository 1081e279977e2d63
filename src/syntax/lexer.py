from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import List, Callable, Set, ClassVar, Dict


class TokenType(IntEnum):
    """Type of lexical token."""
    COMMENT = auto()
    ELEMENT = auto()
    ERROR = auto()
    FUNCTION_OR_METHOD = auto()
    IDENTIFIER = auto()
    JSON_KEY = auto()
    KEYWORD = auto()
    NUMBER = auto()
    OPERATOR = auto()
    PREPROCESSOR = auto()
    REGEXP = auto()
    STRING = auto()
    TEXT = auto()
    TYPE = auto()


@dataclass
class Token:
    """
    Represents a token in the input stream.

    Attributes:
        type: The type of the token
        value: The string value of the token
        start: The starting position of the token in the input stream
    """
    type: TokenType
    value: str
    start: int

    @property
    def end(self) -> int:
        """Position one past the last character of the token."""
        return self.start + len(self.value)


@dataclass
class LexerState:
    """
    State information for the Lexer.
    """


class Lexer(ABC):
    """
    Base lexer class.

    Lexers work one line at a time.  Anything that must survive a line break (an open
    block comment, a template literal) is carried in a LexerState subclass.
    """

    # Character lookup tables - shared by all subclasses
    _WHITESPACE_CHARS: ClassVar[Set[str]] = set(" \t\r\v\f\u00A0\u1680\u2028\u2029\u202F\u205F\u3000")
    _LETTER_CHARS: ClassVar[Set[str]] = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
    _LETTER_DIGIT_UNDERSCORE_CHARS: ClassVar[Set[str]] = set(
        "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
    )
    _DIGIT_CHARS: ClassVar[Set[str]] = set("0123456789")
    _HEX_CHARS: ClassVar[Set[str]] = set("0123456789abcdefABCDEF")
    _BINARY_CHARS: ClassVar[Set[str]] = set("01")
    _OCTAL_CHARS: ClassVar[Set[str]] = set("01234567")

    # Add the Unicode whitespace range \u2000-\u200A
    for i in range(0x2000, 0x200B):
        _WHITESPACE_CHARS.add(chr(i))

    # Subclasses override these with their own operators
    _OPERATORS: ClassVar[List[str]] = []
    _OPERATORS_MAP: ClassVar[Dict[str, List[str]]] = {}

    def __init__(self) -> None:
        self._input: str = ""
        self._input_len: int = 0
        self._position: int = 0
        self._tokens: List[Token] = []
        self._next_token: int = 0

    @abstractmethod
    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        """
        Get the lexing function that matches a given start character.

        Args:
            ch: The start character

        Returns:
            The appropriate lexing function for the character
        """

    @abstractmethod
    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> LexerState | None:
        """
        Lex a single line of input.

        Args:
            prev_lexer_state: The lexer state at the end of the previous line, if any
            input_str: The line to lex, without its trailing newline

        Returns:
            The lexer state at the end of this line
        """

    def _inner_lex(self) -> None:
        """Lex every remaining character of the input."""
        while self._position < self._input_len:
            ch = self._input[self._position]
            self._get_lexing_function(ch)()

    def get_next_token(self) -> Token | None:
        """
        Gets the next token from the input.

        Returns:
            The next Token available or None if there are no tokens left.
        """
        if self._next_token >= len(self._tokens):
            return None

        token = self._tokens[self._next_token]
        self._next_token += 1
        return token

    def peek_next_token(self, offset: int = 0) -> Token | None:
        """
        Get the token that is 'offset' positions ahead without consuming anything.

        Args:
            offset: How many tokens to look ahead (default 0)

        Returns:
            The token at the specified offset, or None if there is no such token
        """
        index = self._next_token + offset
        if index >= len(self._tokens):
            return None

        return self._tokens[index]

    def _read_whitespace(self) -> None:
        """
        Skip whitespace.  Whitespace never produces a token.
        """
        self._position += 1
        while self._position < self._input_len and self._input[self._position] in self._WHITESPACE_CHARS:
            self._position += 1

    def _read_operator(self) -> None:
        """
        Read the longest operator that matches at the current position.

        Anything that isn't a known operator becomes a single character ERROR token.
        """
        start = self._position
        for op in self._OPERATORS_MAP.get(self._input[start], []):
            if self._input.startswith(op, start):
                self._position += len(op)
                self._tokens.append(Token(type=TokenType.OPERATOR, value=op, start=start))
                return

        self._position += 1
        self._tokens.append(Token(type=TokenType.ERROR, value=self._input[start], start=start))

    @staticmethod
    def build_operator_map(operators: List[str]) -> Dict[str, List[str]]:
        """
        Build an operator map from a list of operators.

        Args:
            operators: List of operator strings

        Returns:
            A dictionary mapping first characters to the operators starting with that
            character, longest first so matching is greedy
        """
        operator_map: Dict[str, List[str]] = {}
        for op in operators:
            if not op:
                continue

            operator_map.setdefault(op[0], []).append(op)

        for operators_list in operator_map.values():
            operators_list.sort(key=len, reverse=True)

        return operator_map

    def _is_letter(self, ch: str) -> bool:
        return ch in self._LETTER_CHARS

    def _is_digit(self, ch: str) -> bool:
        return ch in self._DIGIT_CHARS

    def _is_hex_digit(self, ch: str) -> bool:
        return ch in self._HEX_CHARS

    def _is_binary_digit(self, ch: str) -> bool:
        return ch in self._BINARY_CHARS

    def _is_octal_digit(self, ch: str) -> bool:
        return ch in self._OCTAL_CHARS

    def _is_letter_or_digit_or_underscore(self, ch: str) -> bool:
        return ch in self._LETTER_DIGIT_UNDERSCORE_CHARS

    def _is_whitespace(self, ch: str) -> bool:
        """
        Determines if a character is a non-newline whitespace.
        """
        return ch in self._WHITESPACE_CHARS
