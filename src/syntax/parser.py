from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from syntax.lexer import LexerState, Token


@dataclass
class ParserState:
    """
    State information for the Parser.

    Attributes:
        lexer_state: State of the underlying lexer at the end of the line
        parsing_continuation: True if the line ended part way through a multi-line construct
        continuation_state: Opaque marker that changes whenever the continuation changes
    """
    lexer_state: LexerState | None = None
    parsing_continuation: bool = False
    continuation_state: int = 0


class Parser(ABC):
    """
    Base class for line-oriented language parsers.

    A parser is created per line.  The state returned from one line is handed to the
    parser for the next line so multi-line constructs are tracked.
    """

    def __init__(self) -> None:
        self._tokens: List[Token] = []
        self._next_token: int = 0
        self._dialect: str = ""

    def configure(self, dialect: str) -> "Parser":
        """
        Select a grammar dialect.

        Args:
            dialect: Dialect name; an empty string selects the default grammar

        Returns:
            This parser, to allow chaining
        """
        self._dialect = dialect
        return self

    @abstractmethod
    def parse(self, prev_parser_state: ParserState | None, input_str: str) -> ParserState | None:
        """
        Parse a single line.

        Args:
            prev_parser_state: The parser state at the end of the previous line, if any
            input_str: The line to parse, without its trailing newline

        Returns:
            The parser state at the end of this line
        """

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
