from syntax.lexer import Token, TokenType
from syntax.parser import Parser, ParserState
from syntax.parser_registry import ParserRegistry
from syntax.programming_language import ProgrammingLanguage


@ParserRegistry.register_parser(ProgrammingLanguage.TEXT)
class TextParser(Parser):
    """
    Parser for text.  Every non-empty line is a single TEXT token.
    """

    def parse(self, prev_parser_state: ParserState | None, input_str: str) -> None:
        """
        Parse the input string.

        Args:
            prev_parser_state: Ignored
            input_str: The input string to parse
        """
        if input_str:
            self._tokens.append(Token(
                type=TokenType.TEXT,
                value=input_str,
                start=0
            ))
