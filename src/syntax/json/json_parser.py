from syntax.json.json_lexer import JSONLexer
from syntax.lexer import TokenType
from syntax.parser import Parser, ParserState
from syntax.parser_registry import ParserRegistry
from syntax.programming_language import ProgrammingLanguage


@ParserRegistry.register_parser(ProgrammingLanguage.JSON)
class JSONParser(Parser):
    """
    Parser for JSON.

    Strings that are immediately followed by a colon are object keys and are
    reported as JSON_KEY tokens.
    """

    def parse(self, prev_parser_state: ParserState | None, input_str: str) -> None:
        """
        Parse the input string.

        Args:
            prev_parser_state: Ignored, JSON lines are independent
            input_str: The input string to parse
        """
        lexer = JSONLexer()
        lexer.lex(None, input_str)

        while True:
            token = lexer.get_next_token()
            if not token:
                break

            if token.type == TokenType.STRING:
                next_token = lexer.peek_next_token()
                if next_token and next_token.type == TokenType.OPERATOR and next_token.value == ':':
                    token.type = TokenType.JSON_KEY

            self._tokens.append(token)

        return None
