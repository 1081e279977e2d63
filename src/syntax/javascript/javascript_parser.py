from dataclasses import dataclass

from syntax.javascript.javascript_lexer import JavaScriptLexer, JavaScriptLexerState
from syntax.lexer import TokenType
from syntax.parser import Parser, ParserState
from syntax.parser_registry import ParserRegistry
from syntax.programming_language import ProgrammingLanguage


@dataclass
class JavaScriptParserState(ParserState):
    """
    State information for the JavaScript parser.

    Attributes:
        in_element: Indicates if we're currently parsing an element
    """
    in_element: bool = False


@ParserRegistry.register_parser(ProgrammingLanguage.JAVASCRIPT)
class JavaScriptParser(Parser):
    """
    Parser for JavaScript code.

    This parser processes tokens from the JavaScript lexer and handles special cases
    like function calls and element access.  The "ts" and "typescript" dialects switch
    the lexer to the TypeScript keyword set.
    """

    _TYPESCRIPT_DIALECTS = ("ts", "typescript")

    def _is_typescript(self) -> bool:
        return self._dialect.lower() in self._TYPESCRIPT_DIALECTS

    def parse(self, prev_parser_state: ParserState | None, input_str: str) -> JavaScriptParserState:
        """
        Parse the input string using the provided parser state.

        Args:
            prev_parser_state: Optional previous parser state
            input_str: The input string to parse

        Returns:
            The updated parser state after parsing

        Note:
            The parser converts identifier tokens to FUNCTION_OR_METHOD tokens
            when they're followed by parentheses, and to ELEMENT tokens when
            they're part of a dotted access chain.
        """
        in_element = False
        prev_lexer_state = None
        if prev_parser_state:
            assert isinstance(prev_parser_state, JavaScriptParserState), \
                f"Expected JavaScriptParserState, got {type(prev_parser_state).__name__}"
            in_element = prev_parser_state.in_element
            prev_lexer_state = prev_parser_state.lexer_state

        lexer = JavaScriptLexer(typescript=self._is_typescript())
        lexer_state = lexer.lex(prev_lexer_state, input_str)

        while True:
            token = lexer.get_next_token()
            if not token:
                break

            if token.type == TokenType.OPERATOR and token.value in ('.', '?.'):
                in_element = True
                self._tokens.append(token)
                continue

            if token.type != TokenType.IDENTIFIER and not (token.type == TokenType.KEYWORD and token.value == 'this'):
                in_element = False
                self._tokens.append(token)
                continue

            next_token = lexer.peek_next_token()
            if next_token and next_token.type == TokenType.OPERATOR and next_token.value == '(':
                token.type = TokenType.FUNCTION_OR_METHOD

            elif in_element and token.type == TokenType.IDENTIFIER:
                token.type = TokenType.ELEMENT

            in_element = False
            self._tokens.append(token)

        assert isinstance(lexer_state, JavaScriptLexerState)
        parser_state = JavaScriptParserState()
        parser_state.continuation_state = 1 if lexer_state.in_block_comment else 0
        if lexer_state.in_template_literal:
            parser_state.continuation_state = 2

        parser_state.parsing_continuation = lexer_state.in_block_comment or lexer_state.in_template_literal
        parser_state.lexer_state = lexer_state
        parser_state.in_element = in_element
        return parser_state


@ParserRegistry.register_parser(ProgrammingLanguage.TYPESCRIPT)
class TypeScriptParser(JavaScriptParser):
    """
    Parser for TypeScript code, the JavaScript parser with the TypeScript dialect selected.
    """

    def __init__(self) -> None:
        super().__init__()
        self._dialect = "ts"
