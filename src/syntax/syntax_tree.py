"""
Whole-document parsing and highlighting on top of the line-oriented parsers.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List

from syntax.lexer import Token, TokenType
from syntax.parser_registry import ParserRegistry
from syntax.programming_language import ProgrammingLanguage
from syntax.syntax_error import SyntaxParseError


@dataclass
class SyntaxTree:
    """
    The classification of a whole document.

    Attributes:
        text: The text that was parsed
        tokens: Tokens with absolute offsets into text, in ascending order
    """
    text: str
    tokens: List[Token] = field(default_factory=list)


# Class lists reported for each token type.  Tokens with more than one class report
# the most specific one first.
TOKEN_CLASSES: Dict[TokenType, str] = {
    TokenType.COMMENT: "tok-comment",
    TokenType.ELEMENT: "tok-element tok-identifier",
    TokenType.ERROR: "tok-error",
    TokenType.FUNCTION_OR_METHOD: "tok-function tok-identifier",
    TokenType.IDENTIFIER: "tok-identifier",
    TokenType.JSON_KEY: "tok-json-key tok-string",
    TokenType.KEYWORD: "tok-keyword",
    TokenType.NUMBER: "tok-number",
    TokenType.OPERATOR: "tok-operator",
    TokenType.PREPROCESSOR: "tok-preprocessor",
    TokenType.REGEXP: "tok-regexp",
    TokenType.STRING: "tok-string",
    TokenType.TEXT: "tok-text",
    TokenType.TYPE: "tok-type",
}


def token_class_list(token_type: TokenType) -> str | None:
    """Get the class list reported for a token type."""
    return TOKEN_CLASSES.get(token_type)


def parse_text(language: ProgrammingLanguage, text: str, dialect: str = "") -> SyntaxTree:
    """
    Parse a whole document.

    Each line is handed to a fresh parser along with the state left by the previous
    line.  Token offsets are converted from line-relative to document-relative.

    Args:
        language: Language to parse the text as
        text: The document
        dialect: Optional grammar dialect

    Returns:
        The parsed document

    Raises:
        SyntaxParseError: If no parser is registered for the language
    """
    tokens: List[Token] = []
    parser_state = None
    offset = 0
    for line in text.split('\n'):
        parser = ParserRegistry.create_parser(language)
        if parser is None:
            raise SyntaxParseError(f"No parser registered for {language.name}", language.name)

        if dialect:
            parser.configure(dialect)

        parser_state = parser.parse(parser_state, line)
        while True:
            token = parser.get_next_token()
            if token is None:
                break

            tokens.append(Token(type=token.type, value=token.value, start=token.start + offset))

        offset += len(line) + 1

    return SyntaxTree(text=text, tokens=tokens)


def highlight_tree(
    tree: SyntaxTree,
    callback: Callable[[int, int, str], None],
    class_namer: Callable[[TokenType], str | None] = token_class_list
) -> None:
    """
    Report every classified range of a parsed document.

    The callback receives (start, end, class_list) in non-decreasing end order.  Empty
    tokens and token types without a class list are skipped, as is anything between
    tokens, so whitespace and newlines are never reported.

    Args:
        tree: The parsed document
        callback: Called once per classified range
        class_namer: Maps token types to class lists
    """
    for token in tree.tokens:
        if not token.value:
            continue

        class_list = class_namer(token.type)
        if not class_list:
            continue

        callback(token.start, token.end, class_list)
