"""Syntax framework."""

from syntax.lexer import Token, TokenType, Lexer, LexerState
from syntax.parser import Parser, ParserState
from syntax.parser_registry import ParserRegistry
from syntax.programming_language import ProgrammingLanguage
from syntax.programming_language_utils import ProgrammingLanguageUtils
from syntax.syntax_error import SyntaxParseError
from syntax.syntax_tree import SyntaxTree, highlight_tree, parse_text, token_class_list, TOKEN_CLASSES
import syntax.parser_imports  # pylint: disable=unused-import


__all__ = [
    "Lexer",
    "LexerState",
    "Parser",
    "ParserRegistry",
    "ParserState",
    "ProgrammingLanguage",
    "ProgrammingLanguageUtils",
    "SyntaxParseError",
    "SyntaxTree",
    "TOKEN_CLASSES",
    "Token",
    "TokenType",
    "highlight_tree",
    "parse_text",
    "token_class_list"
]
