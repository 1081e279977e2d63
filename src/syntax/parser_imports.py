"""Imports all parsers to ensure they are registered in the ParserRegistry."""

# pylint: disable=unused-import
from syntax.javascript.javascript_parser import JavaScriptParser, TypeScriptParser
from syntax.json.json_parser import JSONParser
from syntax.text.text_parser import TextParser
from syntax.parser_registry import ParserRegistry
# pylint: enable=unused-import
