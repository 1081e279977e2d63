from typing import Dict, List, Type, Callable

from syntax.parser import Parser
from syntax.programming_language import ProgrammingLanguage


class ParserRegistry:
    """
    A registry for parser classes.

    Parser modules register themselves with the decorator when they are imported, so
    the registry never needs to import them and no import cycles arise.
    """

    _instance = None
    _parser_classes: Dict[ProgrammingLanguage, Type[Parser]] = {}

    def __new__(cls) -> "ParserRegistry":
        """
        Implement the singleton pattern to ensure only one registry exists.

        Returns:
            The single ParserRegistry instance
        """
        if cls._instance is None:
            cls._instance = super(ParserRegistry, cls).__new__(cls)

        return cls._instance

    @classmethod
    def register_parser(cls, language: ProgrammingLanguage) -> Callable[[Type[Parser]], Type[Parser]]:
        """
        Register a parser class for a specific programming language.

        This is designed to be used as a decorator on parser classes.

        Args:
            language: The programming language enum value to register the parser for

        Returns:
            A decorator function that registers the parser class

        Example:
            @ParserRegistry.register_parser(ProgrammingLanguage.JSON)
            class JSONParser(Parser):
                ...
        """
        def decorator(parser_class: Type[Parser]) -> Type[Parser]:
            cls._parser_classes[language] = parser_class
            return parser_class

        return decorator

    @classmethod
    def create_parser(cls, language: ProgrammingLanguage) -> Parser | None:
        """
        Create a parser instance for the specified programming language.

        Args:
            language: The language to create a parser for

        Returns:
            A new parser, or None if no parser is registered for the language
        """
        parser_class = cls._parser_classes.get(language)
        if parser_class:
            return parser_class()

        return None

    @classmethod
    def supported_languages(cls) -> List[ProgrammingLanguage]:
        """Languages that currently have a registered parser."""
        return sorted(cls._parser_classes)
