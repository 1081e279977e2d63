"""
Utilities for converting between language names, file extensions and ProgrammingLanguage values.
"""

import os
import logging
from typing import Dict, List

from syntax.programming_language import ProgrammingLanguage


class ProgrammingLanguageUtils:
    """
    Utility class for handling programming language conversions.
    """

    _logger = logging.getLogger("LanguageUtils")

    # Mapping from lowercase language names to enum members
    _NAME_TO_LANGUAGE: Dict[str, ProgrammingLanguage] = {
        "javascript": ProgrammingLanguage.JAVASCRIPT,
        "js": ProgrammingLanguage.JAVASCRIPT,
        "json": ProgrammingLanguage.JSON,
        "plaintext": ProgrammingLanguage.TEXT,
        "text": ProgrammingLanguage.TEXT,
        "txt": ProgrammingLanguage.TEXT,
        "typescript": ProgrammingLanguage.TYPESCRIPT,
        "ts": ProgrammingLanguage.TYPESCRIPT,

        # Empty string defaults to text
        "": ProgrammingLanguage.TEXT
    }

    _LANGUAGE_TO_NAME: Dict[ProgrammingLanguage, str] = {
        ProgrammingLanguage.JAVASCRIPT: "javascript",
        ProgrammingLanguage.JSON: "json",
        ProgrammingLanguage.TEXT: "plaintext",
        ProgrammingLanguage.TYPESCRIPT: "typescript",
        ProgrammingLanguage.UNKNOWN: ""
    }

    _EXTENSION_TO_LANGUAGE: Dict[str, ProgrammingLanguage] = {
        '.cjs': ProgrammingLanguage.JAVASCRIPT,
        '.js': ProgrammingLanguage.JAVASCRIPT,
        '.json': ProgrammingLanguage.JSON,
        '.jsx': ProgrammingLanguage.JAVASCRIPT,
        '.mjs': ProgrammingLanguage.JAVASCRIPT,
        '.ts': ProgrammingLanguage.TYPESCRIPT,
        '.tsx': ProgrammingLanguage.TYPESCRIPT,
        '.txt': ProgrammingLanguage.TEXT
    }

    @classmethod
    def from_name(cls, name: str) -> ProgrammingLanguage:
        """
        Convert a language name to a ProgrammingLanguage.

        Args:
            name: Language name, case-insensitive

        Returns:
            The matching language, or ProgrammingLanguage.UNKNOWN
        """
        language = cls._NAME_TO_LANGUAGE.get(name.strip().lower(), ProgrammingLanguage.UNKNOWN)
        if language == ProgrammingLanguage.UNKNOWN:
            cls._logger.debug("Unknown language name: %s", name)

        return language

    @classmethod
    def get_name(cls, language: ProgrammingLanguage) -> str:
        """Get the canonical lowercase name for a language."""
        return cls._LANGUAGE_TO_NAME.get(language, "")

    @classmethod
    def from_file_extension(cls, filename: str) -> ProgrammingLanguage:
        """
        Work out the language of a file from its extension.

        Args:
            filename: File name or path

        Returns:
            The matching language, or ProgrammingLanguage.TEXT if the extension is not known
        """
        _, ext = os.path.splitext(filename)
        return cls._EXTENSION_TO_LANGUAGE.get(ext.lower(), ProgrammingLanguage.TEXT)

    @classmethod
    def get_supported_file_extensions(cls) -> List[str]:
        """Get every file extension that maps to a language."""
        return sorted(cls._EXTENSION_TO_LANGUAGE)
