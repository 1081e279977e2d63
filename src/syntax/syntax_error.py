"""Exceptions raised by the syntax framework."""


class SyntaxParseError(Exception):
    """Raised when source text cannot be handed to a parser."""

    def __init__(self, message: str, language_name: str | None = None) -> None:
        """
        Initialize the error.

        Args:
            message: Error description
            language_name: Name of the language involved, if known
        """
        self.message = message
        self.language_name = language_name
        super().__init__(message)
