"""Exceptions raised by codefade."""


class CodeFadeError(Exception):
    """Base class for codefade errors."""


class CodeThemeError(CodeFadeError):
    """Raised when a theme definition cannot be used."""

    def __init__(self, message: str, theme_name: str | None = None, rule: str | None = None) -> None:
        """
        Initialize the error.

        Args:
            message: Error description
            theme_name: Name of the theme being loaded, if known
            rule: The rule label that was rejected, if any
        """
        self.message = message
        self.theme_name = theme_name
        self.rule = rule

        details = message
        if theme_name:
            details = f"{details} (theme '{theme_name}')"

        if rule:
            details = f"{details} (rule '{rule}')"

        super().__init__(details)
