from enum import IntEnum, auto


class ProgrammingLanguage(IntEnum):
    """Programming language enum."""
    UNKNOWN = -1
    JAVASCRIPT = auto()
    JSON = auto()
    TEXT = auto()
    TYPESCRIPT = auto()
