from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageConfig:
    """Markers that split a program into statements and statements into parts"""

    terminator: str = ";"
    comment_marker: str = "//"
    assign_marker: str = ":="


DEFAULT_CONFIG = LanguageConfig()
