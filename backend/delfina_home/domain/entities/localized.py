"""Bilingual value objects: every user-facing text is stored in Albanian and English."""

from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    """Supported display languages."""

    SQ = "sq"
    EN = "en"


DEFAULT_LANGUAGE = Language.SQ


@dataclass
class LocalizedString:
    """A text value carried in both supported languages.

    Both variants are always present (empty strings are allowed); callers read
    the value through ``get`` with the active language.
    """

    sq: str = ""
    en: str = ""

    def get(self, language: Language) -> str:
        return self.en if Language(language) is Language.EN else self.sq

    def is_blank(self) -> bool:
        """True when either language variant is empty or whitespace."""
        return not self.sq.strip() or not self.en.strip()
