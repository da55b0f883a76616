"""Display-language selection shared by every page of one visitor."""

import logging

from delfina_home.application.interfaces import KeyValueStore
from delfina_home.domain.entities import DEFAULT_LANGUAGE, Language, LocalizedString

logger = logging.getLogger(__name__)

LANGUAGE_STORAGE_KEY = "delfina_lang"


class LanguageContext:
    """Holds the active language and persists changes to a key/value store.

    The stored preference is read once when the context is created; values
    that are not a supported language fall back to the default.
    """

    def __init__(self, store: KeyValueStore, default: Language = DEFAULT_LANGUAGE):
        self._store = store
        self._language = self._load(default)

    def _load(self, default: Language) -> Language:
        saved = self._store.get(LANGUAGE_STORAGE_KEY)
        if not saved:
            return default
        try:
            return Language(saved)
        except ValueError:
            logger.debug("Ignoring unsupported stored language %r", saved)
            return default

    @property
    def language(self) -> Language:
        return self._language

    def set_language(self, language: Language | str) -> None:
        self._language = Language(language)
        self._store.set(LANGUAGE_STORAGE_KEY, self._language.value)

    def select(self, value: LocalizedString) -> str:
        return value.get(self._language)
