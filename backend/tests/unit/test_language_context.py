"""Unit tests for the LanguageContext and the localized value objects."""

import pytest

from delfina_home.application.services import LanguageContext
from delfina_home.application.services.language_context import LANGUAGE_STORAGE_KEY
from delfina_home.domain.entities import Language, LocalizedString, category_label
from delfina_home.infrastructure.storage.key_value_stores import InMemoryKeyValueStore


def test_defaults_to_albanian_without_stored_preference():
    context = LanguageContext(InMemoryKeyValueStore())
    assert context.language is Language.SQ


def test_restores_stored_preference():
    context = LanguageContext(InMemoryKeyValueStore({LANGUAGE_STORAGE_KEY: "en"}))
    assert context.language is Language.EN


def test_unsupported_stored_value_falls_back_to_default():
    context = LanguageContext(InMemoryKeyValueStore({LANGUAGE_STORAGE_KEY: "de"}))
    assert context.language is Language.SQ


def test_set_language_persists_choice():
    store = InMemoryKeyValueStore()
    context = LanguageContext(store)

    context.set_language("en")

    assert context.language is Language.EN
    assert store.get(LANGUAGE_STORAGE_KEY) == "en"
    assert LanguageContext(store).language is Language.EN


def test_set_language_rejects_unknown_code():
    context = LanguageContext(InMemoryKeyValueStore())
    with pytest.raises(ValueError):
        context.set_language("fr")


def test_select_follows_active_language():
    value = LocalizedString(sq="Kuzhinat", en="Kitchens")
    context = LanguageContext(InMemoryKeyValueStore())
    assert context.select(value) == "Kuzhinat"

    context.set_language(Language.EN)
    assert context.select(value) == "Kitchens"


def test_localized_string_blank_when_either_side_empty():
    assert LocalizedString(sq="Divan", en=" ").is_blank()
    assert not LocalizedString(sq="Divan", en="Sofa").is_blank()


@pytest.mark.parametrize(
    ("category", "language", "label"),
    [
        ("Kuzhinat", Language.SQ, "Kuzhinat"),
        ("Kuzhinat", Language.EN, "Kitchens"),
        ("Dhomat e Gjumit", Language.EN, "Bedrooms"),
        ("Garden", Language.EN, "Garden"),
    ],
)
def test_category_label(category: str, language: Language, label: str):
    assert category_label(category, language) == label
