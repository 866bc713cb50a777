from __future__ import annotations

import pytest

from swiss_health_tracker.constants import LANGUAGE_CODE_KEY, LANGUAGE_NAMESPACE
from swiss_health_tracker.i18n import LanguageRepository, coerce_language, translate_text
from swiss_health_tracker.storage import PreferencesStore


@pytest.mark.parametrize(("code", "expected"), [("fr", "fr"), ("en", "en"), ("de", "fr"), (None, "fr"), ("", "fr")])
def test_coerce_language_falls_back_to_french(code: object, expected: str) -> None:
    assert coerce_language(code) == expected


def test_translate_text_supports_tuples_and_delimited_strings() -> None:
    assert translate_text(("Objectifs", "Goals"), "en") == "Goals"
    assert translate_text(("Objectifs", "Goals"), "xx") == "Objectifs"
    assert translate_text("Résultats / Results", "en") == "Results"
    assert translate_text("Swiss Health", "en") == "Swiss Health"


def test_language_repository_persists_choice(store: PreferencesStore) -> None:
    repository = LanguageRepository(store)

    assert repository.get_language() == "fr"
    assert repository.set_language("en") == "en"
    assert store.get(LANGUAGE_NAMESPACE, LANGUAGE_CODE_KEY) == "en"
    assert LanguageRepository(store).get_language() == "en"


def test_language_repository_normalizes_unknown_codes(store: PreferencesStore) -> None:
    store.set(LANGUAGE_NAMESPACE, LANGUAGE_CODE_KEY, "it")

    repository = LanguageRepository(store)

    assert repository.get_language() == "fr"
    assert repository.set_language("es") == "fr"
