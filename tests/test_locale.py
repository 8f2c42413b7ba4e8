"""Unit tests for the locale tables."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

import pytest
from models import locale
from models.locale import Language, UIString, strings_for, system_prompt, translate


class TestLocale:
    """Test suite for languages, UI strings and system prompts."""

    @pytest.mark.parametrize("language", list(Language))
    def test_every_key_translated(self, language):
        """Every UI string key has non-empty text in every language."""
        for key in UIString:
            assert translate(language, key)

    @pytest.mark.parametrize("language", list(Language))
    def test_every_language_has_system_prompt(self, language):
        assert system_prompt(language)

    def test_prompts_differ_by_language(self):
        assert system_prompt(Language.ZH) != system_prompt(Language.EN)
        assert "interview assistant" in system_prompt(Language.EN)
        assert "面試助手" in system_prompt(Language.ZH)

    def test_toggled_switches_between_two_languages(self):
        assert Language.ZH.toggled() is Language.EN
        assert Language.EN.toggled() is Language.ZH

    def test_error_strings(self):
        assert translate(Language.EN, UIString.ERROR) == (
            "Sorry, there was an error processing your question. Please try again."
        )
        assert translate(Language.ZH, UIString.ERROR) == "抱歉，處理您的問題時發生錯誤。請重試。"

    def test_strings_for_uses_key_names(self):
        strings = strings_for(Language.EN)
        assert strings["askQuestion"] == "Ask Question"
        assert set(strings) == {key.value for key in UIString}

    def test_missing_translation_is_detected(self, monkeypatch):
        """A table lacking a key fails the completeness check."""
        incomplete = dict(locale.TRANSLATIONS[Language.EN])
        del incomplete[UIString.SCROLL_HINT]
        monkeypatch.setitem(locale.TRANSLATIONS, Language.EN, incomplete)

        with pytest.raises(RuntimeError, match="scrollHint"):
            locale._check_tables()
