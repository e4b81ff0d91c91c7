# Area: Shared Tests
"""Tests for localized message lookup."""

import pytest

from word_duel._shared.localization import (
    DEFAULT_LANGUAGE,
    MESSAGES,
    Language,
    Localizer,
    format_message,
    lookup,
)


class TestLookup:
    """Tests for lookup() and format_message()."""

    def test_known_key(self):
        assert lookup(Language.ENGLISH, "winner") == "Winner: {0}!"

    def test_unknown_key_falls_back_to_key(self):
        assert lookup(Language.ENGLISH, "no_such_key") == "no_such_key"
        assert lookup(Language.RUSSIAN, "no_such_key") == "no_such_key"

    def test_positional_placeholders(self):
        assert format_message("{0} vs {1}", "alice", "bob") == "alice vs bob"

    def test_template_without_args_untouched(self):
        assert format_message("Used words: ") == "Used words: "

    def test_both_languages_define_the_same_keys(self):
        assert set(MESSAGES[Language.RUSSIAN]) == set(MESSAGES[Language.ENGLISH])

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            MESSAGES[Language.ENGLISH]["winner"] = "changed"


class TestLanguage:
    """Tests for the Language enum."""

    def test_menu_choices(self):
        assert Language.from_choice("1") is Language.RUSSIAN
        assert Language.from_choice(" 2 ") is Language.ENGLISH

    @pytest.mark.parametrize("choice", ["", "3", "en", "one"])
    def test_invalid_choice(self, choice):
        with pytest.raises(ValueError):
            Language.from_choice(choice)

    def test_default_is_russian(self):
        assert DEFAULT_LANGUAGE is Language.RUSSIAN


class TestLocalizer:
    """Tests for Localizer."""

    def test_formats_in_bound_language(self):
        assert Localizer(Language.ENGLISH).text("player_lost", "bob", 5) == (
            "\nbob failed to enter a word in 5 seconds and loses!"
        )
        assert Localizer(Language.RUSSIAN).text("winner", "боб") == "Победитель: боб!"

    def test_unknown_key_with_args(self):
        assert Localizer(Language.ENGLISH).text("mystery", 1, 2) == "mystery"
