# Area: Shared
"""
word_duel._shared.localization - Localized console text
=======================================================

Read-only message tables for the two supported languages and the
lookup/format helpers the console layer renders through.

Templates use positional ``{0}``-style placeholders. An unknown key is
returned unchanged, so a missing translation never raises.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Language(Enum):
    """Languages offered in the startup menu."""
    RUSSIAN = "ru"
    ENGLISH = "en"

    @classmethod
    def from_choice(cls, choice: str) -> "Language":
        """Map a menu answer ("1" or "2") to a language.

        Raises:
            ValueError: If the answer is not one of the menu entries.
        """
        choices = {"1": cls.RUSSIAN, "2": cls.ENGLISH}
        try:
            return choices[choice.strip()]
        except KeyError:
            raise ValueError(f"Unknown language choice: {choice!r}") from None


DEFAULT_LANGUAGE = Language.RUSSIAN


_RU = {
    "rules": (
        "Правила: игроки по очереди вводят слова из букв начального слова.\n"
        "Проигрывает тот, кто не может ввести слово за отведенное время."
    ),
    "select_language": "Выберите язык\n1. Русский\n2. English\nВведите 1 или 2: ",
    "invalid_language": "Некорректный выбор. Пожалуйста, введите 1 или 2.",
    "enter_player_name": "Введите имя игрока {0}: ",
    "invalid_player_name": "Имя игрока не может быть пустым!",
    "duplicate_player_name": "Это имя уже занято другим игроком!",
    "enter_initial_word": "Введите начальное слово ({0}-{1} символов): ",
    "word_length_error": "Слово должно быть от {0} до {1} символов!",
    "letters_only": "Слово должно содержать только буквы!",
    "set_time_limit": "Установите лимит времени на ход ({0}-{1} секунд): ",
    "invalid_number": "Некорректный ввод. Введите число от {0} до {1}.",
    "game_started": "\nИгра началась!",
    "initial_word": "Начальное слово: {0}",
    "player_turn": "\nХод игрока: {0}",
    "available_commands": "\nДоступные команды:",
    "enter_word": "Введите слово: ",
    "time_out": "\nВремя вышло!",
    "empty_input": "Пустой ввод не допускается!",
    "original_word_error": "Нельзя использовать начальное слово!",
    "word_used": "Это слово уже использовалось!",
    "invalid_word": "Неверное слово! Используйте только буквы из начального слова.",
    "player_lost": "\n{0} не успел ввести слово за {1} секунд и проиграл!",
    "winner": "Победитель: {0}!",
    "game_over": "Игра завершена!",
    "used_words": "Использованные слова: ",
    "command_show_words": "Все введенные слова в текущей игре:",
    "command_score": "Текущие результаты игроков:",
    "command_total_score": "Общие результаты всех игроков:",
    "score_line": "{0}: побед {1} из {2} игр",
    "score_unknown": "{0}: ...",
    "unknown_command": "Неизвестная команда!",
    "stats_save_error": "Не удалось сохранить статистику: {0}",
    "unexpected_error": "Произошла непредвиденная ошибка: {0}",
    "goodbye": "\nИгра прервана.",
}

_EN = {
    "rules": (
        "Rules: players take turns entering words made from the letters of the starting word.\n"
        "The player who fails to enter a word within the time limit loses."
    ),
    "select_language": "Select language:\n1. Русский\n2. English\nEnter 1 or 2: ",
    "invalid_language": "Invalid choice. Please enter 1 or 2.",
    "enter_player_name": "Enter player {0} name: ",
    "invalid_player_name": "Player name cannot be empty!",
    "duplicate_player_name": "That name is already taken by the other player!",
    "enter_initial_word": "Enter the starting word ({0}-{1} characters): ",
    "word_length_error": "The word must be between {0} and {1} characters long!",
    "letters_only": "The word must contain only letters!",
    "set_time_limit": "Set time limit per turn ({0}-{1} seconds): ",
    "invalid_number": "Invalid input. Please enter a number between {0} and {1}.",
    "game_started": "\nGame started!",
    "initial_word": "Starting word: {0}",
    "player_turn": "\nPlayer's turn: {0}",
    "available_commands": "\nAvailable commands:",
    "enter_word": "Enter a word: ",
    "time_out": "\nTime's up!",
    "empty_input": "Empty input is not allowed!",
    "original_word_error": "You can't use the starting word!",
    "word_used": "This word has already been used!",
    "invalid_word": "Invalid word! Use only letters from the starting word.",
    "player_lost": "\n{0} failed to enter a word in {1} seconds and loses!",
    "winner": "Winner: {0}!",
    "game_over": "Game over!",
    "used_words": "Used words: ",
    "command_show_words": "All words entered in current game:",
    "command_score": "Current players score:",
    "command_total_score": "Total score for all players:",
    "score_line": "{0}: {1} wins out of {2} games",
    "score_unknown": "{0}: ...",
    "unknown_command": "Unknown command!",
    "stats_save_error": "Failed to save statistics: {0}",
    "unexpected_error": "An unexpected error occurred: {0}",
    "goodbye": "\nGame interrupted.",
}

MESSAGES: Mapping[Language, Mapping[str, str]] = MappingProxyType({
    Language.RUSSIAN: MappingProxyType(_RU),
    Language.ENGLISH: MappingProxyType(_EN),
})


def lookup(language: Language, key: str) -> str:
    """Return the template for ``key``, or ``key`` itself if unknown."""
    return MESSAGES[language].get(key, key)


def format_message(template: str, *args: object) -> str:
    """Fill positional placeholders; templates without args pass through."""
    return template.format(*args) if args else template


class Localizer:
    """Message lookup bound to one language."""

    def __init__(self, language: Language = DEFAULT_LANGUAGE):
        self.language = language

    def text(self, key: str, *args: object) -> str:
        return format_message(lookup(self.language, key), *args)
