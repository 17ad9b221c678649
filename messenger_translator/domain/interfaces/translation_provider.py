"""Interface for translation backends (Strategy Pattern).

This allows switching between different translation services
(Google Cloud Translation, DeepL, a self-hosted engine, ...).
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, List


@dataclass
class Language:
    """A language supported by the translation backend."""
    code: str
    name: str


@dataclass
class TranslationResult:
    """Result of a single translation request."""
    text: str
    target_language: str
    detected_source_language: Optional[str] = None


class ITranslationProvider(ABC):
    """Interface for translation providers following Strategy Pattern."""

    @abstractmethod
    def translate(self, text: str, target_language: str) -> TranslationResult:
        """
        Translate text into the target language.

        Args:
            text: Text to translate (source language is auto-detected)
            target_language: Target language code

        Returns:
            TranslationResult

        Raises:
            TranslationError: If the backend call fails
        """
        pass

    @abstractmethod
    def get_languages(self, display_locale: str) -> List[Language]:
        """
        List supported languages, with names localized to display_locale.

        Raises:
            TranslationError: If the backend call fails
        """
        pass
