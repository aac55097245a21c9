from dataclasses import dataclass
from enum import Enum
from typing import Union


class Language(Enum):
    JAVA = "Java"
    KOTLIN = "Kotlin"


@dataclass(frozen=True)
class UnsupportedLanguage:
    """Any language the renderer has no statement shapes for."""
    name: str

    @property
    def message(self) -> str:
        return f"Language not Supported: This plugin currently does not support {self.name}."


TargetLanguage = Union[Language, UnsupportedLanguage]


@dataclass(frozen=True)
class RenderMode:
    # Set from the project's build files, only meaningful for Kotlin
    uses_extensions_plugin: bool = False


def resolve_language(name: str) -> TargetLanguage:
    """Map an editor language display name to a target language (case-sensitive)."""
    for language in Language:
        if language.value == name:
            return language
    return UnsupportedLanguage(name)
