"""
The "extract XML" editor action.

The action only talks to the editor through EditorHost; the extraction and
rendering it drives are plain functions of their inputs.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .build_probe import uses_extensions_plugin
from .languages import Language, RenderMode, UnsupportedLanguage, resolve_language
from .layout_parser import extract_bindings
from .renderer import render

logger = logging.getLogger(__name__)

NOTHING_HIGHLIGHTED = (
    "Nothing highlighted: Highlight an XML file name with your cursor before using the shortcut."
)
FILE_NOT_FOUND = (
    "File not found: The text highlighted does not match any files in your project. "
    "Highlight the entire xml file name without the '.xml' extension."
)


class Outcome(Enum):
    INSERTED = "inserted"
    EMPTY_SELECTION = "empty_selection"
    FILE_NOT_FOUND = "file_not_found"
    UNSUPPORTED_LANGUAGE = "unsupported_language"


@dataclass
class ExtractionResult:
    outcome: Outcome
    text: Optional[str] = None
    offset: Optional[int] = None

    @property
    def inserted(self) -> bool:
        return self.outcome is Outcome.INSERTED


class EditorHost(ABC):
    """What the action needs from the editor it runs in."""

    @abstractmethod
    def get_selection(self) -> Optional[str]:
        """Highlighted text, None or "" when nothing is highlighted."""

    @abstractmethod
    def find_files(self, file_name: str) -> List[str]:
        """Project files whose name is exactly `file_name`."""

    @abstractmethod
    def read_file(self, path: str) -> bytes:
        ...

    @abstractmethod
    def get_target_language(self) -> str:
        """Display name of the language of the file being edited."""

    @abstractmethod
    def get_build_config_texts(self) -> List[str]:
        """Contents of the project's build.gradle files."""

    @abstractmethod
    def get_insertion_offset(self) -> int:
        """Start of the line following the caret."""

    @abstractmethod
    def insert_text(self, offset: int, text: str) -> None:
        """Insert `text` at `offset` as one undoable edit."""

    @abstractmethod
    def notify(self, kind: Outcome, message: str) -> None:
        ...


def run_extraction(host: EditorHost) -> ExtractionResult:
    """Generate view bindings for the highlighted layout name and insert them.

    ParseError and MalformedIdentifierError propagate to the caller; nothing
    is inserted in that case.
    """
    selection = host.get_selection()
    if not selection:
        host.notify(Outcome.EMPTY_SELECTION, NOTHING_HIGHLIGHTED)
        return ExtractionResult(Outcome.EMPTY_SELECTION)

    xml_file_name = f"{selection}.xml"
    matches = host.find_files(xml_file_name)
    if not matches:
        host.notify(Outcome.FILE_NOT_FOUND, FILE_NOT_FOUND)
        return ExtractionResult(Outcome.FILE_NOT_FOUND)
    if len(matches) > 1:
        logger.warning("%d files named %s, using %s", len(matches), xml_file_name, matches[0])

    bindings = extract_bindings(host.read_file(matches[0]))
    logger.info("Found %d elements with ids in %s", len(bindings), matches[0])

    language = resolve_language(host.get_target_language())
    if isinstance(language, UnsupportedLanguage):
        host.notify(Outcome.UNSUPPORTED_LANGUAGE, language.message)
        return ExtractionResult(Outcome.UNSUPPORTED_LANGUAGE)

    mode = RenderMode()
    if language is Language.KOTLIN:
        mode = RenderMode(uses_extensions_plugin(host.get_build_config_texts()))

    text = render(bindings, language, mode, title=xml_file_name)
    offset = host.get_insertion_offset()
    host.insert_text(offset, text)
    return ExtractionResult(Outcome.INSERTED, text, offset)
