import os
from typing import List, Optional

from layout_extractor.core.action import EditorHost, Outcome
from layout_extractor.core.project_index import ProjectIndex

from .code_editor import CodeEditor

# Editor display name per file extension
LANGUAGE_NAMES = {
    ".java": "Java",
    ".kt": "Kotlin",
    ".kts": "Kotlin",
    ".py": "Python",
    ".xml": "XML",
    ".gradle": "Groovy",
    ".js": "JavaScript",
}


def language_for_path(path: Optional[str]) -> str:
    if not path:
        return "Plain text"
    ext = os.path.splitext(path)[1].lower()
    return LANGUAGE_NAMES.get(ext, "Plain text")


class QtEditorHost(EditorHost):
    """Runs the extraction action against the editor of a MainWindow."""

    def __init__(self, window):
        self.window = window

    @property
    def editor(self) -> CodeEditor:
        return self.window.editor

    @property
    def index(self) -> Optional[ProjectIndex]:
        return self.window.project_index

    def get_selection(self) -> Optional[str]:
        return self.editor.selected_text()

    def find_files(self, file_name: str) -> List[str]:
        if self.index is None:
            return []
        return self.index.find_files(file_name)

    def read_file(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def get_target_language(self) -> str:
        return language_for_path(self.window.current_path)

    def get_build_config_texts(self) -> List[str]:
        if self.index is None:
            return []
        return self.index.read_texts(self.window.settings.build_file_name)

    def get_insertion_offset(self) -> int:
        return self.editor.next_line_offset()

    def insert_text(self, offset: int, text: str) -> None:
        self.editor.insert_at(offset, text)

    def notify(self, kind: Outcome, message: str) -> None:
        self.window.notify_user(self.window.settings.notification_title, message)
