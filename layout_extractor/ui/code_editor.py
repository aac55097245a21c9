from PyQt5.QtWidgets import QPlainTextEdit
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QTextCursor

INDENT = "    "


class CodeEditor(QPlainTextEdit):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFont(QFont("Consolas", 11))
        self.setLineWrapMode(QPlainTextEdit.NoWrap)

    def selected_text(self) -> str:
        return self.textCursor().selectedText()

    def next_line_offset(self) -> int:
        """Offset of the start of the line after the caret, or the document end."""
        block = self.textCursor().block()
        end = self.document().characterCount() - 1
        return min(block.position() + block.length(), end)

    def insert_at(self, offset: int, text: str):
        """Insert text as a single undo step and leave the caret after it."""
        cursor = QTextCursor(self.document())
        cursor.beginEditBlock()
        cursor.setPosition(offset)
        cursor.insertText(text)
        cursor.endEditBlock()
        # Drops the selection that triggered the insert
        self.setTextCursor(cursor)

    def keyPressEvent(self, event):
        # Keep indentation, and indent one level more after an opening brace
        if event.key() in (Qt.Key_Return, Qt.Key_Enter):
            text = self.textCursor().block().text()
            indentation = text[:len(text) - len(text.lstrip(" \t"))]
            if text.rstrip().endswith(("{", "(")):
                indentation += INDENT
            super().keyPressEvent(event)
            self.insertPlainText(indentation)
            return

        if event.text() == "}":
            cursor = self.textCursor()
            text = cursor.block().text()
            leading = len(text) - len(text.lstrip(" "))
            if cursor.positionInBlock() <= leading and leading >= len(INDENT):
                cursor.beginEditBlock()
                cursor.movePosition(QTextCursor.StartOfBlock)
                for _ in range(len(INDENT)):
                    cursor.deleteChar()
                cursor.endEditBlock()

        super().keyPressEvent(event)
