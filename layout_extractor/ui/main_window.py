import logging
import os
from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import (
    QMainWindow, QToolBar, QSplitter, QTreeWidget, QTreeWidgetItem,
    QMessageBox, QFileDialog
)

from layout_extractor.config import Settings, get_settings
from layout_extractor.core.action import run_extraction
from layout_extractor.core.layout_parser import ExtractionError
from layout_extractor.core.project_index import ProjectIndex

from .code_editor import CodeEditor
from .editor_host import QtEditorHost

logger = logging.getLogger(__name__)

EXTRACT_SHORTCUT = "Ctrl+Alt+X"


class MainWindow(QMainWindow):
    def __init__(self, settings: Optional[Settings] = None, parent=None) -> None:
        super().__init__(parent)
        self.settings = settings or get_settings()
        self.project_index: Optional[ProjectIndex] = None
        self.current_path: Optional[str] = None
        self.host = QtEditorHost(self)

        self._init_ui()
        self._update_actions()

    def _init_ui(self) -> None:
        self.setWindowTitle("Layout Extractor")
        self.resize(1000, 700)

        toolbar = QToolBar(self)
        self.addToolBar(toolbar)

        open_action = toolbar.addAction("Open Project")
        open_action.triggered.connect(self.open_project)

        save_action = toolbar.addAction("Save")
        save_action.setShortcut(QKeySequence.Save)
        save_action.triggered.connect(self.save_current_file)

        refresh_action = toolbar.addAction("Refresh Tree")
        refresh_action.triggered.connect(self.refresh_file_tree)

        self.extract_action = toolbar.addAction("Extract XML")
        self.extract_action.setShortcut(QKeySequence(EXTRACT_SHORTCUT))
        self.extract_action.setToolTip(
            f"Generate view bindings for the highlighted layout name ({EXTRACT_SHORTCUT})"
        )
        self.extract_action.triggered.connect(self.extract_xml)

        splitter = QSplitter(Qt.Horizontal)

        self.tree_widget = QTreeWidget()
        self.tree_widget.setHeaderLabel("Project")
        self.tree_widget.itemClicked.connect(self.on_file_clicked)
        splitter.addWidget(self.tree_widget)

        self.editor = CodeEditor()
        splitter.addWidget(self.editor)

        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 7)

        self.setCentralWidget(splitter)

    def _update_actions(self) -> None:
        # Extraction needs a source file to insert into
        self.extract_action.setEnabled(self.current_path is not None)

    def open_project(self) -> None:
        directory = QFileDialog.getExistingDirectory(self, "Open Android Project")
        if directory:
            self.load_project(directory)

    def load_project(self, directory: str) -> None:
        self.project_index = ProjectIndex(directory)
        logger.info("Opened project %s", self.project_index.root)
        self.refresh_file_tree()
        self.statusBar().showMessage(f"Project: {self.project_index.root}", 3000)

    def refresh_file_tree(self) -> None:
        self.tree_widget.clear()
        if self.project_index is None:
            return

        def get_or_create_item(path_parts, parent_item):
            if not path_parts:
                return parent_item

            for i in range(parent_item.childCount()):
                child = parent_item.child(i)
                if child.text(0) == path_parts[0] and child.data(0, Qt.UserRole) is None:
                    return get_or_create_item(path_parts[1:], child)

            new_item = QTreeWidgetItem(parent_item, [path_parts[0]])
            return get_or_create_item(path_parts[1:], new_item)

        for rel_path in self.project_index.list_files():
            rel_dir, file_name = os.path.split(rel_path)
            path_parts = [p for p in rel_dir.split(os.sep) if p]
            parent_item = get_or_create_item(path_parts, self.tree_widget.invisibleRootItem())
            f_item = QTreeWidgetItem(parent_item, [file_name])
            f_item.setData(0, Qt.UserRole, rel_path)

        self.tree_widget.expandAll()

    def on_file_clicked(self, item, column) -> None:
        rel_path = item.data(0, Qt.UserRole)
        if not rel_path or self.project_index is None:
            return
        self.open_file(os.path.join(self.project_index.root, rel_path))

    def open_file(self, path: str) -> None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            QMessageBox.warning(self, "Error", f"Could not read file: {str(e)}")
            return

        self.current_path = path
        self.editor.setPlainText(content)
        self.setWindowTitle(f"Layout Extractor - {os.path.basename(path)}")
        self._update_actions()

    def save_current_file(self) -> None:
        if not self.current_path:
            return
        try:
            with open(self.current_path, "w", encoding="utf-8") as f:
                f.write(self.editor.toPlainText())
            self.statusBar().showMessage(f"Saved: {os.path.basename(self.current_path)}", 3000)
        except OSError as e:
            QMessageBox.critical(self, "Error", f"Save failed: {str(e)}")

    def extract_xml(self) -> None:
        try:
            result = run_extraction(self.host)
        except (ExtractionError, OSError) as e:
            logger.error("Extraction failed: %s", e)
            QMessageBox.critical(self, self.settings.notification_title, str(e))
            return

        if result.inserted:
            self.statusBar().showMessage("Inserted view bindings", 3000)

    def notify_user(self, title: str, message: str) -> None:
        logger.info("%s: %s", title, message)
        QMessageBox.information(self, title, message)
