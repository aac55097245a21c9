"""
Shared fixtures: sample layouts and an in-memory editor host.
"""

import os

# Must be set before any Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from typing import Dict, List, Optional

import pytest

from layout_extractor.core.action import EditorHost, Outcome


ACTIVITY_MAIN = b"""<?xml version="1.0" encoding="utf-8"?>
<LinearLayout xmlns:android="http://schemas.android.com/apk/res/android"
    android:layout_width="match_parent"
    android:layout_height="match_parent"
    android:orientation="vertical">

    <TextView
        android:id="@+id/title"
        android:layout_width="wrap_content"
        android:layout_height="wrap_content" />

    <!-- no id: contributes nothing -->
    <View
        android:layout_width="match_parent"
        android:layout_height="1dp" />

    <Button
        android:id="@+id/submit"
        android:layout_width="wrap_content"
        android:layout_height="wrap_content" />
</LinearLayout>
"""

GRADLE_WITH_EXTENSIONS = """apply plugin: 'com.android.application'
apply plugin: 'kotlin-android'
apply plugin: 'kotlin-android-extensions'
"""

GRADLE_PLAIN = """apply plugin: 'com.android.application'
apply plugin: 'kotlin-android'
"""


@pytest.fixture
def activity_main():
    return ACTIVITY_MAIN


class FakeHost(EditorHost):
    """EditorHost backed by dicts, recording every insert and notification."""

    def __init__(
        self,
        selection: Optional[str] = "activity_main",
        files: Optional[Dict[str, bytes]] = None,
        language: str = "Java",
        build_texts: Optional[List[str]] = None,
        offset: int = 42,
    ):
        self.selection = selection
        self.files = files if files is not None else {"/app/res/layout/activity_main.xml": ACTIVITY_MAIN}
        self.language = language
        self.build_texts = build_texts or []
        self.offset = offset
        self.inserted = []
        self.notifications = []
        self.build_texts_requested = False

    def get_selection(self):
        return self.selection

    def find_files(self, file_name):
        return sorted(p for p in self.files if os.path.basename(p) == file_name)

    def read_file(self, path):
        return self.files[path]

    def get_target_language(self):
        return self.language

    def get_build_config_texts(self):
        self.build_texts_requested = True
        return self.build_texts

    def get_insertion_offset(self):
        return self.offset

    def insert_text(self, offset, text):
        self.inserted.append((offset, text))

    def notify(self, kind: Outcome, message: str):
        self.notifications.append((kind, message))


@pytest.fixture
def fake_host():
    return FakeHost


@pytest.fixture
def android_project(tmp_path):
    """A minimal Android project tree on disk."""
    layout_dir = tmp_path / "app" / "src" / "main" / "res" / "layout"
    layout_dir.mkdir(parents=True)
    (layout_dir / "activity_main.xml").write_bytes(ACTIVITY_MAIN)

    java_dir = tmp_path / "app" / "src" / "main" / "java" / "com" / "example"
    java_dir.mkdir(parents=True)
    (java_dir / "MainActivity.java").write_text(
        "public class MainActivity extends AppCompatActivity {\n"
        "    setContentView(R.layout.activity_main);\n"
        "}\n",
        encoding="utf-8",
    )
    (java_dir / "MainActivity.kt").write_text(
        "class MainActivity : AppCompatActivity() {\n"
        "    setContentView(R.layout.activity_main)\n"
        "}\n",
        encoding="utf-8",
    )

    (tmp_path / "build.gradle").write_text("buildscript {}\n", encoding="utf-8")
    (tmp_path / "app" / "build.gradle").write_text(GRADLE_WITH_EXTENSIONS, encoding="utf-8")

    # Merged copy in the build output must not be found
    merged = tmp_path / "app" / "build" / "intermediates" / "res" / "layout"
    merged.mkdir(parents=True)
    (merged / "activity_main.xml").write_bytes(ACTIVITY_MAIN)

    return tmp_path


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
