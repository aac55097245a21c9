"""
Tests for the on-disk project index.
"""

import os

from layout_extractor.core.project_index import ProjectIndex


class TestProjectIndex:
    def test_find_layout_skips_build_output(self, android_project):
        index = ProjectIndex(str(android_project))

        matches = index.find_files("activity_main.xml")

        assert len(matches) == 1
        assert matches[0].endswith(os.path.join("res", "layout", "activity_main.xml"))
        assert os.sep + "build" + os.sep not in matches[0]

    def test_no_match(self, android_project):
        assert ProjectIndex(str(android_project)).find_files("missing.xml") == []

    def test_name_must_match_exactly(self, android_project):
        assert ProjectIndex(str(android_project)).find_files("activity_main") == []

    def test_hidden_directories_are_skipped(self, android_project):
        hidden = android_project / ".gradle"
        hidden.mkdir()
        (hidden / "activity_main.xml").write_text("<x/>", encoding="utf-8")

        assert len(ProjectIndex(str(android_project)).find_files("activity_main.xml")) == 1

    def test_read_texts_of_build_files(self, android_project):
        texts = ProjectIndex(str(android_project)).read_texts("build.gradle")

        assert len(texts) == 2
        assert any("kotlin-android-extensions" in t for t in texts)

    def test_list_files_is_relative(self, android_project):
        files = ProjectIndex(str(android_project)).list_files()

        assert "build.gradle" in files
        assert os.path.join("app", "build.gradle") in files
        assert all(not os.path.isabs(f) for f in files)
