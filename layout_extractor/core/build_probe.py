from typing import Sequence

EXTENSIONS_PLUGIN_MARKER = "apply plugin: 'kotlin-android-extensions'"
# Project-level and app-level build.gradle
MAX_BUILD_FILES = 2


def uses_extensions_plugin(build_files: Sequence[str]) -> bool:
    """Best-effort check of the first build files for the extensions plugin.

    A missing build file simply means False; this is a text search, not a
    Gradle parser.
    """
    return any(EXTENSIONS_PLUGIN_MARKER in text for text in build_files[:MAX_BUILD_FILES])
