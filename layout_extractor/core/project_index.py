import logging
import os
from typing import List

logger = logging.getLogger(__name__)

# Gradle output holds merged copies of the layouts
SKIPPED_DIRS = {"build"}


class ProjectIndex:
    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def _walk(self):
        for root, dirs, files in os.walk(self.root):
            dirs[:] = [d for d in dirs if not d.startswith(".") and d not in SKIPPED_DIRS]
            yield root, files

    def find_files(self, file_name: str) -> List[str]:
        """Absolute paths of every project file called exactly `file_name`."""
        matches = []
        for root, files in self._walk():
            if file_name in files:
                matches.append(os.path.join(root, file_name))
        return sorted(matches)

    def list_files(self) -> List[str]:
        """Every indexed file, relative to the project root."""
        rel_paths = []
        for root, files in self._walk():
            rel_dir = os.path.relpath(root, self.root)
            for f in files:
                rel_paths.append(f if rel_dir == "." else os.path.join(rel_dir, f))
        return sorted(rel_paths)

    def read_texts(self, file_name: str) -> List[str]:
        texts = []
        for path in self.find_files(file_name):
            try:
                with open(path, "r", encoding="utf-8", errors="replace") as f:
                    texts.append(f.read())
            except OSError as e:
                logger.warning("Could not read %s: %s", path, e)
        return texts
