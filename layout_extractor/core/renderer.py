"""
Renders extracted bindings as commented Java or Kotlin statements.

The generated block is meant to be pasted into an Activity or Fragment and
trimmed by hand, so every variant is offered at once: split declaration and
lookup, single-line declaration, and for Kotlin projects using the
'kotlin-android-extensions' plugin the bare ids.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .bindings import BindingSet, ElementBinding
from .languages import Language, RenderMode, TargetLanguage


@dataclass(frozen=True)
class StatementShapes:
    """str.format templates filled with `type` and `id`."""
    declaration: str
    assignment: str
    combined: str

    def fill(self, template: str, binding: ElementBinding) -> str:
        return template.format(type=binding.element_type, id=binding.identifier)


STATEMENT_SHAPES: Dict[Language, StatementShapes] = {
    Language.JAVA: StatementShapes(
        declaration="private {type} {id};",
        assignment="{id} = findViewById(R.id.{id});",
        combined="private {type} {id} = findViewById(R.id.{id});",
    ),
    Language.KOTLIN: StatementShapes(
        declaration="private lateinit var {id}: {type}",
        assignment="{id} = findViewById(R.id.{id})",
        combined="val {id} = findViewById<{type}>(R.id.{id});",
    ),
}

SPLIT_HEADER = "\t1) Split Declaration & Instantiation:\n\n"
SINGLE_LINE_HEADER = "\n\t2) Single line Declaration & Instantiation:\n\n"
EXTENSIONS_HEADER = (
    "\n\t3) 'kotlin-android-extensions' plugin detected. "
    "Here are all IDs of the XML elements in {title}:\n\n"
)


def sort_by_length(lines: Iterable[str]) -> List[str]:
    """Shortest first; sorted() is stable so equal lengths keep their order."""
    return sorted(lines, key=len)


def _section(lines: Iterable[str]) -> str:
    return "".join(f"\t\t{line}\n" for line in sort_by_length(lines))


def render(
    bindings: BindingSet,
    language: TargetLanguage,
    mode: Optional[RenderMode] = None,
    title: str = "",
) -> str:
    if not isinstance(language, Language):
        raise ValueError(f"Cannot render statements for {language!r}")
    mode = mode or RenderMode()
    shapes = STATEMENT_SHAPES[language]

    parts = [f"\t/*\n\tXML Extraction for: {title}\n\n", SPLIT_HEADER]
    parts.append(_section(shapes.fill(shapes.declaration, b) for b in bindings))
    parts.append("\n")
    parts.append(_section(shapes.fill(shapes.assignment, b) for b in bindings))

    parts.append(SINGLE_LINE_HEADER)
    parts.append(_section(shapes.fill(shapes.combined, b) for b in bindings))

    if language is Language.KOTLIN and mode.uses_extensions_plugin:
        parts.append(EXTENSIONS_HEADER.format(title=title))
        parts.append(_section(b.identifier for b in bindings))

    parts.append("\t*/\n")
    return "".join(parts)
