from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ElementBinding:
    """A layout element that carries an id: its tag name and the bare id."""
    element_type: str
    identifier: str


# Document order of first occurrence, duplicates kept
BindingSet = List[ElementBinding]
