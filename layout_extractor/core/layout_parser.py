import io
import logging
import xml.etree.ElementTree as ET
from typing import BinaryIO, Optional, Tuple, Union

from .bindings import BindingSet, ElementBinding

logger = logging.getLogger(__name__)

ANDROID_NAMESPACE = "http://schemas.android.com/apk/res/android"
ID_ATTRIBUTE = f"{{{ANDROID_NAMESPACE}}}id"
# Length of "@+id/"; dropped without looking at the characters
ID_PREFIX_LENGTH = 5


class ExtractionError(Exception):
    """Base class for failures while reading a layout file."""


class ParseError(ExtractionError):
    """The layout is not well-formed XML."""

    def __init__(self, message: str, position: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        # (line, column) as reported by expat
        self.position = position


class MalformedIdentifierError(ExtractionError):
    """An android:id value too short to hold anything after its prefix."""

    def __init__(self, element_type: str, value: str):
        self.element_type = element_type
        self.value = value
        super().__init__(
            f'Malformed android:id "{value}" on <{element_type}>: '
            f"expected more than {ID_PREFIX_LENGTH} characters"
        )


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def strip_id_prefix(element_type: str, value: str) -> str:
    """Drop the fixed-length resource prefix from an android:id value.

    "@+id/submitButton" -> "submitButton". The prefix is not inspected, only
    its length is; values that would leave nothing behind are rejected.
    """
    if len(value) <= ID_PREFIX_LENGTH:
        raise MalformedIdentifierError(element_type, value)
    return value[ID_PREFIX_LENGTH:]


class LayoutXmlParser:
    def extract(self, source: Union[bytes, BinaryIO]) -> BindingSet:
        """Walk the layout once and collect (tag, id) pairs in document order."""
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)

        bindings: BindingSet = []
        try:
            for event, element in ET.iterparse(source, events=("start", "end")):
                if event == "end":
                    # Children have been visited, drop them
                    element.clear()
                    continue
                value = element.get(ID_ATTRIBUTE)
                if value is None:
                    continue
                element_type = _local_name(element.tag)
                bindings.append(ElementBinding(element_type, strip_id_prefix(element_type, value)))
        except ET.ParseError as e:
            raise ParseError(f"Layout XML is not well-formed: {e}", e.position) from e

        logger.debug("Extracted %d bindings", len(bindings))
        return bindings

    def parse_file(self, xml_path: str) -> BindingSet:
        """Extract the bindings of a layout file on disk."""
        logger.info("Parsing layout file: %s", xml_path)
        with open(xml_path, "rb") as f:
            return self.extract(f)


def extract_bindings(source: Union[bytes, BinaryIO]) -> BindingSet:
    return LayoutXmlParser().extract(source)
