"""Segmenter Module - Splits a document into body and reference list."""

import re
from dataclasses import dataclass
from typing import Optional
from loguru import logger


# Heading token ending its line, so "7. References" and "VII. REFERENCES" count
REFERENCE_HEADING_PATTERN = re.compile(
    r'\b(References|Bibliography|Works[ \t]+Cited)[ \t]*\r?\n',
    re.IGNORECASE,
)


@dataclass(frozen=True)
class DocumentSegments:
    """Body and reference regions of a document.

    ``references_start`` is the absolute offset of the reference region, so
    an offset found inside ``references`` maps back to the document by
    adding it.
    """
    body: str
    references: str
    references_start: int
    heading: Optional[str] = None

    @property
    def has_references(self) -> bool:
        return self.heading is not None


def find_reference_heading(text: str) -> Optional[re.Match]:
    """Return the first heading token that ends a line, or None."""
    return REFERENCE_HEADING_PATTERN.search(text)


def split_document(text: str) -> DocumentSegments:
    """
    Split document text at the first reference heading.

    Everything before the heading token is body, so a section number such
    as "7. " stays in the body. Everything after the line break is the
    reference region. Without a heading the whole document is
    body and the reference region is empty.
    """
    match = find_reference_heading(text)
    if match is None:
        logger.debug("No reference heading found; treating whole document as body")
        return DocumentSegments(body=text, references="", references_start=len(text))

    heading = match.group(1)
    logger.debug(f"Reference heading '{heading}' found at offset {match.start()}")
    return DocumentSegments(
        body=text[:match.start()],
        references=text[match.end():],
        references_start=match.end(),
        heading=heading,
    )
