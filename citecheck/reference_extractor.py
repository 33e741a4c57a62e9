"""Reference Extractor Module - Parses author-year entries from the reference list."""

import re
from dataclasses import dataclass, field
from typing import List, Optional
from loguru import logger

from .models import Citation, CitationKind, MatchStatus, Span


# A bare four-digit year in parentheses marks a line as an entry
YEAR_MARKER_PATTERN = re.compile(r'\(([0-9]{4})\)')

# Title runs up to the first dot
TITLE_PATTERN = re.compile(r'^([^.]+)\.')

# DOIs may contain almost anything; trailing punctuation is trimmed afterwards
DOI_PATTERN = re.compile(r'10\.[0-9]{4,9}/\S+', re.IGNORECASE)

DOI_TRAILING_PUNCTUATION = '.,;'

REFERENCE_AUTHOR_SEPARATOR_PATTERN = re.compile(r',|&')

# Sentences that are identifiers rather than a journal name
NON_JOURNAL_PREFIXES = ('10.', 'doi', 'http')


@dataclass
class ParsedEntry:
    """Fields of one reference line, before it is placed in the document."""
    year: int
    authors: List[str] = field(default_factory=list)
    title: str = ""
    journal: Optional[str] = None
    doi: Optional[str] = None


def find_year_marker(line: str) -> Optional[re.Match]:
    """Return the "(YYYY)" marker of a reference line, or None."""
    return YEAR_MARKER_PATTERN.search(line)


def split_reference_authors(text: str) -> List[str]:
    """
    Split the text before the year marker into author tokens.

    "Siler, K." -> ["Siler", "K"]
    """
    authors = []
    for token in REFERENCE_AUTHOR_SEPARATOR_PATTERN.split(text):
        token = token.strip()
        if token.endswith('.'):
            token = token[:-1]
        if token:
            authors.append(token)
    return authors


def strip_leading_dot(rest: str) -> str:
    rest = rest.strip()
    if rest.startswith('.'):
        rest = rest[1:].strip()
    return rest


def extract_title(rest: str) -> str:
    """Title is the text before the first dot, or all of ``rest`` without one."""
    match = TITLE_PATTERN.match(rest)
    return match.group(1).strip() if match else rest


def extract_journal(rest: str) -> Optional[str]:
    """Return the sentence following the title, unless it is an identifier."""
    match = TITLE_PATTERN.match(rest)
    if match is None:
        return None

    remainder = rest[match.end():].strip()
    if not remainder or remainder.lower().startswith(NON_JOURNAL_PREFIXES):
        return None

    journal = remainder.split('.', 1)[0].strip()
    return journal or None


def extract_doi(line: str) -> Optional[str]:
    """Return the first DOI in a line with trailing punctuation removed."""
    match = DOI_PATTERN.search(line)
    if match is None:
        return None
    return match.group(0).rstrip(DOI_TRAILING_PUNCTUATION) or None


def parse_reference_line(line: str) -> Optional[ParsedEntry]:
    """
    Parse one reference line.

    Returns None when the line has no "(YYYY)" marker.
    """
    marker = find_year_marker(line)
    if marker is None:
        return None

    rest = strip_leading_dot(line[marker.end():])
    return ParsedEntry(
        year=int(marker.group(1)),
        authors=split_reference_authors(line[:marker.start()].strip()),
        title=extract_title(rest),
        journal=extract_journal(rest),
        doi=extract_doi(line),
    )


class ReferenceExtractor:
    """Extracts reference entries from the reference region."""

    def extract(self, references: str, references_start: int) -> List[Citation]:
        """
        Parse every non-empty line of the reference region.

        Args:
            references: Reference region text
            references_start: Absolute offset of the region in the document

        Returns:
            Reference citations in list order, all marked UNUSED
        """
        citations: List[Citation] = []
        lines = [line for line in references.split('\n') if line.strip()]
        # Duplicate lines must resolve to distinct offsets
        search_from = 0

        for index, line in enumerate(lines):
            entry = parse_reference_line(line)
            if entry is None:
                logger.debug(f"Skipping reference line without year marker: {line.strip()[:60]!r}")
                continue

            offset = references.find(line, search_from)
            if offset == -1:
                continue
            search_from = offset + len(line)

            citations.append(Citation(
                id=f"ref-{index}",
                kind=CitationKind.REFERENCE,
                raw_text=line,
                authors=entry.authors,
                year=entry.year,
                span=Span(start=references_start + offset, length=len(line)),
                match_status=MatchStatus.UNUSED,
                title=entry.title,
                journal=entry.journal,
                doi=entry.doi,
            ))

        logger.debug(f"Extracted {len(citations)} reference(s) from {len(lines)} line(s)")
        return citations


def extract_references(references: str, references_start: int = 0) -> List[Citation]:
    """Convenience function for reference extraction."""
    return ReferenceExtractor().extract(references, references_start)
