"""In-Text Extractor Module - Finds author-year and numeric mentions in the body."""

import re
from typing import List, Optional
from loguru import logger

from .assembler import IdCounter
from .models import Citation, CitationKind, MatchStatus, Span


# Capital initial, shortest author run, comma, four-digit year
AUTHOR_YEAR_PATTERN = re.compile(r'^([A-Z][A-Za-z\s.,&]+?),\s*([0-9]{4})')

AUTHOR_SEPARATOR_PATTERN = re.compile(r',|&| and ')

ET_AL = ' et al.'


def starts_with_capital(clause: str) -> bool:
    """Reject lowercase asides such as "(see below)" or "(however, 2012 ...)"."""
    return bool(clause) and 'A' <= clause[0] <= 'Z'


def match_author_year(clause: str) -> Optional[re.Match]:
    """Match "Author[, Author & Author], YYYY" at the start of a trimmed clause."""
    return AUTHOR_YEAR_PATTERN.match(clause)


def split_in_text_authors(text: str) -> List[str]:
    """
    Split the author part of an in-text clause into tokens.

    "Slyder et al." -> ["Slyder"]
    "Smith & Jones" -> ["Smith", "Jones"]
    """
    text = text.replace(ET_AL, '', 1)
    return [a.strip() for a in AUTHOR_SEPARATOR_PATTERN.split(text) if a.strip()]


def split_numeric_group(interior: str) -> List[str]:
    """Split "1, 2,3" into ["1", "2", "3"]."""
    return [n.strip() for n in interior.split(',')]


class InTextExtractor:
    """Extracts in-text citations from the document body.

    Two independent passes:
    - parenthetical: (Siler, 2012; Hyland, 2015)
    - numeric: [1] or [1, 2, 3]
    """

    PAREN_GROUP_PATTERN = re.compile(r'\(([^)]+)\)')
    NUMERIC_GROUP_PATTERN = re.compile(r'\[([0-9]+(?:,\s*[0-9]+)*)\]')

    def extract(self, body: str, counter: IdCounter) -> List[Citation]:
        """Run both passes; parenthetical results come first."""
        citations = self.extract_parenthetical(body, counter)
        citations.extend(self.extract_numeric(body, counter))
        logger.debug(f"Extracted {len(citations)} in-text citation(s)")
        return citations

    def extract_parenthetical(self, body: str, counter: IdCounter) -> List[Citation]:
        """Extract author-year clauses from every parenthesized group."""
        citations: List[Citation] = []

        for group in self.PAREN_GROUP_PATTERN.finditer(body):
            interior = group.group(1)
            # Advanced by accepted clauses only, so repeats get distinct offsets
            search_from = 0

            for clause in interior.split(';'):
                trimmed = clause.strip()
                if not starts_with_capital(trimmed):
                    continue

                match = match_author_year(trimmed)
                if match is None:
                    logger.debug(f"Skipping non-citation clause: {trimmed!r}")
                    continue

                offset = interior.find(trimmed, search_from)
                if offset == -1:
                    continue
                search_from = offset + len(trimmed)

                citations.append(Citation(
                    id=f"intext-{counter.next()}",
                    kind=CitationKind.IN_TEXT,
                    raw_text=trimmed,
                    authors=split_in_text_authors(match.group(1)),
                    year=int(match.group(2)),
                    span=Span(start=group.start() + 1 + offset, length=len(trimmed)),
                    match_status=MatchStatus.PENDING,
                ))

        return citations

    def extract_numeric(self, body: str, counter: IdCounter) -> List[Citation]:
        """
        Extract one citation per number in every bracket group.

        Every number of a group gets the span of the whole group, so
        ``raw_text`` ("[n]") differs from the text under the span for
        multi-number groups.
        """
        citations: List[Citation] = []

        for group in self.NUMERIC_GROUP_PATTERN.finditer(body):
            span = Span(start=group.start(), length=len(group.group(0)))
            for number in split_numeric_group(group.group(1)):
                citations.append(Citation(
                    id=f"intext-num-{counter.next()}",
                    kind=CitationKind.IN_TEXT,
                    raw_text=f"[{number}]",
                    authors=[],
                    year=0,
                    span=span,
                    match_status=MatchStatus.PENDING,
                ))

        return citations


def extract_in_text_citations(body: str, counter: Optional[IdCounter] = None) -> List[Citation]:
    """Convenience function for in-text extraction."""
    return InTextExtractor().extract(body, counter or IdCounter())
