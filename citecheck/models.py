"""
Citation data model.

Spans are half-open code-point ranges into the original document string, so
``document[span.start:span.end]`` recovers the text a citation points at.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class CitationKind(Enum):
    """Where a citation was found."""
    IN_TEXT = "in-text"
    REFERENCE = "reference"


class MatchStatus(Enum):
    """Cross-reference lifecycle of a citation."""
    PENDING = "pending"
    MATCHED = "matched"
    MISSING = "missing"
    UNUSED = "unused"

    @property
    def is_initial(self) -> bool:
        return self in (MatchStatus.PENDING, MatchStatus.UNUSED)

    def can_transition_to(self, target: 'MatchStatus') -> bool:
        """Statuses move once from an initial state to MATCHED or MISSING."""
        if target not in (MatchStatus.MATCHED, MatchStatus.MISSING):
            return False
        return self.is_initial


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, start + length)``."""
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def slice(self, document: str) -> str:
        return document[self.start:self.end]

    def within(self, document: str) -> bool:
        return 0 <= self.start and self.end <= len(document)

    def to_dict(self) -> Dict[str, int]:
        return {"start": self.start, "length": self.length}


@dataclass
class CitationMetadata:
    """Bibliographic details copied from a matched reference entry."""
    title: str = ""
    authors: List[str] = field(default_factory=list)
    year: int = 0
    journal: Optional[str] = None
    doi: Optional[str] = None

    @classmethod
    def from_reference(cls, reference: 'Citation') -> 'CitationMetadata':
        return cls(
            title=reference.title or "",
            authors=list(reference.authors),
            year=reference.year,
            journal=reference.journal,
            doi=reference.doi,
        )

    def to_dict(self) -> Dict:
        return {
            "title": self.title,
            "authors": list(self.authors),
            "year": self.year,
            "journal": self.journal,
            "doi": self.doi,
        }


@dataclass
class Citation:
    """
    One in-text mention or reference-list entry.

    Attributes:
        id: Unique within a single ParseResult (e.g. "intext-0", "ref-2")
        kind: IN_TEXT or REFERENCE
        raw_text: Matched text; for numeric mentions this is "[n]" and does
            not equal the text under ``span`` (the span covers the group)
        authors: Surname-ish tokens in document order (empty for numeric)
        year: Four-digit year, or 0 when unknown
        span: Location in the original document
        match_status: PENDING/MISSING/MATCHED for in-text, UNUSED/MATCHED
            for references
        title, journal, doi: Reference entries only
        metadata: Copied from the matched reference (in-text only)
    """
    id: str
    kind: CitationKind
    raw_text: str
    authors: List[str]
    year: int
    span: Span
    match_status: MatchStatus
    title: Optional[str] = None
    journal: Optional[str] = None
    doi: Optional[str] = None
    metadata: Optional[CitationMetadata] = None

    @property
    def is_in_text(self) -> bool:
        return self.kind is CitationKind.IN_TEXT

    @property
    def is_reference(self) -> bool:
        return self.kind is CitationKind.REFERENCE

    @property
    def is_numeric(self) -> bool:
        """Numeric mentions carry no authors and can never be resolved."""
        return self.is_in_text and not self.authors

    def to_dict(self) -> Dict:
        """Convert citation to dictionary for JSON serialization."""
        data = {
            "id": self.id,
            "kind": self.kind.value,
            "raw_text": self.raw_text,
            "authors": list(self.authors),
            "year": self.year,
            "match_status": self.match_status.value,
            "span": self.span.to_dict(),
        }
        if self.is_reference:
            data["title"] = self.title
            data["journal"] = self.journal
            data["doi"] = self.doi
        if self.metadata is not None:
            data["metadata"] = self.metadata.to_dict()
        return data


@dataclass
class ParseResult:
    """Complete citation inventory for one document."""
    citations: List[Citation] = field(default_factory=list)
    missing_citations: List[Citation] = field(default_factory=list)
    unused_references: List[Citation] = field(default_factory=list)
    total_in_text: int = 0
    total_references: int = 0

    @property
    def in_text_citations(self) -> List[Citation]:
        return [c for c in self.citations if c.is_in_text]

    @property
    def references(self) -> List[Citation]:
        return [c for c in self.citations if c.is_reference]

    @property
    def matched_citations(self) -> List[Citation]:
        return [c for c in self.citations if c.match_status is MatchStatus.MATCHED]

    @property
    def is_clean(self) -> bool:
        return not self.missing_citations and not self.unused_references

    def get(self, citation_id: str) -> Optional[Citation]:
        """Look up a citation by id."""
        for citation in self.citations:
            if citation.id == citation_id:
                return citation
        return None

    def to_dict(self) -> Dict:
        """Convert result to dictionary for JSON serialization."""
        return {
            "citations": [c.to_dict() for c in self.citations],
            "missing_citations": [c.id for c in self.missing_citations],
            "unused_references": [c.id for c in self.unused_references],
            "total_in_text": self.total_in_text,
            "total_references": self.total_references,
            "is_clean": self.is_clean,
        }
