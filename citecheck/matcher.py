"""
Cross-Reference Matcher Module

Links in-text mentions to reference entries by year equality and loose
surname containment. The first reference (in list order) that satisfies
both wins; there is no scoring and no disambiguation.
"""

from typing import Iterable, List, Optional
from loguru import logger

from .models import Citation, CitationKind, CitationMetadata, MatchStatus


def authors_overlap(in_text_authors: Iterable[str], reference_authors: Iterable[str]) -> bool:
    """
    True when any author pair overlaps by substring, in either direction.

    Case-sensitive, so "Slyder" matches "Slyder et al" but not "slyder".
    """
    in_text_authors = list(in_text_authors)
    for ref_author in reference_authors:
        for cit_author in in_text_authors:
            if ref_author in cit_author or cit_author in ref_author:
                return True
    return False


def is_candidate_match(citation: Citation, reference: Citation) -> bool:
    return reference.year == citation.year and authors_overlap(citation.authors, reference.authors)


class CitationArena:
    """Index-addressable store for every citation of one parse.

    In-text citations and references share one list; status changes go
    through the arena by index so neither side holds a reference to the
    other.
    """

    def __init__(self):
        self._citations: List[Citation] = []
        self.in_text_indices: List[int] = []
        self.reference_indices: List[int] = []

    def __len__(self) -> int:
        return len(self._citations)

    def __getitem__(self, index: int) -> Citation:
        return self._citations[index]

    def add(self, citation: Citation) -> int:
        index = len(self._citations)
        self._citations.append(citation)
        if citation.kind is CitationKind.IN_TEXT:
            self.in_text_indices.append(index)
        else:
            self.reference_indices.append(index)
        return index

    def extend(self, citations: Iterable[Citation]) -> List[int]:
        return [self.add(c) for c in citations]

    def set_status(self, index: int, status: MatchStatus) -> None:
        """Apply a one-way status transition; repeating the same status is a no-op."""
        citation = self._citations[index]
        if citation.match_status is status:
            return
        # Guards programming errors only; the matcher never requests an invalid move
        if not citation.match_status.can_transition_to(status):
            raise ValueError(
                f"Cannot move {citation.id} from {citation.match_status.value} to {status.value}"
            )
        citation.match_status = status

    def attach_metadata(self, index: int, metadata: CitationMetadata) -> None:
        self._citations[index].metadata = metadata


class CrossReferenceMatcher:
    """Resolves in-text citations against reference entries."""

    def match(self, arena: CitationArena) -> None:
        """Resolve every author-year citation in the arena."""
        matched = 0
        for index in arena.in_text_indices:
            citation = arena[index]
            if not citation.authors:
                # Numeric mentions cannot be resolved and stay pending
                continue

            ref_index = self.find_reference(arena, citation)
            if ref_index is None:
                arena.set_status(index, MatchStatus.MISSING)
                logger.debug(f"{citation.id} {citation.raw_text!r}: no reference found")
                continue

            arena.set_status(index, MatchStatus.MATCHED)
            arena.set_status(ref_index, MatchStatus.MATCHED)
            arena.attach_metadata(index, CitationMetadata.from_reference(arena[ref_index]))
            matched += 1
            logger.debug(f"{citation.id} {citation.raw_text!r} -> {arena[ref_index].id}")

        logger.debug(f"Matched {matched} of {len(arena.in_text_indices)} in-text citation(s)")

    def find_reference(self, arena: CitationArena, citation: Citation) -> Optional[int]:
        """Return the arena index of the first matching reference, or None."""
        for ref_index in arena.reference_indices:
            if is_candidate_match(citation, arena[ref_index]):
                return ref_index
        return None
