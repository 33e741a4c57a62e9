"""
Citation Parser
===============
Single entry point for the citation analysis engine.
Orchestrates: Segmenter -> In-Text / Reference extraction -> Matcher -> Assembler

Usage:
    from citecheck import parse_citations

    result = parse_citations(text)
    for citation in result.missing_citations:
        print(citation.raw_text, citation.span)
"""

from typing import Optional
from loguru import logger

from .assembler import IdCounter, ResultAssembler
from .intext_extractor import InTextExtractor
from .matcher import CitationArena, CrossReferenceMatcher
from .models import ParseResult
from .reference_extractor import ReferenceExtractor
from .segmenter import split_document


class CitationParser:
    """
    Stateless citation analysis pipeline.

    Components are created once and hold no per-document state, so a
    single parser can be shared between threads.
    """

    def __init__(self):
        self.in_text_extractor = InTextExtractor()
        self.reference_extractor = ReferenceExtractor()
        self.matcher = CrossReferenceMatcher()
        self.assembler = ResultAssembler()

    def parse(self, text: Optional[str]) -> ParseResult:
        """
        Parse a document into a citation inventory.

        Args:
            text: Already-decoded document text (None is treated as empty)

        Returns:
            ParseResult; empty when the document has no citations
        """
        if text is None:
            text = ""
        if not isinstance(text, str):
            raise TypeError(f"Document text must be str, not {type(text).__name__}")

        logger.info(f"Analyzing document for citations ({len(text)} characters)")

        # 1. Split body from reference list
        segments = split_document(text)

        # 2. Extract both streams; ids come from a per-parse counter
        arena = CitationArena()
        arena.extend(self.in_text_extractor.extract(segments.body, IdCounter()))
        arena.extend(self.reference_extractor.extract(
            segments.references, segments.references_start
        ))

        # 3. Cross-reference
        self.matcher.match(arena)

        # 4. Assemble
        return self.assembler.assemble(arena)


def parse_citations(text: Optional[str]) -> ParseResult:
    """Convenience function: parse a document with a fresh CitationParser."""
    return CitationParser().parse(text)
