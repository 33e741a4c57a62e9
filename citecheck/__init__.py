"""CiteCheck - heuristic in-text citation and reference list checker."""

from .models import Citation, CitationKind, CitationMetadata, MatchStatus, ParseResult, Span
from .segmenter import DocumentSegments, split_document
from .intext_extractor import InTextExtractor, extract_in_text_citations
from .reference_extractor import ReferenceExtractor, extract_references, parse_reference_line
from .matcher import CitationArena, CrossReferenceMatcher, authors_overlap
from .assembler import IdCounter, ResultAssembler
from .citation_parser import CitationParser, parse_citations

__version__ = '1.0.0'
