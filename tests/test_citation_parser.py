"""
End-to-end tests for the citation parser.

Tests cover:
- Documented scenarios (matched, missing, unused, numeric, multi-citation)
- Span bounds and round-trip properties
- Determinism and classification invariants
- Empty and citation-free documents
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from citecheck import CitationParser, parse_citations
from citecheck.matcher import authors_overlap
from citecheck.models import MatchStatus


SILER_REF = "Siler, K. (2012). Citation choice. Scientometrics. 10.1007/s11192-012-0881-8"

SAMPLE_DOCUMENT = """Peer review shapes what gets cited (Siler, 2012; Hyland, 2015).
Forest plots were surveyed (Slyder et al., 2011) and (see appendix) discussed [1, 2].
Later work (Smith & Jones, 2010; Siler, 2012) agreed [3].

References
Siler, K. (2012). Citation choice. Scientometrics. 10.1007/s11192-012-0881-8
Slyder, J. B., Stein, B. A. (2011). Forest plots. Ecology Letters.
Doe, J. (2020). Title. Journal.
Further reading is available on request.
Smith, A., & Jones, B. (2010). Joint work. Nature. https://doi.org/10.1038/abc123.
"""


class TestScenarios:
    """Documented end-to-end scenarios."""

    def test_matched_citation_carries_doi(self):
        """(Siler, 2012) resolves to the Siler reference and copies its DOI."""
        text = f"\nIn-text citation (Siler, 2012).\n\nReferences\n{SILER_REF}\n"
        result = parse_citations(text)

        (cit,) = result.in_text_citations
        assert cit.match_status is MatchStatus.MATCHED
        assert cit.metadata.doi == "10.1007/s11192-012-0881-8"
        assert cit.metadata.title == "Citation choice"
        assert result.total_in_text == 1
        assert result.total_references == 1
        assert result.is_clean

    def test_unknown_citation_is_missing(self):
        """A mention with no reference ends up in missing_citations."""
        result = parse_citations("Prediction (Unknown, 2099).")

        (cit,) = result.missing_citations
        assert cit.raw_text == "Unknown, 2099"
        assert cit.match_status is MatchStatus.MISSING

    def test_uncited_reference_is_unused(self):
        """A reference never cited ends up in unused_references."""
        result = parse_citations("Body without citations.\nReferences\nDoe, J. (2020). Title. Journal.\n")

        (ref,) = result.unused_references
        assert ref.authors == ["Doe", "J"]
        assert ref.title == "Title"
        assert ref.journal == "Journal"
        assert ref.match_status is MatchStatus.UNUSED

    def test_numeric_citation_stays_pending(self):
        """Numeric mentions are never resolved and are neither missing nor matched."""
        result = parse_citations("Claim [1].")

        (cit,) = result.citations
        assert cit.authors == []
        assert cit.year == 0
        assert cit.match_status is MatchStatus.PENDING
        assert result.missing_citations == []
        assert result.total_in_text == 1

    def test_multi_citation_group(self):
        """One clause matches, the other is missing, spans stay apart."""
        text = f"Prior work (Siler, 2012; Hyland, 2015).\nReferences\n{SILER_REF}\n"
        result = parse_citations(text)

        siler, hyland = result.in_text_citations
        assert siler.match_status is MatchStatus.MATCHED
        assert hyland.match_status is MatchStatus.MISSING
        assert siler.span.end <= hyland.span.start

        group_start = text.index("(")
        group_end = text.index(")")
        for cit in (siler, hyland):
            assert group_start < cit.span.start and cit.span.end <= group_end


class TestSampleDocument:
    """Checks over a realistic document."""

    def setup_method(self):
        self.result = parse_citations(SAMPLE_DOCUMENT)

    def test_counts(self):
        assert self.result.total_in_text == 8
        assert self.result.total_references == 4

    def test_citation_order(self):
        """Parenthetical citations, then numeric, then references."""
        ids = [c.id for c in self.result.citations]
        assert ids == [
            "intext-0", "intext-1", "intext-2", "intext-3", "intext-4",
            "intext-num-5", "intext-num-6", "intext-num-7",
            "ref-0", "ref-1", "ref-2", "ref-4",
        ]

    def test_statuses(self):
        status = {c.id: c.match_status for c in self.result.citations}
        assert status["intext-0"] is MatchStatus.MATCHED   # Siler
        assert status["intext-1"] is MatchStatus.MISSING   # Hyland
        assert status["intext-2"] is MatchStatus.MATCHED   # Slyder et al.
        assert status["intext-3"] is MatchStatus.MATCHED   # Smith & Jones
        assert status["intext-4"] is MatchStatus.MATCHED   # Siler again
        assert status["ref-2"] is MatchStatus.UNUSED       # Doe
        assert [c.id for c in self.result.unused_references] == ["ref-2"]
        assert [c.id for c in self.result.missing_citations] == ["intext-1"]

    def test_doi_trailing_dot_removed(self):
        smith = self.result.get("ref-4")
        assert smith.doi == "10.1038/abc123"
        assert smith.title == "Joint work"

    def test_bounds(self):
        """Every span lies inside the document."""
        for cit in self.result.citations:
            assert 0 <= cit.span.start
            assert cit.span.end <= len(SAMPLE_DOCUMENT)

    def test_round_trip(self):
        """Author-year and reference spans recover raw_text exactly."""
        for cit in self.result.citations:
            if cit.is_numeric:
                continue
            assert cit.span.slice(SAMPLE_DOCUMENT) == cit.raw_text

    def test_numeric_round_trip_exception(self):
        """Grouped numeric citations point at the whole group."""
        numeric = [c for c in self.result.citations if c.is_numeric]
        grouped = [c for c in numeric if c.raw_text in ("[1]", "[2]")]

        assert len(grouped) == 2
        for cit in grouped:
            assert cit.span.slice(SAMPLE_DOCUMENT) == "[1, 2]"
            assert cit.span.slice(SAMPLE_DOCUMENT) != cit.raw_text

    def test_match_symmetry(self):
        """Every matched mention has a matched reference with its year and an overlapping author."""
        references = self.result.references
        for cit in self.result.in_text_citations:
            if cit.match_status is not MatchStatus.MATCHED:
                continue
            partners = [
                r for r in references
                if r.match_status is MatchStatus.MATCHED
                and r.year == cit.year
                and authors_overlap(cit.authors, r.authors)
            ]
            assert partners

    def test_classification_disjoint_from_matched(self):
        flagged = {c.id for c in self.result.missing_citations + self.result.unused_references}
        matched = {c.id for c in self.result.matched_citations}
        assert flagged.isdisjoint(matched)

    def test_determinism(self):
        """Parsing twice gives identical results."""
        again = CitationParser().parse(SAMPLE_DOCUMENT)
        assert again.to_dict() == self.result.to_dict()

    def test_body_mentions_in_references_are_ignored(self):
        """Parenthetical years in the reference list are not in-text citations."""
        for cit in self.result.in_text_citations:
            assert cit.span.start < SAMPLE_DOCUMENT.index("References\n")


class TestEdgeCases:
    """Inputs that yield empty results."""

    @pytest.mark.parametrize("text", ["", None, "No citations here.", "References\n"])
    def test_empty_results(self, text):
        result = parse_citations(text)
        assert result.citations == []
        assert result.total_in_text == 0
        assert result.total_references == 0
        assert result.is_clean

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            parse_citations(42)

    def test_parser_is_reusable(self):
        """A parser instance keeps no per-document state."""
        parser = CitationParser()
        first = parser.parse("(Smith, 2010)")
        second = parser.parse("(Jones, 2011)")
        assert first.citations[0].id == second.citations[0].id == "intext-0"
        assert first.citations[0].authors == ["Smith"]

    @pytest.mark.parametrize("heading", ["7. References", "VII. REFERENCES"])
    def test_numbered_heading_keeps_reference_list(self, heading):
        """Numbered section headings still separate the reference list."""
        text = f"Body (Siler, 2012).\n{heading}\nSiler, K. (2012). Citation choice. Scientometrics.\n"
        result = parse_citations(text)

        assert result.total_references == 1
        assert [c.match_status for c in result.in_text_citations] == [MatchStatus.MATCHED]

    def test_references_without_body_citations(self):
        """Reference-only documents report every entry as unused."""
        text = "References\nDoe, J. (2020). Title.\nRoe, A. (2019). Other.\n"
        result = parse_citations(text)
        assert result.total_references == 2
        assert len(result.unused_references) == 2
