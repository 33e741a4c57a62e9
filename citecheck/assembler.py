"""Result Assembler Module - Builds the final ParseResult from the arena."""

from loguru import logger

from .matcher import CitationArena
from .models import MatchStatus, ParseResult


class IdCounter:
    """Running index shared by the extraction passes of one parse.

    Each parse owns a fresh counter, so ids are stable within a result but
    not across re-parses of edited text.
    """

    def __init__(self, start: int = 0):
        self._value = start

    @property
    def value(self) -> int:
        return self._value

    def next(self) -> int:
        """Return the current index and advance."""
        value = self._value
        self._value += 1
        return value


class ResultAssembler:
    """Collects arena contents into a ParseResult."""

    def assemble(self, arena: CitationArena) -> ParseResult:
        in_text = [arena[i] for i in arena.in_text_indices]
        references = [arena[i] for i in arena.reference_indices]

        missing = [c for c in in_text if c.match_status is MatchStatus.MISSING]
        unused = [c for c in references if c.match_status is MatchStatus.UNUSED]

        result = ParseResult(
            citations=in_text + references,
            missing_citations=missing,
            unused_references=unused,
            total_in_text=len(in_text),
            total_references=len(references),
        )

        logger.info(
            f"Parsed {result.total_in_text} in-text citation(s) and "
            f"{result.total_references} reference(s): "
            f"{len(missing)} missing, {len(unused)} unused"
        )
        return result
