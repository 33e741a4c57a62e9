"""Report Module - Renders a ParseResult as markdown, JSON or a rich table."""

import json
from typing import List

from rich.table import Table

from .models import Citation, MatchStatus, ParseResult


STATUS_STYLES = {
    MatchStatus.MATCHED: "green",
    MatchStatus.MISSING: "red",
    MatchStatus.UNUSED: "yellow",
    MatchStatus.PENDING: "dim",
}


def _shorten(text: str, width: int = 60) -> str:
    text = " ".join(text.split())
    if len(text) <= width:
        return text
    return text[:width - 3] + "..."


def _list_items(citations: List[Citation], max_items: int) -> List[str]:
    output = []
    for citation in citations[:max_items]:
        output.append(
            f"- `{citation.id}` at {citation.span.start}: {_shorten(citation.raw_text)}"
        )
    if len(citations) > max_items:
        output.append(f"- ... and {len(citations) - max_items} more")
    return output


def format_report(result: ParseResult, max_items: int = 20) -> str:
    """
    Format a parse result as markdown.

    Args:
        result: Result to format
        max_items: Maximum entries listed per issue section

    Returns:
        Markdown-formatted report string
    """
    in_text = result.in_text_citations
    matched = [c for c in in_text if c.match_status is MatchStatus.MATCHED]
    pending = [c for c in in_text if c.match_status is MatchStatus.PENDING]

    output = ["# Citation Check Report", ""]
    output.append(f"- **In-text citations:** {result.total_in_text}")
    output.append(f"- **References:** {result.total_references}")
    output.append(f"- **Matched citations:** {len(matched)}")
    if pending:
        output.append(f"- **Unresolved numeric citations:** {len(pending)}")
    output.append("")

    if result.is_clean:
        output.append("✅ **No missing citations or unused references found.**")
        return "\n".join(output)

    if result.missing_citations:
        output.append(f"## ❌ Missing References ({len(result.missing_citations)})")
        output.append("")
        output.append("These citations appear in the text but have no reference entry:")
        output.append("")
        output.extend(_list_items(result.missing_citations, max_items))
        output.append("")

    if result.unused_references:
        output.append(f"## ⚠️ Unused References ({len(result.unused_references)})")
        output.append("")
        output.append("These references are listed but never cited in the text:")
        output.append("")
        output.extend(_list_items(result.unused_references, max_items))
        output.append("")

    return "\n".join(output)


def result_to_json(result: ParseResult, indent: int = 2) -> str:
    """Serialize a parse result to JSON."""
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


def build_summary_table(result: ParseResult) -> Table:
    """Build a rich table listing every citation."""
    table = Table(title="Citations", show_lines=False)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Status")
    table.add_column("Span", justify="right")
    table.add_column("Text")

    for citation in result.citations:
        style = STATUS_STYLES[citation.match_status]
        table.add_row(
            citation.id,
            citation.kind.value,
            f"[{style}]{citation.match_status.value}[/{style}]",
            f"{citation.span.start}+{citation.span.length}",
            _shorten(citation.raw_text),
        )

    return table
