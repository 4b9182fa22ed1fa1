"""GitHub-style pipe table rendering."""

from __future__ import annotations

from .models import Alignment


def split_row(line: str) -> list[str]:
    """Split a pipe-delimited row into trimmed cells.

    One leading and one trailing pipe are treated as boundary artifacts and
    dropped; empty cells between pipes are kept.

    Args:
        line: A single table row.

    Returns:
        list[str]: Cell contents, stripped of surrounding whitespace.

    Examples:
        split_row("| a | b |")  # ["a", "b"]
        split_row("|a||c|")  # ["a", "", "c"]
    """
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    return [cell.strip() for cell in row.split("|")]


def parse_alignment(cell: str) -> Alignment:
    """Map a separator cell such as ``:---:`` to its column alignment."""
    cell = cell.strip()
    if cell.startswith(":") and cell.endswith(":"):
        return Alignment.CENTER
    if cell.endswith(":"):
        return Alignment.RIGHT
    return Alignment.LEFT


def render_table(block: str) -> str:
    """Render a Markdown pipe table as HTML.

    Alignment is read once from the separator row and applied by column
    position to every data row. Rows whose cell count differs from the header
    are rendered as they are; columns past the separator default to left.

    Args:
        block: Header line, separator line and one or more data lines.

    Returns:
        str: A ``<table>`` element with ``<thead>`` and ``<tbody>``.

    Examples:
        render_table("|A|B|\\n|---|--:|\\n|1|2|")
    """
    lines = block.strip().split("\n")
    header_cells = split_row(lines[0])
    alignments = [parse_alignment(cell) for cell in split_row(lines[1])] if len(lines) > 1 else []

    parts = ["<table><thead><tr>"]
    parts.extend(f"<th>{cell}</th>" for cell in header_cells)
    parts.append("</tr></thead><tbody>")

    for line in lines[2:]:
        if not line.strip():
            continue
        parts.append("<tr>")
        for index, cell in enumerate(split_row(line)):
            alignment = alignments[index] if index < len(alignments) else Alignment.LEFT
            parts.append(f'<td style="text-align: {alignment.value}">{cell}</td>')
        parts.append("</tr>")

    parts.append("</tbody></table>")
    return "".join(parts)
