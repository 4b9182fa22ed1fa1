from __future__ import annotations

import textwrap

import pytest

from chat_markdown.models import Alignment
from chat_markdown.tables import parse_alignment, render_table, split_row


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("| a | b |", ["a", "b"]),
        ("|a|b|", ["a", "b"]),
        ("|a||c|", ["a", "", "c"]),
        ("  | spaced |  ", ["spaced"]),
    ],
)
def test_split_row(line: str, expected: list[str]):
    assert split_row(line) == expected


@pytest.mark.parametrize(
    ("cell", "expected"),
    [
        ("---", Alignment.LEFT),
        (":---", Alignment.LEFT),
        (":---:", Alignment.CENTER),
        (" ---: ", Alignment.RIGHT),
    ],
)
def test_parse_alignment(cell: str, expected: Alignment):
    assert parse_alignment(cell) is expected


def test_render_table_applies_alignment_by_column():
    block = textwrap.dedent(
        """\
        | L | C | R |
        |:---|:---:|---:|
        | 1 | 2 | 3 |
        """
    )

    assert render_table(block) == (
        "<table><thead><tr><th>L</th><th>C</th><th>R</th></tr></thead><tbody><tr>"
        '<td style="text-align: left">1</td>'
        '<td style="text-align: center">2</td>'
        '<td style="text-align: right">3</td>'
        "</tr></tbody></table>"
    )


def test_render_table_keeps_rows_with_mismatched_cell_counts():
    block = "|A|B|\n|--:|--:|\n|1|2|3|\n|4|"

    html = render_table(block)

    assert (
        '<tr><td style="text-align: right">1</td><td style="text-align: right">2</td>'
        '<td style="text-align: left">3</td></tr>'
    ) in html
    assert '<tr><td style="text-align: right">4</td></tr>' in html


def test_render_table_skips_blank_lines():
    html = render_table("|A|\n|---|\n|1|\n\n|2|\n")

    assert html.count("<tr>") == 3
