from __future__ import annotations

import logging

from chat_markdown.constants import FENCE, INLINE_CODE, TABLE
from chat_markdown.placeholders import (
    ProtectedRegistry,
    choose_sentinel,
    shield_fences,
    shield_inline_code,
    shield_tables,
)


def test_choose_sentinel_avoids_characters_in_text():
    assert choose_sentinel("plain") == "\ue000"
    assert choose_sentinel("\ue000\ue001") == "\ue002"


def test_register_uses_disjoint_namespaces():
    registry = ProtectedRegistry("\ue000")

    fence = registry.register(FENCE, "<pre>f</pre>")
    code = registry.register(INLINE_CODE, "<code>c</code>")
    table = registry.register(TABLE, "<table></table>")
    second_code = registry.register(INLINE_CODE, "<code>d</code>")

    assert len({fence, code, table, second_code}) == 4
    assert code == "\ue000CODE0\ue000"
    assert second_code == "\ue000CODE1\ue000"
    assert registry.block_tokens() == {fence, table}


def test_restore_substitutes_each_token_once():
    registry = ProtectedRegistry("\ue000")
    token = registry.register(INLINE_CODE, "<code>x</code>")

    restored = registry.restore(f"{token} and {token}")

    assert restored == f"<code>x</code> and {token}"
    assert registry.pending() == []


def test_restore_skips_missing_tokens(caplog):
    caplog.set_level(logging.DEBUG, logger="chat_markdown.placeholders")
    registry = ProtectedRegistry("\ue000")
    registry.register(FENCE, "<pre>lost</pre>")

    assert registry.restore("no tokens here") == "no tokens here"
    assert len(registry.pending()) == 1
    assert "not found" in caplog.text
    assert "FENCE0" in caplog.text


def test_shield_fences_escapes_content():
    registry = ProtectedRegistry("\ue000")

    text = shield_fences("a ```<x>\n&``` b", registry)

    assert text == "a \ue000FENCE0\ue000 b"
    assert registry.fragments[FENCE][0].html == "<pre><code>&lt;x&gt;\n&amp;</code></pre>"


def test_shield_fences_matches_pairs_non_greedily():
    registry = ProtectedRegistry("\ue000")

    text = shield_fences("```a``` mid ```b```", registry)

    assert text == "\ue000FENCE0\ue000 mid \ue000FENCE1\ue000"


def test_shield_inline_code_stays_on_one_line():
    registry = ProtectedRegistry("\ue000")

    assert shield_inline_code("`a\nb`", registry) == "`a\nb`"
    assert shield_inline_code("`'q'`", registry) == "\ue000CODE0\ue000"
    assert registry.fragments[INLINE_CODE][0].html == "<code>&#039;q&#039;</code>"


def test_shield_tables_requires_separator_row():
    registry = ProtectedRegistry("\ue000")
    text = "|A|B|\n|1|2|\n|3|4|"

    assert shield_tables(text, registry) == text
    assert registry.fragments[TABLE] == []


def test_shield_tables_keeps_line_break_after_table():
    registry = ProtectedRegistry("\ue000")

    text = shield_tables("|A|\n|---|\n|1|\nnext", registry)

    assert text == "\ue000TABLE0\ue000\nnext"
