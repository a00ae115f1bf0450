from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from spine_bootstrap.config import properties


def test_comments_separators_and_continuations() -> None:
    text = "\n".join(
        [
            "# comment",
            "! another comment",
            "",
            "plain=value",
            "colon: spaced value",
            "space separated",
            "continued = first \\",
            "    second",
            "unicode=caf\\u00e9",
            "escaped\\=key=tab\\there",
        ]
    )

    assert properties.loads(text) == {
        "plain": "value",
        "colon": "spaced value",
        "space": "separated",
        "continued": "first second",
        "unicode": "café",
        "escaped=key": "tab\there",
    }


def test_later_duplicates_win() -> None:
    assert properties.loads("a=1\na=2\n") == {"a": "2"}


def test_malformed_unicode_escape_names_the_line() -> None:
    with pytest.raises(properties.PropertiesSyntaxError, match="line 2"):
        properties.loads("ok=1\nbad=\\u12\n")


def test_dumps_sorts_keys_and_writes_comments() -> None:
    rendered = properties.dumps({"b": "2", "a": "1"}, comments=("header",))

    assert rendered == "# header\na=1\nb=2\n"


_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), max_codepoint=0xFFFF), max_size=20
)


@settings(derandomize=True, deadline=None)
@given(st.dictionaries(_text.filter(bool), _text, max_size=5))
def test_dumped_text_loads_back(values: dict[str, str]) -> None:
    assert properties.loads(properties.dumps(values)) == values
