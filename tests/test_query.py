import string

import pytest

from clinvardl.query import Query, extract_first_term


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("BRCA1[gene]", "BRCA1"),
        ("cancer AND TP53[gene]", "TP53"),
        ("EGFR[protein] OR KRAS[gene]", "KRAS"),
        ("insulin[protein]", "insulin"),
        ("review[title]", "review"),
        ('"breast cancer" OR lung', "breast cancer"),
        ("  hello world  ", "hello"),
    ],
)
def test_extract_first_term(content, expected):
    assert extract_first_term(content) == expected


def test_empty_content_gives_placeholder():
    assert extract_first_term("   ") == "EMPTY"


def test_words_are_ascii_only():
    assert extract_first_term("é BRCA1") == "BRCA1"


def test_no_word_falls_back_to_first_ten_characters():
    content = "!!!!!!!!!!!!!!!!"
    assert extract_first_term(content) == content[:10]


def test_short_symbols_kept_whole():
    assert extract_first_term("-+-") == "-+-"


def test_query_id_format():
    query_id = Query("BRCA1[gene]").query_id()
    prefix, _, short_hash = query_id.partition("-")
    assert prefix == "BRCA1"
    assert len(short_hash) == 6
    assert set(short_hash) <= set(string.hexdigits.lower())


def test_query_id_of_empty_content():
    assert Query("").query_id() == "EMPTY-d41d8c"


def test_query_id_is_stable():
    first = Query("TP53[gene]").query_id()
    second = Query("TP53[gene]").query_id()
    assert first == second
    assert first.split("-")[0] == "TP53"
    assert len(first) == len("TP53-") + 6


def test_different_contents_give_different_ids():
    first = Query("BRCA1[gene]").query_id()
    second = Query("BRCA1[gene] AND pathogenic").query_id()
    assert first.startswith("BRCA1-")
    assert second.startswith("BRCA1-")
    assert first != second


def test_str_is_query_id():
    query = Query("KRAS[gene]")
    assert str(query) == query.query_id()