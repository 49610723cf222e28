import pytest

from assistant.nlp.matching import boundary_match, edit_distance, fuzzy_match, phrase_match, similarity


def test_boundary_match_whole_words_only():
    assert boundary_match("We build React apps", "react")
    assert not boundary_match("a reactive design", "react")
    assert not boundary_match("anything", "")


def test_boundary_match_treats_metacharacters_literally():
    assert boundary_match("version a.b shipped", "a.b")
    assert not boundary_match("version axb shipped", "a.b")
    assert not boundary_match("price (maybe", "(maybe)")


def test_phrase_match_needs_multiword_phrase():
    assert phrase_match("we need a web app soon", "web app")
    assert not phrase_match("we need an app", "app")


def test_edit_distance():
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("", "abc") == 3
    assert edit_distance("abc", "") == 3
    assert edit_distance("React", "react") == 0


def test_similarity_bounds():
    assert similarity("", "") == 1.0
    assert similarity("abc", "xyz") == 0.0


def test_fuzzy_match_typo():
    assert fuzzy_match("i want an ecomerce store", "ecommerce", 0.85)
    assert not fuzzy_match("i want a bakery", "ecommerce", 0.85)


def test_fuzzy_match_literal_containment_short_circuits():
    assert fuzzy_match("we sell websites", "website", 0.99)


def test_fuzzy_match_skips_short_tokens():
    assert not fuzzy_match("go to it", "got", 0.6)


def test_similarity_uses_levenshtein_distance():
    assert edit_distance("Ecomerce", "ecommerce") == 1
    assert similarity("ecomerce", "ecommerce") == pytest.approx(8 / 9)
    assert similarity("", "") == 1.0
