import pytest

from dsakata.autocomplete import Autocomplete, AutocompleteHistory


def test_basic_predict():
    ac = Autocomplete()
    ac.insert("apple", 5)
    ac.insert("app", 3)
    ac.insert("application", 2)
    ac.insert("banana", 4)
    assert ac.predict("app", 2) == ["apple", "app"]


def test_no_match():
    ac = Autocomplete()
    ac.insert("hello", 1)
    ac.insert("help", 2)
    assert ac.predict("xyz", 3) == []


def test_single_match():
    ac = Autocomplete()
    ac.insert("unique", 10)
    ac.insert("other", 5)
    assert ac.predict("uni", 5) == ["unique"]


def test_k_larger_than_results():
    ac = Autocomplete()
    ac.insert("cat", 3)
    ac.insert("car", 5)
    assert ac.predict("ca", 10) == ["car", "cat"]


def test_exact_word_as_prefix():
    ac = Autocomplete()
    ac.insert("the", 10)
    ac.insert("them", 5)
    ac.insert("there", 3)
    result = ac.predict("the", 3)
    assert len(result) == 3
    assert result[0] == "the"
    assert set(result) == {"the", "them", "there"}


def test_empty_prefix():
    ac = Autocomplete()
    ac.insert("a", 1)
    ac.insert("b", 2)
    ac.insert("c", 3)
    result = ac.predict("", 2)
    assert len(result) == 2
    assert result[0] == "c"


def test_update_frequency_accumulates():
    ac = Autocomplete()
    ac.insert("test", 1)
    ac.insert("test", 5)
    ac.insert("team", 4)
    assert ac.predict("te", 1) == ["test"]


def test_zero_k_returns_nothing():
    ac = Autocomplete()
    ac.insert("word", 1)
    assert ac.predict("w", 0) == []


def test_history_basic_suggest():
    ac = AutocompleteHistory(5)
    ac.use_word("apple")
    ac.use_word("application")
    ac.use_word("banana")
    assert ac.suggest("app") == ["application", "apple"]


def test_history_recent_order():
    ac = AutocompleteHistory(5)
    ac.use_word("apple")
    ac.use_word("app")
    ac.use_word("apple")
    assert ac.suggest("app") == ["apple", "app"]


def test_history_no_match():
    ac = AutocompleteHistory(5)
    ac.use_word("hello")
    assert ac.suggest("xyz") == []


def test_history_max_recent_eviction():
    ac = AutocompleteHistory(2)
    ac.use_word("a1")
    ac.use_word("a2")
    ac.use_word("a3")
    assert ac.suggest("a") == ["a3", "a2"]


def test_history_empty():
    ac = AutocompleteHistory(5)
    assert ac.suggest("test") == []


def test_history_prefix_matches_all():
    ac = AutocompleteHistory(10)
    ac.use_word("test")
    ac.use_word("testing")
    ac.use_word("tested")
    assert sorted(ac.suggest("test")) == ["test", "tested", "testing"]


def test_history_counts_uses():
    ac = AutocompleteHistory(3)
    ac.use_word("go")
    ac.use_word("go")
    assert ac.freq["go"] == 2


def test_history_rejects_negative_limit():
    with pytest.raises(ValueError):
        AutocompleteHistory(-1)