import pytest

from normalizer import Normalizer


@pytest.fixture
def normalizer(enhanced_config):
    return Normalizer(enhanced_config)


def test_lowercases_and_strips_punctuation(normalizer):
    assert normalizer.normalize("FREE MONEY!!! Click here now!") == ["free", "money", "click", "here", "now"]


def test_drops_short_and_overlong_tokens(normalizer):
    text = "an ox ate " + "a" * 19 + " " + "b" * 20
    assert normalizer.normalize(text) == ["ate", "a" * 19]


def test_underscore_and_symbols_split_tokens(normalizer):
    assert normalizer.normalize("win_big$$cash") == ["win", "big", "cash"]


def test_digits_survive(normalizer):
    assert normalizer.normalize("call 5551234567 today") == ["call", "5551234567", "today"]


def test_truncates_to_max_tokens_in_order(normalizer):
    words = [f"word{i:03d}" for i in range(80)]
    tokens = normalizer.normalize(" ".join(words))
    assert tokens == words[:50]


@pytest.mark.parametrize("value", [None, "", 42, ["hello there"]])
def test_rejects_non_text(normalizer, value):
    assert normalizer.normalize(value) == []


def test_rejects_out_of_bounds_after_trimming(normalizer):
    assert normalizer.normalize("  ab  ") == []
    assert normalizer.normalize("x" * 1001) == []
    assert normalizer.normalize("  " + "hello " * 100 + "  ") != []
