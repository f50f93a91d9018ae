import itertools
from collections import Counter

import pytest

from wordgame.models.game import Verdict
from wordgame.services.evaluator import evaluate

CODES = {"G": Verdict.RIGHT, "Y": Verdict.CLOSE, "-": Verdict.WRONG}


def verdicts(secret, guess):
    return [r.verdict for r in evaluate(secret, guess).result]


def pattern(code):
    return [CODES[c] for c in code]


@pytest.mark.parametrize("guess,secret,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("llama", "alloy", "YGY--"),
    ("allee", "apple", "GY--G"),
    ("eerie", "there", "Y-Y-G"),
])
def test_golden_patterns(guess, secret, expected):
    assert verdicts(secret, guess) == pattern(expected)


def test_result_is_aligned_with_guess():
    result = evaluate("apple", "allee").result
    assert [r.letter for r in result] == list("allee")


def test_letter_categories_for_duplicate_budget():
    evaluation = evaluate("apple", "allee")
    assert evaluation.right_letters == {"a", "e"}
    assert evaluation.close_letters == {"l"}
    assert evaluation.wrong_letters == ("l", "e")
    assert not evaluation.solved


def test_exact_guess_is_solved():
    evaluation = evaluate("grape", "grape")
    assert evaluation.solved
    assert evaluation.right_letters == set("grape")
    assert evaluation.close_letters == frozenset()
    assert evaluation.wrong_letters == ()


def test_no_secret_letter_is_claimed_twice():
    words = ["apple", "alloy", "llama", "level", "eerie", "geese", "sassy", "mamma", "abbey", "crane"]
    for secret, guess in itertools.product(words, repeat=2):
        claimed = Counter(
            r.letter for r in evaluate(secret, guess).result if r.verdict is not Verdict.WRONG
        )
        available = Counter(secret)
        for letter, count in claimed.items():
            assert count <= available[letter], (secret, guess, letter)


def test_does_not_validate_characters():
    result = evaluate("apple", "12!?e").result
    assert [r.verdict for r in result] == pattern("----G")


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        evaluate("apple", "app")
