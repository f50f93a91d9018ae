import json

import pytest

from wordgame import create_app
from wordgame.config import TestingConfig, is_valid_word, load_word_list, validate_word_list_integrity


def test_packaged_word_list_is_valid():
    words = load_word_list()
    assert len(words) > 100
    assert validate_word_list_integrity(words) is True
    assert all(len(word) == 5 and word.islower() for word in words)


def test_custom_word_list_is_lowercased(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["GRAPE", "Apple"]), encoding="utf-8")
    assert load_word_list(str(path)) == ["grape", "apple"]


@pytest.mark.parametrize("content,message", [
    ([], "empty"),
    (["grape", "toolong"], "5 letters"),
    (["grape", "grape"], "Duplicate"),
    ({"words": ["grape"]}, "array"),
])
def test_invalid_word_lists(tmp_path, content, message):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(content), encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_word_list(str(path))


def test_missing_word_list(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / "missing.json"))


@pytest.mark.parametrize("word,expected", [
    ("grape", True), ("GRAPE", True), ("grap", False), ("gr4pe", False), ("grâpe", False), (None, False),
])
def test_is_valid_word(word, expected):
    assert is_valid_word(word) is expected


def test_app_uses_config(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["grape"]), encoding="utf-8")

    class CustomConfig(TestingConfig):
        WORD_LIST_PATH = str(path)
        MAX_GUESSES = 3
        REQUIRE_DICTIONARY_WORD = True

    app = create_app(CustomConfig)
    service = app.extensions['game_service']
    assert service.max_guesses == 3
    assert service.require_dictionary_word is True
    assert service.word_bank.words == ("grape",)

    client = app.test_client()
    session_id = client.get('/newgame').get_json()['sessionID']
    response = client.post('/guess', json={'sessionID': session_id, 'guess': 'moldy'})
    assert response.status_code == 400
    assert response.get_json()['code'] == 'NOT_IN_WORD_LIST'


def test_app_rejects_empty_guess_budget():
    class NoGuessesConfig(TestingConfig):
        MAX_GUESSES = 0

    with pytest.raises(ValueError):
        create_app(NoGuessesConfig)
