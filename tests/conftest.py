import random

import pytest

from wordgame import create_app
from wordgame.config import TestingConfig
from wordgame.services.game_service import GameService
from wordgame.services.word_bank import WordBank

SMALL_WORDS = ["apple", "grape", "alloy", "crane", "level"]


@pytest.fixture
def word_bank():
    return WordBank(SMALL_WORDS, random.Random(1234))


@pytest.fixture
def service(word_bank):
    return GameService(word_bank)


@pytest.fixture
def app():
    app = create_app(TestingConfig, rng=random.Random(1234))
    yield app
    app.extensions['game_service'].shutdown()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def new_session(client):
    def _start(answer=None):
        url = '/newgame' if answer is None else f'/newgame?answer={answer}'
        response = client.get(url)
        assert response.status_code == 201
        return response.get_json()['sessionID']
    return _start
