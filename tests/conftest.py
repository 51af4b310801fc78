import os
import random
import tempfile

# Keep log files out of the working tree; must happen before wordriddle is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordriddle-logs-'))

import pytest

from wordriddle.models.errors import WordSourceError
from wordriddle.services.game_service import GameService
from wordriddle.services.session import GameSession
from wordriddle.services.statistics_store import InMemoryStatisticsStore
from wordriddle.services.word_source import WordBank, WordSource

TARGET = "CRANE"
OTHER_WORDS = ["SLATE", "ADIEU", "AUDIO", "RAISE", "ARISE", "STARE", "TRACE", "SPARE", "SHARE"]


class StaticWordSource(WordSource):
    """Word source serving fixed pools, or failing with `error`."""

    def __init__(self, question_words, answer_words=(), error=None):
        self.question_words = set(question_words)
        self.answer_words = set(answer_words)
        self.error = error
        self.calls = 0

    def fetch_question_words(self):
        self.calls += 1
        if self.error:
            raise WordSourceError(self.error)
        return set(self.question_words)

    def fetch_answer_words(self):
        return set(self.answer_words)


@pytest.fixture
def word_bank():
    bank = WordBank(StaticWordSource([TARGET], OTHER_WORDS))
    bank.load()
    return bank


@pytest.fixture
def store():
    return InMemoryStatisticsStore()


@pytest.fixture
def make_session(word_bank, store):
    def factory(bank=None, statistics_store=None):
        return GameSession(
            game_id="test-game",
            word_bank=bank or word_bank,
            statistics_store=statistics_store or store,
            rng=random.Random(0),
        )
    return factory


@pytest.fixture
def session(make_session):
    return make_session()


@pytest.fixture
def game_service():
    service = GameService(
        word_source=StaticWordSource([TARGET], OTHER_WORDS),
        rng=random.Random(0),
    )
    service.load_word_lists()
    return service


@pytest.fixture
def app(game_service):
    from wordriddle import create_app
    from wordriddle.config import TestingConfig

    flask_app, socketio = create_app(TestingConfig, game_service)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
