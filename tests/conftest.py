"""
Fixtures compartidos: un Redis en memoria, un proveedor de preguntas
guionado y un controlador armado con ambos.
"""
import random

import pytest

from trebekbot.config import Settings
from trebekbot.game import RoundController
from trebekbot.models import Question
from trebekbot.slack import SlackDirectory
from trebekbot.store import RoundStore, ScoreLedger


class InMemoryRedis:
    """Doble de redis.Redis(decode_responses=True) con lo que usa el bot."""

    def __init__(self):
        self.data = {}
        self.ttls = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = str(value)
        return True

    def setex(self, key, ttl, value):
        self.ttls[key] = ttl
        return self.set(key, value)

    def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return removed

    def incrby(self, key, amount):
        value = int(self.data.get(key, 0)) + amount
        self.data[key] = str(value)
        return value

    def ping(self):
        return True


class ScriptedProvider:
    """Entrega las preguntas en orden y cuenta las llamadas."""

    def __init__(self, questions):
        self.questions = list(questions)
        self.calls = 0

    def fetch_random_question(self):
        self.calls += 1
        return self.questions.pop(0)


def make_question(answer="dirt", value=200, prompt="It's under your feet", qid="1", category="Ground"):
    return Question(id=qid, category=category, prompt=prompt, answer=answer, value=value)


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def settings():
    return Settings(webhook_token="secret", bot_username="trebekbot", bot_icon=":trebek:")


@pytest.fixture
def dirt_question():
    return make_question()


@pytest.fixture
def provider(dirt_question):
    return ScriptedProvider([dirt_question])


@pytest.fixture
def directory(fake_redis):
    # sin token de API: siempre usa el nombre que manda Slack
    return SlackDirectory(None, fake_redis)


@pytest.fixture
def controller(fake_redis, provider, directory, settings):
    return RoundController(
        RoundStore(fake_redis),
        ScoreLedger(fake_redis),
        provider,
        directory,
        settings,
        rng=random.Random(0),
    )
