"""
Estado durable en Redis: la pregunta activa por canal y el puntaje por usuario.

Ninguna operación toma locks: dos requests del mismo canal compiten por la
misma clave y gana la última escritura. Los puntajes usan INCRBY, que es atómico.
"""
import logging
import redis

from .models import Question

log = logging.getLogger(__name__)

ROUND_KEY = "current_question:{channel_id}"
SCORE_KEY = "user_score:{user_id}"


def connect(url: str) -> redis.Redis:
    return redis.Redis.from_url(url, decode_responses=True)


class RoundStore:
    def __init__(self, r: redis.Redis):
        self.r = r

    def get_active(self, channel_id: str) -> Question | None:
        raw = self.r.get(ROUND_KEY.format(channel_id=channel_id))
        if raw is None:
            return None
        return Question.model_validate_json(raw)

    def set_active(self, channel_id: str, question: Question) -> None:
        self.r.set(ROUND_KEY.format(channel_id=channel_id), question.model_dump_json())

    def clear_active(self, channel_id: str) -> None:
        self.r.delete(ROUND_KEY.format(channel_id=channel_id))


class ScoreLedger:
    def __init__(self, r: redis.Redis):
        self.r = r

    def get_score(self, user_id: str) -> int:
        """Lee el puntaje; la primera lectura deja guardado un 0."""
        key = SCORE_KEY.format(user_id=user_id)
        raw = self.r.get(key)
        if raw is None:
            self.r.set(key, 0)
            return 0
        return int(raw)

    def apply_delta(self, user_id: str, delta: int) -> int:
        total = int(self.r.incrby(SCORE_KEY.format(user_id=user_id), delta))
        log.info(f"Score {user_id}: {delta:+d} -> {total}")
        return total


def format_score(score: int) -> str:
    if score >= 0:
        return f"${score}"
    return f"-${-score}"
