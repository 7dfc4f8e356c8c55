import logging
import re
from typing import NamedTuple

from .scorer import Role, normalize_for_comparison, similarity, strip_html, strip_punctuation

log = logging.getLogger(__name__)

# Umbral fijo: cambiarlo cambia el juego, no se expone en la config.
SIMILARITY_THRESHOLD = 0.5

QUESTION_FORMAT = re.compile(r"^(what|whats|where|wheres|who|whos) ", re.IGNORECASE)


class Verdict(NamedTuple):
    is_question_format: bool
    is_correct: bool


def is_question_format(submission_raw: str) -> bool:
    # se mira el texto original (sin puntuación), no el normalizado
    return QUESTION_FORMAT.match(strip_punctuation(submission_raw)) is not None


def is_correct_answer(correct_answer_raw: str, submission_raw: str) -> bool:
    correct = normalize_for_comparison(strip_html(correct_answer_raw), Role.ANSWER)
    answer = normalize_for_comparison(submission_raw, Role.SUBMISSION)
    sim = similarity(correct, answer)
    log.info(f"Correct answer: {correct} | User answer: {answer} | Similarity: {sim}")
    return sim >= SIMILARITY_THRESHOLD


def judge(correct_answer_raw: str, submission_raw: str) -> Verdict:
    """Clasifica la respuesta: formato de pregunta + similitud con la correcta."""
    return Verdict(
        is_question_format=is_question_format(submission_raw),
        is_correct=is_correct_answer(correct_answer_raw, submission_raw),
    )
