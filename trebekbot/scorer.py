"""
Normalización de textos y similitud entre respuestas.

La similitud es la de Simon White ("strike a match"): pares de letras
adyacentes dentro de cada palabra, comparados como multiconjunto.
"""
import html
import re
from collections import Counter
from enum import Enum


class Role(Enum):
    ANSWER = "answer"          # respuesta correcta guardada
    SUBMISSION = "submission"  # lo que escribió el usuario


PUNCTUATION = re.compile(r"[^\w\s]")
TAGS = re.compile(r"<[^>]*>")

# cada prefijo se saca a lo más una vez, en este orden
INTERROGATIVE = re.compile(r"^(what|whats|where|wheres|who|whos) ", re.IGNORECASE)
COPULA = re.compile(r"^(is|are|was|were) ", re.IGNORECASE)
SUBMISSION_ARTICLE = re.compile(r"^(the|a) ", re.IGNORECASE)
ANSWER_ARTICLE = re.compile(r"^(the|a|an) ", re.IGNORECASE)
TRAILING_QUESTION_MARKS = re.compile(r"\?+$")


def strip_html(raw: str) -> str:
    """Saca etiquetas (p.ej. <i>Hamlet</i>) y decodifica entidades."""
    return html.unescape(TAGS.sub("", raw or ""))


def strip_punctuation(raw: str) -> str:
    return PUNCTUATION.sub("", raw or "")


def normalize_for_comparison(raw: str, role: Role) -> str:
    txt = strip_punctuation(raw)
    if role is Role.ANSWER:
        txt = ANSWER_ARTICLE.sub("", txt, count=1)
    else:
        txt = INTERROGATIVE.sub("", txt, count=1)
        txt = COPULA.sub("", txt, count=1)
        txt = SUBMISSION_ARTICLE.sub("", txt, count=1)
        txt = TRAILING_QUESTION_MARKS.sub("", txt)
    return txt.strip().lower()


def _letter_pairs(txt: str) -> list[str]:
    pairs = []
    for word in txt.upper().split():
        pairs.extend(word[i:i + 2] for i in range(len(word) - 1))
    return pairs


def similarity(a: str, b: str) -> float:
    """
    2 * pares compartidos / pares totales, en [0, 1] y simétrica.
    Si ningún lado tiene pares (palabras de una letra) se compara por igualdad.
    """
    if a and a == b:
        return 1.0
    pairs_a = _letter_pairs(a)
    pairs_b = _letter_pairs(b)
    if not pairs_a and not pairs_b:
        words_a = " ".join(a.upper().split())
        words_b = " ".join(b.upper().split())
        return 1.0 if words_a and words_a == words_b else 0.0
    shared = sum((Counter(pairs_a) & Counter(pairs_b)).values())
    return (2.0 * shared) / (len(pairs_a) + len(pairs_b))
