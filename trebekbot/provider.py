import logging
import httpx
from pydantic import ValidationError

from .models import Question

log = logging.getLogger(__name__)


class ProviderError(Exception):
    """Error del proveedor de preguntas."""


class ProviderResponseError(ProviderError):
    """Respuesta 200 que no trae una pregunta (no es JSON, lista vacía, campos raros)."""


class ProviderExhaustedError(ProviderError):
    """El proveedor devolvió sólo preguntas vacías en todos los intentos."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Trivia provider returned no usable question after {attempts} attempts")


class JServiceProvider:
    """Cliente de la API de jService: una pregunta aleatoria por llamada."""

    RANDOM_PATH = "/api/random"

    def __init__(self, base_url: str, timeout: float = 10.0, client: httpx.Client | None = None):
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.Client(timeout=timeout)

    def fetch_random_question(self) -> Question:
        r = self.client.get(f"{self.base_url}{self.RANDOM_PATH}", params={"count": 1})
        r.raise_for_status()
        try:
            item = r.json()[0]
            return Question(
                id=item.get("id"),
                category=(item.get("category") or {}).get("title") or "",
                prompt=item.get("question") or "",
                answer=item.get("answer") or "",
                value=item.get("value"),
            )
        except (ValueError, LookupError, TypeError, AttributeError, ValidationError) as e:
            raise ProviderResponseError(f"Unexpected trivia provider payload: {e}") from e

    def close(self) -> None:
        self.client.close()


def fetch_question(provider, max_attempts: int = 5) -> Question:
    """
    Pide preguntas hasta que llegue una con enunciado.
    Después de max_attempts intentos vacíos levanta ProviderExhaustedError.
    """
    for attempt in range(1, max_attempts + 1):
        question = provider.fetch_random_question()
        if question.prompt.strip():
            return question
        log.warning(f"Empty question from provider (id={question.id}), attempt {attempt}/{max_attempts}")
    raise ProviderExhaustedError(max_attempts)
