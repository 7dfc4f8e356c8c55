import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# ---------- Config ----------
# Se resuelve una sola vez al arrancar y se pasa a quien la necesite.

class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    webhook_token: str = ""
    redis_url: str = "redis://localhost:6379/0"
    bot_username: str | None = None
    bot_icon: str | None = None
    slack_api_token: str | None = None
    slack_api_base: str = "https://slack.com"
    jservice_url: str = "http://jservice.io"
    http_timeout: float = 10.0
    question_max_attempts: int = 5

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Lee las variables de entorno (y .env si existe).
        Las variables vacías se tratan como no definidas.
        """
        if dotenv:
            load_dotenv()

        def _env(name: str) -> str | None:
            value = os.getenv(name)
            return value if value else None

        return cls(
            webhook_token=os.getenv("OUTGOING_WEBHOOK_TOKEN", ""),
            redis_url=os.getenv("REDIS_URL", "redis://localhost:6379/0"),
            bot_username=_env("BOT_USERNAME"),
            bot_icon=_env("BOT_ICON"),
            slack_api_token=_env("API_TOKEN"),
            slack_api_base=os.getenv("SLACK_API_BASE", "https://slack.com"),
            jservice_url=os.getenv("JSERVICE_URL", "http://jservice.io"),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "10")),
            question_max_attempts=int(os.getenv("QUESTION_MAX_ATTEMPTS", "5")),
        )
