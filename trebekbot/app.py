import logging
import re
import httpx
import redis
from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import PlainTextResponse

from .config import Settings
from .game import RoundController
from .provider import JServiceProvider, ProviderError
from .slack import SlackDirectory, build_reply
from .store import RoundStore, ScoreLedger, connect

# ----------------- App & logging -----------------
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
log = logging.getLogger("trebekbot")

START_ROUND = re.compile(r"^jeopardy me", re.IGNORECASE)
MY_SCORE = re.compile(r"my score$", re.IGNORECASE)
HELP = re.compile(r"^help$", re.IGNORECASE)


def create_app(settings: Settings | None = None, r: redis.Redis | None = None,
               provider=None, directory: SlackDirectory | None = None) -> FastAPI:
    """
    Arma la app con sus colaboradores. Sin argumentos, todo sale de las
    variables de entorno; los tests inyectan dobles.
    """
    settings = settings or Settings.from_env()
    r = r if r is not None else connect(settings.redis_url)
    provider = provider or JServiceProvider(settings.jservice_url, settings.http_timeout)
    directory = directory or SlackDirectory(settings.slack_api_token, r, settings.slack_api_base,
                                            settings.http_timeout)
    game = RoundController(RoundStore(r), ScoreLedger(r), provider, directory, settings)

    app = FastAPI(title="trebekbot")
    app.state.settings = settings
    app.state.game = game

    # ----------------- Health -----------------
    @app.get("/health")
    def health():
        try:
            r.ping()
            return {"ok": True}
        except redis.RedisError as e:
            raise HTTPException(500, f"Redis unavailable: {e}")

    # ----------------- Webhook -----------------
    # params: token, team_id, channel_id, channel_name, timestamp,
    #         user_id, user_name, text ("trebekbot jeopardy me"), trigger_word
    @app.post("/")
    def webhook(
        token: str = Form(""),
        channel_id: str = Form(""),
        user_id: str = Form(""),
        user_name: str = Form(""),
        text: str = Form(""),
        trigger_word: str = Form(""),
    ):
        if trigger_word:
            text = text.replace(trigger_word, "", 1)
        text = text.strip()

        # sin token configurado no se acepta ningún request
        if not settings.webhook_token or token != settings.webhook_token:
            log.warning(f"Invalid token from channel {channel_id}")
            return PlainTextResponse("Invalid token")

        try:
            if START_ROUND.search(text):
                reply = game.start_round(channel_id)
            elif MY_SCORE.search(text):
                reply = game.get_score_reply(user_id, user_name)
            elif HELP.search(text):
                reply = game.help_text()
            else:
                reply = game.submit_answer(channel_id, user_id, user_name, text)
        except redis.RedisError as e:
            log.exception(f"Redis error handling '{text}' in {channel_id}")
            raise HTTPException(503, f"Redis unavailable: {e}")
        except ProviderError as e:
            log.error(str(e))
            raise HTTPException(502, str(e))
        except httpx.HTTPError as e:
            log.exception("Trivia provider request failed")
            raise HTTPException(502, f"Trivia provider error: {e}")

        return build_reply(reply, settings)

    return app
