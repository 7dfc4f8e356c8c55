"""Lo específico de Slack: sobre de respuesta y nombres desde users.list."""
import logging
import httpx
import redis

from .config import Settings

log = logging.getLogger(__name__)

NAME_KEY = "user_names:{user_id}"
NAME_TTL = 3600  # 1h


def build_reply(text: str, settings: Settings) -> dict:
    reply = {"text": text, "link_names": 1}
    if settings.bot_username is not None:
        reply["username"] = settings.bot_username
    if settings.bot_icon is not None:
        reply["icon_emoji"] = settings.bot_icon
    return reply


class SlackDirectory:
    def __init__(self, api_token: str | None, r: redis.Redis, base_url: str = "https://slack.com",
                 timeout: float = 10.0, client: httpx.Client | None = None):
        self.api_token = api_token
        self.r = r
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.Client(timeout=timeout)

    def resolve_display_name(self, user_id: str, fallback: str) -> str:
        """
        Primer nombre del perfil de Slack, o `fallback` si no hay token,
        si la API falla o si el usuario no tiene primer nombre.
        """
        if not self.api_token:
            return fallback

        key = NAME_KEY.format(user_id=user_id)
        name = self.r.get(key)
        if name is not None:
            return name

        try:
            resp = self.client.get(f"{self.base_url}/api/users.list", params={"token": self.api_token})
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            log.warning(f"users.list failed for {user_id}, using '{fallback}': {e}")
            return fallback

        name = fallback
        if data.get("ok"):
            user = next((m for m in data.get("members", []) if m.get("id") == user_id), None)
            first_name = ((user or {}).get("profile") or {}).get("first_name")
            if first_name:
                name = first_name
        else:
            log.warning(f"users.list not ok: {data.get('error')}")
        self.r.setex(key, NAME_TTL, name)
        return name

    def close(self) -> None:
        self.client.close()
