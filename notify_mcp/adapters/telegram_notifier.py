"""Telegram notification adapter — implements NotificationPort.

Calls the Bot API `sendMessage` method over HTTPS with a fixed timeout and
maps every failure onto a NotificationError category. Malformed responses
and explicit rejections are logged separately but surface to the caller
with the same remote-rejected diagnostic.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from notify_mcp.ports.notification_port import FailureCategory, NotificationError

if TYPE_CHECKING:
    from notify_mcp.config import Settings

logger = logging.getLogger(__name__)

_TIMEOUT_SECONDS = 10
_UNKNOWN_TELEGRAM_ERROR = "Unknown Telegram error"


class TelegramNotifier:
    """Telegram implementation of NotificationPort."""

    def __init__(self, bot_token: str, chat_id: str, api_base_url: str = "https://api.telegram.org") -> None:
        self._chat_id = chat_id
        self._send_url = f"{api_base_url.rstrip('/')}/bot{bot_token}/sendMessage"

    @classmethod
    def from_settings(cls, settings: Settings) -> TelegramNotifier:
        return cls(
            bot_token=settings.TELEGRAM_BOT_TOKEN,
            chat_id=settings.TELEGRAM_CHAT_ID,
            api_base_url=settings.TELEGRAM_API_BASE_URL,
        )

    async def send_message(self, text: str, parse_mode: str | None = None) -> int:
        """Send `text` to the configured chat and return Telegram's message_id.

        Raises:
            NotificationError: on timeout, connection failure, or when
                Telegram does not confirm the message.
        """
        payload: dict[str, Any] = {"chat_id": self._chat_id, "text": text}
        if parse_mode:
            payload["parse_mode"] = parse_mode

        try:
            async with httpx.AsyncClient(timeout=_TIMEOUT_SECONDS) as client:
                resp = await client.post(self._send_url, json=payload)
        except httpx.TimeoutException as exc:
            logger.warning("Telegram sendMessage timed out after %ss: %r", _TIMEOUT_SECONDS, exc)
            raise NotificationError(
                FailureCategory.TIMEOUT,
                "Request timed out: the Telegram API did not respond in time.",
            ) from exc
        except httpx.TransportError as exc:
            logger.error("Telegram API unreachable: %r", exc)
            raise NotificationError(
                FailureCategory.NETWORK,
                "Network error: unable to reach the Telegram API.",
            ) from exc

        return _message_id_from_response(resp)


def _message_id_from_response(resp: httpx.Response) -> int:
    try:
        data = resp.json()
    except ValueError:
        logger.error(
            "Malformed Telegram response (HTTP %s): %.200s", resp.status_code, resp.text
        )
        raise NotificationError(
            FailureCategory.REMOTE_REJECTED,
            f"Telegram API error: {_UNKNOWN_TELEGRAM_ERROR}",
        ) from None

    if not isinstance(data, dict):
        data = {}

    result = data.get("result")
    message_id = result.get("message_id") if isinstance(result, dict) else None
    valid_id = isinstance(message_id, int) and not isinstance(message_id, bool) and message_id > 0

    if data.get("ok") is not True or not valid_id:
        description = data.get("description") or _UNKNOWN_TELEGRAM_ERROR
        logger.error(
            "Telegram API error on send (HTTP %s): %s", resp.status_code, description
        )
        raise NotificationError(
            FailureCategory.REMOTE_REJECTED,
            f"Telegram API error: {description}",
        )

    logger.info("Notification sent via Telegram. Message ID: %s", message_id)
    return message_id
