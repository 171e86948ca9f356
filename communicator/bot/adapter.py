# communicator/bot/adapter.py
import logging

from botbuilder.core import BotFrameworkAdapter, BotFrameworkAdapterSettings, TurnContext

from communicator.config import Settings

logger = logging.getLogger(__name__)

TURN_ERROR_MESSAGE = "The bot encountered an error or bug."


async def on_turn_error(turn_context: TurnContext, error: Exception):
    logger.error("Unhandled error in bot turn: %s", error, exc_info=error)
    await turn_context.send_activity(TURN_ERROR_MESSAGE)


def create_adapter(settings: Settings) -> BotFrameworkAdapter:
    adapter_settings = BotFrameworkAdapterSettings(
        app_id=settings.app_id,
        app_password=settings.app_password,
        channel_auth_tenant=settings.app_tenant_id,
    )
    adapter = BotFrameworkAdapter(adapter_settings)
    adapter.on_turn_error = on_turn_error
    return adapter
