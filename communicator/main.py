# communicator/main.py
import logging

from dotenv import load_dotenv

# 1) load the environment from .env before reading any settings
load_dotenv()

from azure.data.tables.aio import TableServiceClient
from botbuilder.core import BotTelemetryClient
from fastapi import FastAPI

from communicator.api.health import router as health_router
from communicator.api.messages import router as messages_router
from communicator.bot.adapter import create_adapter
from communicator.bot.telemetry import LoggingTelemetryClient
from communicator.bot.user_activity_handler import UserTeamsActivityHandler
from communicator.config import Settings, get_settings
from communicator.infra.table_client import get_table_service_client
from communicator.repositories.sent_notification_repository import SentNotificationRepository
from communicator.repositories.team_data_repository import TeamDataRepository
from communicator.services.teams_data_capture import TeamsDataCapture

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Company Communicator User Bot")

# 2) routes
app.include_router(messages_router)
app.include_router(health_router)


def build_bot(
    settings: Settings,
    table_service: TableServiceClient,
    telemetry_client: BotTelemetryClient,
) -> UserTeamsActivityHandler:
    sent_notification_repository = SentNotificationRepository(table_service)
    team_data_repository = TeamDataRepository(
        table_service, ensure_table_exists=settings.ensure_table_exists
    )
    return UserTeamsActivityHandler(
        teams_data_capture=TeamsDataCapture(team_data_repository),
        sent_notification_repository=sent_notification_repository,
        telemetry_client=telemetry_client,
    )


@app.on_event("startup")
async def startup_event():
    # 3) wire the services once per process
    table_service = get_table_service_client(settings.storage_connection_string)
    bot = build_bot(settings, table_service, LoggingTelemetryClient())

    app.state.table_service = table_service
    app.state.adapter = create_adapter(settings)
    app.state.bot = bot
    app.state.sent_notification_repository = bot.sent_notification_repository

    # 4) the table must exist before the first reaction comes in
    if settings.ensure_table_exists:
        await bot.sent_notification_repository.ensure_table_exists()
        logger.info("Table %s is ready", bot.sent_notification_repository.table_name)


@app.on_event("shutdown")
async def shutdown_event():
    table_service = getattr(app.state, "table_service", None)
    if table_service is not None:
        await table_service.close()
