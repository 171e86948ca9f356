# communicator/bot/user_activity_handler.py
import logging
from typing import List, Optional

from botbuilder.core import BotTelemetryClient, NullTelemetryClient, TurnContext
from botbuilder.core.teams import TeamsActivityHandler
from botbuilder.schema import Activity, MessageReaction

from communicator.models.sent_notification import REACTED, build_reaction_filter
from communicator.repositories.sent_notification_repository import SentNotificationRepository
from communicator.services.teams_data_capture import TeamsDataCapture, get_teams_channel_data

logger = logging.getLogger(__name__)

TEAM_RENAMED_EVENT_TYPE = "teamRenamed"
MESSAGE_REACTION_EVENT = "MessageReaction"

AUTO_REPLY_MESSAGE = (
    "Thank you for your message. Please reach out to "
    "<a href='mailto:feedback@hearst.com'>feedback@hearst.com</a> with any questions."
)


class NotificationNotFoundError(LookupError):
    pass


class UserTeamsActivityHandler(TeamsActivityHandler):
    """
    User bot: answers messages, records reactions on sent notifications
    and captures team data on conversation updates.
    """

    def __init__(
        self,
        teams_data_capture: TeamsDataCapture,
        sent_notification_repository: SentNotificationRepository,
        telemetry_client: Optional[BotTelemetryClient] = None,
    ):
        if teams_data_capture is None:
            raise TypeError("teams_data_capture is required")
        if sent_notification_repository is None:
            raise TypeError("sent_notification_repository is required")

        self.teams_data_capture = teams_data_capture
        self.sent_notification_repository = sent_notification_repository
        self.telemetry_client = telemetry_client or NullTelemetryClient()

    async def on_message_activity(self, turn_context: TurnContext):
        await turn_context.send_activity(AUTO_REPLY_MESSAGE)

    async def on_reactions_added(
        self, message_reactions: List[MessageReaction], turn_context: TurnContext
    ):
        activity = turn_context.activity
        user_id = activity.from_property.aad_object_id if activity.from_property else None
        message_id = activity.reply_to_id
        query_filter = build_reaction_filter(user_id, message_id)

        try:
            try:
                await self._mark_reacted(query_filter)
            except Exception as e:
                logger.warning("Could not record reaction (%s): %s", query_filter, e, exc_info=e)
                await turn_context.send_activity(
                    f"failed to interact with the notification repo, {e}"
                )
        finally:
            self.telemetry_client.track_event(
                MESSAGE_REACTION_EVENT,
                {
                    "Filter": query_filter,
                    "From.AAD object": user_id,
                    "From.Id": activity.from_property.id if activity.from_property else None,
                    "# of Reaction Added": str(len(activity.reactions_added or [])),
                    "# of Reaction Removed": str(len(activity.reactions_removed or [])),
                    "ReplyToId": message_id,
                },
            )

        await super().on_reactions_added(message_reactions, turn_context)

    async def _mark_reacted(self, query_filter: str):
        entities = await self.sent_notification_repository.get_with_filter(query_filter)
        # one record per (user, message) is assumed; the first one wins
        if not entities:
            raise NotificationNotFoundError(f"no sent notification matches {query_filter}")

        entity = entities[0]
        entity.MessageReaction = REACTED
        await self.sent_notification_repository.insert_or_merge(entity)

    async def on_conversation_update_activity(self, turn_context: TurnContext):
        # base routes member changes and Teams events (on_teams_members_added, ...);
        # the capture calls below run whatever it did
        await super().on_conversation_update_activity(turn_context)

        activity = turn_context.activity

        if self.is_team_information_updated(activity):
            await self.teams_data_capture.on_team_information_updated(activity)

        if activity.members_added:
            await self.teams_data_capture.on_bot_added(turn_context, activity)

        if activity.members_removed:
            await self.teams_data_capture.on_bot_removed(activity)

    @staticmethod
    def is_team_information_updated(activity: Activity) -> bool:
        channel_data = get_teams_channel_data(activity)
        if channel_data is None or not channel_data.event_type:
            return False

        return channel_data.event_type.lower() == TEAM_RENAMED_EVENT_TYPE.lower()
