# communicator/services/teams_data_capture.py
import logging
from typing import List, Optional

from botbuilder.core import TurnContext
from botbuilder.schema import Activity, ChannelAccount
from botbuilder.schema.teams import TeamsChannelData

from communicator.models.team_data import TeamDataEntity
from communicator.repositories.team_data_repository import TeamDataRepository

logger = logging.getLogger(__name__)

CHANNEL_CONVERSATION_TYPE = "channel"


def get_teams_channel_data(activity: Activity) -> Optional[TeamsChannelData]:
    if activity is None or not activity.channel_data:
        return None
    return TeamsChannelData().deserialize(activity.channel_data)


class TeamsDataCapture:
    """
    Keeps the TeamData table in step with the teams the bot is installed in.
    Called by the activity handler on conversation updates.
    """

    def __init__(self, team_data_repository: TeamDataRepository):
        self.team_data_repository = team_data_repository

    async def on_bot_added(self, turn_context: TurnContext, activity: Activity):
        if not self._is_channel_conversation(activity):
            logger.debug("Bot added outside a team conversation, nothing to capture")
            return

        if not self._includes_bot(activity.members_added, activity):
            return

        team = self._team_from_activity(activity)
        if team is None:
            logger.warning("Bot added to a channel without team channel data")
            return

        await self.team_data_repository.insert_or_merge(team)
        logger.info("Captured team %s", team.RowKey)

    async def on_bot_removed(self, activity: Activity):
        if not self._is_channel_conversation(activity):
            return

        # a person leaving the team is not the bot being uninstalled
        if not self._includes_bot(activity.members_removed, activity):
            return

        channel_data = get_teams_channel_data(activity)
        if channel_data is None or channel_data.team is None:
            return

        team = await self.team_data_repository.get(
            self.team_data_repository.default_partition_key, channel_data.team.id
        )
        if team is None:
            return

        await self.team_data_repository.delete(team)
        logger.info("Removed team %s", team.RowKey)

    async def on_team_information_updated(self, activity: Activity):
        team = self._team_from_activity(activity)
        if team is None:
            return

        await self.team_data_repository.insert_or_merge(team)
        logger.info("Updated team %s name to %s", team.RowKey, team.Name)

    @staticmethod
    def _includes_bot(members: Optional[List[ChannelAccount]], activity: Activity) -> bool:
        if activity.recipient is None:
            return False
        return any(member.id == activity.recipient.id for member in members or [])

    @staticmethod
    def _is_channel_conversation(activity: Activity) -> bool:
        conversation = activity.conversation if activity else None
        return conversation is not None and conversation.conversation_type == CHANNEL_CONVERSATION_TYPE

    @staticmethod
    def _team_from_activity(activity: Activity) -> Optional[TeamDataEntity]:
        channel_data = get_teams_channel_data(activity)
        if channel_data is None or channel_data.team is None:
            return None

        return TeamDataEntity(
            RowKey=channel_data.team.id,
            Name=channel_data.team.name,
            ServiceUrl=activity.service_url,
            TenantId=channel_data.tenant.id if channel_data.tenant else None,
        )
