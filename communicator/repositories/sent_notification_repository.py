# communicator/repositories/sent_notification_repository.py
import logging
from typing import List

from azure.data.tables.aio import TableServiceClient

from communicator.models.sent_notification import (
    DEFAULT_PARTITION,
    TABLE_NAME,
    SentNotificationEntity,
)
from communicator.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)


class SentNotificationRepository(BaseRepository[SentNotificationEntity]):
    entity_type = SentNotificationEntity

    def __init__(self, table_service: TableServiceClient, ensure_table_exists: bool = False):
        super().__init__(
            table_service,
            table_name=TABLE_NAME,
            default_partition_key=DEFAULT_PARTITION,
            ensure_table_exists=ensure_table_exists,
        )

    async def ensure_table_exists(self):
        """
        Create the SentNotificationData table if it is missing.
        Must run before anything that reads or writes the table;
        nothing downstream creates it on its own.
        """
        if not await self.table_exists():
            await self.create_table()

    async def get_with_filter(self, query_filter: str) -> List[SentNotificationEntity]:
        try:
            return await self.execute_query(query_filter)
        except Exception as e:
            logger.exception("Query on %s failed: %s", self.table_name, e)
            raise
