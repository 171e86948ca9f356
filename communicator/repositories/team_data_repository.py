# communicator/repositories/team_data_repository.py
from azure.data.tables.aio import TableServiceClient

from communicator.models.team_data import DEFAULT_PARTITION, TABLE_NAME, TeamDataEntity
from communicator.repositories.base_repository import BaseRepository


class TeamDataRepository(BaseRepository[TeamDataEntity]):
    """Teams the bot has been installed in (PartitionKey 'TeamData', RowKey = team id)."""
    entity_type = TeamDataEntity

    def __init__(self, table_service: TableServiceClient, ensure_table_exists: bool = False):
        super().__init__(
            table_service,
            table_name=TABLE_NAME,
            default_partition_key=DEFAULT_PARTITION,
            ensure_table_exists=ensure_table_exists,
        )
