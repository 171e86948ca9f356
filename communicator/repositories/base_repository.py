# communicator/repositories/base_repository.py
import logging
from typing import Generic, List, Optional, Type, TypeVar

from azure.core.exceptions import ResourceNotFoundError
from azure.data.tables import UpdateMode
from azure.data.tables.aio import TableServiceClient
from pydantic import BaseModel

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


class BaseRepository(Generic[EntityT]):
    """
    Table storage access shared by the repositories.
    Subclasses set `entity_type`, a model with from_table_entity/to_table_entity.
    """
    entity_type: Type[EntityT]

    def __init__(
        self,
        table_service: TableServiceClient,
        table_name: str,
        default_partition_key: str,
        ensure_table_exists: bool = False,
    ):
        self.table_service = table_service
        self.table_name = table_name
        self.default_partition_key = default_partition_key
        self.table = table_service.get_table_client(table_name=table_name)
        self._table_ready = not ensure_table_exists

    async def _prepare(self):
        # lazy create on first use when the repository was asked to
        if self._table_ready:
            return
        await self.table_service.create_table_if_not_exists(table_name=self.table_name)
        self._table_ready = True

    async def table_exists(self) -> bool:
        tables = self.table_service.query_tables(
            "TableName eq @name", parameters={"name": self.table_name}
        )
        async for _ in tables:
            return True
        return False

    async def create_table(self):
        await self.table.create_table()
        logger.info("Created table %s", self.table_name)

    async def execute_query(self, query_filter: str, parameters: Optional[dict] = None,
                            count: Optional[int] = None) -> List[EntityT]:
        await self._prepare()
        entities = self.table.query_entities(
            query_filter=query_filter,
            parameters=parameters,
            results_per_page=count,
        )
        results = []
        async for entity in entities:
            results.append(self.entity_type.from_table_entity(entity))
            if count is not None and len(results) >= count:
                break
        return results

    async def get(self, partition_key: str, row_key: str) -> Optional[EntityT]:
        await self._prepare()
        try:
            entity = await self.table.get_entity(partition_key=partition_key, row_key=row_key)
        except ResourceNotFoundError:
            return None
        return self.entity_type.from_table_entity(entity)

    async def get_all(self, partition_key: Optional[str] = None,
                      count: Optional[int] = None) -> List[EntityT]:
        return await self.execute_query(
            "PartitionKey eq @pk",
            parameters={"pk": partition_key or self.default_partition_key},
            count=count,
        )

    async def insert_or_merge(self, entity: EntityT):
        await self._prepare()
        await self.table.upsert_entity(entity=entity.to_table_entity(), mode=UpdateMode.MERGE)

    async def insert_or_replace(self, entity: EntityT):
        await self._prepare()
        await self.table.upsert_entity(entity=entity.to_table_entity(), mode=UpdateMode.REPLACE)

    async def delete(self, entity: EntityT):
        await self._prepare()
        await self.table.delete_entity(partition_key=entity.PartitionKey, row_key=entity.RowKey)
