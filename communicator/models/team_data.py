# communicator/models/team_data.py
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict

TABLE_NAME = "TeamData"
DEFAULT_PARTITION = "TeamData"


class TeamDataEntity(BaseModel):
    model_config = ConfigDict(extra="allow")

    PartitionKey: str = DEFAULT_PARTITION
    RowKey: str            # team id
    Name: Optional[str] = None
    ServiceUrl: Optional[str] = None
    TenantId: Optional[str] = None

    @classmethod
    def from_table_entity(cls, entity: Mapping[str, Any]) -> "TeamDataEntity":
        return cls(**dict(entity))

    def to_table_entity(self) -> dict:
        extra = self.model_extra or {}
        entity = self.model_dump(exclude_none=True, exclude=set(extra))
        # extras go back as the SDK gave them (EntityProperty for Edm.Int64, ...)
        entity.update({k: v for k, v in extra.items() if v is not None})
        return entity
