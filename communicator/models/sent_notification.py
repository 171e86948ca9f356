# communicator/models/sent_notification.py
from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict

TABLE_NAME = "SentNotificationData"
DEFAULT_PARTITION = "Default"

NO_REACTION = 0
REACTED = 1


class SentNotificationEntity(BaseModel):
    """
    One delivery of a notification to one recipient.
    PartitionKey = notification id, RowKey = recipient (AAD object id).
    Columns we don't model are kept as extras so a merge never drops them.
    """
    model_config = ConfigDict(extra="allow")

    PartitionKey: str
    RowKey: str
    MessageId: Optional[str] = None
    MessageReaction: int = NO_REACTION

    RecipientType: Optional[str] = None
    RecipientId: Optional[str] = None
    DeliveryStatus: Optional[str] = None
    StatusCode: Optional[int] = None
    SentDate: Optional[datetime] = None
    ConversationId: Optional[str] = None
    ServiceUrl: Optional[str] = None
    TenantId: Optional[str] = None
    UserId: Optional[str] = None
    ErrorMessage: Optional[str] = None
    TotalNumberOfSendThrottles: Optional[int] = None

    @classmethod
    def from_table_entity(cls, entity: Mapping[str, Any]) -> "SentNotificationEntity":
        return cls(**dict(entity))

    def to_table_entity(self) -> dict:
        extra = self.model_extra or {}
        entity = self.model_dump(exclude_none=True, exclude=set(extra))
        # extras go back as the SDK gave them (EntityProperty for Edm.Int64, ...)
        entity.update({k: v for k, v in extra.items() if v is not None})
        return entity


def _quote(value: Optional[str]) -> str:
    if value is None:
        value = ""
    # OData string literal: a single quote is written as two
    return "'" + str(value).replace("'", "''") + "'"


def build_reaction_filter(user_id: Optional[str], message_id: Optional[str]) -> str:
    """
    Filter for the sent notification a user reacted to:
      RowKey eq '<userId>' and MessageId eq '<messageId>'
    """
    return f"RowKey eq {_quote(user_id)} and MessageId eq {_quote(message_id)}"
