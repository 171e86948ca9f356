# tests/test_sent_notification_model.py
from datetime import datetime, timezone

from communicator.models.sent_notification import (
    NO_REACTION,
    SentNotificationEntity,
    build_reaction_filter,
)


def test_reaction_filter_format():
    assert build_reaction_filter("U1", "M1") == "RowKey eq 'U1' and MessageId eq 'M1'"


def test_reaction_filter_with_real_ids():
    f = build_reaction_filter(
        "6d2a1f3c-0f5e-4c61-9d2e-1c3b2a4e5f60",
        "1:1Xq0VvS4yF2hK9pQ",
    )
    assert f == (
        "RowKey eq '6d2a1f3c-0f5e-4c61-9d2e-1c3b2a4e5f60' "
        "and MessageId eq '1:1Xq0VvS4yF2hK9pQ'"
    )


def test_reaction_filter_doubles_single_quotes():
    assert build_reaction_filter("O'Brien", "M1") == "RowKey eq 'O''Brien' and MessageId eq 'M1'"


def test_reaction_filter_missing_values_are_empty_literals():
    assert build_reaction_filter(None, None) == "RowKey eq '' and MessageId eq ''"


def test_entity_defaults_to_no_reaction():
    entity = SentNotificationEntity(PartitionKey="n1", RowKey="U1")
    assert entity.MessageReaction == NO_REACTION
    assert entity.MessageId is None


def test_entity_keeps_unknown_columns():
    entity = SentNotificationEntity.from_table_entity({
        "PartitionKey": "n1",
        "RowKey": "U1",
        "MessageId": "M1",
        "IsStatusCodeFromCreateConversation": True,
    })

    row = entity.to_table_entity()
    assert row["IsStatusCodeFromCreateConversation"] is True
    assert row["MessageId"] == "M1"


def test_to_table_entity_drops_unset_fields():
    sent = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    entity = SentNotificationEntity(PartitionKey="n1", RowKey="U1", SentDate=sent, StatusCode=201)

    assert entity.to_table_entity() == {
        "PartitionKey": "n1",
        "RowKey": "U1",
        "MessageReaction": 0,
        "SentDate": sent,
        "StatusCode": 201,
    }
