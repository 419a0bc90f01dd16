"""Repository for Message records. No business logic; caller owns the transaction."""
from __future__ import annotations
from datetime import datetime
from sqlalchemy import func
from sqlmodel import Session, col, select
from eventdesk.models.core import Event, Message


class MessageRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def count_sent_since(self, owner_id: int, since: datetime) -> int:
        """Messages the owner sent on their own events since *since*; drafts excluded."""
        return self._s.exec(
            select(func.count()).select_from(Message)
            .join(Event, Message.event_id == Event.id)
            .where(
                Event.created_by == owner_id,
                Message.created_by == owner_id,
                col(Message.sent_date).is_not(None),
                Message.sent_date >= since,
            )
        ).one()

    def create(
        self,
        *,
        event_id: int,
        created_by: int,
        subject: str,
        body: str = "",
        sent_date: datetime | None = None,
    ) -> Message:
        message = Message(
            event_id=event_id, created_by=created_by, subject=subject, body=body, sent_date=sent_date,
        )
        self._s.add(message)
        self._s.flush()
        return message
