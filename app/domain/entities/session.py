"""Login session entity"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from ..value_objects.entity_ids import UserId


@dataclass
class Session:
    id: str
    user_id: UserId
    expires_at: datetime
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def start(cls, session_id: str, user_id: UserId, duration: timedelta) -> 'Session':
        now = datetime.utcnow()
        return cls(id=session_id, user_id=user_id, expires_at=now + duration, created_at=now)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or datetime.utcnow()) > self.expires_at
