from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow():
    return datetime.now(timezone.utc)


@dataclass
class Post:
    id: int
    title: str
    content: str
    author: str
    date: datetime = field(default_factory=_utcnow)
