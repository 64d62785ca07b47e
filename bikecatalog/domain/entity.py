from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


@dataclass(frozen=True, kw_only=True)
class Entity:
    # excluded from equality
    uid: str = field(default_factory=lambda: str(uuid4()), compare=False)
    created_at: datetime = field(default_factory=datetime.now, compare=False)
