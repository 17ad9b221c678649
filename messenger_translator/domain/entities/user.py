"""User preference domain entity."""
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass
class UserPreference:
    """Per-user preference record, keyed by the Messenger sender id."""

    id: str
    locale: str  # language of the bot's own strings (help, errors)
    language: str  # translation target
    name: Optional[str] = None
    record_id: Optional[str] = None  # store-side primary key, when it differs from id

    def __post_init__(self):
        """Validate user entity."""
        if not self.id:
            raise ValueError("id is required")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
