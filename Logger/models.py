# Logger/models.py
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Any


LOG_LEVELS = ('INFO', 'WARNING', 'ERROR')


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    level: str
    message: str
    source: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'timestamp': self.timestamp.isoformat(),
            'level': self.level,
            'message': self.message,
            'source': self.source,
        }
