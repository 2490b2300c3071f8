from dataclasses import dataclass
from datetime import datetime


@dataclass
class IncrementUploadOptions:
    user_id: str
    uploaded_at: datetime


__all__ = ["IncrementUploadOptions"]
