from typing import Iterable, Optional
from urllib.parse import unquote_plus

from internal.model.constant import PROCESSED_KEY_PREFIX
from ..constant import OBJECT_CREATED_PREFIXES
from ..type import Notification


def decode_key(key: str) -> str:
    """Notification keys arrive form-encoded: '+' is a space, then percent-decoding."""
    return unquote_plus(key)


def has_accepted_extension(key: str, accepted_extensions: Iterable[str]) -> bool:
    return key.lower().endswith(tuple(accepted_extensions))


def is_object_created(event_name: Optional[str]) -> bool:
    # Records without an event name are treated as creations
    if not event_name:
        return True
    return event_name.startswith(OBJECT_CREATED_PREFIXES)


def build_processed_key(content_id: str, extension: str) -> str:
    return f"{PROCESSED_KEY_PREFIX}{content_id}.{extension}"


def resolve_user_id(notification: Notification, default_user_id: str) -> str:
    user_id = (notification.user_id or "").strip()
    return user_id or default_user_id


def normalize_etag(etag: Optional[str]) -> Optional[str]:
    if not etag:
        return None
    return etag.strip().strip('"') or None


__all__ = [
    "decode_key",
    "has_accepted_extension",
    "is_object_created",
    "build_processed_key",
    "resolve_user_id",
    "normalize_etag",
]
