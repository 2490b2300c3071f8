from .presenters import parse_envelope, to_notifications, new_batch_resp

__all__ = [
    "parse_envelope",
    "to_notifications",
    "new_batch_resp",
]
