from .handler import IngestionHandler
from .new import New

__all__ = ["IngestionHandler", "New"]
