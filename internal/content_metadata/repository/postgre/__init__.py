from .content_metadata import ContentMetadataPostgresRepository

__all__ = ["ContentMetadataPostgresRepository"]
