from .user_analytics import UserAnalyticsPostgresRepository

__all__ = ["UserAnalyticsPostgresRepository"]
