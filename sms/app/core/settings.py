import os


class Settings:
    def __init__(self):
        self.app_name = "Student Management System"
        self.api_version = "1.0.0"
        self.environment = os.getenv("SMS_ENVIRONMENT", "development")
        self.database_url = os.getenv("SMS_DATABASE_URL", "sqlite:///./sms.db")
        self.log_level = os.getenv("SMS_LOG_LEVEL", "INFO").upper()


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
