from faultkit.config.settings import Settings
from faultkit.logging.logger import Log


def configure(settings: Settings | None = None) -> Settings:
    """Load settings (from the environment unless given) and wire up logging."""
    settings = settings or Settings()
    Log.configure(settings.log_level)
    Log.info(f"faultkit configured for {settings.app_env} at {settings.log_level}")
    return settings
