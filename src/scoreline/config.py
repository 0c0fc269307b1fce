from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml

from scoreline.exceptions import ConfigError

class AppSettings(BaseSettings):
    name: str = "Scoreline"
    version: str = "1.0.0"

class WindowSettings(BaseSettings):
    # Window lengths offered by the dashboard range picker.
    allowed_days: list[int] = [7, 30, 90, 365]
    default_range: str = "30d"
    timezone: str = "UTC"  # used to derive "today" at the API/CLI edge

class ExportSettings(BaseSettings):
    output_dir: Path = Path("./reports")

class SecuritySettings(BaseSettings):
    max_body_kb: int = 2048  # Content-Length guard for series requests

class LoggingSettings(BaseSettings):
    log_requests: bool = True
    level: str = "INFO"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_nested_delimiter="__", env_file=".env", extra="ignore")
    app: AppSettings = AppSettings()
    window: WindowSettings = WindowSettings()
    export: ExportSettings = ExportSettings()
    security: SecuritySettings = SecuritySettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        default_path = Path("config/settings.yaml")
        path = config_path or (default_path if default_path.exists() else None)

        if not path:
            return cls()

        try:
            with open(path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to read settings from {path}: {exc}") from exc

        if not isinstance(config_data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")
        return cls(**config_data)

settings = Settings.load()
