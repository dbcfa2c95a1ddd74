import os
from dataclasses import dataclass
from typing import Optional

from log_tester.core.schema.level import Level


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: Level
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class CaptureSettings:
    target: str


@dataclass(frozen=True, slots=True)
class Settings:
    logging: LoggingSettings
    capture: CaptureSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    logging_backend = _env_str("LOG_TESTER_LOGGER_BACKEND", "console").lower()
    logging_name = _env_str("LOG_TESTER_LOGGER_NAME", "log_tester")
    logging_level = Level.parse(_env_str("LOG_TESTER_LOGGER_LEVEL", "warning"))
    logfire_token = _env_or_default("LOG_TESTER_LOGFIRE_TOKEN")
    capture_target = _env_str("LOG_TESTER_CAPTURE_TARGET", "")

    return Settings(
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            level=logging_level,
            logfire_token=logfire_token,
        ),
        capture=CaptureSettings(target=capture_target),
    )


def _env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_str(name: str, default: str = "") -> str:
    return _env_or_default(name, default) or default
