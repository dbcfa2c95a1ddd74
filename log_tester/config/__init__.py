from log_tester.config.settings import (
    CaptureSettings,
    LoggingSettings,
    Settings,
    load_settings,
)

__all__ = [
    'Settings',
    'LoggingSettings',
    'CaptureSettings',
    'load_settings',
]
