class LogTesterError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class LoggerAlreadySetError(LogTesterError):
    def __init__(self, message: str, target: str) -> None:
        self.target = target
        super().__init__(message)


class InvalidLevelError(LogTesterError):
    def __init__(self, message: str, value: object) -> None:
        self.value = value
        super().__init__(message)


class ConfigurationError(LogTesterError):
    pass
