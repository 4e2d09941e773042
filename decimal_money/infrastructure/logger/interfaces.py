from logging import Handler
from pathlib import Path
from typing import Any, Protocol

from structlog.typing import ProcessorReturnValue


class ILoggingConfig(Protocol):
    debug: bool
    app_name: str
    log_level: str
    enable_file_logging: bool
    logs_dir: Path
    logs_file_name: str
    max_file_size_mb: int
    backup_count: int


class IHandler(Protocol):
    def __call__(self) -> Handler: ...


class ILogProcessor(Protocol):
    def __call__(self, *args: Any, **kwargs: Any) -> ProcessorReturnValue: ...
