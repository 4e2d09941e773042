import sys
from logging import Handler, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .enums import HandlerNames
from .interfaces import IHandler, ILoggingConfig


class ConsoleHandlerStrategy:
    # stdout is reserved for calculation results
    def __call__(self) -> Handler:
        return StreamHandler(sys.stderr)


class FileHandlerStrategy:
    def __init__(self, logging_config: ILoggingConfig) -> None:
        self.logging_config = logging_config

    def __call__(self) -> Handler:
        return RotatingFileHandler(
            filename=str(
                Path(self.logging_config.logs_dir)
                / self.logging_config.logs_file_name
            ),
            maxBytes=self.logging_config.max_file_size_mb * 1024 * 1024,
            backupCount=self.logging_config.backup_count,
            encoding="utf-8",
        )


class HandlerBuilder:
    def create(
        self, name: HandlerNames, logging_config: ILoggingConfig | None = None
    ) -> IHandler:
        if name == HandlerNames.CONSOLE:
            return ConsoleHandlerStrategy()
        if name == HandlerNames.FILE:
            if logging_config is None:
                raise ValueError("File handler requires a logging config")
            return FileHandlerStrategy(logging_config)
        raise ValueError(f"Handler '{name}' not registered")

    def build_console_handler(self) -> Handler:
        strategy = self.create(HandlerNames.CONSOLE)
        return strategy()

    def build_file_handler(self, logging_config: ILoggingConfig) -> Handler:
        Path(logging_config.logs_dir).mkdir(parents=True, exist_ok=True)
        strategy = self.create(HandlerNames.FILE, logging_config)
        return strategy()

    def build_handler_chain(
        self,
        logging_config: ILoggingConfig,
    ) -> list[Handler]:
        result = [self.build_console_handler()]
        if logging_config.enable_file_logging:
            result.append(self.build_file_handler(logging_config))
        return result
