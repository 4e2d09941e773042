from decimal import Decimal
from typing import Any, Callable

import structlog
from structlog.types import EventDict

from .enums import ProcessorNames
from .interfaces import ILoggingConfig, ILogProcessor


class LogMessageCleaner:
    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        """
        Clean up log messages for better readability in console output.
        Removes extra whitespace.
        """
        event = event_dict.get("event")
        if isinstance(event, str):
            event_dict["event"] = event.strip()
        return event_dict


class AppContextAdder:
    def __init__(self, app_name: str, debug: bool) -> None:
        self.app_name = app_name
        self.debug = debug

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        """Add application-wide context to all log entries."""
        event_dict.setdefault("app", self.app_name)
        event_dict.setdefault("debug", self.debug)
        return event_dict


class DecimalStringifier:
    """
    Render Decimal values as plain fixed-point text.

    Keeps ``Decimal('9.89')`` out of console output and lets the JSON
    renderer emit amounts as exact strings instead of floats.
    """

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, Decimal):
                event_dict[key] = format(value, "f")
        return event_dict


class ProcessorBuilder:
    def __init__(
        self,
        logging_config: ILoggingConfig,
        additional_processors: list[ILogProcessor] | None = None,
    ) -> None:
        self.logging_config = logging_config
        self.additional_processors = additional_processors or []
        self._blueprints: dict[ProcessorNames, Callable[[], ILogProcessor]] = {
            ProcessorNames.MERGE_CONTEXTVARS: lambda: (
                structlog.contextvars.merge_contextvars
            ),
            ProcessorNames.ADD_LOGGER_NAME: lambda: (
                structlog.stdlib.add_logger_name
            ),
            ProcessorNames.ADD_LOG_LEVEL: lambda: structlog.stdlib.add_log_level,
            ProcessorNames.POSITIONAL_ARGS: (
                structlog.stdlib.PositionalArgumentsFormatter
            ),
            ProcessorNames.TIMESTAMP: lambda: structlog.processors.TimeStamper(
                fmt="%Y-%m-%d %H:%M:%S"
            ),
            ProcessorNames.STACK_INFO: structlog.processors.StackInfoRenderer,
            ProcessorNames.EXC_INFO: lambda: structlog.processors.format_exc_info,
            ProcessorNames.CONTEXT_ADDER: lambda: AppContextAdder(
                app_name=self.logging_config.app_name,
                debug=self.logging_config.debug,
            ),
            ProcessorNames.MESSAGE_CLEANER: LogMessageCleaner,
            ProcessorNames.DECIMAL_STRINGIFIER: DecimalStringifier,
        }

    def create(self, name: ProcessorNames) -> ILogProcessor:
        if name not in self._blueprints:
            raise ValueError(f"Processor '{name}' not registered")
        return self._blueprints[name]()

    def get_available_products(self) -> list[str]:
        return [str(name) for name in self._blueprints]

    def build_base_chain(self) -> list[ILogProcessor]:
        return [
            self.create(ProcessorNames.MERGE_CONTEXTVARS),
            self.create(ProcessorNames.ADD_LOGGER_NAME),
            self.create(ProcessorNames.ADD_LOG_LEVEL),
            self.create(ProcessorNames.POSITIONAL_ARGS),
            self.create(ProcessorNames.TIMESTAMP),
            self.create(ProcessorNames.STACK_INFO),
            self.create(ProcessorNames.EXC_INFO),
        ]

    def build_shared_chain(self) -> list[ILogProcessor]:
        chain = self.build_base_chain()
        if not self.logging_config.debug:
            chain.append(self.create(ProcessorNames.CONTEXT_ADDER))
        chain.append(self.create(ProcessorNames.MESSAGE_CLEANER))
        chain.append(self.create(ProcessorNames.DECIMAL_STRINGIFIER))
        chain.extend(self.additional_processors)
        return chain

    def build_formatter_wrapper(self) -> ILogProcessor:
        return structlog.stdlib.ProcessorFormatter.wrap_for_formatter
