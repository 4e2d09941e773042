import logging
from logging import Handler
from typing import Any

import structlog

from decimal_money.utils.metaclasses import Singleton

from .handlers import HandlerBuilder
from .interfaces import ILoggingConfig
from .processors import ProcessorBuilder
from .renderers import RendererBuilder


class LoggerManager(metaclass=Singleton):
    def __init__(self) -> None:
        self.config: ILoggingConfig | None = None
        self.handler_builder: HandlerBuilder | None = None
        self.processor_builder: ProcessorBuilder | None = None
        self.renderer_builder: RendererBuilder | None = None
        self.handlers: list[Handler] = []
        self.is_configured = False

    def _configure_structlog(self) -> None:
        if (
            not self.processor_builder
            or not self.handler_builder
            or not self.renderer_builder
            or not self.config
        ):
            raise RuntimeError(
                "LoggerManager is not configured. "
                "Call 'setup_logging()' first."
            )

        shared_processors = self.processor_builder.build_shared_chain()
        formatter_wrapper = self.processor_builder.build_formatter_wrapper()

        structlog.configure(
            processors=shared_processors + [formatter_wrapper],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        formatter = structlog.stdlib.ProcessorFormatter(
            processor=self.renderer_builder.build_renderer(self.config.debug),
            foreign_pre_chain=shared_processors,
        )

        self.handlers = self.handler_builder.build_handler_chain(self.config)
        for handler in self.handlers:
            handler.setFormatter(formatter)
            handler.setLevel(self.config.log_level)

        root_logger = logging.getLogger()
        root_logger.handlers = list(self.handlers)
        root_logger.setLevel(self.config.log_level)

    def configure_logger_manager(
        self,
        config: ILoggingConfig,
        handler_builder: HandlerBuilder,
        processor_builder: ProcessorBuilder,
        renderer_builder: RendererBuilder,
    ) -> None:
        if self.is_configured:
            return

        self.config = config
        self.handler_builder = handler_builder
        self.processor_builder = processor_builder
        self.renderer_builder = renderer_builder

        self._configure_structlog()

        self.is_configured = True

    def shutdown(self) -> None:
        root_logger = logging.getLogger()
        for handler in self.handlers:
            if handler in root_logger.handlers:
                root_logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        structlog.reset_defaults()
        self.is_configured = False


def get_logger_manager() -> LoggerManager:
    return LoggerManager()


def bind_context(**kwargs: Any) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context(*keys: str) -> None:
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)
    else:
        structlog.contextvars.clear_contextvars()


def setup_logging(config: ILoggingConfig) -> None:
    manager = get_logger_manager()

    if manager.is_configured:
        return

    manager.configure_logger_manager(
        config=config,
        handler_builder=HandlerBuilder(),
        processor_builder=ProcessorBuilder(logging_config=config),
        renderer_builder=RendererBuilder(),
    )


def reset_logging() -> None:
    """Undo ``setup_logging`` so it can be called again with a new config."""
    manager = get_logger_manager()
    manager.shutdown()
    LoggerManager.clear_singleton()
