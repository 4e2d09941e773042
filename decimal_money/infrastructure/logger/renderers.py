from typing import Any, Callable

import orjson
import structlog
from structlog.types import EventDict, Processor, WrappedLogger
from structlog.typing import ProcessorReturnValue

from .enums import RendererNames


class JsonRenderStrategy:
    def __init__(self) -> None:
        self.renderer: Processor = structlog.processors.JSONRenderer(
            serializer=self._serializer
        )

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue:
        return self.renderer(logger, method_name, event_dict)

    def _serializer(
        self,
        data: Any,
        default: Callable[[Any], Any] | None = None,
        option: int | None = None,
    ) -> str:
        # value types like DecimalMoney serialize as their text form
        option = (option or 0) | orjson.OPT_PASSTHROUGH_DATACLASS
        return orjson.dumps(data, default=str, option=option).decode("utf-8")


class ConsoleRenderStrategy:
    def __init__(self, colors: bool = True, pad_event_to: int = 20) -> None:
        self.renderer: Processor = structlog.dev.ConsoleRenderer(
            colors=colors,
            pad_event_to=pad_event_to,
        )

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue:
        return self.renderer(logger, method_name, event_dict)


class RendererBuilder:
    def build_renderer(self, debug: bool) -> Processor:
        if not debug:
            return self.create(RendererNames.JSON)
        else:
            return self.create(RendererNames.CONSOLE)

    def create(self, name: RendererNames) -> Processor:
        if name == RendererNames.JSON:
            return JsonRenderStrategy()
        if name == RendererNames.CONSOLE:
            return ConsoleRenderStrategy(colors=True, pad_event_to=20)
        raise ValueError(f"Renderer '{name}' not registered")
