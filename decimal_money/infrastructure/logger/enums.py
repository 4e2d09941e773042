from enum import StrEnum


class ProcessorNames(StrEnum):
    MERGE_CONTEXTVARS = "merge_contextvars"
    ADD_LOGGER_NAME = "add_logger_name"
    ADD_LOG_LEVEL = "add_log_level"
    POSITIONAL_ARGS = "positional_args_formatter"
    TIMESTAMP = "timestamp_stamper"
    STACK_INFO = "stack_info_renderer"
    EXC_INFO = "exc_info_formatter"

    CONTEXT_ADDER = "context_adder"
    MESSAGE_CLEANER = "message_cleaner"
    DECIMAL_STRINGIFIER = "decimal_stringifier"


class HandlerNames(StrEnum):
    FILE = "file"
    CONSOLE = "console"


class RendererNames(StrEnum):
    JSON = "json"
    CONSOLE = "console"
