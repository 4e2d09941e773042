from threading import Lock
from typing import Any, Type


class Singleton(type):
    __instances: dict[Type, object] = {}
    __lock: Lock = Lock()

    def __call__(cls, *args: Any, **kwargs: Any):
        metaclass = type(cls)
        if cls not in metaclass.__instances:
            with metaclass.__lock:
                if cls not in metaclass.__instances:
                    metaclass.__instances[cls] = super().__call__(
                        *args, **kwargs
                    )
        return metaclass.__instances[cls]

    def clear_singleton(cls) -> None:
        metaclass = type(cls)
        with metaclass.__lock:
            metaclass.__instances.pop(cls, None)
