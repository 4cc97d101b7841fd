from typing import Any, Callable, List

Handler = Callable[..., Any]


class EventEmitter:
    """Outbound event of a view. Handlers run synchronously, in connection order."""

    def __init__(self, name: str = ""):
        self.name = name
        self._handlers: List[Handler] = []

    def connect(self, handler: Handler) -> Handler:
        self._handlers.append(handler)
        return handler

    def disconnect(self, handler: Handler):
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, *args: Any):
        for handler in list(self._handlers):
            handler(*args)
