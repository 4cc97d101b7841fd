from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import logging

from sales_console.core.broadcast import BroadcastChannel, ChannelSubscription
from sales_console.core.events import EventEmitter
from sales_console.core.text import alternate_case
from sales_console.schemas.records import Salesperson

logger = logging.getLogger(__name__)


class ChannelView(ABC):
    """Base for views that mirror the favorite from a BroadcastChannel while open."""

    def __init__(self, channel: BroadcastChannel):
        self._channel = channel
        self._subscription: Optional[ChannelSubscription] = None

    def open(self):
        if self._subscription is None:
            self._subscription = self._channel.subscribe(self._on_favorite)
        return self

    def close(self):
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @abstractmethod
    def _on_favorite(self, name: str):
        pass


class SalespersonRow(ChannelView):
    """
    One salesperson in a list.

    Gets its record from the parent list and emits events back up:
      favorite_selected(name), delete_requested(id), raise_requested(id).
    Separately follows the shared favorite through the channel.
    """

    def __init__(self, salesperson: Salesperson, channel: BroadcastChannel):
        super().__init__(channel)
        self.salesperson = salesperson
        self.favorite = ""
        self.favorite_selected = EventEmitter("favorite_selected")
        self.delete_requested = EventEmitter("delete_requested")
        self.raise_requested = EventEmitter("raise_requested")

    def _on_favorite(self, name: str):
        self.favorite = name

    @property
    def is_favorite(self) -> bool:
        return bool(self.favorite) and self.favorite == self.salesperson.first_name

    def select_favorite(self):
        name = self.salesperson.first_name
        self._channel.publish(name)
        self.favorite_selected.emit(name)

    def request_delete(self):
        self.delete_requested.emit(self.salesperson.id)

    def request_raise(self):
        self.raise_requested.emit(self.salesperson.id)

    def view(self, lower_first: bool = False) -> Dict[str, Any]:
        data = self.salesperson.view()
        data["styledName"] = alternate_case(self.salesperson.display_name, lower_first)
        data["isFavorite"] = self.is_favorite
        return data


class FavoriteDisplay(ChannelView):
    """Header widget showing the current favorite salesperson."""

    PLACEHOLDER = "Mock SP"

    def __init__(self, channel: BroadcastChannel):
        super().__init__(channel)
        # Replaced by the channel's current value as soon as the display opens
        self.current = self.PLACEHOLDER

    def _on_favorite(self, name: str):
        self.current = name

    def styled(self, lower_first: bool) -> str:
        return alternate_case(self.current, lower_first)
