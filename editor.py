"""Editor host interface the plugins are written against."""
from typing import Awaitable, Callable, List, Protocol, Tuple


MenuCallback = Callable[["EditorHost"], Awaitable[None]]


class EditorHost(Protocol):
    """Capabilities a host editor hands to the plugins."""

    def get_selection(self) -> str:
        ...

    def replace_selection(self, text: str) -> None:
        ...

    def get_value(self) -> str:
        ...

    def set_value(self, text: str) -> None:
        ...

    def add_menu_item(self, title: str, callback: MenuCallback) -> None:
        ...

    def notify(self, message: str) -> None:
        ...


class InMemoryEditor:
    """
    Editor over a plain string buffer.

    Used by the CLI, the HTTP API and the tests. The selection is a
    (start, end) pair of offsets into the buffer.
    """

    def __init__(self, value: str = "", selection: Tuple[int, int] = (0, 0)):
        self.value = value
        self.selection = selection
        self.menu_items: List[Tuple[str, MenuCallback]] = []
        self.notifications: List[str] = []

    def select(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self.value):
            raise ValueError(f"Selection {start}:{end} outside buffer of {len(self.value)} chars")
        self.selection = (start, end)

    def select_all(self) -> None:
        self.selection = (0, len(self.value))

    def get_selection(self) -> str:
        start, end = self.selection
        return self.value[start:end]

    def replace_selection(self, text: str) -> None:
        start, end = self.selection
        self.value = self.value[:start] + text + self.value[end:]
        self.selection = (start, start + len(text))

    def get_value(self) -> str:
        return self.value

    def set_value(self, text: str) -> None:
        self.value = text
        start, end = self.selection
        self.selection = (min(start, len(text)), min(end, len(text)))

    def add_menu_item(self, title: str, callback: MenuCallback) -> None:
        self.menu_items.append((title, callback))

    def notify(self, message: str) -> None:
        self.notifications.append(message)

    @property
    def menu_titles(self) -> List[str]:
        return [title for title, _ in self.menu_items]

    async def trigger(self, title: str) -> None:
        """Run the menu item with the given title, as a right-click would."""
        for item_title, callback in self.menu_items:
            if item_title == title:
                await callback(self)
                return
        raise KeyError(f"No menu item named '{title}'")
