"""Materialise stored entries into the visible, newest-first list."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional

from markupsafe import Markup, escape

from .localization import format_entry_date
from .models import Entry
from .services.entries import EntryStore


DeleteHandler = Callable[[int], object]


def memo_to_html(memo: str) -> Markup:
    """Escape the memo and turn its line breaks into ``<br>`` tags."""
    lines = memo.replace("\r\n", "\n").split("\n")
    return Markup("<br>").join(escape(line) for line in lines)


@dataclass
class EntryNode:
    entry_id: int
    city: str
    display_date: str
    memo_html: Markup
    image: Optional[str] = None
    on_delete: Optional[DeleteHandler] = field(default=None, repr=False, compare=False)

    @property
    def dom_id(self) -> str:
        return f"entry-{self.entry_id}"

    def delete(self):
        if self.on_delete is None:
            raise RuntimeError(f"{self.dom_id} has no delete control attached")
        return self.on_delete(self.entry_id)


class VisibleList:
    """Ordered nodes as shown on the page, top first."""

    def __init__(self) -> None:
        self._nodes: List[EntryNode] = []

    def prepend(self, node: EntryNode) -> None:
        self._nodes.insert(0, node)

    def remove(self, entry_id: int) -> bool:
        for index, node in enumerate(self._nodes):
            if node.entry_id == entry_id:
                del self._nodes[index]
                return True
        return False

    def clear(self) -> None:
        self._nodes.clear()

    def ids(self) -> List[int]:
        return [node.entry_id for node in self._nodes]

    def __iter__(self) -> Iterator[EntryNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)


class ListRenderer:
    def __init__(
        self,
        store: EntryStore,
        visible: Optional[VisibleList] = None,
        *,
        lang: str = "ko",
        on_delete: Optional[DeleteHandler] = None,
    ) -> None:
        self.store = store
        self.visible = visible if visible is not None else VisibleList()
        self.lang = lang
        self.on_delete = on_delete

    def build_node(self, entry: Entry) -> EntryNode:
        return EntryNode(
            entry_id=entry.id,
            city=entry.city,
            display_date=format_entry_date(entry.date, self.lang),
            memo_html=memo_to_html(entry.memo),
            image=entry.image or None,
            on_delete=self.on_delete,
        )

    def render_one(self, entry: Entry) -> EntryNode:
        node = self.build_node(entry)
        self.visible.prepend(node)
        return node

    def render_all(self) -> VisibleList:
        # Storage order is oldest first; prepending each one leaves the
        # newest entry on top.
        self.visible.clear()
        for entry in self.store.load():
            self.render_one(entry)
        return self.visible
