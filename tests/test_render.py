import unittest

from markupsafe import Markup

from traveljournal.localization import format_entry_date
from traveljournal.models import Entry
from traveljournal.render import ListRenderer, VisibleList, memo_to_html
from traveljournal.services.entries import EntryStore
from traveljournal.storage import MemoryStorage


class MemoToHtmlTest(unittest.TestCase):
    def test_line_breaks_become_br(self) -> None:
        self.assertEqual(memo_to_html("first\nsecond"), Markup("first<br>second"))

    def test_markup_in_memo_is_escaped(self) -> None:
        self.assertEqual(
            memo_to_html("<b>bold</b>\r\nnext"),
            Markup("&lt;b&gt;bold&lt;/b&gt;<br>next"),
        )


class FormatEntryDateTest(unittest.TestCase):
    def test_korean(self) -> None:
        self.assertEqual(format_entry_date("2024-05-03", "ko"), "2024년 5월 3일")

    def test_english(self) -> None:
        self.assertEqual(format_entry_date("2024-05-03", "en"), "May 3, 2024")

    def test_unparseable_passes_through(self) -> None:
        self.assertEqual(format_entry_date("sometime", "en"), "sometime")


class ListRendererTest(unittest.TestCase):
    def setUp(self) -> None:
        self.store = EntryStore(MemoryStorage())
        self.renderer = ListRenderer(self.store, lang="en")

    def add(self, entry_id, city, **kwargs) -> Entry:
        entry = Entry(id=entry_id, city=city, date="2024-05-03", **kwargs)
        self.store.add(entry)
        return entry

    def test_render_all_shows_newest_first(self) -> None:
        self.add(1, "A")
        self.add(2, "B")
        self.add(3, "C")
        visible = self.renderer.render_all()
        self.assertEqual([node.city for node in visible], ["C", "B", "A"])
        # storage keeps chronological order
        self.assertEqual([e.city for e in self.store.load()], ["A", "B", "C"])

    def test_render_all_twice_does_not_duplicate(self) -> None:
        self.add(1, "A")
        self.add(2, "B")
        self.renderer.render_all()
        once = self.renderer.visible.ids()
        self.renderer.render_all()
        self.assertEqual(self.renderer.visible.ids(), once)
        self.assertEqual(len(self.renderer.visible), 2)

    def test_render_one_inserts_on_top(self) -> None:
        self.add(1, "A")
        self.renderer.render_all()
        self.renderer.render_one(Entry(id=2, city="B", date="2024-05-04"))
        self.assertEqual(self.renderer.visible.ids(), [2, 1])

    def test_node_fields(self) -> None:
        entry = self.add(9, "Jeju", memo="sun\nsea", image="data:image/png;base64,AAAA")
        node = self.renderer.render_one(entry)
        self.assertEqual(node.dom_id, "entry-9")
        self.assertEqual(node.display_date, "May 3, 2024")
        self.assertEqual(node.memo_html, Markup("sun<br>sea"))
        self.assertEqual(node.image, "data:image/png;base64,AAAA")

    def test_node_without_image(self) -> None:
        node = self.renderer.render_one(self.add(4, "Busan"))
        self.assertIsNone(node.image)

    def test_delete_control_calls_handler_with_id(self) -> None:
        calls = []
        renderer = ListRenderer(self.store, on_delete=calls.append)
        node = renderer.render_one(self.add(4, "Busan"))
        node.delete()
        self.assertEqual(calls, [4])

    def test_delete_without_handler_raises(self) -> None:
        node = self.renderer.render_one(self.add(4, "Busan"))
        with self.assertRaises(RuntimeError):
            node.delete()


class VisibleListTest(unittest.TestCase):
    def test_remove_missing_id_returns_false(self) -> None:
        self.assertFalse(VisibleList().remove(1))


if __name__ == "__main__":
    unittest.main()
