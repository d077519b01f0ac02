import json
import unittest

from traveljournal.models import Entry
from traveljournal.services.entries import EntryStore
from traveljournal.storage import MemoryStorage


def make_entry(entry_id, city="Seoul", date="2024-05-03", memo="", image=None):
    return Entry(id=entry_id, city=city, date=date, memo=memo, image=image)


class EntryStoreTest(unittest.TestCase):
    def setUp(self) -> None:
        self.storage = MemoryStorage()
        self.store = EntryStore(self.storage, "travelEntries")

    def test_load_without_blob_is_empty(self) -> None:
        self.assertEqual(self.store.load(), [])
        self.assertIsNone(self.store.warning)

    def test_save_then_load_round_trips_field_for_field(self) -> None:
        entries = [
            make_entry(1, memo="line one\nline two"),
            make_entry(2, city="Busan", date="2024-06-01", image="data:image/png;base64,AAAA"),
        ]
        self.store.save(entries)
        self.assertEqual(self.store.load(), entries)

    def test_blob_uses_fixed_key_and_json_array_schema(self) -> None:
        self.store.add(make_entry(5, city="부산"))
        payload = json.loads(self.storage.get_item("travelEntries"))
        self.assertEqual(
            payload,
            [{"id": 5, "city": "부산", "date": "2024-05-03", "memo": "", "image": None}],
        )

    def test_add_appends_in_insertion_order(self) -> None:
        for entry_id in (3, 1, 2):
            self.store.add(make_entry(entry_id))
        self.assertEqual([e.id for e in self.store.load()], [3, 1, 2])

    def test_remove_drops_only_matching_id(self) -> None:
        for entry_id in (1, 2, 3):
            self.store.add(make_entry(entry_id))
        self.assertTrue(self.store.remove(2))
        self.assertEqual([e.id for e in self.store.load()], [1, 3])

    def test_remove_unknown_id_is_a_noop(self) -> None:
        self.store.add(make_entry(1))
        before = self.storage.get_item("travelEntries")
        self.assertFalse(self.store.remove(99))
        self.assertEqual(self.storage.get_item("travelEntries"), before)

    def test_malformed_json_loads_as_empty_with_warning(self) -> None:
        self.storage.set_item("travelEntries", "{not json")
        with self.assertLogs("traveljournal.services.entries", level="WARNING"):
            self.assertEqual(self.store.load(), [])
        self.assertIsNotNone(self.store.warning)

    def test_non_list_payload_is_malformed(self) -> None:
        self.storage.set_item("travelEntries", json.dumps({"id": 1}))
        with self.assertLogs("traveljournal.services.entries", level="WARNING"):
            self.assertEqual(self.store.load(), [])

    def test_entries_without_image_key_load(self) -> None:
        self.storage.set_item(
            "travelEntries",
            json.dumps([{"id": 7, "city": "Jeju", "date": "2023-01-02", "memo": "hi"}]),
        )
        [entry] = self.store.load()
        self.assertIsNone(entry.image)
        self.assertEqual(entry.memo, "hi")

    def test_next_id_uses_timestamp_when_newer(self) -> None:
        self.store.add(make_entry(1000))
        self.assertEqual(self.store.next_id(2000), 2000)

    def test_next_id_bumps_past_collisions(self) -> None:
        self.store.add(make_entry(1000))
        self.assertEqual(self.store.next_id(1000), 1001)
        self.assertEqual(self.store.next_id(500), 1001)

    def test_raw_defaults_to_empty_array(self) -> None:
        self.assertEqual(self.store.raw(), "[]")


if __name__ == "__main__":
    unittest.main()
