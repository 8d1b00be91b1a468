import json
import unittest
from macroplan.domain.Catalog import DishCatalog
from macroplan.events.Event_Bus import EventBus, CATALOG_DISH_ADDED, CATALOG_DISH_DELETED
from macroplan.infra.Catalog_Repository import CatalogRepository, seed_dishes
from macroplan.infra.storage import MemoryStore
from macroplan.utilities.constants import CATALOG_STORAGE_KEY

COMPLETE = {"name": "Lentil soup", "protein": 18, "fats": 4, "carbs": 40, "calories": 260,
            "link": "https://example.org/lentils"}


class TestDishCatalog(unittest.TestCase):

    def setUp(self):
        self.kv = MemoryStore()
        self.now = [1700000000000]
        self.catalog = DishCatalog(
            seed_dishes(), repository=CatalogRepository(self.kv), clock=lambda: self.now[0]
        ).set_event_bus(EventBus())

    def stored(self):
        return json.loads(self.kv.get(CATALOG_STORAGE_KEY))

    def test_add_complete_dish_appends_one(self):
        before = len(self.catalog)
        dish = self.catalog.add_dish(COMPLETE)
        self.assertEqual(len(self.catalog), before + 1)
        self.assertIs(self.catalog.get_items()[-1], dish)
        for key, value in COMPLETE.items():
            self.assertEqual(getattr(dish, key), value)
        self.assertEqual(dish.id, "1700000000000")

    def test_add_persists_full_catalog(self):
        self.catalog.add_dish(COMPLETE)
        stored = self.stored()
        self.assertEqual(len(stored), 5)
        self.assertEqual(stored[-1]["name"], "Lentil soup")
        self.assertEqual([d["id"] for d in stored[:4]], ["1", "2", "3", "4"])

    def test_add_with_missing_field_is_ignored(self):
        for missing in ("name", "protein", "fats", "carbs", "calories"):
            draft = {k: v for k, v in COMPLETE.items() if k != missing}
            self.assertIsNone(self.catalog.add_dish(draft), missing)
            self.assertEqual(len(self.catalog), 4, missing)
        self.assertIsNone(self.kv.get(CATALOG_STORAGE_KEY))

    def test_zero_values_count_as_present(self):
        dish = self.catalog.add_dish({"name": "Water", "protein": 0, "fats": 0, "carbs": 0, "calories": 0})
        self.assertIsNotNone(dish)

    def test_negative_or_blank_values_are_ignored(self):
        self.assertIsNone(self.catalog.add_dish({**COMPLETE, "fats": -1}))
        self.assertIsNone(self.catalog.add_dish({**COMPLETE, "name": "   "}))
        self.assertIsNone(self.catalog.add_dish({**COMPLETE, "calories": "inf"}))
        self.assertIsNone(self.catalog.add_dish({**COMPLETE, "protein": "1e400"}))
        self.assertIsNone(self.catalog.add_dish({**COMPLETE, "carbs": float("nan")}))
        self.assertEqual(len(self.catalog), 4)

    def test_ids_stay_unique_within_same_millisecond(self):
        first = self.catalog.add_dish(COMPLETE)
        second = self.catalog.add_dish({**COMPLETE, "name": "Lentil soup II"})
        self.assertNotEqual(first.id, second.id)
        ids = [d.id for d in self.catalog]
        self.assertEqual(len(ids), len(set(ids)))

    def test_delete_keeps_order_of_others(self):
        self.catalog.delete_dish("2")
        self.assertEqual([d.id for d in self.catalog], ["1", "3", "4"])
        self.assertEqual([d["id"] for d in self.stored()], ["1", "3", "4"])

    def test_delete_unknown_is_noop(self):
        self.assertIsNone(self.catalog.delete_dish("missing"))
        self.assertEqual([d.id for d in self.catalog], ["1", "2", "3", "4"])
        # Still persisted
        self.assertEqual([d["id"] for d in self.stored()], ["1", "2", "3", "4"])

    def test_mutations_publish_events(self):
        bus = EventBus()
        seen = []
        bus.subscribe(CATALOG_DISH_ADDED, lambda name, payload: seen.append((name, payload["dish"].name)))
        bus.subscribe(CATALOG_DISH_DELETED, lambda name, payload: seen.append((name, payload["dish"].name)))
        self.catalog.set_event_bus(bus)
        self.catalog.add_dish(COMPLETE)
        self.catalog.delete_dish("3")
        self.catalog.delete_dish("nope")
        self.assertEqual(seen, [(CATALOG_DISH_ADDED, "Lentil soup"), (CATALOG_DISH_DELETED, "Greek salad")])

    def test_load_from_repository(self):
        self.catalog.add_dish(COMPLETE)
        reloaded = DishCatalog.load(CatalogRepository(self.kv))
        self.assertEqual(reloaded.to_dict(), self.catalog.to_dict())


if __name__ == '__main__':
    unittest.main()
