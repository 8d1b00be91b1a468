import unittest
from macroplan.domain.Dish import Dish
from macroplan.domain.MealPlan import MealPlan
from macroplan.events.Event_Bus import EventBus
from macroplan.infra.Ration_Repository import RationRepository
from macroplan.infra.storage import MemoryStore
from macroplan.utilities.constants import RATIONS_STORAGE_KEY


class TestRationRepository(unittest.TestCase):

    def setUp(self):
        self.kv = MemoryStore()
        self.repo = RationRepository(self.kv, bus=EventBus())
        self.plan = MealPlan()
        self.plan.add_dish_to_meal("Monday", "Breakfast", Dish("1", "Oatmeal with berries", 12, 8, 45, 310))

    def test_save_and_load_snapshot(self):
        ration = self.repo.save_ration("Cutting week", self.plan)
        self.assertEqual(ration.dish_count(), 1)
        # Later edits to the live plan do not leak into the snapshot
        self.plan.add_dish_to_meal("Monday", "Lunch", Dish("2", "Chicken breast with rice", 35, 10, 50, 430))
        loaded = self.repo.load_ration("Cutting week")
        self.assertEqual([d.name for d in loaded.get_meal("Monday", "Breakfast")], ["Oatmeal with berries"])
        self.assertEqual(loaded.get_meal("Monday", "Lunch"), [])

    def test_loaded_plans_are_independent(self):
        self.repo.save_ration("Base", self.plan)
        first = self.repo.load_ration("Base")
        first.clear()
        self.assertFalse(self.repo.load_ration("Base").is_empty())

    def test_same_name_replaces_in_place(self):
        self.repo.save_ration("A", self.plan)
        self.repo.save_ration("B", MealPlan())
        self.repo.save_ration("A", MealPlan())
        rations = self.repo.list_rations()
        self.assertEqual([r.name for r in rations], ["A", "B"])
        self.assertEqual(rations[0].dish_count(), 0)

    def test_blank_name_is_ignored(self):
        self.assertIsNone(self.repo.save_ration("  ", self.plan))
        self.assertIsNone(self.kv.get(RATIONS_STORAGE_KEY))

    def test_delete(self):
        self.repo.save_ration("A", self.plan)
        self.assertTrue(self.repo.delete_ration("A"))
        self.assertFalse(self.repo.delete_ration("A"))
        self.assertIsNone(self.repo.load_ration("A"))

    def test_unreadable_rations_start_empty(self):
        self.kv.set(RATIONS_STORAGE_KEY, "{broken")
        self.assertEqual(self.repo.list_rations(), [])


if __name__ == '__main__':
    unittest.main()
