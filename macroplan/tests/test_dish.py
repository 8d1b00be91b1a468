import unittest
from macroplan.domain.Dish import Dish


class TestDish(unittest.TestCase):

    def setUp(self):
        self.dish = Dish("1", "Oatmeal with berries", 12, 8, 45, 310, link="https://example.org/oats")

    def test_copy_is_equal_but_independent(self):
        copy = self.dish.copy()
        self.assertEqual(copy, self.dish)
        self.assertIsNot(copy, self.dish)

    def test_fields_cannot_be_reassigned(self):
        with self.assertRaises(AttributeError):
            self.dish.name = "Porridge"
        with self.assertRaises(AttributeError):
            self.dish.calories = 0

    def test_to_dict_omits_missing_link(self):
        d = Dish("2", "Greek salad", 8, 15, 12, 220).to_dict()
        self.assertNotIn("link", d)
        self.assertEqual(d, {"id": "2", "name": "Greek salad", "protein": 8, "fats": 15, "carbs": 12, "calories": 220})

    def test_from_dict_ignores_unknown_keys(self):
        dish = Dish.from_dict({**self.dish.to_dict(), "rating": 5})
        self.assertEqual(dish, self.dish)
        self.assertEqual(dish.link, "https://example.org/oats")

    def test_from_dict_requires_id_and_name(self):
        with self.assertRaises(ValueError):
            Dish.from_dict({"name": "Nameless id"})
        with self.assertRaises(ValueError):
            Dish.from_dict({"id": "9"})

    def test_from_dict_rejects_unusable_amounts(self):
        base = self.dish.to_dict()
        for key, value in (("protein", "12"), ("fats", None), ("carbs", -1),
                           ("calories", float("inf")), ("protein", True)):
            with self.assertRaises(ValueError, msg=f"{key}={value!r}"):
                Dish.from_dict({**base, key: value})
        without_calories = {k: v for k, v in base.items() if k != "calories"}
        with self.assertRaises(ValueError):
            Dish.from_dict(without_calories)


if __name__ == '__main__':
    unittest.main()
