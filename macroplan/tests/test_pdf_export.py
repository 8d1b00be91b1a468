import unittest
from macroplan.domain.Dish import Dish
from macroplan.domain.MealPlan import MealPlan
from macroplan.infra.pdf_utils import generate_pdf_for_week


class TestPdfExport(unittest.TestCase):

    def test_empty_plan(self):
        self.assertTrue(generate_pdf_for_week(MealPlan()).startswith(b'%PDF'))

    def test_names_with_markup_characters(self):
        plan = MealPlan()
        plan.add_dish_to_meal("Monday", "Lunch", Dish("1", "Mac & cheese <large>", 20, 25, 60, 560))
        pdf = generate_pdf_for_week(plan, title="Test week")
        self.assertTrue(pdf.startswith(b'%PDF'))
        self.assertGreater(len(pdf), 1000)


if __name__ == '__main__':
    unittest.main()
