import unittest
from fastapi.testclient import TestClient
from macroplan.api.api_run import app
from macroplan.domain.Dish import Dish
from macroplan.events import web_observers
from macroplan.events.Event_Bus import EventBus
from macroplan.events.event_helpers import publish_dish_added, publish_dish_removed, publish_ration_saved


class TestEventBus(unittest.TestCase):

    def test_subscribe_once(self):
        bus = EventBus()
        calls = []
        listener = lambda name, payload: calls.append(payload)  # noqa: E731
        bus.subscribe("x", listener)
        bus.subscribe("x", listener)
        bus.publish("x", 1)
        bus.publish("y", 2)
        self.assertEqual(calls, [1])

    def test_failing_listener_does_not_stop_others(self):
        bus = EventBus()
        calls = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe("x", broken)
        bus.subscribe("x", lambda name, payload: calls.append(payload))
        bus.publish("x", "ok")
        self.assertEqual(calls, ["ok"])


class TestActivityFeed(unittest.TestCase):

    def test_global_events_are_recorded_with_cursor(self):
        web_observers.start()
        cursor = web_observers.get_events()['next_cursor']
        publish_dish_added(Dish("77", "Pho", 20, 5, 60, 380))
        publish_dish_removed("Monday", "Lunch", "77", 2)
        publish_ration_saved("Week B")
        data = web_observers.get_events(since=cursor)
        self.assertEqual([e['type'] for e in data['events']],
                         ['catalog.dish_added', 'plan.dish_removed', 'ration.saved'])
        added, removed, saved = data['events']
        self.assertEqual((added['dish_id'], added['name']), ('77', 'Pho'))
        self.assertEqual((removed['day'], removed['slot'], removed['removed']), ('Monday', 'Lunch', 2))
        self.assertEqual(saved['name'], 'Week B')
        self.assertEqual(data['next_cursor'], saved['id'])
        self.assertEqual(web_observers.get_events(since=data['next_cursor'])['events'], [])

    def test_app_startup_starts_observers(self):
        web_observers._started = False
        with TestClient(app):
            self.assertTrue(web_observers._started)

    def test_events_endpoint(self):
        with TestClient(app) as client:
            cursor = client.get('/api/events').json()['next_cursor']
            publish_ration_saved("Week C")
            resp = client.get('/api/events', params={'since': cursor})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([e['name'] for e in resp.json()['events']], ['Week C'])


if __name__ == '__main__':
    unittest.main()
