"""Dish catalog persistence: the whole catalog as one JSON array under a fixed key."""
import json
import logging
from typing import Iterable, List

from macroplan.domain.Dish import Dish
from macroplan.infra.storage import KeyValueStore
from macroplan.utilities.constants import CATALOG_STORAGE_KEY, SEED_DISHES

logger = logging.getLogger(__name__)


def seed_dishes() -> List[Dish]:
    return [Dish.from_dict(d) for d in SEED_DISHES]


def _unique_ids(dishes: List[Dish]) -> List[Dish]:
    """Keep the first dish for each identifier."""
    seen = set()
    unique = []
    for dish in dishes:
        if dish.id in seen:
            logger.warning(f"Dropping stored dish {dish.name!r}: duplicate id {dish.id}")
            continue
        seen.add(dish.id)
        unique.append(dish)
    return unique


class CatalogRepository:
    def __init__(self, store: KeyValueStore, key: str = CATALOG_STORAGE_KEY):
        self.store = store
        self.key = key

    def load(self) -> List[Dish]:
        """Read the stored catalog; absent or unreadable data yields the seed dishes."""
        raw = self.store.get(self.key)
        if raw is None:
            logger.info("No stored catalog found, starting from seed dishes")
            return seed_dishes()
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            dishes = [Dish.from_dict(entry) for entry in data]
        except (ValueError, TypeError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning(f"Stored catalog under '{self.key}' is unreadable ({e}); using seed dishes")
            return seed_dishes()
        return _unique_ids(dishes)

    def save(self, dishes: Iterable[Dish]) -> None:
        """Overwrite the stored catalog with the full collection."""
        payload = [d.to_dict() for d in dishes]
        self.store.set(self.key, json.dumps(payload, ensure_ascii=False))
        logger.info(f"Catalog saved ({len(payload)} dishes)")
