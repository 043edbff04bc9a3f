"""Food catalog access and one-time seeding."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from diet_planner.domain.errors import DuplicateFoodError
from diet_planner.domain.foods import FoodFilter, FoodItem
from diet_planner.services.builtin_foods import builtin_foods

_logger = logging.getLogger(__name__)


class FoodCatalog(Protocol):
    """Query interface over the shared food catalog."""

    def count(self) -> int:
        """Return the number of foods in the catalog."""

    def query(self, food_filter: FoodFilter) -> list[FoodItem]:
        """Return foods matching a filter."""

    def insert_many(self, foods: list[FoodItem]) -> int:
        """Insert foods and return how many rows were written."""


class FoodListGenerator(Protocol):
    """Source of generated catalog entries."""

    async def generate_foods(self) -> list[FoodItem] | None:
        """Return generated foods, or None when no backend succeeded."""


@dataclass
class CatalogSeeder:
    """Populate an empty catalog exactly once per process."""

    catalog: FoodCatalog
    generator: FoodListGenerator | None = None
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)
    _seeded: bool = field(default=False, init=False, repr=False)

    async def ensure_seeded(self) -> bool:
        """Seed the catalog if it is empty; return True when this call seeded it."""
        if self._seeded:
            return False
        async with self._lock:
            if self._seeded:
                return False
            count = await asyncio.to_thread(self.catalog.count)
            if count == 0:
                await self._seed()
            self._seeded = True
            return count == 0

    async def _seed(self) -> None:
        _logger.info("Food catalog is empty, seeding")
        foods: list[FoodItem] | None = None
        source = "generated"
        if self.generator is not None:
            foods = await self.generator.generate_foods()
        if not foods:
            foods = builtin_foods()
            source = "built-in"
        try:
            inserted = await asyncio.to_thread(self.catalog.insert_many, foods)
        except DuplicateFoodError as exc:
            _logger.warning("Food catalog seeding hit existing entries: %s", exc)
            return
        _logger.info("Seeded food catalog with %s %s foods", inserted, source)
