# carrier.py
# The vehicle: a weight limit and the goods currently on board.

import logging
import math
from enum import Enum

from .errors import InvalidConfigError

logger = logging.getLogger(__name__)


class LoadOutcome(str, Enum):
    LOADED = "loaded"
    CAPACITY_EXCEEDED = "capacity_exceeded"


class Carrier:
    """
    Holds goods up to `capacity_max` units of weight.

    accept_good() is the only method that changes state, so
    capacity_used always equals the weight of what is on board
    (an exact fill is snapped to capacity_max).
    """

    def __init__(self, carrier_type, capacity_max):
        if not math.isfinite(capacity_max) or capacity_max <= 0:
            raise InvalidConfigError(f"Carrier capacity must be positive, got {capacity_max}.")

        self.carrier_type = carrier_type
        self.capacity_max = float(capacity_max)
        self._capacity_used = 0.0
        self._goods = []

    @property
    def capacity_used(self):
        return self._capacity_used

    @property
    def loaded_goods(self):
        return tuple(self._goods)

    def accept_good(self, good):
        # First fit: no reordering, a good either fits now or is rejected
        new_used = self._capacity_used + good.weight
        # Decimal weights like 0.1 + 0.2 land a hair above an exact fill
        if new_used <= self.capacity_max or math.isclose(new_used, self.capacity_max):
            self._goods.append(good)
            self._capacity_used = min(new_used, self.capacity_max)
            logger.debug("Loaded %s (%.2f), used %.2f/%.2f",
                         good.name, good.weight, self._capacity_used, self.capacity_max)
            return LoadOutcome.LOADED

        logger.debug("Rejected %s (%.2f), only %.2f left",
                     good.name, good.weight, self.remaining_capacity())
        return LoadOutcome.CAPACITY_EXCEEDED

    def total_weight(self):
        return self._capacity_used

    def total_value(self):
        total = 0.0
        for good in self._goods:
            total += good.compute_value()
        return total

    def remaining_capacity(self):
        return self.capacity_max - self._capacity_used

    def utilization_percent(self):
        return self._capacity_used * 100 / self.capacity_max
