# transaction.py
# One loading job: a worker puts staged goods on a carrier, then we add it up.

import copy
import logging
from enum import Enum

from .carrier import LoadOutcome
from .errors import TransactionStateError

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    LOADING = "loading"
    SUMMARIZED = "summarized"


class LoadAttempt:
    """Result of trying to put one good on the carrier."""

    def __init__(self, good, outcome):
        self.good = good
        self.outcome = outcome

    @property
    def loaded(self):
        return self.outcome == LoadOutcome.LOADED

    def __repr__(self):
        return f"LoadAttempt({self.good.name!r}, {self.outcome.value})"


class LoadingSummary:
    """
    Financial picture of a finished load.

    profit = total_value - service_cost
    """

    def __init__(self, carrier_type, worker_name, worker_rate, goods, total_weight,
                 total_value, service_cost, utilization_percent):
        self.carrier_type = carrier_type
        self.worker_name = worker_name
        self.worker_rate = worker_rate
        self.goods = tuple(goods)
        self.total_weight = total_weight
        self.total_value = total_value
        self.service_cost = service_cost
        self.utilization_percent = utilization_percent
        self.profit = total_value - service_cost

    def as_dict(self):
        return {
            "carrier_type": self.carrier_type,
            "worker_name": self.worker_name,
            "worker_rate": self.worker_rate,
            "goods": list(self.goods),
            "total_weight": self.total_weight,
            "total_value": self.total_value,
            "service_cost": self.service_cost,
            "utilization_percent": self.utilization_percent,
            "profit": self.profit,
        }

    def __eq__(self, other):
        if not isinstance(other, LoadingSummary):
            return NotImplemented
        return self.as_dict() == other.as_dict()


class LoadingTransaction:
    """
    Owns its own copies of the worker and the carrier.

    Phases: LOADING -> SUMMARIZED. run() may be called once, summarize()
    only after run(). Nothing goes back to LOADING.
    """

    def __init__(self, worker, carrier):
        self.worker = copy.deepcopy(worker)
        self.carrier = copy.deepcopy(carrier)
        self.phase = Phase.LOADING
        self.attempts = []
        self._has_run = False

    def run(self, staged_goods):
        if self.phase != Phase.LOADING or self._has_run:
            raise TransactionStateError("Loading already finished for this transaction.")
        self._has_run = True

        for good in staged_goods:
            # A rejected good is not fatal, the loop moves on to the next one
            outcome = self.carrier.accept_good(good)
            self.attempts.append(LoadAttempt(good, outcome))

        return list(self.attempts)

    def summarize(self):
        if not self._has_run:
            raise TransactionStateError("Nothing has been loaded yet, call run() first.")

        if self.phase == Phase.LOADING:
            logger.debug("Transaction moves to %s", Phase.SUMMARIZED.value)
            self.phase = Phase.SUMMARIZED

        total_weight = self.carrier.total_weight()
        return LoadingSummary(
            carrier_type=self.carrier.carrier_type,
            worker_name=self.worker.name,
            worker_rate=self.worker.rate_per_weight,
            goods=self.carrier.loaded_goods,
            total_weight=total_weight,
            total_value=self.carrier.total_value(),
            service_cost=self.worker.service_cost(total_weight),
            utilization_percent=self.carrier.utilization_percent(),
        )
