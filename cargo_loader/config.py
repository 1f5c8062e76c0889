# config.py
# Fixed settings for a loading run. The CLI can override each of them.

import math

from .errors import InvalidConfigError

DEFAULT_WORKER_NAME = "Budi"
DEFAULT_WORKER_RATE = 5000.0
DEFAULT_CARRIER_TYPE = "Truk Ekspedisi"
DEFAULT_CARRIER_CAPACITY = 500.0
DEFAULT_CURRENCY = "Rp"


class RunConfig:
    def __init__(self, worker_name=DEFAULT_WORKER_NAME, worker_rate=DEFAULT_WORKER_RATE,
                 carrier_type=DEFAULT_CARRIER_TYPE, carrier_capacity=DEFAULT_CARRIER_CAPACITY,
                 currency=DEFAULT_CURRENCY):
        self.worker_name = worker_name
        self.worker_rate = worker_rate
        self.carrier_type = carrier_type
        self.carrier_capacity = carrier_capacity
        self.currency = currency

    def validate(self):
        if not self.worker_name:
            raise InvalidConfigError("worker_name must not be empty.")
        if not math.isfinite(self.worker_rate) or self.worker_rate < 0:
            raise InvalidConfigError("worker_rate must be a finite number >= 0.")
        if not self.carrier_type:
            raise InvalidConfigError("carrier_type must not be empty.")
        if not math.isfinite(self.carrier_capacity) or self.carrier_capacity <= 0:
            raise InvalidConfigError("carrier_capacity must be a finite number > 0.")
        return self

    @classmethod
    def from_args(cls, args):
        return cls(
            worker_name=args.worker_name,
            worker_rate=args.worker_rate,
            carrier_type=args.carrier_type,
            carrier_capacity=args.capacity,
            currency=args.currency,
        ).validate()
