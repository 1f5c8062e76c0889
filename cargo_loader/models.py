# models.py
# Simple value objects for goods and the people who load them.

import math
from abc import ABC, abstractmethod

from .errors import InvalidConfigError, InvalidGoodError


class Item(ABC):
    """
    Something with a name and a weight that can be put on a carrier.
    Subclasses decide how much the item is worth.
    """

    def __init__(self, name, weight):
        if not name or not str(name).strip():
            raise InvalidGoodError("Item name must not be empty.")
        if not math.isfinite(weight) or weight <= 0:
            raise InvalidGoodError(f"Weight of '{name}' must be a positive number, got {weight}.")

        self._name = str(name).strip()
        self._weight = float(weight)

    @property
    def name(self):
        return self._name

    @property
    def weight(self):
        return self._weight

    @abstractmethod
    def compute_value(self):
        ...


class Good(Item):
    """
    An item priced per unit of weight.

    value = weight * unit_price
    """

    def __init__(self, name, weight, unit_price):
        super().__init__(name, weight)
        if not math.isfinite(unit_price) or unit_price < 0:
            raise InvalidGoodError(f"Price of '{name}' must be a number >= 0, got {unit_price}.")
        self._unit_price = float(unit_price)

    @property
    def unit_price(self):
        # Only the reporting layer needs this one
        return self._unit_price

    def compute_value(self):
        return self._weight * self._unit_price

    def __eq__(self, other):
        if not isinstance(other, Good):
            return NotImplemented
        return (self._name, self._weight, self._unit_price) == (
            other._name, other._weight, other._unit_price
        )

    def __hash__(self):
        return hash((self._name, self._weight, self._unit_price))

    def __repr__(self):
        return f"Good(name={self._name!r}, weight={self._weight}, unit_price={self._unit_price})"


class Person:
    def __init__(self, name):
        self._name = name

    @property
    def name(self):
        return self._name


class Worker(Person):
    """
    The loader. Charges a flat rate for every unit of weight moved.
    """

    def __init__(self, name, rate_per_weight):
        super().__init__(name)
        if not math.isfinite(rate_per_weight) or rate_per_weight < 0:
            raise InvalidConfigError(f"Rate of worker '{name}' must be a number >= 0.")
        self._rate_per_weight = float(rate_per_weight)

    @property
    def rate_per_weight(self):
        return self._rate_per_weight

    def service_cost(self, total_weight):
        return total_weight * self._rate_per_weight

    def __eq__(self, other):
        if not isinstance(other, Worker):
            return NotImplemented
        return (self._name, self._rate_per_weight) == (other._name, other._rate_per_weight)

    def __hash__(self):
        return hash((self._name, self._rate_per_weight))

    def __repr__(self):
        return f"Worker(name={self._name!r}, rate_per_weight={self._rate_per_weight})"
