# errors.py
# Exceptions raised by the loading simulator.


class CargoLoaderError(Exception):
    """Base class for every error raised by cargo_loader."""


class InvalidGoodError(CargoLoaderError, ValueError):
    pass


class InvalidConfigError(CargoLoaderError, ValueError):
    pass


class TransactionStateError(CargoLoaderError, RuntimeError):
    """Raised when a transaction step is called in the wrong phase."""


class InputAborted(CargoLoaderError):
    """The console ran out of input before all goods were entered."""
