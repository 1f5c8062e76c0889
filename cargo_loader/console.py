# console.py
# Asks the user for the goods to load, one question at a time.

import logging
import math

from .errors import InputAborted
from .models import Good
from .staging import StagingList

logger = logging.getLogger(__name__)


class ConsolePrompter:
    """
    Wraps input()/print() so tests can feed answers from a list.

    A bad answer prints an error and the same question is asked again.
    """

    def __init__(self, input_fn=input, print_fn=print):
        self.input_fn = input_fn
        self.print_fn = print_fn

    def _ask(self, prompt):
        try:
            return self.input_fn(prompt).strip()
        except EOFError as e:
            raise InputAborted(f"Input ended while waiting for: {prompt.strip()}") from e

    def ask_count(self):
        while True:
            answer = self._ask("Enter number of goods: ")
            try:
                count = int(answer)
            except ValueError:
                self._reject(f"'{answer}' is not a whole number.")
                continue
            if count < 0:
                self._reject("Number of goods must not be negative.")
                continue
            return count

    def ask_text(self, prompt):
        while True:
            answer = self._ask(prompt)
            if answer:
                return answer
            self._reject("Please enter a name.")

    def ask_number(self, prompt, allow_zero):
        while True:
            answer = self._ask(prompt)
            try:
                number = float(answer)
            except ValueError:
                self._reject(f"'{answer}' is not a number.")
                continue
            if not math.isfinite(number):
                self._reject(f"'{answer}' is not a finite number.")
                continue
            if number < 0 or (number == 0 and not allow_zero):
                limit = "zero or more" if allow_zero else "greater than zero"
                self._reject(f"Value must be {limit}.")
                continue
            return number

    def ask_good(self, position):
        self.print_fn("")
        self.print_fn(f"Good #{position}")
        name = self.ask_text("Name        : ")
        weight = self.ask_number("Weight (kg) : ", allow_zero=False)
        unit_price = self.ask_number("Price/kg    : ", allow_zero=True)
        return Good(name, weight, unit_price)

    def _reject(self, message):
        logger.info("Rejected console entry: %s", message)
        self.print_fn(f"Invalid input: {message}")


def collect_goods(prompter):
    """
    Ask for a count, then that many goods. Returns a StagingList of Good.
    """
    staged = StagingList()
    prompter.print_fn("")
    count = prompter.ask_count()

    for i in range(count):
        staged += prompter.ask_good(i + 1)

    return staged
