"""Word store for the MARIE simulator."""

import logging
import math
from typing import Any

from .errors import AddressingFault

logger = logging.getLogger(__name__)

# Value read from outside the store when range checks are off. It is not an
# integer, so using it later as an address or instruction always faults.
UNSET = math.nan


def is_word(value: Any) -> bool:
    """Return True if value is a usable integer word.

    Only ``int`` qualifies. Whole-number floats such as ``5.0`` are rejected
    too, since they cannot index the store or be shifted by the decoder.
    """
    return isinstance(value, int) and not isinstance(value, bool)


class WordStore:
    """Fixed-size linear memory holding both instructions and data.

    Cells are unmasked Python integers. ``range_checks`` decides whether an
    integer address outside ``[0, size)`` is a fault or is attempted anyway;
    a non-integer address is always a fault.
    """

    def __init__(self, size: int = 4096, range_checks: bool = False):
        self.size = size
        self.range_checks = range_checks
        self.cells: list[int] = [0] * size

    def __len__(self) -> int:
        return self.size

    def in_range(self, addr: Any) -> bool:
        return is_word(addr) and 0 <= addr < self.size

    def check_address(self, value: Any, label: str = "Address") -> None:
        """Raise AddressingFault if value may not be used as an address."""
        if not is_word(value) or (self.range_checks and not self.in_range(value)):
            raise AddressingFault(f"Error: {label} {value} is out of bounds", addr=value)

    def read(self, addr: int) -> Any:
        """Read a cell; unchecked reads outside the store give UNSET."""
        if not self.in_range(addr):
            return UNSET
        return self.cells[addr]

    def write(self, addr: int, value: Any) -> None:
        """Write a cell; unchecked writes outside the store are discarded."""
        if not self.in_range(addr):
            logger.debug("Discarding write of %s to address %s", value, addr)
            return
        self.cells[addr] = value

    def snapshot(self) -> list[int]:
        """Return a copy of the entire memory."""
        return self.cells.copy()

    def clear(self) -> None:
        self.cells[:] = [0] * self.size
