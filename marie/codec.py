"""Instruction word encoding for the MARIE simulator.

A word packs an opcode above bit 7 and an 8-bit operand address::

    word = (opcode << 8) | (address & 0xFF)

Only the first 256 cells are directly addressable, whatever the store size.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


ADDRESS_MASK = 0xFF
OPCODE_SHIFT = 8


class Opcode(IntEnum):
    LOAD = 0b0001
    STORE = 0b0010
    ADD = 0b0011
    SUBTRACT = 0b0100
    INPUT = 0b0101
    OUTPUT = 0b0110
    HALT = 0b1111


HALT_WORD = Opcode.HALT << OPCODE_SHIFT  # 0b111100000000 == 3840

# Opcodes that take a memory address operand
OPCODES_WITH_ADDRESS = {Opcode.LOAD, Opcode.STORE, Opcode.ADD, Opcode.SUBTRACT}


@dataclass(frozen=True)
class DecodedInstruction:
    """Opcode and address fields of a word."""
    opcode: int
    address: int

    @property
    def operation(self) -> Optional[Opcode]:
        """Known opcode, or None for values outside the instruction set."""
        try:
            return Opcode(self.opcode)
        except ValueError:
            return None


def encode(opcode: int, address: int = 0) -> int:
    """Pack opcode and address into a word. No validation is done."""
    return (opcode << OPCODE_SHIFT) | (address & ADDRESS_MASK)


def decode(word: int) -> DecodedInstruction:
    """Split a word into opcode and address."""
    return DecodedInstruction(opcode=word >> OPCODE_SHIFT, address=word & ADDRESS_MASK)
