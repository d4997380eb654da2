"""Instruction builders for composing MARIE programs.

Each builder returns an encoded word; nothing here touches a simulator::

    program = [LOAD(10), ADD(11), STORE(12), HALT()]
"""

from types import SimpleNamespace

from .codec import Opcode, OPCODES_WITH_ADDRESS, encode
from .errors import UnknownOpcode


def LOAD(pos: int) -> int:
    """LOAD a: AC := MEM[a]"""
    return encode(Opcode.LOAD, pos)


def STORE(pos: int) -> int:
    """STORE a: MEM[a] := AC"""
    return encode(Opcode.STORE, pos)


def ADD(pos: int) -> int:
    """ADD a: AC := AC + MEM[a]"""
    return encode(Opcode.ADD, pos)


def SUBTRACT(pos: int) -> int:
    """SUBTRACT a: AC := AC - MEM[a]"""
    return encode(Opcode.SUBTRACT, pos)


def INPUT() -> int:
    """INPUT: AC := value from the input provider"""
    return encode(Opcode.INPUT)


def OUTPUT() -> int:
    """OUTPUT: emit AC"""
    return encode(Opcode.OUTPUT)


def HALT() -> int:
    """HALT: stop the run"""
    return encode(Opcode.HALT)


INSTRUCTION_BUILDERS = {
    "LOAD": LOAD,
    "STORE": STORE,
    "ADD": ADD,
    "SUBTRACT": SUBTRACT,
    "INPUT": INPUT,
    "OUTPUT": OUTPUT,
    "HALT": HALT,
}

# Attribute-style access, e.g. ins.LOAD(10)
ins = SimpleNamespace(**INSTRUCTION_BUILDERS)


def assemble(mnemonic: str, address: int = 0) -> int:
    """Encode a single instruction by mnemonic.

    The address is ignored for INPUT, OUTPUT and HALT.
    """
    name = mnemonic.strip().upper()
    if name not in INSTRUCTION_BUILDERS:
        raise UnknownOpcode(f"Unknown opcode: {mnemonic}")
    if Opcode[name] in OPCODES_WITH_ADDRESS:
        return INSTRUCTION_BUILDERS[name](address)
    return INSTRUCTION_BUILDERS[name]()


def opcode_table() -> list[dict]:
    """Describe every instruction as mnemonic, opcode and operand kind."""
    return [
        {
            "mnemonic": op.name,
            "opcode": int(op),
            "operand": "address" if op in OPCODES_WITH_ADDRESS else None,
        }
        for op in Opcode
    ]
