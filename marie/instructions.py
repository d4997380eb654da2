"""Instruction execution for the MARIE simulator."""

import logging
import math
import re
from typing import Callable, Iterable, Optional, Protocol

from .codec import DecodedInstruction, Opcode
from .cpu import Registers
from .errors import InputParseFault, InputUnderflow
from .memory import WordStore
from .trace import TraceLog

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

# AC value after unparseable input when input errors are not reported
NOT_A_NUMBER = math.nan


class InputProvider(Protocol):
    """Source of lines for INPUT."""

    def read_line(self) -> str:
        ...


class ConsoleInput:
    """Prompt for a number on standard input."""

    def __init__(self, prompt: str = "Enter a number: "):
        self.prompt = prompt

    def read_line(self) -> str:
        try:
            return input(self.prompt)
        except EOFError as e:
            raise InputUnderflow("End of input") from e


class ScriptedInput:
    """Return pre-supplied values in order."""

    def __init__(self, values: Iterable = ()):
        self._values = [str(v) for v in values]
        self._pos = 0

    def read_line(self) -> str:
        if self._pos >= len(self._values):
            raise InputUnderflow("Input buffer is empty")
        value = self._values[self._pos]
        self._pos += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos


def parse_int(text) -> Optional[int]:
    """Parse a leading decimal integer, ignoring anything after it."""
    if not isinstance(text, str):
        return None
    match = _LEADING_INT_RE.match(text)
    if match is None:
        return None
    return int(match.group(1))


class IOPort:
    """Input provider plus the record of OUTPUT values."""

    def __init__(self, provider: Optional[InputProvider] = None, report_input_errors: bool = False):
        self.provider = provider if provider is not None else ConsoleInput()
        self.report_input_errors = report_input_errors
        self.outputs: list = []

    def read_line(self) -> str:
        return self.provider.read_line()

    def write_value(self, value) -> None:
        self.outputs.append(value)


# Instruction executor type
InstructionExecutor = Callable[[DecodedInstruction, Registers, WordStore, IOPort, TraceLog], None]


def execute_load(instr: DecodedInstruction, cpu: Registers, mem: WordStore, io: IOPort, trace: TraceLog) -> None:
    """LOAD a: MAR := a; MDR := MEM[MAR]; AC := MDR"""
    mem.check_address(instr.address)
    cpu.mar = instr.address
    cpu.mdr = mem.read(cpu.mar)
    cpu.ac = cpu.mdr
    trace.record(f"Load: AC={cpu.ac}")


def execute_store(instr: DecodedInstruction, cpu: Registers, mem: WordStore, io: IOPort, trace: TraceLog) -> None:
    """STORE a: MAR := a; MEM[MAR] := AC"""
    mem.check_address(instr.address)
    cpu.mar = instr.address
    mem.write(cpu.mar, cpu.ac)
    trace.record(f"Store: Memory[{cpu.mar}] = {cpu.ac}")


def execute_add(instr: DecodedInstruction, cpu: Registers, mem: WordStore, io: IOPort, trace: TraceLog) -> None:
    """ADD a: MAR := a; MDR := MEM[MAR]; AC := AC + MDR"""
    mem.check_address(instr.address)
    cpu.mar = instr.address
    cpu.mdr = mem.read(cpu.mar)
    cpu.ac = cpu.ac + cpu.mdr
    trace.record(f"Add: AC = {cpu.ac}")


def execute_subtract(instr: DecodedInstruction, cpu: Registers, mem: WordStore, io: IOPort, trace: TraceLog) -> None:
    """SUBTRACT a: MAR := a; MDR := MEM[MAR]; AC := AC - MDR"""
    mem.check_address(instr.address)
    cpu.mar = instr.address
    cpu.mdr = mem.read(cpu.mar)
    cpu.ac = cpu.ac - cpu.mdr
    trace.record(f"Subtract: AC = {cpu.ac}")


def execute_input(instr: DecodedInstruction, cpu: Registers, mem: WordStore, io: IOPort, trace: TraceLog) -> None:
    """INPUT: AC := integer read from the input provider

    Unparseable input leaves AC as NOT_A_NUMBER. When input errors are
    reported the step then fails without a trace entry.
    """
    text = io.read_line()
    value = parse_int(text)
    cpu.ac = NOT_A_NUMBER if value is None else value
    if value is None and io.report_input_errors:
        raise InputParseFault(f"Error: Invalid input {text}", addr=text)
    trace.record(f"Input: AC = {cpu.ac}")


def execute_output(instr: DecodedInstruction, cpu: Registers, mem: WordStore, io: IOPort, trace: TraceLog) -> None:
    """OUTPUT: emit AC

    AC is bounds-checked as if it were an address.
    """
    mem.check_address(cpu.ac)
    io.write_value(cpu.ac)
    trace.record(f"Output: AC = {trace.format(cpu.ac)}")


def execute_unknown(instr: DecodedInstruction, cpu: Registers, mem: WordStore, io: IOPort, trace: TraceLog) -> None:
    """Opcodes outside the instruction set (HALT included) do nothing."""
    logger.debug("No operation for opcode %s", instr.opcode)


# Instruction dispatch table
INSTRUCTION_EXECUTORS: dict[Opcode, InstructionExecutor] = {
    Opcode.LOAD: execute_load,
    Opcode.STORE: execute_store,
    Opcode.ADD: execute_add,
    Opcode.SUBTRACT: execute_subtract,
    Opcode.INPUT: execute_input,
    Opcode.OUTPUT: execute_output,
}


def execute_instruction(
    instr: DecodedInstruction,
    cpu: Registers,
    mem: WordStore,
    io: IOPort,
    trace: TraceLog,
) -> None:
    """Execute a single decoded instruction.

    Raises:
        MarieFault: the operand failed its address check or input did not parse
    """
    executor = INSTRUCTION_EXECUTORS.get(instr.operation, execute_unknown)
    executor(instr, cpu, mem, io, trace)
