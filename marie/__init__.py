"""MARIE accumulator machine simulator."""

from .assembler import ADD, HALT, INPUT, LOAD, OUTPUT, STORE, SUBTRACT, assemble, ins
from .codec import HALT_WORD, Opcode, decode, encode
from .config import SimulatorConfig
from .errors import (
    AddressingFault,
    ConfigError,
    InputParseFault,
    InputUnderflow,
    LoaderTypeFault,
    MarieError,
    MarieFault,
)
from .instructions import ConsoleInput, ScriptedInput
from .runner import RunResult, RunState, Simulator, run_program

__all__ = [
    "Simulator",
    "SimulatorConfig",
    "RunState",
    "RunResult",
    "run_program",
    "ConsoleInput",
    "ScriptedInput",
    "Opcode",
    "HALT_WORD",
    "encode",
    "decode",
    "assemble",
    "ins",
    "LOAD",
    "STORE",
    "ADD",
    "SUBTRACT",
    "INPUT",
    "OUTPUT",
    "HALT",
    "MarieError",
    "MarieFault",
    "AddressingFault",
    "InputParseFault",
    "LoaderTypeFault",
    "ConfigError",
    "InputUnderflow",
]
