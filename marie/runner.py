"""Cycle controller and program runner for the MARIE simulator."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Optional

from .codec import HALT_WORD, DecodedInstruction, decode
from .config import ConfigLike, resolve_config
from .cpu import Registers
from .errors import ErrorInfo, LoaderTypeFault, MarieError, MarieFault, ProgramTooLarge
from .instructions import InputProvider, IOPort, ScriptedInput, execute_instruction
from .memory import WordStore, is_word
from .trace import TraceLog

logger = logging.getLogger(__name__)


class RunState(Enum):
    RUNNING = "running"
    HALTED = "halted"
    FAULTED = "faulted"


BreakpointHook = Callable[["Simulator"], None]


def log_snapshot(sim: "Simulator") -> None:
    """Default breakpoint hook: log the registers."""
    logger.debug("Cycle %d registers: %s", sim.cycles, sim.get_registers())


class Simulator:
    """A MARIE machine: word store, registers, trace and I/O port.

    Registers and memory persist across runs; call ``reset`` or build a new
    simulator for a fresh start.
    """

    def __init__(
        self,
        config: ConfigLike = None,
        input_provider: Optional[InputProvider] = None,
        breakpoint_hook: Optional[BreakpointHook] = None,
    ):
        self.config = resolve_config(config)
        self.memory = WordStore(
            size=self.config.memory_size,
            range_checks=self.config.error_logging,
        )
        self.registers = Registers()
        self.trace = TraceLog(enabled=self.config.logging, parse_to=self.config.parse_to)
        self.io = IOPort(input_provider, report_input_errors=self.config.error_logging)
        self.breakpoint_hook = breakpoint_hook or log_snapshot
        self.state = RunState.RUNNING
        self.fault: Optional[ErrorInfo] = None
        self.cycles = 0

    def load(self, program) -> None:
        """Install encoded words from address 0, appending HALT if missing.

        Raises:
            LoaderTypeFault: program is not a list or tuple
            ProgramTooLarge: program does not fit in memory
        """
        if not isinstance(program, (list, tuple)):
            raise LoaderTypeFault("Programs should be a list or tuple of words")
        words = list(program)
        if HALT_WORD not in words:
            words.append(HALT_WORD)
        if len(words) > self.memory.size:
            raise ProgramTooLarge(
                f"Program of {len(words)} words does not fit in {self.memory.size} cells"
            )
        self.memory.cells[:len(words)] = words

    def _fetch(self) -> Any:
        cpu = self.registers
        cpu.mar = cpu.pc
        cpu.ir = self.memory.read(cpu.mar)
        return cpu.ir

    def _decode(self, word: Any) -> DecodedInstruction:
        self.memory.check_address(word, label="Instruction")
        return decode(word)

    def _advance(self) -> None:
        self.registers.pc += 1
        self.cycles += 1
        if self.config.debug:
            self.breakpoint_hook(self)

    def _stop(self, error: MarieError, step: int) -> None:
        error.step = step
        logger.error(error.message)
        self.fault = error.to_error_info()
        self.state = RunState.FAULTED

    def step(self) -> RunState:
        """Run one fetch-decode-execute-advance cycle.

        Does nothing once the simulator has halted or faulted.
        """
        if self.state is not RunState.RUNNING:
            return self.state

        try:
            self.memory.check_address(self.registers.pc)
            word = self._fetch()
            instr = self._decode(word)
            execute_instruction(instr, self.registers, self.memory, self.io, self.trace)
        except MarieFault as e:
            self._stop(e, self.cycles + 1)
            return self.state
        except MarieError as e:
            # Input underflow and similar are raised to the caller
            self._stop(e, self.cycles + 1)
            raise

        try:
            self._advance()
        except MarieError as e:
            self._stop(e, self.cycles)
            raise

        if word == HALT_WORD:
            logger.info("Program halted")
            self.state = RunState.HALTED
        return self.state

    def run(self) -> None:
        """Run cycles until the program halts or faults."""
        self.state = RunState.RUNNING
        while self.state is RunState.RUNNING:
            self.step()

    def reset(self) -> None:
        """Clear memory, registers, trace and outputs."""
        self.memory.clear()
        self.registers.reset()
        self.trace.clear()
        self.io.outputs.clear()
        self.state = RunState.RUNNING
        self.fault = None
        self.cycles = 0

    def get_memory(self) -> list:
        """Return the live list of memory cells."""
        return self.memory.cells

    def get_registers(self) -> dict:
        return self.registers.get_state()

    def get_trace(self) -> list[str]:
        return self.trace.entries

    @property
    def outputs(self) -> list:
        return self.io.outputs


def _json_value(value: Any) -> Optional[int]:
    """Registers may hold the non-numeric sentinel; report it as None."""
    return value if is_word(value) else None


@dataclass
class RunResult:
    """Result of program execution."""
    status: str  # "halted" | "faulted" | "error"
    cycles: int
    registers: dict
    outputs: list
    trace: list[str]
    memory: dict[str, Any] = field(default_factory=dict)
    error: Optional[ErrorInfo] = None

    def to_dict(self) -> dict:
        result = {
            "status": self.status,
            "cycles": self.cycles,
            "registers": {k: _json_value(v) for k, v in self.registers.items()},
            "outputs": self.outputs,
            "trace": self.trace,
            "memory": {k: _json_value(v) for k, v in self.memory.items()},
        }
        if self.error:
            result["error"] = self.error.to_dict()
        return result


def run_program(
    program,
    inputs: Iterable = (),
    config: ConfigLike = None,
    initial_memory: Optional[dict[int, int]] = None,
    watch: Iterable[int] = (),
    breakpoint_hook: Optional[BreakpointHook] = None,
) -> RunResult:
    """Load and run a program on a fresh simulator.

    Args:
        program: Encoded words
        inputs: Values returned to INPUT, in order
        config: SimulatorConfig or options mapping
        initial_memory: Cells to preset after the program is loaded
        watch: Addresses whose final values are reported
        breakpoint_hook: Called after each PC advance when debug is on

    Returns:
        RunResult with final status, registers, outputs and trace
    """
    sim = Simulator(config, input_provider=ScriptedInput(inputs), breakpoint_hook=breakpoint_hook)
    error_info: Optional[ErrorInfo] = None

    try:
        sim.load(program)
        for addr, val in (initial_memory or {}).items():
            sim.memory.write(addr, val)
        sim.run()
    except MarieError as e:
        error_info = e.to_error_info()

    if error_info is not None:
        status = "error"
    elif sim.state is RunState.FAULTED:
        status = "faulted"
        error_info = sim.fault
    else:
        status = sim.state.value

    return RunResult(
        status=status,
        cycles=sim.cycles,
        registers=sim.get_registers(),
        outputs=list(sim.outputs),
        trace=list(sim.get_trace()),
        memory={str(addr): sim.memory.read(addr) for addr in sorted(set(watch))},
        error=error_info,
    )
