"""Custom exceptions for the MARIE simulator."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ErrorInfo:
    """Structured error information for API responses."""
    type: str
    message: str
    step: int
    addr: Optional[Any] = None

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "message": self.message,
            "step": self.step,
            "addr": self.addr,
        }


class MarieError(Exception):
    """Base exception for all simulator errors."""

    def __init__(self, message: str, step: int = 0, addr: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.step = step
        self.addr = addr

    def to_error_info(self) -> ErrorInfo:
        return ErrorInfo(
            type=self.__class__.__name__,
            message=self.message,
            step=self.step,
            addr=self.addr,
        )


class MarieFault(MarieError):
    """Fault raised by a single cycle; ends the run in the faulted state."""
    pass


class AddressingFault(MarieFault):
    """Invalid or out-of-range word store access."""
    pass


class InputParseFault(MarieFault):
    """INPUT received something that is not an integer."""
    pass


class LoaderFault(MarieError):
    """Program could not be installed."""
    pass


class LoaderTypeFault(LoaderFault):
    """Program is not a list or tuple of words."""
    pass


class ProgramTooLarge(LoaderFault):
    """Program does not fit in the word store."""
    pass


class ConfigError(MarieError):
    """Unrecognized or invalid configuration option."""
    pass


class UnknownOpcode(MarieError):
    """Mnemonic has no opcode."""
    pass


class InputUnderflow(MarieError):
    """INPUT with no scripted values left."""
    pass


class CycleLimitExceeded(MarieError):
    """Run stopped by a caller-imposed cycle limit."""
    pass
