"""Register set for the MARIE simulator."""

REGISTER_NAMES = ("AC", "MQ", "PC", "IR", "MAR", "MDR")


class Registers:
    """AC, MQ, PC, IR, MAR and MDR.

    Registers are plain Python integers. The architecture documents 12-bit
    registers but nothing is masked, so ADD/SUBTRACT never wrap.
    """

    def __init__(self):
        self.ac = 0   # Accumulator
        self.mq = 0   # Multiplier/Quotient, unused by every opcode
        self.pc = 0   # Program Counter
        self.ir = 0   # Instruction Register
        self.mar = 0  # Memory Address Register
        self.mdr = 0  # Memory Data Register

    def get_state(self) -> dict:
        """Get current register values as a dictionary."""
        return {name: getattr(self, name.lower()) for name in REGISTER_NAMES}

    def reset(self) -> None:
        """Zero every register."""
        self.ac = 0
        self.mq = 0
        self.pc = 0
        self.ir = 0
        self.mar = 0
        self.mdr = 0
