"""Tests for instruction encoding and the assembler API."""

import pytest
from marie import ins
from marie.assembler import assemble, opcode_table
from marie.codec import HALT_WORD, Opcode, decode, encode
from marie.errors import UnknownOpcode


class TestCodec:
    """Encode/decode tests."""

    @pytest.mark.parametrize("opcode", [1, 2, 3, 4, 5, 6, 15])
    def test_address_survives_encoding(self, opcode):
        """Every 8-bit address decodes back unchanged."""
        for address in range(256):
            decoded = decode(encode(opcode, address))
            assert decoded.address == address
            assert decoded.opcode == opcode

    def test_address_truncated_to_low_byte(self):
        """Addresses above 255 keep only their low 8 bits."""
        assert encode(Opcode.LOAD, 0x1FF) == 0x1FF
        assert decode(encode(Opcode.LOAD, 300)).address == 300 & 0xFF

    def test_halt_word(self):
        assert HALT_WORD == 3840
        assert HALT_WORD == 0b111100000000

    def test_decode_known_operation(self):
        assert decode(0x30A).operation is Opcode.ADD

    def test_decode_unknown_operation(self):
        """Opcodes outside the set have no operation."""
        assert decode(0x70A).operation is None
        assert decode(0).operation is None


class TestAssembler:
    """Instruction builder tests."""

    def test_builders(self):
        assert ins.LOAD(10) == 0x10A
        assert ins.STORE(12) == 0x20C
        assert ins.ADD(11) == 0x30B
        assert ins.SUBTRACT(1) == 0x401
        assert ins.INPUT() == 0x500
        assert ins.OUTPUT() == 0x600
        assert ins.HALT() == 3840

    def test_assemble_by_mnemonic(self):
        assert assemble("load", 10) == ins.LOAD(10)
        assert assemble(" Store ", 3) == ins.STORE(3)
        assert assemble("OUTPUT", 99) == ins.OUTPUT()
        assert assemble("HALT") == HALT_WORD

    def test_assemble_unknown(self):
        with pytest.raises(UnknownOpcode):
            assemble("JUMP", 4)

    def test_opcode_table(self):
        table = {row["mnemonic"]: row for row in opcode_table()}
        assert set(table) == {"LOAD", "STORE", "ADD", "SUBTRACT", "INPUT", "OUTPUT", "HALT"}
        assert table["HALT"] == {"mnemonic": "HALT", "opcode": 15, "operand": None}
        assert table["LOAD"]["operand"] == "address"
