"""
VOXL Instruction Set Definition
===============================

This module defines the parts of the VOXL virtual-machine instruction set
that the assembler front end needs: the register file and the mnemonic to
opcode table.

Registers
---------
The VM has six named registers and ten general-purpose registers. Register
ordinals are fixed; they are what the code generator encodes.

| Ordinal | Register | Assembly | Purpose              |
|---------|----------|----------|----------------------|
| 0       | RSP      | $rsp     | Stack pointer        |
| 1       | RFP      | $rfp     | Frame pointer        |
| 2       | ROU      | $rou     | Output register      |
| 3       | RFL      | $rfl     | Frame limit          |
| 4       | RRA      | $rra     | Return register A    |
| 5       | RRB      | $rrb     | Return register B    |
| 6-15    | R0-R9    | $r0-$r9  | General purpose      |

Mnemonics
---------
Mnemonics are lowercase and purely alphabetic, so they can never collide
with an identifier containing '_' or a digit. Lookup is case-sensitive:
``LDI`` is an identifier, ``ldi`` is an opcode.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


# =============================================================================
# Register File
# =============================================================================

class Register(IntEnum):
    """VOXL registers, valued by their encoding ordinal."""

    RSP = 0
    RFP = 1
    ROU = 2
    RFL = 3
    RRA = 4
    RRB = 5
    R0 = 6
    R1 = 7
    R2 = 8
    R3 = 9
    R4 = 10
    R5 = 11
    R6 = 12
    R7 = 13
    R8 = 14
    R9 = 15

    @classmethod
    def from_digit(cls, digit: int) -> "Register":
        """Return the general-purpose register R<digit>."""
        if not 0 <= digit <= 9:
            raise ValueError(f"no general-purpose register r{digit}")
        return cls(cls.R0 + digit)

    @property
    def spelling(self) -> str:
        """Assembly spelling without the '$' sigil, e.g. 'rsp' or 'r3'."""
        return self.name.lower()


# Two-letter suffixes that follow '$r' for the named registers
REGISTER_SUFFIXES: dict[str, Register] = {
    "sp": Register.RSP,
    "fp": Register.RFP,
    "fl": Register.RFL,
    "ou": Register.ROU,
    "ra": Register.RRA,
    "rb": Register.RRB,
}


# =============================================================================
# Instruction Table
# =============================================================================

@dataclass(frozen=True)
class InstructionInfo:
    """
    A single VOXL instruction.

    Attributes:
        mnemonic: Assembly spelling (lowercase letters only)
        opcode: Encoded operation byte
    """
    mnemonic: str
    opcode: int


INSTRUCTIONS: tuple[InstructionInfo, ...] = (
    # Control
    InstructionInfo("nop", 0x00),
    InstructionInfo("halt", 0x01),
    # Data movement
    InstructionInfo("mov", 0x02),
    InstructionInfo("ldi", 0x03),
    InstructionInfo("ld", 0x04),
    InstructionInfo("st", 0x05),
    InstructionInfo("push", 0x06),
    InstructionInfo("pop", 0x07),
    # Arithmetic
    InstructionInfo("add", 0x10),
    InstructionInfo("sub", 0x11),
    InstructionInfo("mul", 0x12),
    InstructionInfo("div", 0x13),
    InstructionInfo("mod", 0x14),
    InstructionInfo("neg", 0x15),
    InstructionInfo("inc", 0x16),
    InstructionInfo("dec", 0x17),
    # Bitwise
    InstructionInfo("and", 0x18),
    InstructionInfo("or", 0x19),
    InstructionInfo("xor", 0x1A),
    InstructionInfo("not", 0x1B),
    InstructionInfo("shl", 0x1C),
    InstructionInfo("shr", 0x1D),
    # Comparison
    InstructionInfo("cmp", 0x20),
    # Branches
    InstructionInfo("jmp", 0x40),
    InstructionInfo("jz", 0x41),
    InstructionInfo("jnz", 0x42),
    InstructionInfo("call", 0x43),
    InstructionInfo("ret", 0x44),
    # Heap
    InstructionInfo("malloc", 0x50),
    InstructionInfo("free", 0x51),
    # I/O
    InstructionInfo("out", 0x60),
    InstructionInfo("in", 0x61),
)

OPCODE_TABLE: dict[str, InstructionInfo] = {i.mnemonic: i for i in INSTRUCTIONS}

MNEMONICS: dict[int, str] = {i.opcode: i.mnemonic for i in INSTRUCTIONS}


# =============================================================================
# Lookup Functions
# =============================================================================

def opcode_for(mnemonic: str) -> Optional[int]:
    """
    Return the opcode for a mnemonic, or None if it is not an instruction.

    >>> opcode_for("call")
    67
    >>> opcode_for("CALL") is None
    True
    """
    info = OPCODE_TABLE.get(mnemonic)
    return info.opcode if info is not None else None


def mnemonic_for(opcode: int) -> Optional[str]:
    """Return the mnemonic encoded by ``opcode``, or None."""
    return MNEMONICS.get(opcode)
