"""Linear EVM disassembler."""

from opcodes import decode, immediate_length


class Instruction:
    """One decoded instruction.

    ``offset`` is the logical program counter of the instruction (the value a
    JUMP would target), ``operand`` the immediate bytes of a PUSH1..PUSH32,
    otherwise None.  A PUSH at the very end of the code may carry fewer bytes
    than its opcode declares.
    """

    __slots__ = ("opcode", "offset", "operand")

    def __init__(self, opcode, offset, operand=None):
        self.opcode = opcode
        self.offset = offset
        self.operand = operand

    @property
    def name(self):
        return self.opcode.mnemonic

    def operand_int(self):
        if self.operand is None:
            return None
        return int.from_bytes(self.operand, byteorder="big")

    def __eq__(self, other):
        if not isinstance(other, Instruction):
            return NotImplemented
        return (self.opcode, self.offset, self.operand) == (other.opcode, other.offset, other.operand)

    def __hash__(self):
        return hash((self.opcode, self.offset, self.operand))

    def __str__(self):
        if self.operand is not None:
            return f"{self.name} {self.operand.hex()}"
        return self.name

    def __repr__(self):
        return f"{self.offset:04x}: {self}"


def disassemble(bytecode):
    """
    Walk through raw bytecode and return a list of Instruction objects.
    """
    code = bytes(bytecode)
    instructions = []
    pc = 0
    offset = 0
    while pc < len(code):
        opcode = decode(code[pc])
        imm_bytes = immediate_length(opcode)
        operand = None
        if imm_bytes > 0:
            # Truncated tail: take what is left, but keep the nominal offset step.
            operand = code[pc + 1:pc + 1 + imm_bytes]
        instructions.append(Instruction(opcode, offset, operand))
        pc += 1 + (len(operand) if operand is not None else 0)
        offset += 1 + imm_bytes
    return instructions


def format_listing(instructions, limit=None):
    """Render instructions one per line, prefixed with their offset."""
    if limit is not None:
        instructions = instructions[:limit]
    return "\n".join(repr(ins) for ins in instructions)
