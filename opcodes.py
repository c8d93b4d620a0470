"""EVM opcode table: byte <-> Opcode lookups and per-opcode metadata."""

from enum import Enum


class Opcode(Enum):
    """Symbolic EVM instruction identities.

    The value of every member is its canonical mnemonic.  ``INVALID`` doubles
    as the reserved identity for byte values with no assigned instruction.
    """

    STOP = "STOP"
    ADD = "ADD"
    MUL = "MUL"
    SUB = "SUB"
    DIV = "DIV"
    SDIV = "SDIV"
    MOD = "MOD"
    SMOD = "SMOD"
    ADDMOD = "ADDMOD"
    MULMOD = "MULMOD"
    EXP = "EXP"
    SIGNEXTEND = "SIGNEXTEND"
    LT = "LT"
    GT = "GT"
    SLT = "SLT"
    SGT = "SGT"
    EQ = "EQ"
    ISZERO = "ISZERO"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    NOT = "NOT"
    BYTE = "BYTE"
    SHL = "SHL"
    SHR = "SHR"
    SAR = "SAR"
    SHA3 = "SHA3"
    ADDRESS = "ADDRESS"
    BALANCE = "BALANCE"
    ORIGIN = "ORIGIN"
    CALLER = "CALLER"
    CALLVALUE = "CALLVALUE"
    CALLDATALOAD = "CALLDATALOAD"
    CALLDATASIZE = "CALLDATASIZE"
    CALLDATACOPY = "CALLDATACOPY"
    CODESIZE = "CODESIZE"
    CODECOPY = "CODECOPY"
    GASPRICE = "GASPRICE"
    EXTCODESIZE = "EXTCODESIZE"
    EXTCODECOPY = "EXTCODECOPY"
    RETURNDATASIZE = "RETURNDATASIZE"
    RETURNDATACOPY = "RETURNDATACOPY"
    EXTCODEHASH = "EXTCODEHASH"
    BLOCKHASH = "BLOCKHASH"
    COINBASE = "COINBASE"
    TIMESTAMP = "TIMESTAMP"
    NUMBER = "NUMBER"
    # Pre-merge name of 0x44, encode-only.
    DIFFICULTY = "DIFFICULTY"
    PREVRANDAO = "PREVRANDAO"
    GASLIMIT = "GASLIMIT"
    CHAINID = "CHAINID"
    SELFBALANCE = "SELFBALANCE"
    BASEFEE = "BASEFEE"
    BLOBHASH = "BLOBHASH"
    BLOBBASEFEE = "BLOBBASEFEE"
    POP = "POP"
    MLOAD = "MLOAD"
    MSTORE = "MSTORE"
    MSTORE8 = "MSTORE8"
    SLOAD = "SLOAD"
    SSTORE = "SSTORE"
    JUMP = "JUMP"
    JUMPI = "JUMPI"
    PC = "PC"
    MSIZE = "MSIZE"
    GAS = "GAS"
    JUMPDEST = "JUMPDEST"
    TLOAD = "TLOAD"
    TSTORE = "TSTORE"
    MCOPY = "MCOPY"
    PUSH0 = "PUSH0"
    PUSH1 = "PUSH1"
    PUSH2 = "PUSH2"
    PUSH3 = "PUSH3"
    PUSH4 = "PUSH4"
    PUSH5 = "PUSH5"
    PUSH6 = "PUSH6"
    PUSH7 = "PUSH7"
    PUSH8 = "PUSH8"
    PUSH9 = "PUSH9"
    PUSH10 = "PUSH10"
    PUSH11 = "PUSH11"
    PUSH12 = "PUSH12"
    PUSH13 = "PUSH13"
    PUSH14 = "PUSH14"
    PUSH15 = "PUSH15"
    PUSH16 = "PUSH16"
    PUSH17 = "PUSH17"
    PUSH18 = "PUSH18"
    PUSH19 = "PUSH19"
    PUSH20 = "PUSH20"
    PUSH21 = "PUSH21"
    PUSH22 = "PUSH22"
    PUSH23 = "PUSH23"
    PUSH24 = "PUSH24"
    PUSH25 = "PUSH25"
    PUSH26 = "PUSH26"
    PUSH27 = "PUSH27"
    PUSH28 = "PUSH28"
    PUSH29 = "PUSH29"
    PUSH30 = "PUSH30"
    PUSH31 = "PUSH31"
    PUSH32 = "PUSH32"
    DUP1 = "DUP1"
    DUP2 = "DUP2"
    DUP3 = "DUP3"
    DUP4 = "DUP4"
    DUP5 = "DUP5"
    DUP6 = "DUP6"
    DUP7 = "DUP7"
    DUP8 = "DUP8"
    DUP9 = "DUP9"
    DUP10 = "DUP10"
    DUP11 = "DUP11"
    DUP12 = "DUP12"
    DUP13 = "DUP13"
    DUP14 = "DUP14"
    DUP15 = "DUP15"
    DUP16 = "DUP16"
    SWAP1 = "SWAP1"
    SWAP2 = "SWAP2"
    SWAP3 = "SWAP3"
    SWAP4 = "SWAP4"
    SWAP5 = "SWAP5"
    SWAP6 = "SWAP6"
    SWAP7 = "SWAP7"
    SWAP8 = "SWAP8"
    SWAP9 = "SWAP9"
    SWAP10 = "SWAP10"
    SWAP11 = "SWAP11"
    SWAP12 = "SWAP12"
    SWAP13 = "SWAP13"
    SWAP14 = "SWAP14"
    SWAP15 = "SWAP15"
    SWAP16 = "SWAP16"
    LOG0 = "LOG0"
    LOG1 = "LOG1"
    LOG2 = "LOG2"
    LOG3 = "LOG3"
    LOG4 = "LOG4"
    CREATE = "CREATE"
    CALL = "CALL"
    CALLCODE = "CALLCODE"
    RETURN = "RETURN"
    DELEGATECALL = "DELEGATECALL"
    CREATE2 = "CREATE2"
    STATICCALL = "STATICCALL"
    REVERT = "REVERT"
    INVALID = "INVALID"
    SELFDESTRUCT = "SELFDESTRUCT"

    @property
    def mnemonic(self):
        return self.value

    @property
    def immediate_length(self):
        return immediate_length(self)

    @property
    def is_literal_push(self):
        return is_literal_push(self)

    def __str__(self):
        return self.value


# Assigned byte values.  PUSH, DUP and SWAP ranges are filled in below.
EVM_OPCODES = {
    0x00: "STOP",
    0x01: "ADD",
    0x02: "MUL",
    0x03: "SUB",
    0x04: "DIV",
    0x05: "SDIV",
    0x06: "MOD",
    0x07: "SMOD",
    0x08: "ADDMOD",
    0x09: "MULMOD",
    0x0a: "EXP",
    0x0b: "SIGNEXTEND",
    0x10: "LT",
    0x11: "GT",
    0x12: "SLT",
    0x13: "SGT",
    0x14: "EQ",
    0x15: "ISZERO",
    0x16: "AND",
    0x17: "OR",
    0x18: "XOR",
    0x19: "NOT",
    0x1a: "BYTE",
    0x1b: "SHL",
    0x1c: "SHR",
    0x1d: "SAR",
    0x20: "SHA3",
    0x30: "ADDRESS",
    0x31: "BALANCE",
    0x32: "ORIGIN",
    0x33: "CALLER",
    0x34: "CALLVALUE",
    0x35: "CALLDATALOAD",
    0x36: "CALLDATASIZE",
    0x37: "CALLDATACOPY",
    0x38: "CODESIZE",
    0x39: "CODECOPY",
    0x3a: "GASPRICE",
    0x3b: "EXTCODESIZE",
    0x3c: "EXTCODECOPY",
    0x3d: "RETURNDATASIZE",
    0x3e: "RETURNDATACOPY",
    0x3f: "EXTCODEHASH",
    0x40: "BLOCKHASH",
    0x41: "COINBASE",
    0x42: "TIMESTAMP",
    0x43: "NUMBER",
    0x44: "PREVRANDAO",
    0x45: "GASLIMIT",
    0x46: "CHAINID",
    0x47: "SELFBALANCE",
    0x48: "BASEFEE",
    0x49: "BLOBHASH",
    0x4a: "BLOBBASEFEE",
    0x50: "POP",
    0x51: "MLOAD",
    0x52: "MSTORE",
    0x53: "MSTORE8",
    0x54: "SLOAD",
    0x55: "SSTORE",
    0x56: "JUMP",
    0x57: "JUMPI",
    0x58: "PC",
    0x59: "MSIZE",
    0x5a: "GAS",
    0x5b: "JUMPDEST",
    0x5c: "TLOAD",
    0x5d: "TSTORE",
    0x5e: "MCOPY",
    0x5f: "PUSH0",
    0xa0: "LOG0",
    0xa1: "LOG1",
    0xa2: "LOG2",
    0xa3: "LOG3",
    0xa4: "LOG4",
    0xf0: "CREATE",
    0xf1: "CALL",
    0xf2: "CALLCODE",
    0xf3: "RETURN",
    0xf4: "DELEGATECALL",
    0xf5: "CREATE2",
    0xfa: "STATICCALL",
    0xfd: "REVERT",
    0xfe: "INVALID",
    0xff: "SELFDESTRUCT",
}

for i in range(1, 33):
    EVM_OPCODES[0x5f + i] = f"PUSH{i}"

for i in range(1, 17):
    EVM_OPCODES[0x7f + i] = f"DUP{i}"
    EVM_OPCODES[0x8f + i] = f"SWAP{i}"

# Identities that share a byte with the canonical entry above.
HISTORICAL_ALIASES = {
    Opcode.DIFFICULTY: 0x44,
}

_BYTE_TO_OPCODE = tuple(Opcode(EVM_OPCODES.get(b, "INVALID")) for b in range(256))

_OPCODE_TO_BYTE = {Opcode(name): b for b, name in EVM_OPCODES.items()}
_OPCODE_TO_BYTE.update(HISTORICAL_ALIASES)

_PUSH_LENGTHS = {Opcode(f"PUSH{i}"): i for i in range(0, 33)}

assert len(_BYTE_TO_OPCODE) == 256
assert set(_OPCODE_TO_BYTE) == set(Opcode), "every opcode needs a byte"
assert all(_BYTE_TO_OPCODE[b] is op for op, b in _OPCODE_TO_BYTE.items() if op not in HISTORICAL_ALIASES)


def decode(byte):
    """Return the Opcode for a byte value.

    Unassigned values decode to ``Opcode.INVALID``; 0x44 decodes to
    ``PREVRANDAO``.
    """
    return _BYTE_TO_OPCODE[byte & 0xff]


def encode(opcode):
    """Return the canonical byte value of an opcode."""
    return _OPCODE_TO_BYTE[opcode]


def immediate_length(opcode):
    """Number of immediate operand bytes following the opcode (0..32)."""
    return _PUSH_LENGTHS.get(opcode, 0)


def is_literal_push(opcode):
    """True for PUSH1..PUSH32. PUSH0 carries no operand bytes."""
    return _PUSH_LENGTHS.get(opcode, 0) > 0


def is_push4_or_le(opcode):
    """True for the literal pushes a compiler uses to embed a selector."""
    return 1 <= _PUSH_LENGTHS.get(opcode, 0) <= 4
