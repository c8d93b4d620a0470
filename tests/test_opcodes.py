import pytest

from opcodes import (
    EVM_OPCODES,
    Opcode,
    decode,
    encode,
    immediate_length,
    is_literal_push,
    is_push4_or_le,
)


def test_decode_is_total():
    for byte in range(256):
        assert isinstance(decode(byte), Opcode)


def test_unassigned_bytes_decode_to_invalid():
    for byte in (0x0c, 0x21, 0x4b, 0xa5, 0xef, 0xfb):
        assert decode(byte) is Opcode.INVALID


def test_encode_round_trips_assigned_bytes():
    for byte in EVM_OPCODES:
        assert encode(decode(byte)) == byte


def test_every_opcode_has_a_byte():
    for opcode in Opcode:
        assert 0 <= encode(opcode) <= 0xff


def test_shared_byte_resolves_to_prevrandao():
    assert decode(0x44) is Opcode.PREVRANDAO
    assert encode(Opcode.PREVRANDAO) == 0x44
    assert encode(Opcode.DIFFICULTY) == 0x44


@pytest.mark.parametrize(
    "opcode, length",
    [
        (Opcode.ADD, 0),
        (Opcode.PUSH0, 0),
        (Opcode.PUSH1, 1),
        (Opcode.PUSH4, 4),
        (Opcode.PUSH20, 20),
        (Opcode.PUSH32, 32),
        (Opcode.DUP1, 0),
        (Opcode.JUMPI, 0),
    ],
)
def test_immediate_length(opcode, length):
    assert immediate_length(opcode) == length
    assert opcode.immediate_length == length


def test_literal_push_excludes_push0():
    assert not is_literal_push(Opcode.PUSH0)
    assert is_literal_push(Opcode.PUSH1)
    assert is_literal_push(Opcode.PUSH32)
    assert not is_literal_push(Opcode.DUP1)


def test_push4_or_le():
    assert [op for op in Opcode if is_push4_or_le(op)] == [
        Opcode.PUSH1,
        Opcode.PUSH2,
        Opcode.PUSH3,
        Opcode.PUSH4,
    ]


def test_mnemonics():
    assert decode(0x63).mnemonic == "PUSH4"
    assert decode(0x80).mnemonic == "DUP1"
    assert decode(0x9f).mnemonic == "SWAP16"
    assert str(decode(0x57)) == "JUMPI"
