from disassembler import Instruction, disassemble, format_listing
from opcodes import Opcode, encode


def test_empty_bytecode():
    assert disassemble(b"") == []


def test_offsets_follow_push_lengths():
    instructions = disassemble(bytes.fromhex("6080604052"))
    assert [ins.opcode for ins in instructions] == [Opcode.PUSH1, Opcode.PUSH1, Opcode.MSTORE]
    assert [ins.offset for ins in instructions] == [0, 2, 4]
    assert [ins.operand for ins in instructions] == [b"\x80", b"\x40", None]


def test_push0_has_no_operand():
    instructions = disassemble(bytes.fromhex("5f5f"))
    assert [(ins.opcode, ins.offset, ins.operand) for ins in instructions] == [
        (Opcode.PUSH0, 0, None),
        (Opcode.PUSH0, 1, None),
    ]


def test_truncated_push_at_end():
    instructions = disassemble(bytes.fromhex("0063aabb"))
    assert len(instructions) == 2
    push = instructions[1]
    assert push.opcode is Opcode.PUSH4
    assert push.offset == 1
    assert push.operand == b"\xaa\xbb"


def test_lone_truncated_push():
    instructions = disassemble(b"\x63")
    assert len(instructions) == 1
    assert instructions[0].opcode is Opcode.PUSH4
    assert instructions[0].operand == b""


def test_unknown_byte_is_invalid_instruction():
    instructions = disassemble(bytes.fromhex("0c01"))
    assert instructions[0].opcode is Opcode.INVALID
    assert instructions[1].opcode is Opcode.ADD
    assert instructions[1].offset == 1


def test_offsets_strictly_increasing():
    instructions = disassemble(bytes(range(256)) * 2)
    offsets = [ins.offset for ins in instructions]
    assert offsets[0] == 0
    assert all(a < b for a, b in zip(offsets, offsets[1:]))


def test_reencode_well_formed_code():
    code = bytes.fromhex("6080604052348015600f57600080fd5b5060043610")
    rebuilt = b"".join(
        bytes([encode(ins.opcode)]) + (ins.operand or b"") for ins in disassemble(code)
    )
    assert rebuilt == code


def test_instruction_rendering():
    push, jumpi = disassemble(bytes.fromhex("63a9059cbb57"))
    assert str(push) == "PUSH4 a9059cbb"
    assert str(jumpi) == "JUMPI"
    assert repr(jumpi) == "0005: JUMPI"
    assert push.operand_int() == 0xa9059cbb
    assert jumpi.operand_int() is None


def test_instruction_equality():
    assert Instruction(Opcode.ADD, 3) == Instruction(Opcode.ADD, 3, None)
    assert Instruction(Opcode.ADD, 3) != Instruction(Opcode.ADD, 4)


def test_format_listing_limit():
    listing = format_listing(disassemble(bytes.fromhex("6080604052")), limit=2)
    assert listing == "0000: PUSH1 80\n0002: PUSH1 40"
