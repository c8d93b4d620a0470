"""Recover function selectors from the dispatcher of deployed bytecode.

Compilers route an incoming call by comparing the first four bytes of the
call data against every public function selector.  Each comparison compiles
to a short, recognisable run of instructions; this module slides a five
instruction window over the disassembly and collects the literal selector of
every run it recognises.
"""

import logging

from disassembler import disassemble
from opcodes import Opcode, is_literal_push, is_push4_or_le

logger = logging.getLogger(__name__)

SELECTOR_SIZE = 4
WINDOW_SIZE = 5


class SelectorSet:
    """Unique 4-byte selectors, kept in the order they were first found."""

    def __init__(self, selectors=()):
        self._selectors = {}
        for selector in selectors:
            self.add(selector)

    def add(self, selector):
        """Record a selector. Returns False if it was already present."""
        selector = bytes(selector)
        if len(selector) != SELECTOR_SIZE:
            raise ValueError(f"selector must be {SELECTOR_SIZE} bytes, got {len(selector)}")
        if selector in self._selectors:
            return False
        self._selectors[selector] = None
        return True

    def __contains__(self, selector):
        return bytes(selector) in self._selectors

    def __iter__(self):
        return iter(self._selectors)

    def __len__(self):
        return len(self._selectors)

    def __eq__(self, other):
        if isinstance(other, SelectorSet):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == [bytes(s) for s in other]
        return NotImplemented

    def __repr__(self):
        return f"SelectorSet({to_hex_strings(self)!r})"


def to_selector(push_value):
    """Left-pad an optimizer-shortened literal with zero bytes to 4 bytes."""
    return bytes(push_value).rjust(SELECTOR_SIZE, b"\x00")


def _solc_dup1_eq(window):
    # DUP1 PUSHn <selector> EQ PUSHn <dest> JUMPI
    return (window[0].opcode is Opcode.DUP1
            and is_push4_or_le(window[1].opcode)
            and window[2].opcode is Opcode.EQ
            and is_literal_push(window[3].opcode)
            and window[4].opcode is Opcode.JUMPI)


def _vyper_dup2_xor(window):
    # PUSHn <selector> DUP2 XOR PUSHn <dest> JUMPI
    return (is_push4_or_le(window[0].opcode)
            and window[1].opcode is Opcode.DUP2
            and window[2].opcode is Opcode.XOR
            and is_literal_push(window[3].opcode)
            and window[4].opcode is Opcode.JUMPI)


def _vyper_mload_eq(window):
    # Old Vyper keeps the call data selector in memory slot 0:
    # PUSHn <selector> PUSH1 00 MLOAD EQ ISZERO
    return (is_push4_or_le(window[0].opcode)
            and window[1].opcode is Opcode.PUSH1
            and window[1].operand == b"\x00"
            and window[2].opcode is Opcode.MLOAD
            and window[3].opcode is Opcode.EQ
            and window[4].opcode is Opcode.ISZERO)


# (name, predicate, index of the selector push inside the window), in priority order.
DISPATCH_IDIOMS = (
    ("solc-dup1-eq", _solc_dup1_eq, 1),
    ("vyper-dup2-xor", _vyper_dup2_xor, 0),
    ("vyper-mload-eq", _vyper_mload_eq, 0),
)


def match_window(window, idioms=DISPATCH_IDIOMS):
    """Return (idiom name, selector) for the first idiom matching the window, or None."""
    for name, predicate, index in idioms:
        if predicate(window):
            return name, to_selector(window[index].operand)
    return None


def selectors_from_instructions(instructions, idioms=DISPATCH_IDIOMS):
    selectors = SelectorSet()
    for start in range(len(instructions) - WINDOW_SIZE + 1):
        window = instructions[start:start + WINDOW_SIZE]
        match = match_window(window, idioms)
        if match is None:
            continue
        name, selector = match
        if selectors.add(selector):
            logger.debug("selector 0x%s via %s at offset %d", selector.hex(), name, window[0].offset)
    return selectors


def extract_selectors(bytecode):
    """Return every potential function selector found in deployed bytecode.

    Never fails: malformed or truncated code yields an empty or partial set.
    """
    return selectors_from_instructions(disassemble(bytecode))


def to_hex_strings(selectors):
    return [f"0x{selector.hex()}" for selector in selectors]


def extract_selector_hex_strings(bytecode):
    """Same as extract_selectors, formatted as "0xa9059cbb" strings."""
    return to_hex_strings(extract_selectors(bytecode))
