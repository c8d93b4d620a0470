#!/usr/bin/env python3
"""List the function selectors dispatched by a deployed contract."""

import argparse
import logging
import sys

import requests

from contract_types import classify
from disassembler import disassemble, format_listing
from function_selectors import selectors_from_instructions, to_hex_strings
from get_bytecode import (
    DEFAULT_CONTRACT_ADDRESS,
    DEFAULT_RPC_URL,
    DEFAULT_TIMEOUT,
    BytecodeError,
    get_code,
    read_bytecode_file,
    save_bytecode,
)

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        nargs="?",
        help="Bytecode file (hex text or raw binary). Fetched over RPC when omitted.",
    )
    parser.add_argument(
        "--address",
        default=None,
        help=f"Contract address to fetch (default: {DEFAULT_CONTRACT_ADDRESS})",
    )
    parser.add_argument(
        "--rpc-url",
        default=DEFAULT_RPC_URL,
        help="JSON-RPC endpoint (default: $ETH_RPC_URL or %(default)s)",
    )
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    parser.add_argument("--save", default=None, help="Write the fetched bytecode to this file as hex")
    parser.add_argument("--disasm", action="store_true", help="Print the disassembly listing")
    parser.add_argument("--limit", type=int, default=None, help="Only list the first N instructions")
    parser.add_argument("--contract-type", action="store_true", help="Guess ERC20/ERC721 from the selectors")
    parser.add_argument("-o", "--output", default=None, help="Write selectors to this file, one per line")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def load_code(args):
    if args.input is not None:
        logger.info("reading bytecode from %s", args.input)
        return read_bytecode_file(args.input)
    address = args.address or DEFAULT_CONTRACT_ADDRESS
    code = get_code(address, rpc_url=args.rpc_url, timeout=args.timeout)
    if args.save:
        save_bytecode(args.save, code)
    return code


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        code = load_code(args)
    except FileNotFoundError:
        print(f"Error: file {args.input} not found.", file=sys.stderr)
        return 1
    except (BytecodeError, requests.RequestException, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    instructions = disassemble(code)
    logger.info("%d bytes, %d instructions", len(code), len(instructions))

    if args.disasm:
        print(format_listing(instructions, args.limit))

    selectors = selectors_from_instructions(instructions)
    if not selectors:
        print("No function dispatch patterns detected.")
    for selector in to_hex_strings(selectors):
        print(f" Function selector: {selector}")

    if args.contract_type:
        print(f"Contract type: {classify(selectors)}")

    if args.output:
        with open(args.output, "w") as f:
            for selector in to_hex_strings(selectors):
                f.write(f"{selector}\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
