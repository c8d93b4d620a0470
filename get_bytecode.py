"""Fetch deployed bytecode over JSON-RPC and move it to and from disk."""

import logging
import os
import string

import requests

logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = os.environ.get("ETH_RPC_URL", "https://ethereum-rpc.publicnode.com")
DEFAULT_CONTRACT_ADDRESS = "0x5af0d9827e0c53e4799bb226655a1de152a425a5"
DEFAULT_TIMEOUT = 30

HEX_DIGITS = frozenset(string.hexdigits)


class BytecodeError(Exception):
    """Base class for bytecode acquisition failures."""


class HexParseError(BytecodeError, ValueError):
    pass


class RpcError(BytecodeError):
    pass


def parse_hex(text):
    """Convert a hex string (optionally 0x-prefixed) into bytes."""
    hex_str = text.strip()
    if hex_str.startswith(("0x", "0X")):
        hex_str = hex_str[2:]
    if len(hex_str) % 2:
        raise HexParseError(f"odd number of hex digits ({len(hex_str)})")
    bad = next((c for c in hex_str if c not in HEX_DIGITS), None)
    if bad is not None:
        raise HexParseError(f"invalid hex character {bad!r}")
    return bytes.fromhex(hex_str)


def get_code(contract_address, rpc_url=None, block="latest", timeout=DEFAULT_TIMEOUT):
    """Return the runtime bytecode at contract_address via eth_getCode."""
    url = rpc_url or DEFAULT_RPC_URL
    rpc = {
        "jsonrpc": "2.0",
        "method": "eth_getCode",
        "params": [
            contract_address,
            block
        ],
        "id": 1
    }

    logger.info("eth_getCode %s from %s", contract_address, url)
    response = requests.post(url, json=rpc, timeout=timeout)
    response.raise_for_status()
    j = response.json()

    if "error" in j:
        error = j["error"]
        message = error.get("message", error) if isinstance(error, dict) else error
        raise RpcError(f"eth_getCode failed: {message}")
    if "result" not in j or j["result"] is None:
        raise RpcError("eth_getCode returned no result")

    code = parse_hex(j["result"])
    if not code:
        logger.warning("no code at %s (not a contract?)", contract_address)
    return code


def read_bytecode_file(filepath):
    """Read bytecode stored either as hex text or as raw bytes."""
    with open(filepath, "rb") as f:
        content = f.read()

    try:
        text = content.decode("ascii")
    except UnicodeDecodeError:
        return content

    hex_str = "".join(text.split())
    try:
        return parse_hex(hex_str)
    except HexParseError:
        if hex_str[:2] in ("0x", "0X"):
            raise
        logger.debug("%s is not hex text, reading as binary", filepath)
        return content


def save_bytecode(filepath, code):
    """Store bytecode as a hex text file (no 0x prefix)."""
    with open(filepath, "w") as f:
        f.write(bytes(code).hex())
    logger.info("saved %d bytes of code to %s", len(code), filepath)
