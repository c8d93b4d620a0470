"""Guess the interface standard a contract implements from its selectors."""

from enum import Enum

from function_selectors import extract_selectors

ERC20_DEFAULT_FUNCS = {
    bytes.fromhex("dd62ed3e"): "allowance(address,address)",
    bytes.fromhex("095ea7b3"): "approve(address,uint256)",
    bytes.fromhex("70a08231"): "balanceOf(address)",
    bytes.fromhex("18160ddd"): "totalSupply()",
    bytes.fromhex("a9059cbb"): "transfer(address,uint256)",
    bytes.fromhex("23b872dd"): "transferFrom(address,address,uint256)",
}

ERC721_DEFAULT_FUNCS = {
    bytes.fromhex("70a08231"): "balanceOf(address)",
    bytes.fromhex("6352211e"): "ownerOf(uint256)",
    bytes.fromhex("b88d4fde"): "safeTransferFrom(address,address,uint256,bytes)",
    bytes.fromhex("42842e0e"): "safeTransferFrom(address,address,uint256)",
    bytes.fromhex("23b872dd"): "transferFrom(address,address,uint256)",
    bytes.fromhex("095ea7b3"): "approve(address,uint256)",
    bytes.fromhex("a22cb465"): "setApprovalForAll(address,bool)",
    bytes.fromhex("081812fc"): "getApproved(uint256)",
    bytes.fromhex("e985e9c5"): "isApprovedForAll(address,address)",
}


class ContractType(Enum):
    ERC20 = "ERC20"
    ERC721 = "ERC721"
    UNKNOWN = "unknown"

    def __str__(self):
        return self.value


# Checked in order; the first fully covered interface wins.
REFERENCE_INTERFACES = (
    (ContractType.ERC20, ERC20_DEFAULT_FUNCS),
    (ContractType.ERC721, ERC721_DEFAULT_FUNCS),
)


def has_all_selectors(required, selectors):
    found = {bytes(s) for s in selectors}
    return all(selector in found for selector in required)


def classify(selectors):
    """Return the first interface whose required selectors are all present."""
    for contract_type, required in REFERENCE_INTERFACES:
        if has_all_selectors(required, selectors):
            return contract_type
    return ContractType.UNKNOWN


def contract_type_from_bytecode(bytecode):
    return classify(extract_selectors(bytecode))
