"""Tests for instruction builders."""

import base64
import struct

import pytest
from solders.pubkey import Pubkey

from solforge.errors import InstructionBuildError, InvalidAddressError, InvalidFieldError
from solforge.instructions import (
    RENT_SYSVAR,
    SYSTEM_PROGRAM,
    TOKEN_PROGRAM,
    initialize_mint,
    mint_to,
    transfer_native,
    transfer_token,
)
from solforge.instructions.base import U64_MAX

BAD = "not-base58!"


def flags(descriptor) -> list[tuple[bool, bool]]:
    return [(a.is_signer, a.is_writable) for a in descriptor.accounts]


def keys(descriptor) -> list[str]:
    return [str(a.pubkey) for a in descriptor.accounts]


class TestInitializeMint:
    """Tests for initialize_mint."""

    def test_accounts_and_program(self, addresses):
        mint, authority = addresses[:2]
        ix = initialize_mint(mint, authority, 9)

        assert ix.program_id == TOKEN_PROGRAM
        assert keys(ix) == [mint, str(RENT_SYSVAR)]
        assert flags(ix) == [(False, True), (False, False)]

    def test_data_layout(self, addresses):
        mint, authority = addresses[:2]
        ix = initialize_mint(mint, authority, 6)

        assert ix.data == bytes([0, 6]) + bytes(Pubkey.from_string(authority)) + b"\x00"
        assert len(ix.data) == 35

    @pytest.mark.parametrize("decimals", [0, 255])
    def test_decimals_bounds_accepted(self, addresses, decimals):
        ix = initialize_mint(addresses[0], addresses[1], decimals)
        assert ix.data[1] == decimals

    @pytest.mark.parametrize("decimals", [-1, 256])
    def test_decimals_out_of_range(self, addresses, decimals):
        with pytest.raises(InvalidFieldError):
            initialize_mint(addresses[0], addresses[1], decimals)

    def test_invalid_mint(self, address):
        with pytest.raises(InvalidAddressError) as exc_info:
            initialize_mint(BAD, address, 9)
        assert exc_info.value.field == "mint"

    def test_invalid_mint_authority(self, address):
        with pytest.raises(InvalidAddressError) as exc_info:
            initialize_mint(address, BAD, 9)
        assert exc_info.value.field == "mint_authority"

    def test_first_invalid_field_reported(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            initialize_mint(BAD, BAD, 9)
        assert exc_info.value.field == "mint"


class TestMintTo:
    """Tests for mint_to."""

    def test_accounts(self, addresses):
        mint, dest, authority = addresses[:3]
        ix = mint_to(mint, dest, authority, 1_000)

        assert ix.program_id == TOKEN_PROGRAM
        assert keys(ix) == [mint, dest, authority]
        assert flags(ix) == [(False, True), (False, True), (True, False)]

    def test_data_layout(self, addresses):
        ix = mint_to(*addresses[:3], 1_000)
        assert ix.data == bytes([7]) + struct.pack("<Q", 1_000)

    def test_zero_amount_accepted(self, addresses):
        ix = mint_to(*addresses[:3], 0)
        assert ix.data == bytes([7]) + bytes(8)

    def test_max_amount_accepted(self, addresses):
        ix = mint_to(*addresses[:3], U64_MAX)
        assert ix.data == bytes([7]) + b"\xff" * 8

    @pytest.mark.parametrize("amount", [-1, U64_MAX + 1])
    def test_amount_out_of_range(self, addresses, amount):
        with pytest.raises(InvalidFieldError) as exc_info:
            mint_to(*addresses[:3], amount)
        assert exc_info.value.field == "amount"

    @pytest.mark.parametrize("position,field", [(0, "mint"), (1, "destination"), (2, "authority")])
    def test_each_invalid_field(self, addresses, position, field):
        args = addresses[:3]
        args[position] = BAD

        with pytest.raises(InvalidAddressError) as exc_info:
            mint_to(*args, 10)
        assert exc_info.value.field == field


class TestTransferToken:
    """Tests for transfer_token."""

    def test_accounts(self, addresses):
        source, dest, owner = addresses[:3]
        ix = transfer_token(source, dest, owner, 50)

        assert ix.program_id == TOKEN_PROGRAM
        assert keys(ix) == [source, dest, owner]
        assert flags(ix) == [(False, True), (False, True), (True, False)]
        assert ix.data == bytes([3]) + struct.pack("<Q", 50)

    def test_owner_as_source(self, addresses):
        """Source and owner may be the same address."""
        owner, dest = addresses[:2]
        ix = transfer_token(owner, dest, owner, 1)

        assert keys(ix) == [owner, dest, owner]

    def test_zero_amount_accepted(self, addresses):
        ix = transfer_token(*addresses[:3], 0)
        assert ix.data == bytes([3]) + bytes(8)

    @pytest.mark.parametrize("position,field", [(0, "source"), (1, "destination"), (2, "owner")])
    def test_each_invalid_field(self, addresses, position, field):
        args = addresses[:3]
        args[position] = BAD

        with pytest.raises(InvalidAddressError) as exc_info:
            transfer_token(*args, 10)
        assert exc_info.value.field == field


class TestTransferNative:
    """Tests for transfer_native."""

    def test_accounts(self, addresses):
        sender, recipient = addresses[:2]
        ix = transfer_native(sender, recipient, 1_000)

        assert ix.program_id == SYSTEM_PROGRAM
        assert keys(ix) == [sender, recipient]
        assert flags(ix) == [(True, True), (False, True)]

    def test_data_layout(self, addresses):
        ix = transfer_native(*addresses[:2], 1_000)
        assert ix.data == struct.pack("<IQ", 2, 1_000)

    def test_zero_lamports_accepted(self, addresses):
        ix = transfer_native(*addresses[:2], 0)
        assert ix.data == struct.pack("<IQ", 2, 0)

    def test_invalid_from(self, address):
        with pytest.raises(InvalidAddressError) as exc_info:
            transfer_native(BAD, address, 1)
        assert exc_info.value.field == "from"

    def test_invalid_to(self, address):
        with pytest.raises(InvalidAddressError) as exc_info:
            transfer_native(address, BAD, 1)
        assert exc_info.value.field == "to"

    def test_accepts_pubkeys(self, keypair, other_keypair):
        ix = transfer_native(keypair.pubkey(), other_keypair.pubkey(), 5)
        assert keys(ix) == [str(keypair.pubkey()), str(other_keypair.pubkey())]

    def test_library_failure_becomes_build_error(self, addresses, monkeypatch):
        def boom(params):
            raise RuntimeError("unexpected")

        monkeypatch.setattr("solforge.instructions.system.transfer", boom)

        with pytest.raises(InstructionBuildError):
            transfer_native(*addresses[:2], 1)


class TestDescriptorSerialization:
    """Tests for InstructionDescriptor.to_dict."""

    def test_wire_shape(self, addresses):
        data = transfer_native(*addresses[:2], 1_000).to_dict()

        assert data["program_id"] == str(SYSTEM_PROGRAM)
        assert data["accounts"][0] == {
            "pubkey": addresses[0],
            "is_signer": True,
            "is_writable": True,
        }
        assert base64.b64decode(data["instruction_data"]) == struct.pack("<IQ", 2, 1_000)
