"""Unit tests for wire message encoding/decoding."""

from __future__ import annotations

import pytest

from contract_registry import DecodeError, EncodeError, decode, encode
from contract_registry.wire import (
    ContractId,
    ContractWire,
    DeleteArtifactRequest,
    GetCatalogRequest,
    GetCatalogResponse,
    GetContractRequest,
    GetContractResponse,
    GetTagsRequest,
    GetTagsResponse,
    RegisterContractRequest,
    RegisterContractResponse,
)


class TestEncode:
    """Test protobuf wire encoding."""

    def test_string_field(self) -> None:
        """Test a single string field."""
        data = encode(GetTagsRequest(name="contract1"))

        # field 1, wire type 2, length 9
        assert data == b"\x0a\x09contract1"

    def test_bytes_field(self) -> None:
        """Test a single bytes field."""
        assert encode(DeleteArtifactRequest(bytecode_hash=b"\xfe\xfe")) == b"\x0a\x02\xfe\xfe"

    def test_empty_messages(self) -> None:
        """Test messages without fields encode to nothing."""
        assert encode(GetCatalogRequest()) == b""
        assert encode(RegisterContractResponse()) == b""

    def test_empty_scalars_are_omitted(self) -> None:
        """Test proto3 omission of empty strings."""
        assert encode(ContractId(name="c", tag="")) == b"\x0a\x01c"

    def test_repeated_strings(self) -> None:
        """Test repeated string fields keep their order."""
        data = encode(GetTagsResponse(tags=["tag2", "tag1"]))

        assert data == b"\x0a\x04tag2\x0a\x04tag1"

    def test_nested_messages(self) -> None:
        """Test nested identity and contract messages."""
        request = RegisterContractRequest(
            contract=ContractWire(
                id=ContractId(name="c", tag="1"),
                abi=b"[]",
                bytecode=b"\xfe\xfe",
                deployed_bytecode=b"\xde\xde",
            )
        )

        expected = (
            b"\x0a\x14"  # contract, 20 bytes
            b"\x0a\x06\x0a\x01c\x12\x011"  # id {name: "c", tag: "1"}
            b"\x12\x02[]"  # abi
            b"\x1a\x02\xfe\xfe"  # bytecode
            b"\x22\x02\xde\xde"  # deployed_bytecode
        )
        assert encode(request) == expected

    def test_empty_nested_message_is_written(self) -> None:
        """Test that a nested message is present even when empty."""
        assert encode(GetContractRequest()) == b"\x0a\x00"

    def test_deterministic(self) -> None:
        """Test equal messages encode to equal bytes."""
        first = GetCatalogResponse(names=["a", "b"])
        second = GetCatalogResponse(names=["a", "b"])

        assert encode(first) == encode(second)

    def test_non_message_rejected(self) -> None:
        """Test encoding something that is not a wire message."""
        with pytest.raises(EncodeError, match="expected a WireMessage"):
            encode({"name": "contract1"})  # type: ignore[arg-type]


class TestDecode:
    """Test protobuf wire decoding."""

    def test_roundtrip_nested(self) -> None:
        """Test decoding a nested message."""
        response = GetContractResponse(
            contract=ContractWire(id=ContractId(name="c", tag="1"), abi=b"[]", bytecode=b"\x01")
        )

        assert decode(GetContractResponse, encode(response)) == response

    def test_missing_fields_are_empty(self) -> None:
        """Test missing fields decode to empty values."""
        response = decode(GetContractResponse, b"")

        assert response.contract.id == ContractId(name="", tag="")
        assert response.contract.abi == b""
        assert response.contract.bytecode == b""
        assert response.contract.deployed_bytecode == b""

    def test_unknown_fields_are_ignored(self) -> None:
        """Test fields from a newer schema are skipped."""
        # field 15, varint 1
        data = b"\x0a\x04tag1\x78\x01"

        assert decode(GetTagsResponse, data).tags == ["tag1"]

    def test_truncated_data(self) -> None:
        """Test truncated data error."""
        with pytest.raises(DecodeError, match="Invalid GetTagsResponse payload"):
            decode(GetTagsResponse, b"\x0a\x05ab")

    def test_wrong_wire_type(self) -> None:
        """Test a field with an unexpected wire type."""
        # field 1 as fixed64 with a truncated value
        with pytest.raises(DecodeError):
            decode(GetTagsRequest, b"\x09\x01")

    def test_non_bytes_rejected(self) -> None:
        """Test decoding something that is not bytes."""
        with pytest.raises(DecodeError, match="expected bytes"):
            decode(GetTagsResponse, "tags")  # type: ignore[arg-type]

    def test_accepts_bytearray(self) -> None:
        """Test bytearray input."""
        assert decode(GetTagsRequest, bytearray(b"\x0a\x01x")).name == "x"
