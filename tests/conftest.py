"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from contract_registry import ContractRegistry, MockTransport


@pytest.fixture
def sample_abi() -> list[dict[str, Any]]:
    """ABI with a single view function."""
    return [
        {
            "constant": True,
            "inputs": [],
            "name": "name",
            "outputs": [{"internalType": "string", "name": "", "type": "string"}],
            "payable": False,
            "stateMutability": "view",
            "type": "function",
        }
    ]


@pytest.fixture
def mock_transport() -> MockTransport:
    """Mock transport with no scripted responses."""
    return MockTransport()


@pytest.fixture
def registry(mock_transport: MockTransport) -> ContractRegistry:
    """Registry client wired to the mock transport."""
    return ContractRegistry(transport=mock_transport)
