"""Command-line interface for contract_registry."""
