"""Main CLI entry point for contract_registry."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from .. import __version__
from ..client import ContractRegistry
from ..exceptions import ContractRegistryError
from ..protobuf import registry_proto_schema
from ..transport import TransportConfig

DEFAULT_ENDPOINT = "localhost:50051"
ENDPOINT_ENV = "CONTRACT_REGISTRY_ENDPOINT"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="contract-registry",
        description="contract-registry: Contract Registry Client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  contract-registry catalog                       List contract names
  contract-registry tags myContract               List tags of a contract
  contract-registry abi myContract 1              Print a contract ABI
  contract-registry register myContract 1 --abi abi.json \\
      --bytecode 0x6080... --deployed-bytecode 0x6080...
  contract-registry proto                         Print the .proto schema

The endpoint defaults to ${ENDPOINT_ENV}, then {DEFAULT_ENDPOINT}.
        """,
    )

    parser.add_argument(
        "--endpoint",
        default=os.environ.get(ENDPOINT_ENV, DEFAULT_ENDPOINT),
        help="Registry service address as host:port",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-call deadline in seconds",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log transport activity to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"contract-registry {__version__}",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    commands.add_parser("catalog", help="List the names of all registered contracts")

    tags = commands.add_parser("tags", help="List the tags registered for a contract")
    tags.add_argument("name")

    for command, help_text in (
        ("get", "Print a full contract as JSON"),
        ("abi", "Print a contract ABI as JSON"),
        ("bytecode", "Print a contract bytecode"),
        ("deployed-bytecode", "Print a contract deployed bytecode"),
        ("deregister", "Remove a name/tag entry"),
    ):
        sub = commands.add_parser(command, help=help_text)
        sub.add_argument("name")
        sub.add_argument("tag", nargs="?", default="")

    register = commands.add_parser("register", help="Register contract artifacts")
    register.add_argument("name")
    register.add_argument("tag")
    register.add_argument("--abi", required=True, type=Path, help="Path to an ABI JSON file")
    register.add_argument("--bytecode", required=True, help="0x-prefixed creation bytecode")
    register.add_argument(
        "--deployed-bytecode", required=True, help="0x-prefixed deployed bytecode"
    )

    delete = commands.add_parser("delete-artifact", help="Delete artifact bytes by hash")
    delete.add_argument("bytecode_hash", metavar="HASH")

    commands.add_parser("proto", help="Print the service .proto schema")

    return parser


async def run_command(registry: ContractRegistry, args: argparse.Namespace) -> Any:
    """Run one registry command and return what should be printed."""
    command = args.command

    if command == "catalog":
        return await registry.get_catalog()
    if command == "tags":
        return await registry.get_tags(args.name)
    if command == "get":
        contract = await registry.get(args.name, args.tag)
        return contract.model_dump()
    if command == "abi":
        return await registry.get_abi(args.name, args.tag)
    if command == "bytecode":
        return await registry.get_bytecode(args.name, args.tag)
    if command == "deployed-bytecode":
        return await registry.get_deployed_bytecode(args.name, args.tag)
    if command == "deregister":
        await registry.deregister(args.name, args.tag)
        return None
    if command == "delete-artifact":
        await registry.delete_artifact(args.bytecode_hash)
        return None
    if command == "register":
        abi = json.loads(args.abi.read_text(encoding="utf-8"))
        await registry.register(
            args.name, args.tag, abi, args.bytecode, args.deployed_bytecode
        )
        return None

    raise ValueError(f"Unknown command: {command}")


async def _run(args: argparse.Namespace) -> Any:
    config = TransportConfig(args.endpoint, timeout=args.timeout)
    async with ContractRegistry(config=config) as registry:
        return await run_command(registry, args)


def _print_result(result: Any) -> None:
    if result is None:
        return
    if isinstance(result, str):
        print(result)
    elif isinstance(result, list) and all(isinstance(item, str) for item in result):
        for item in result:
            print(item)
    else:
        print(json.dumps(result, indent=2))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the contract-registry CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "proto":
        print(registry_proto_schema(), end="")
        return 0

    try:
        result = asyncio.run(_run(args))
    except (ContractRegistryError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
