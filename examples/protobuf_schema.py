"""Write the registry service .proto file.

The wire models are the source of truth; this renders them as a .proto file
that other languages can compile with protoc.
"""

from __future__ import annotations

import sys
from pathlib import Path

from contract_registry import registry_proto_schema


def main() -> None:
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("contractregistry.proto")
    target.write_text(registry_proto_schema(), encoding="utf-8")
    print(f"Wrote {target}")


if __name__ == "__main__":
    main()
