from __future__ import annotations

import sys
from pathlib import Path

# Allow running as: python scripts/registry_demo.py
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from username_registry.deps import get_registry
from username_registry.logging_config import configure_logging


def main() -> int:
    configure_logging()

    registry = get_registry()

    registry.register_username("john_doe", "user123")

    print("check john_doe", registry.check_availability("john_doe"))
    print("check jane_smith", registry.check_availability("jane_smith"))

    print("suggestions john_doe", registry.suggest_alternatives("john_doe"))

    for _ in range(3):
        registry.check_availability("admin")

    print("most attempted", registry.get_most_attempted())
    print("snapshot", registry.snapshot().model_dump_json())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
