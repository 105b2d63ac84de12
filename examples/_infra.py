from __future__ import annotations

import logging
import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


def banner(title: str) -> None:
    print("\n" + "=" * 72)
    print(title)
    print("=" * 72)


def enable_debug_logs() -> None:
    """Show the DEBUG records haskellite emits (cache top-ups, rejected redraws)."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
