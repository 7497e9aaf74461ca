from __future__ import annotations

import importlib.util
import sys
from typing import List


def startup_warnings(need_serial: bool) -> List[str]:
    warnings = []
    if need_serial and importlib.util.find_spec("serial") is None:
        warnings.append("pyserial is not installed; LED commands will fail. Install with: pip install pyserial")
    return warnings


def emit_startup_warnings(need_serial: bool = False) -> None:
    for message in startup_warnings(need_serial):
        print(f"Warning: {message}", file=sys.stderr)
