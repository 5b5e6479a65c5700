from __future__ import annotations

import os
import sys
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

GUI_SRC = Path(__file__).resolve().parents[1] / "src"
CORE_ROOT = Path(__file__).resolve().parents[3] / "core"

for path in (GUI_SRC, CORE_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
