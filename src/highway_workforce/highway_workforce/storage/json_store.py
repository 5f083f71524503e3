from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List


class JsonFileStore:
    """Reads and writes one JSON array-of-objects file per collection.

    Note: Writes are a full, non-atomic rewrite of the file.
    """

    def __init__(self, *, indent: int = 2):
        self._indent = indent

    def read_list(self, path: Path) -> List[Dict[str, Any]]:
        path = Path(path)
        if not path.exists():
            return []

        with path.open("r", encoding="utf-8") as f:
            content = f.read()
        if not content.strip():
            return []

        rows = json.loads(content)
        if not isinstance(rows, list):
            raise ValueError(f"Expected a JSON array in {path}")
        return rows

    def write_list(self, path: Path, rows: List[Dict[str, Any]]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(rows, f, ensure_ascii=False, indent=self._indent)
            f.write("\n")
