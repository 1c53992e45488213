from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional


class JsonFileBackend:
    """One ``<bucket>.json`` file per bucket inside ``directory``.

    Writes go to a temporary file which is then renamed into place.
    """

    def __init__(self, directory: str | Path):
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path(self, bucket: str) -> Path:
        return self._dir / f"{bucket}.json"

    def read(self, bucket: str) -> Optional[Any]:
        path = self._path(bucket)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def write(self, bucket: str, value: Any) -> None:
        path = self._path(bucket)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, path)
