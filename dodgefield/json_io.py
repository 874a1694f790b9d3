"""Reading and writing JSON documents on disk."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, Union


class JsonIo:
    """Writes objects to, and reads data from, one JSON file."""

    def __init__(self, file_name: Union[str, Path]) -> None:
        self.file_name = Path(file_name)

    def write_json(self, data: Any) -> None:
        """Write ``data`` as pretty-printed JSON, replacing the file.

        Objects with a ``to_dict`` method and dataclass instances are converted first.
        """
        if hasattr(data, "to_dict"):
            data = data.to_dict()
        elif dataclasses.is_dataclass(data) and not isinstance(data, type):
            data = dataclasses.asdict(data)
        text = json.dumps(data, indent=2, ensure_ascii=False)
        self.file_name.write_text(text, encoding="utf-8")

    def read_json(self) -> Any:
        """Return the parsed contents of the file."""
        return json.loads(self.file_name.read_text(encoding="utf-8"))