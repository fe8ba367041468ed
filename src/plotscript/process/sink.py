from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class InstructionSink(Protocol):
    def add_instruction(self, text: str) -> None:
        ...


class InstructionBuffer:
    """Ordered, append-only instruction store with optional file output."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    def add_instruction(self, text: str) -> None:
        self._lines.append(text)

    @property
    def instructions(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))

    def to_script(self) -> str:
        if not self._lines:
            return ""
        return "\n".join(self._lines) + "\n"

    def save(self, path: str | Path, metadata: Optional[Dict[str, Any]] = None) -> Path:
        """Write the script, plus a JSON metadata sidecar when metadata is given."""
        out_file = Path(path)
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(self.to_script(), encoding="utf-8")
        if metadata is not None:
            meta_file = out_file.with_suffix(out_file.suffix + ".metadata.json")
            try:
                with open(meta_file, "w", encoding="utf-8") as fh:
                    json.dump(metadata, fh, indent=2, default=str)
            except OSError as e:
                logger.exception("Failed to write metadata file: %s", e)
        return out_file
