"""
Scratch file bookkeeping.

Each request gets a uniquely named input/output pair under a shared
directory. Names come from 8 random bytes so concurrent requests never
collide and no locking is needed.

Dependencies: pathlib, secrets
System role: Per-request temporary file lifecycle
"""

import logging
import secrets
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

INPUT_SUFFIX = ".mmd"
OUTPUT_SUFFIX = ".svg"


@dataclass(frozen=True)
class ScratchFilePair:
    """Input and output paths owned by one in-flight request."""

    scratch_id: str
    input_path: Path
    output_path: Path


class ScratchSpace:
    """Shared scratch directory handing out per-request file pairs."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def ensure(self) -> Path:
        """Create the scratch directory if absent. Safe to call concurrently."""
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    def allocate(self) -> ScratchFilePair:
        """
        Reserve a fresh pair of paths. Nothing is written yet.

        Returns:
            ScratchFilePair: Paths named by a new 16-hex-char identifier
        """
        scratch_id = secrets.token_hex(8)
        return ScratchFilePair(
            scratch_id=scratch_id,
            input_path=self.root / f"{scratch_id}{INPUT_SUFFIX}",
            output_path=self.root / f"{scratch_id}{OUTPUT_SUFFIX}",
        )

    @staticmethod
    def release(pair: ScratchFilePair | None) -> None:
        """
        Best-effort removal of both files of a pair.

        Missing files and OS errors are ignored; cleanup never raises.

        Args:
            pair: Pair to remove, or None if allocation never happened
        """
        if pair is None:
            return
        for path in (pair.input_path, pair.output_path):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.debug(
                    "Failed to cleanup scratch file",
                    extra={"file_path": str(path), "error": str(e)},
                )
