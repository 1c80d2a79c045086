"""hostsync - Hosts File Executor

Replaces the hosts file atomically: the new content is written to a temp file in
the same directory and renamed over the destination.
"""
import logging
import os
import tempfile
from pathlib import Path

from hostsync.errors import WriteError

logger = logging.getLogger(__name__)


class HostsFileWriter:
    def __init__(self, path: str = "/etc/hosts", mode: int = 0o644):
        self.path = Path(path)
        self.mode = mode

    def write(self, content: str) -> None:
        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(temp_path, self.mode)
            os.replace(temp_path, self.path)
        except (OSError, UnicodeError) as e:
            raise WriteError(f"Cannot write {self.path}: {e}") from e
        finally:
            # Left behind only if the replace did not happen
            if temp_path and os.path.exists(temp_path):
                os.unlink(temp_path)

        logger.debug(f"Wrote {len(content)} bytes to {self.path}")
