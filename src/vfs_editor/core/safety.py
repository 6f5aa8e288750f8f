"""Locking, atomic writes and timing for work done outside the in-memory store."""
import logging
import os
import shutil
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Union

from filelock import FileLock

logger = logging.getLogger(__name__)


class SafeFileOperation:
    """Context manager guarding a host file with a lock and a rollback copy.

    Used when a snapshot is written to disk: the lock keeps two hosts from
    interleaving writes, the backup restores the previous snapshot if the
    block raises, and ``write_text`` replaces the file atomically.
    """

    def __init__(
        self, file_path: Union[str, Path], timeout: float = 30, create_backup: bool = True
    ):
        """Initialize safe file operation.

        Args:
            file_path: Path to the file to operate on
            timeout: Lock timeout in seconds
            create_backup: Whether to copy the current file before writing
        """
        self.file_path = Path(file_path)
        self.timeout = timeout
        self.create_backup = create_backup
        self.lock_path = Path(f"{self.file_path}.lock")
        self.backup_path = Path(f"{self.file_path}.backup")
        self.temp_path: Optional[Path] = None
        self.lock: Optional[FileLock] = None

    def __enter__(self):
        self.lock = FileLock(self.lock_path, timeout=self.timeout)
        self.lock.acquire()
        logger.debug(f"Acquired lock for {self.file_path}")

        try:
            if self.create_backup and self.file_path.exists():
                shutil.copy2(self.file_path, self.backup_path)
                logger.debug(f"Created backup: {self.backup_path}")
        except OSError:
            self.lock.release()
            raise

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is not None:
                logger.error(f"Write to {self.file_path} failed: {exc_val}")
                self._restore_from_backup()
            elif self.create_backup and self.backup_path.exists():
                os.remove(self.backup_path)

        finally:
            if self.temp_path and self.temp_path.exists():
                os.remove(self.temp_path)

            self.lock.release()
            logger.debug(f"Released lock for {self.file_path}")

    def _restore_from_backup(self):
        if self.create_backup and self.backup_path.exists():
            shutil.move(self.backup_path, self.file_path)
            logger.info(f"Restored {self.file_path} from backup")

    def get_temp_file(self) -> Path:
        """Get a temporary file beside the target, so replacement stays atomic."""
        if self.temp_path is None:
            with tempfile.NamedTemporaryFile(
                dir=self.file_path.parent,
                prefix=f".{self.file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                self.temp_path = Path(tmp.name)

        return self.temp_path

    def write_text(self, content: str, encoding: str = "utf-8"):
        """Write content to a temporary file and move it over the target."""
        temp_file = self.get_temp_file()
        temp_file.write_text(content, encoding=encoding)
        os.replace(temp_file, self.file_path)
        logger.debug(f"Atomically replaced {self.file_path}")


@contextmanager
def safe_edit_context(file_path: Union[str, Path], timeout: float = 30, create_backup: bool = True):
    """Context manager for safe writes to a host file.

    Yields:
        SafeFileOperation instance
    """
    with SafeFileOperation(file_path, timeout, create_backup) as safe_op:
        yield safe_op


class PerformanceMonitor:
    """Monitor tool command performance."""

    def __init__(self):
        self.metrics = {}

    @contextmanager
    def measure_operation(self, operation_name: str):
        """Context manager to measure operation duration.

        Args:
            operation_name: Name of operation being measured
        """
        start_time = time.perf_counter()
        try:
            yield
        finally:
            duration = time.perf_counter() - start_time
            self._record_metric(operation_name, duration)

    def _record_metric(self, operation: str, duration: float):
        if operation not in self.metrics:
            self.metrics[operation] = {
                "count": 0,
                "total_time": 0.0,
                "min_time": float("inf"),
                "max_time": 0.0,
            }

        metrics = self.metrics[operation]
        metrics["count"] += 1
        metrics["total_time"] += duration
        metrics["min_time"] = min(metrics["min_time"], duration)
        metrics["max_time"] = max(metrics["max_time"], duration)

    def get_stats(self, operation: str) -> dict:
        """Get statistics for an operation.

        Returns:
            Dictionary with count, total, average, min and max durations
        """
        if operation not in self.metrics:
            return {}

        metrics = self.metrics[operation]
        return {
            "count": metrics["count"],
            "total_time": metrics["total_time"],
            "average_time": metrics["total_time"] / metrics["count"],
            "min_time": metrics["min_time"],
            "max_time": metrics["max_time"],
        }

    def get_all_stats(self) -> dict:
        return {op: self.get_stats(op) for op in self.metrics}

    def reset(self):
        self.metrics.clear()


# Global performance monitor instance
performance_monitor = PerformanceMonitor()
