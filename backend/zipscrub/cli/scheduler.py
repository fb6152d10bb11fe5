from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from ..scanner.filters import is_archive_name
from ..scanner.models import JobOutcome, RewriteResult, RunSummary
from ..scanner.rewriter import rewrite_archive
from .failure_policy import DeleteOnFailure, FailurePolicy

RewriteFunc = Callable[[Path, bytes], RewriteResult]

logger = logging.getLogger(__name__)


def default_worker_count() -> int:
    return os.cpu_count() or 1


def iter_archives(
    root: Path | str,
    on_error: Optional[Callable[[OSError], None]] = None,
) -> Iterator[Path]:
    """Yield every regular .zip file below ``root`` in sorted, depth-first order.

    A ``root`` that is itself a .zip file is yielded on its own. Directories
    that cannot be listed are reported through ``on_error`` and skipped; the
    rest of the tree is still visited. FIFOs and device nodes are ignored.
    """
    root_path = Path(root)
    if root_path.is_file():
        if is_archive_name(root_path.name):
            yield root_path
        return

    for current_root, dirs, files in os.walk(root, onerror=on_error):
        dirs.sort()
        current_path = Path(current_root)
        for filename in sorted(files):
            candidate = current_path / filename
            if is_archive_name(filename) and candidate.is_file():
                yield candidate


class ArchiveScheduler:
    """
    Discover archives under a root directory and rewrite them on a thread pool.

    Traversal runs in the calling thread. A bounded semaphore holds it back
    whenever ``workers`` rewrites are already in flight, so at most that many
    archives are being processed (and buffered in memory) at once. Each job
    catches its own failure and hands it to the failure policy; ``run``
    returns only after every dispatched job has finished.
    """

    def __init__(
        self,
        placeholder: bytes,
        *,
        workers: int | None = None,
        failure_policy: FailurePolicy | None = None,
        rewrite: RewriteFunc = rewrite_archive,
    ) -> None:
        if workers is not None and workers < 1:
            raise ValueError("workers must be at least 1")
        self.placeholder = placeholder
        self.workers = workers or default_worker_count()
        self.failure_policy = failure_policy or DeleteOnFailure()
        self._rewrite = rewrite

    def run(self, root: Path | str) -> RunSummary:
        summary = RunSummary()
        slots = threading.BoundedSemaphore(self.workers)
        futures: List[Future] = []

        def _record_walk_error(exc: OSError) -> None:
            logger.error("Error walking the directory: %s", exc)
            summary.traversal_errors.append(exc)

        def _release_slot(_future: Future) -> None:
            slots.release()

        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="zipscrub") as pool:
            for archive in iter_archives(root, on_error=_record_walk_error):
                slots.acquire()
                try:
                    future = pool.submit(self._run_job, archive)
                except RuntimeError:
                    slots.release()
                    raise
                future.add_done_callback(_release_slot)
                futures.append(future)
            wait(futures)

        summary.outcomes = [future.result() for future in futures]
        logger.debug(
            "Finished %d archive(s): %d rewritten, %d failed",
            summary.discovered,
            summary.succeeded,
            summary.failed,
        )
        return summary

    def _run_job(self, archive: Path) -> JobOutcome:
        logger.debug("Processing %s", archive)
        try:
            result = self._rewrite(archive, self.placeholder)
        except Exception as exc:
            logger.error("Error processing zip file %s: %s", archive, exc)
            removed = self.failure_policy.handle(archive, exc)
            return JobOutcome(path=archive, error=exc, removed=removed)
        return JobOutcome(path=archive, result=result)
