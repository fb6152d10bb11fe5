from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
import sys
from typing import List, Optional

_DATACLASS_KWARGS = {"slots": True} if sys.version_info >= (3, 10) else {}

DEFAULT_PLACEHOLDER_PATH = "./placeholder.png"


class EntryKind(str, Enum):
    IMAGE = "image"
    EXCLUDED = "excluded"
    PASS_THROUGH = "pass_through"


@dataclass(**_DATACLASS_KWARGS)
class RewriteResult:
    path: Path
    kept: int = 0
    replaced: int = 0
    excluded: List[str] = field(default_factory=list)
    bytes_written: int = 0


@dataclass(**_DATACLASS_KWARGS)
class JobOutcome:
    path: Path
    result: Optional[RewriteResult] = None
    error: Optional[BaseException] = None
    removed: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(**_DATACLASS_KWARGS)
class RunSummary:
    outcomes: List[JobOutcome] = field(default_factory=list)
    traversal_errors: List[OSError] = field(default_factory=list)

    @property
    def discovered(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.ok)

    @property
    def removed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.removed)

    @property
    def entries_replaced(self) -> int:
        return sum(outcome.result.replaced for outcome in self.outcomes if outcome.result)

    @property
    def entries_excluded(self) -> int:
        return sum(len(outcome.result.excluded) for outcome in self.outcomes if outcome.result)


@dataclass(**_DATACLASS_KWARGS)
class ScrubSettings:
    """
    Resolved options for a single run.

    ``workers`` left as None means one worker per available CPU.
    """

    root: Path = Path(".")
    placeholder_path: str = DEFAULT_PLACEHOLDER_PATH
    workers: int | None = None
    preserve_on_failure: bool = False
    verbose: bool = False
