"""
Batch add - generate and apply several content entries in turn.

Entries are processed strictly one after another, so the duplicate
check for each entry completes before any of its files are written.
A failing entry is counted and the batch moves on.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from chuk_mcp_copy.errors import EntryResolutionError
from chuk_mcp_copy.generation import ContentGenerator
from chuk_mcp_copy.models.content import ContentMatrix
from chuk_mcp_copy.models.token import ApplyResult, PreviewResult
from chuk_mcp_copy.store.repository import TokenRepository

logger = logging.getLogger(__name__)

# Called with the entry, its content and the preview; return False to skip
ApprovalCallback = Callable[["ResolvedEntry", ContentMatrix, PreviewResult], Awaitable[bool]]


@dataclass(frozen=True)
class ResolvedEntry:
    """A raw name resolved into domain, entry name and title."""

    domain: str
    name: str
    neutral_title: str

    @property
    def path(self) -> str:
        return f"{self.domain}.{self.name}"


class EntryStatus(str, Enum):
    """Outcome of one batch entry."""

    ADDED = "added"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class EntryOutcome:
    entry: ResolvedEntry
    status: EntryStatus
    result: ApplyResult | None = None
    error: str | None = None


@dataclass
class BatchSummary:
    """Per-entry outcomes and counts for a batch."""

    outcomes: list[EntryOutcome] = field(default_factory=list)

    def _count(self, status: EntryStatus) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def added(self) -> int:
        return self._count(EntryStatus.ADDED)

    @property
    def skipped(self) -> int:
        return self._count(EntryStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(EntryStatus.FAILED)

    def __str__(self) -> str:
        return f"{self.added} added, {self.skipped} skipped, {self.failed} failed"


def resolve_entry(raw: str, default_domain: str | None = None) -> ResolvedEntry:
    """
    Resolve a raw name into an entry.

    - "nav.dashboard" -> domain "nav", name "dashboard"
    - "Privacy Policy" with default domain "legal" -> name "privacy-policy"

    Raises:
        EntryResolutionError: If there is no dot and no default domain
    """
    trimmed = raw.strip()

    if "." in trimmed:
        domain, _, last = trimmed.rpartition(".")
        return ResolvedEntry(domain=domain, name=last.lower(), neutral_title=trimmed)

    if default_domain:
        name = re.sub(r"\s+", "-", trimmed.lower())
        return ResolvedEntry(domain=default_domain, name=name, neutral_title=trimmed)

    raise EntryResolutionError(trimmed)


def parse_names(names: list[str], input_file: Path | None = None) -> list[str]:
    """
    Collect raw names from a file (one per line) or comma-separated arguments.

    Blank lines and empty items are dropped.
    """
    if input_file is not None:
        with open(input_file, encoding="utf-8") as f:
            return [line.strip() for line in f if line.strip()]

    result: list[str] = []
    for arg in names:
        result.extend(part.strip() for part in arg.split(",") if part.strip())
    return result


class BatchRunner:
    """Runs generate -> preview -> approve -> apply for each entry."""

    def __init__(
        self,
        generator: ContentGenerator,
        repository: TokenRepository,
        approve: ApprovalCallback | None = None,
    ):
        """
        Initialize the runner.

        Args:
            generator: Content generator
            repository: Token repository to apply into
            approve: Optional approval callback (default: approve everything)
        """
        self.generator = generator
        self.repository = repository
        self.approve = approve

    async def run_entry(self, entry: ResolvedEntry, dry_run: bool = False) -> EntryOutcome:
        """Process one entry; errors become a FAILED outcome."""
        try:
            content = await self.generator.generate(
                domain=entry.domain,
                name=entry.name,
                neutral_title=entry.neutral_title,
            )
            preview = self.repository.preview(entry.domain, entry.name, content)
            logger.info(
                f"{entry.path}: will write {preview.total_tokens} tokens "
                f"across {len(preview.files)} files"
            )

            if self.approve is not None and not await self.approve(entry, content, preview):
                logger.info(f"{entry.path}: skipped")
                return EntryOutcome(entry=entry, status=EntryStatus.SKIPPED)

            result = await self.repository.apply(entry.domain, entry.name, content, dry_run=dry_run)
            return EntryOutcome(entry=entry, status=EntryStatus.ADDED, result=result)
        except Exception as e:
            logger.error(f"{entry.path}: {e}")
            return EntryOutcome(entry=entry, status=EntryStatus.FAILED, error=str(e))

    async def run(self, entries: list[ResolvedEntry], dry_run: bool = False) -> BatchSummary:
        """
        Process entries one at a time.

        Args:
            entries: Resolved entries
            dry_run: Check and count only, write nothing

        Returns:
            BatchSummary with one outcome per entry
        """
        summary = BatchSummary()
        for entry in entries:
            summary.outcomes.append(await self.run_entry(entry, dry_run=dry_run))

        logger.info(f"Batch complete: {summary}")
        return summary
