"""Data models for documents and batch runs."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Document:
    """A stored document with a single mutable text body.

    Attributes:
        id: Opaque identifier assigned by the store
        body: The document's text content
    """

    id: str
    body: str = ""


@dataclass
class DocumentOutcome:
    """What happened to one document during a batch run.

    Attributes:
        id: Document identifier
        changed: Whether stripping altered the body
        written: Whether the new body was persisted
        error: Store error message if the read or write failed
    """

    id: str
    changed: bool = False
    written: bool = False
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class BatchResult:
    """Aggregate result of one batch run."""

    outcomes: list[DocumentOutcome] = field(default_factory=list)
    dry_run: bool = False

    @property
    def scanned(self) -> int:
        return len(self.outcomes)

    @property
    def changed(self) -> int:
        return sum(1 for o in self.outcomes if o.changed)

    @property
    def written(self) -> int:
        return sum(1 for o in self.outcomes if o.written)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.failed)

    @property
    def success(self) -> bool:
        """True when no document failed."""
        return self.failed == 0

    @property
    def changed_ids(self) -> list[str]:
        return [o.id for o in self.outcomes if o.changed]

    @property
    def failures(self) -> list[DocumentOutcome]:
        return [o for o in self.outcomes if o.failed]

    def add(self, outcome: DocumentOutcome) -> None:
        """Record the outcome for one document."""
        self.outcomes.append(outcome)
