"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class EntryKind(str, Enum):
    """Kind of an entry in the repository's root listing."""

    FILE = "file"
    DIRECTORY = "directory"


class Category(str, Enum):
    """The nine scored categories, in report order."""

    CODE_QUALITY = "Code Quality"
    PROJECT_STRUCTURE = "Project Structure"
    DOCUMENTATION = "Documentation"
    TESTING = "Testing"
    GIT_PRACTICES = "Git Practices"
    SECURITY = "Security"
    PERFORMANCE = "Performance"
    ERROR_HANDLING = "Error Handling"
    PRACTICALITY = "Practicality"


class Tier(str, Enum):
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


class IndustryReadiness(str, Enum):
    ACADEMIC = "Academic"
    PORTFOLIO_READY = "Portfolio-Ready"
    INDUSTRY_READY = "Industry-Ready"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RedFlagKind(str, Enum):
    POOR_COMMITS = "poor_commits"
    MISSING_DOCS = "missing_docs"
    SECURITY_ISSUE = "security_issue"
    UNUSED_FILES = "unused_files"
    INACTIVE_REPO = "inactive_repo"


# ── Fetched data ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RepositoryMetadata:
    """Snapshot of ``GET /repos/{owner}/{repo}``."""

    name: str
    full_name: str
    html_url: str
    description: str | None = None
    language: str | None = None
    size_kb: int = 0
    stars: int = 0
    forks: int = 0
    open_issues: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pushed_at: datetime | None = None
    has_license: bool = False
    topics: tuple[str, ...] = ()
    has_issues: bool = False
    has_wiki: bool = False
    has_pages: bool = False
    archived: bool = False
    disabled: bool = False
    default_branch: str = "main"


@dataclass(frozen=True, slots=True)
class CommitRecord:
    """One commit from the recent-commits listing."""

    message: str
    authored_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A single entry of the repository root listing."""

    name: str
    path: str
    kind: EntryKind = EntryKind.FILE
    size: int | None = None


@dataclass(frozen=True, slots=True)
class RepositorySnapshot:
    """Everything fetched for one analysis."""

    metadata: RepositoryMetadata
    commits: tuple[CommitRecord, ...] = ()
    entries: tuple[DirectoryEntry, ...] = ()
    readme_text: str = ""

    @property
    def entry_names(self) -> tuple[str, ...]:
        return tuple(e.name for e in self.entries)

    @property
    def readme_entry(self) -> DirectoryEntry | None:
        return find_readme(self.entries)


def find_readme(entries: tuple[DirectoryEntry, ...] | list[DirectoryEntry]) -> DirectoryEntry | None:
    """Return the first entry whose name starts with ``readme`` (any case)."""
    for entry in entries:
        if entry.name.lower().startswith("readme"):
            return entry
    return None


# ── Analysis output ─────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CategoryScore:
    category: Category
    score: int
    description: str
    icon: str

    @property
    def title(self) -> str:
        return self.category.value


@dataclass(frozen=True, slots=True)
class RoadmapItem:
    title: str
    description: str
    priority: Priority


@dataclass(frozen=True, slots=True)
class RedFlag:
    kind: RedFlagKind
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class ChecklistItem:
    label: str
    present: bool


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """The final report card handed to the presentation layer."""

    owner: str
    repo: str
    repo_name: str
    repo_url: str
    score: int
    tier: Tier
    industry_readiness: IndustryReadiness
    summary: str
    categories: tuple[CategoryScore, ...] = field(default_factory=tuple)
    roadmap: tuple[RoadmapItem, ...] = field(default_factory=tuple)
    red_flags: tuple[RedFlag, ...] = field(default_factory=tuple)
    readme_checklist: tuple[ChecklistItem, ...] = field(default_factory=tuple)
