"""README completeness checklist — keyword and marker checks."""

from __future__ import annotations

from typing import Callable, Sequence

from gitgrade.domain.entities import ChecklistItem, RepositorySnapshot
from gitgrade.services.templates import CHECKLIST_LABELS

# (raw README text, lowercased README text, lowercased entry names) -> present
_Check = Callable[[str, str, Sequence[str]], bool]


def _mentions(*keywords: str) -> _Check:
    return lambda _raw, lowered, _names: any(k in lowered for k in keywords)


def _mentions_or_file(keyword: str) -> _Check:
    return lambda _raw, lowered, names: keyword in lowered or any(keyword in n for n in names)


_CHECKS: dict[str, _Check] = {
    "Project Overview": lambda raw, _lowered, _names: "##" in raw or len(raw) > 100,
    "Setup Instructions": _mentions("install", "setup"),
    "Usage Examples": _mentions("usage", "example"),
    "Screenshots/Demo": lambda raw, lowered, _names: "![" in raw or "demo" in lowered,
    "API Documentation": _mentions("api"),
    "Contributing Guide": _mentions_or_file("contribut"),
    "License": _mentions_or_file("license"),
    "Future Scope": _mentions("todo", "roadmap", "future"),
}


def build_checklist(snapshot: RepositorySnapshot) -> tuple[ChecklistItem, ...]:
    """Evaluate the eight README checks in display order."""
    raw = snapshot.readme_text
    lowered = raw.lower()
    names = [name.lower() for name in snapshot.entry_names]
    return tuple(
        ChecklistItem(label=label, present=_CHECKS[label](raw, lowered, names))
        for label in CHECKLIST_LABELS
    )
