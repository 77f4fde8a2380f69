"""Company file persistence.

INVARIANT: A save is a full-state overwrite, never an incremental patch.
A missing file loads as an empty company; every other read failure is a
:class:`~staffctl.domain.errors.SerializeError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from staffctl.domain.company import Company
from staffctl.domain.errors import SerializeError
from staffctl.domain.snapshot import CompanySnapshot, from_snapshot, to_snapshot

logger = logging.getLogger(__name__)


def save_company(company: Company, path: Path) -> None:
    """Write *company* to *path* as indented UTF-8 JSON.

    Creates parent directories if they don't exist.
    """
    rendered = to_snapshot(company).to_json()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rendered + "\n", encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot write {path}: {exc.strerror or exc}"
        raise SerializeError(msg) from exc
    logger.debug(
        "Saved company to %s (%d departments, %d staffs)",
        path,
        len(company.departments),
        len(company.staffs),
    )


def load_company(path: Path) -> Company:
    """Read a company from *path*.

    Returns a fresh empty company when *path* does not exist. A leading
    UTF-8 byte order mark is accepted.
    """
    if not path.exists():
        logger.info("No data file at %s, starting with an empty company", path)
        return Company()
    try:
        raw = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise SerializeError(msg) from exc
    try:
        company = from_snapshot(CompanySnapshot.from_json(raw))
    except SerializeError:
        logger.warning("Failed to load company from %s", path, exc_info=True)
        raise
    logger.debug("Loaded %r from %s", company, path)
    return company


class CompanyStore:
    """Lazily loaded company bound to a data file.

    Used by callers that persist after every mutation (CLI subcommands,
    MCP tools). The company is read on first access.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._company: Company | None = None

    @property
    def company(self) -> Company:
        """The company instance (loaded lazily on first access)."""
        if self._company is None:
            self._company = load_company(self.path)
        return self._company

    def save(self) -> None:
        save_company(self.company, self.path)

    def discard(self) -> None:
        """Drop the in-memory company; the next access reloads from disk."""
        self._company = None
