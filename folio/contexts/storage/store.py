"""
Persistent SQLite store for portfolios.

Stores each portfolio as one row: owner, listing fields (name, template,
timestamps) and the full document as a JSON payload, so every model field,
including the complete custom theme, survives a save/load round trip.
"""

import json
import os
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from folio.contexts.portfolio.exceptions import ConfigurationError, StoreError
from folio.contexts.portfolio.model import Portfolio
from folio.contexts.storage.logger import _log_error, log_store_operation
from folio.utils.timestamp import now_ms

load_dotenv()
FOLIO_DB_PATH = Path(os.getenv("FOLIO_DB_PATH", "outs/folio.db"))


@dataclass(frozen=True)
class Owner:
    """
    Authenticated user handle supplied by the identity provider.

    Attributes:
        owner_id: Opaque user id
        display_label: Name shown in the dashboard
    """

    owner_id: str
    display_label: str

    @classmethod
    def from_identity(
        cls, owner_id: str, display_name: Optional[str] = None, email: Optional[str] = None
    ) -> "Owner":
        """Build an owner, labelling it by display name, then email, then "User"."""
        return cls(owner_id=owner_id, display_label=display_name or email or "User")


class PortfolioStore:
    """
    SQLite store for portfolio documents.

    The database file and schema are created on first use. Every failure of the
    underlying database is raised as StoreError; callers keep their in-memory
    portfolio and may retry.
    """

    def __init__(self, db_path: Path = None):
        """
        Open (or create) a store.

        Args:
            db_path: Path to SQLite database file (default: FOLIO_DB_PATH)

        Raises:
            StoreError: If the database cannot be opened or initialized
        """
        if db_path is None:
            db_path = FOLIO_DB_PATH
        self.db_path = Path(db_path)

        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self.conn = sqlite3.connect(str(self.db_path))
            self.conn.row_factory = sqlite3.Row  # Enable column access by name
            self._create_schema()
        except (OSError, sqlite3.Error) as e:
            raise StoreError(f"Cannot open store at {self.db_path}", original_error=e) from e

    def _create_schema(self) -> None:
        self.conn.execute(
            """
            CREATE TABLE IF NOT EXISTS portfolios (
                id TEXT PRIMARY KEY,
                owner_id TEXT NOT NULL,

                name TEXT NOT NULL,
                template_id TEXT NOT NULL,
                payload TEXT NOT NULL,

                last_modified INTEGER NOT NULL,
                created_at INTEGER NOT NULL,
                updated_at INTEGER NOT NULL,
                revision INTEGER NOT NULL
            )
        """
        )
        self.conn.execute("CREATE INDEX IF NOT EXISTS idx_owner_id ON portfolios(owner_id)")
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "PortfolioStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _next_revision(self) -> int:
        row = self.conn.execute("SELECT COALESCE(MAX(revision), 0) + 1 FROM portfolios").fetchone()
        return row[0]

    def create(self, owner_id: str, portfolio: Portfolio) -> None:
        """
        Insert a new portfolio for an owner.

        Raises:
            StoreError: If a portfolio with the same id exists or the insert fails
        """
        now = now_ms()
        try:
            with self.conn:
                self.conn.execute(
                    """
                    INSERT INTO portfolios (
                        id, owner_id, name, template_id, payload,
                        last_modified, created_at, updated_at, revision
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        portfolio.id,
                        owner_id,
                        portfolio.name,
                        portfolio.template_id,
                        json.dumps(portfolio.to_dict()),
                        portfolio.last_modified,
                        now,
                        now,
                        self._next_revision(),
                    ),
                )
        except sqlite3.IntegrityError as e:
            raise StoreError("Portfolio already exists", portfolio.id, e) from e
        except sqlite3.Error as e:
            raise StoreError("Failed to create portfolio", portfolio.id, e) from e
        log_store_operation("create", portfolio.id, owner_id)

    def update(self, owner_id: str, portfolio: Portfolio) -> None:
        """
        Replace an existing portfolio owned by owner_id.

        Raises:
            StoreError: If the portfolio doesn't exist for this owner or the update fails
        """
        try:
            with self.conn:
                cursor = self.conn.execute(
                    """
                    UPDATE portfolios
                    SET name = ?, template_id = ?, payload = ?,
                        last_modified = ?, updated_at = ?, revision = ?
                    WHERE id = ? AND owner_id = ?
                    """,
                    (
                        portfolio.name,
                        portfolio.template_id,
                        json.dumps(portfolio.to_dict()),
                        portfolio.last_modified,
                        now_ms(),
                        self._next_revision(),
                        portfolio.id,
                        owner_id,
                    ),
                )
        except sqlite3.Error as e:
            raise StoreError("Failed to update portfolio", portfolio.id, e) from e

        if cursor.rowcount == 0:
            raise StoreError(f"Portfolio not found for owner {owner_id}", portfolio.id)
        log_store_operation("update", portfolio.id, owner_id)

    def delete(self, portfolio_id: str) -> bool:
        """
        Delete a portfolio.

        Returns:
            True if a portfolio was deleted, False if none had that id

        Raises:
            StoreError: If the delete fails
        """
        try:
            with self.conn:
                cursor = self.conn.execute("DELETE FROM portfolios WHERE id = ?", (portfolio_id,))
        except sqlite3.Error as e:
            raise StoreError("Failed to delete portfolio", portfolio_id, e) from e
        log_store_operation("delete", portfolio_id)
        return cursor.rowcount > 0

    def get(self, portfolio_id: str) -> Optional[Portfolio]:
        """
        Load one portfolio by id.

        Returns:
            Portfolio, or None if not found

        Raises:
            StoreError: If the query fails or the stored document is invalid
        """
        try:
            row = self.conn.execute(
                "SELECT payload FROM portfolios WHERE id = ?", (portfolio_id,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StoreError("Failed to load portfolio", portfolio_id, e) from e

        if row is None:
            return None
        try:
            return Portfolio.from_dict(json.loads(row["payload"]))
        except (ConfigurationError, ValueError, KeyError, TypeError) as e:
            raise StoreError("Stored portfolio is invalid", portfolio_id, e) from e

    def exists(self, portfolio_id: str) -> bool:
        try:
            row = self.conn.execute(
                "SELECT 1 FROM portfolios WHERE id = ?", (portfolio_id,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StoreError("Failed to query portfolio", portfolio_id, e) from e
        return row is not None

    def list(self, owner_id: str) -> List[Portfolio]:
        """
        List an owner's portfolios, most recently created or updated first.

        Stored documents that no longer load are skipped and logged.

        Raises:
            StoreError: If the query fails
        """
        try:
            rows = self.conn.execute(
                "SELECT id, payload FROM portfolios WHERE owner_id = ? ORDER BY revision DESC",
                (owner_id,),
            ).fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to list portfolios for owner {owner_id}", original_error=e) from e

        portfolios = []
        errors = []
        for row in rows:
            try:
                portfolios.append(Portfolio.from_dict(json.loads(row["payload"])))
            except (ConfigurationError, ValueError, KeyError, TypeError) as e:
                errors.append((row["id"], str(e)))

        if errors:
            error_summary = "\n".join(f"  - {pid}: {error}" for pid, error in errors)
            _log_error(f"Skipped {len(errors)} unreadable portfolio(s):\n{error_summary}")

        return portfolios
