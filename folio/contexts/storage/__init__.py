"""
Storage Context

Responsibilities:
- Persist portfolios per owner (create, update, delete, list, get)
- Import/export portfolios as YAML files

Owns:
- SQLite schema for portfolio documents
- Owner handle from the identity provider

Never:
- Modifies a portfolio's contents (only stores what it is given)
- Decides when to save (editing context does)
"""

from folio.contexts.storage.store import FOLIO_DB_PATH, Owner, PortfolioStore
from folio.contexts.storage.yaml_io import load_portfolio_yaml, save_portfolio_yaml

__all__ = [
    "FOLIO_DB_PATH",
    "Owner",
    "PortfolioStore",
    "load_portfolio_yaml",
    "save_portfolio_yaml",
]
