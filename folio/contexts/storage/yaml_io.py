"""
YAML import/export of portfolio documents.

Uses the same dict form as the SQLite payload, so a file written here loads
back into an equal Portfolio. Values are read without interpolation; text such
as "${name}" in a summary stays literal.
"""

from pathlib import Path

from omegaconf import OmegaConf

from folio.contexts.portfolio.exceptions import ConfigurationError
from folio.contexts.portfolio.model import Portfolio
from folio.contexts.storage.logger import _log_info


def load_portfolio_yaml(path: Path) -> Portfolio:
    """
    Load a portfolio from a YAML file.

    Args:
        path: YAML file path

    Returns:
        Portfolio

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If the document is invalid (missing id, malformed
            collections, custom template without theme)
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Portfolio file not found: {path}")

    config = OmegaConf.load(path)
    data = OmegaConf.to_container(config, resolve=False)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid portfolio file {path}: expected a mapping at the top level")

    try:
        portfolio = Portfolio.from_dict(data)
    except ConfigurationError:
        raise
    except KeyError as e:
        raise ConfigurationError(f"Invalid portfolio file {path}: missing field {e}") from e
    except (TypeError, ValueError, AttributeError) as e:
        raise ConfigurationError(f"Invalid portfolio file {path}: {e}") from e
    _log_info(f"Loaded portfolio '{portfolio.name}' from {path}")
    return portfolio


def save_portfolio_yaml(portfolio: Portfolio, path: Path) -> Path:
    """
    Write a portfolio to a YAML file, creating parent directories.

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    config = OmegaConf.create(portfolio.to_dict())
    OmegaConf.save(config, path)

    # Strip trailing blank lines
    content = path.read_text(encoding="utf-8").rstrip("\n") + "\n"
    path.write_text(content, encoding="utf-8")

    _log_info(f"Saved portfolio '{portfolio.name}' to {path}")
    return path
