"""
Design (storage.py)
- Purpose: Load and save the store list to/from disk (versioned JSON document).
- Inputs: Path (from get_stores_path()), Repo for save.
- Outputs: Repo on load; success flag on save.
- Side effects: Reads/writes file. On load failure returns an empty Repo; on save failure
                logs and leaves the in-memory list untouched. Neither raises.
"""

from pathlib import Path
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from .config import STORAGE_FORMAT_VERSION, get_config
from .logging import get_logger
from .models import Store
from .repository import Repo

logger = get_logger(__name__)


class StoreRecord(BaseModel):
    """On-disk shape of one store."""
    model_config = ConfigDict(strict=True)

    name: str = Field(description="Store name (lookup key)")
    address: str = Field(description="Free-form address")
    specialization: str = Field(description="Free-form specialization")
    working_hours: str = Field(description="Working hours; '24/7' means always open")
    phones: List[str] = Field(default_factory=list, description="Phone numbers in insertion order")


class StoresDocument(BaseModel):
    """Top-level document written to the stores file."""
    model_config = ConfigDict(strict=True)

    version: Literal[STORAGE_FORMAT_VERSION] = Field(default=STORAGE_FORMAT_VERSION, description="Format version")
    stores: List[StoreRecord] = Field(default_factory=list, description="Stores in list order")


def get_stores_path() -> Path:
    """
    Resolve path for the stores file. Relative names from the config are taken from the
    current working directory.
    """
    path = Path(get_config().stores_file)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def encode_stores(repo: Repo) -> StoresDocument:
    return StoresDocument(
        stores=[
            StoreRecord(
                name=s.name,
                address=s.address,
                specialization=s.specialization,
                working_hours=s.working_hours,
                phones=list(s.phones),
            )
            for s in repo
        ]
    )


def decode_stores(document: StoresDocument) -> Repo:
    return Repo(
        Store(
            name=r.name,
            address=r.address,
            specialization=r.specialization,
            working_hours=r.working_hours,
            phones=list(r.phones),
        )
        for r in document.stores
    )


def load_stores(path: Path) -> Repo:
    """
    Load stores from the JSON document at path. Returns an empty Repo on missing file
    or on any read/parse/validation error.
    """
    if not path.exists():
        print(f"{path.name} not found. Starting with an empty list.")
        logger.info(f"{path} not found; using an empty list")
        return Repo()
    try:
        with open(path, "rb") as f:
            raw = f.read()
        document = StoresDocument.model_validate_json(raw)
    except (OSError, ValueError) as e:
        # ValueError covers pydantic's ValidationError (bad JSON, wrong shape, unknown version)
        logger.error(f"Error loading data from {path}: {e}. Starting with an empty list.")
        return Repo()
    repo = decode_stores(document)
    print(f"Data loaded successfully from {path.name}")
    logger.info(f"Loaded {len(repo)} stores from {path}")
    return repo


def save_stores(repo: Repo, path: Path) -> bool:
    """
    Save the whole store list to path, replacing previous content. Returns False after
    logging when the list can't be encoded or the file can't be written.
    """
    tmp = path.with_name(path.name + ".tmp")
    try:
        # ValueError: text pydantic can't encode as UTF-8 (e.g. lone surrogates from stdin)
        data = encode_stores(repo).model_dump_json(indent=2)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(data)
        tmp.replace(path)
    except (OSError, ValueError) as e:
        logger.error(f"Error saving data to file {path}: {e}")
        if tmp.exists():
            tmp.unlink(missing_ok=True)
        return False
    print(f"Data successfully saved to file {path.name}")
    logger.info(f"Saved {len(repo)} stores to {path}")
    return True
