"""Load and validate the YAML address book used to seed the in-memory model."""

import logging
import os
from pathlib import Path

import yaml

from modbook.domain import (
    Email,
    ModuleCode,
    Name,
    Person,
    Phone,
    Remark,
    Tag,
    TeleHandle,
)
from modbook.infrastructure.memory_model import InMemoryModel
from modbook.infrastructure.phone import normalize_phone

logger = logging.getLogger(__name__)

DEFAULT_PHONE_REGION = "SG"


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parents[3]


def get_address_book_path() -> Path:
    """Return path to the address book YAML (ADDRESS_BOOK_PATH env or data/addressbook.yaml)."""
    default = _repo_root() / "data" / "addressbook.yaml"
    path = os.environ.get("ADDRESS_BOOK_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def get_default_phone_region() -> str | None:
    """Region for numbers without a country code (DEFAULT_PHONE_REGION env, SG if unset)."""
    region = os.environ.get("DEFAULT_PHONE_REGION", DEFAULT_PHONE_REGION).strip()
    return region.upper() or None


def _as_list(value, what: str) -> list:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ValueError(f"'{what}' must be a list")
    return value


def person_from_dict(entry: dict, default_region: str | None = None) -> Person:
    """Build a Person from one YAML entry. Raises ValueError on missing or invalid fields."""
    if not isinstance(entry, dict):
        raise ValueError("entry must be a mapping")
    for required in ("name", "email"):
        if not entry.get(required):
            raise ValueError(f"missing '{required}'")

    phone = None
    raw_phone = entry.get("phone")
    if raw_phone is not None and str(raw_phone).strip():
        phone = Phone(normalize_phone(str(raw_phone), default_region))

    return Person(
        name=Name(str(entry["name"])),
        email=Email(str(entry["email"])),
        module_codes=frozenset(
            ModuleCode(str(code)) for code in _as_list(entry.get("module_codes"), "module_codes")
        ),
        phone=phone,
        tele_handle=TeleHandle(str(entry.get("tele_handle") or "")),
        remark=Remark(str(entry.get("remark") or "")),
        tags=frozenset(Tag(str(tag)) for tag in _as_list(entry.get("tags"), "tags")),
    )


def load_persons(path: Path | None = None, default_region: str | None = None) -> list[Person]:
    """Load the address book YAML and return its persons in file order."""
    if path is None:
        path = get_address_book_path()
    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw)
    if data is None:
        return []
    if not isinstance(data, dict):
        raise ValueError("Address book YAML must be a dict")
    entries = data.get("persons") or []
    if not isinstance(entries, list):
        raise ValueError("Address book 'persons' must be a list")

    persons: list[Person] = []
    for position, entry in enumerate(entries, start=1):
        try:
            person = person_from_dict(entry, default_region)
        except ValueError as exc:
            raise ValueError(f"Person #{position}: {exc}") from exc
        if person in persons:
            raise ValueError(f"Person #{position}: duplicate of an earlier entry")
        persons.append(person)
    return persons


def load_model(path: Path | None = None) -> InMemoryModel:
    """Build an InMemoryModel from the address book file. Missing file gives an empty model."""
    if path is None:
        path = get_address_book_path()
    if not path.exists():
        logger.warning("Address book %s not found; starting empty", path)
        return InMemoryModel()
    persons = load_persons(path, default_region=get_default_phone_region())
    logger.info("Loaded %d person(s) from %s", len(persons), path)
    return InMemoryModel(persons)
