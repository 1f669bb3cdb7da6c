"""Infrastructure layer: concrete implementations of application ports."""

from modbook.infrastructure.address_book_loader import (
    get_address_book_path,
    load_model,
    load_persons,
    person_from_dict,
)
from modbook.infrastructure.memory_model import InMemoryModel
from modbook.infrastructure.phone import normalize_phone

__all__ = [
    "InMemoryModel",
    "get_address_book_path",
    "load_model",
    "load_persons",
    "normalize_phone",
    "person_from_dict",
]
