"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol

from modbook.domain import Person


class Model(Protocol):
    """Owns the address book and the filtered view shown to the user."""

    def get_person_list(self) -> list[Person]:
        """Return every person in the address book, in insertion order."""
        ...

    def get_filtered_person_list(self) -> list[Person]:
        """Return the persons currently displayed, in address book order."""
        ...

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        """Display only the persons matching predicate."""
        ...

    def has_person(self, person: Person) -> bool:
        ...

    def add_person(self, person: Person) -> None:
        """Append a person. Raises DuplicatePersonError if already present."""
        ...

    def delete_person(self, person: Person) -> None:
        """Remove a person. Raises PersonNotFoundError if absent."""
        ...

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace target with edited in the same slot."""
        ...
