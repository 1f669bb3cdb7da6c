"""In-memory implementation of the Model port (no DB)."""

from collections.abc import Callable, Iterable

from modbook.application.errors import DuplicatePersonError, PersonNotFoundError
from modbook.domain import SHOW_ALL_PERSONS, Person


class InMemoryModel:
    """Stores persons in memory. Order preserved by insertion.
    The filtered list is recomputed from the backing list on every read, so it
    always reflects deletions and replacements.
    """

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        self._predicate: Callable[[Person], bool] = SHOW_ALL_PERSONS
        for person in persons:
            self.add_person(person)

    def _position(self, person: Person) -> int:
        try:
            return self._persons.index(person)
        except ValueError:
            raise PersonNotFoundError(f"Person not found: {person.name}") from None

    def get_person_list(self) -> list[Person]:
        return list(self._persons)

    def get_filtered_person_list(self) -> list[Person]:
        return [person for person in self._persons if self._predicate(person)]

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        self._predicate = predicate

    def has_person(self, person: Person) -> bool:
        return person in self._persons

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError(f"Person already exists: {person.name}")
        self._persons.append(person)

    def delete_person(self, person: Person) -> None:
        del self._persons[self._position(person)]

    def set_person(self, target: Person, edited: Person) -> None:
        position = self._position(target)
        if edited != target and self.has_person(edited):
            raise DuplicatePersonError(f"Person already exists: {edited.name}")
        self._persons[position] = edited

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InMemoryModel):
            return NotImplemented
        return (
            self._persons == other._persons
            and self.get_filtered_person_list() == other.get_filtered_person_list()
        )
