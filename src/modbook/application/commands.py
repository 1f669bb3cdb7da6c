"""Commands executed against the model: delete, list and filter."""

import logging
from dataclasses import dataclass
from typing import Protocol

from modbook.application.dto import (
    ByModuleCode,
    CommandResult,
    DeleteRequest,
    IndexRange,
    SingleIndex,
)
from modbook.application.errors import CommandError
from modbook.application.messages import (
    MESSAGE_DELETE_SUCCESS,
    MESSAGE_EDIT_WOULD_DUPLICATE,
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_INVALID_RANGE,
    MESSAGE_LIST_SUCCESS,
    MESSAGE_NO_SUCH_MODULE_CODE,
    MESSAGE_NUMBER_DELETED_PERSON,
    MESSAGE_NUMBER_EDITED_PERSON,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
)
from modbook.application.ports import Model
from modbook.domain import SHOW_ALL_PERSONS, Person, PersonPredicate

logger = logging.getLogger(__name__)


class Command(Protocol):
    def execute(self, model: Model) -> CommandResult:
        ...


def _listing(persons: list[Person]) -> str:
    return "".join(MESSAGE_DELETE_SUCCESS % person for person in persons)


@dataclass(frozen=True)
class DeleteCommand:
    """
    Deletes persons by displayed index, by inclusive index range, or by module code.

    A module-code delete removes the code from every matching person. Persons
    holding other codes are kept with the code dropped (edited); persons whose
    only code it was are deleted. The display filter is reset to show all
    persons after a successful run.
    """

    request: DeleteRequest

    def execute(self, model: Model) -> CommandResult:
        if isinstance(self.request, ByModuleCode):
            feedback = self._delete_by_module_code(model, self.request)
        else:
            feedback = self._delete_range(model, *self._bounds())
        model.update_filtered_person_list(SHOW_ALL_PERSONS)
        return CommandResult(feedback=feedback)

    def _bounds(self) -> tuple[int, int]:
        if isinstance(self.request, SingleIndex):
            return self.request.index.zero_based, self.request.index.zero_based
        if isinstance(self.request, IndexRange):
            return self.request.start.zero_based, self.request.end.zero_based
        raise TypeError(f"Unsupported delete request: {self.request!r}")

    def _delete_range(self, model: Model, first: int, last: int) -> str:
        shown = model.get_filtered_person_list()
        size = len(shown)
        if first >= size:
            raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        if first > last or last >= size:
            raise CommandError(MESSAGE_INVALID_RANGE)

        targets = shown[first : last + 1]
        # Highest position first so earlier slots stay where they were.
        for person in reversed(targets):
            model.delete_person(person)
        logger.info(
            "Deleted %d person(s) at displayed positions %d-%d",
            len(targets),
            first + 1,
            last + 1,
        )
        return (MESSAGE_NUMBER_DELETED_PERSON % len(targets)) + _listing(targets)

    def _delete_by_module_code(self, model: Model, request: ByModuleCode) -> str:
        model.update_filtered_person_list(request.predicate)
        matched = model.get_filtered_person_list()
        if not matched:
            model.update_filtered_person_list(SHOW_ALL_PERSONS)
            raise CommandError(MESSAGE_NO_SUCH_MODULE_CODE)

        replacements = {
            person: person.without_module_code(request.module_code)
            for person in matched
            if len(person.module_codes) > 1
        }
        # Every replacement is checked before the model is touched.
        for person, replacement in replacements.items():
            if model.has_person(replacement):
                model.update_filtered_person_list(SHOW_ALL_PERSONS)
                raise CommandError(
                    MESSAGE_EDIT_WOULD_DUPLICATE % (request.module_code, person.name)
                )

        deleted: list[Person] = []
        edited: list[Person] = []
        for person in reversed(matched):
            if person in replacements:
                model.set_person(person, replacements[person])
                edited.insert(0, replacements[person])
            else:
                model.delete_person(person)
                deleted.insert(0, person)
        logger.info(
            "Module code %s: deleted %d, edited %d",
            request.module_code.value,
            len(deleted),
            len(edited),
        )
        return (
            (MESSAGE_NUMBER_DELETED_PERSON % len(deleted))
            + _listing(deleted)
            + (MESSAGE_NUMBER_EDITED_PERSON % len(edited))
            + _listing(edited)
        )


@dataclass(frozen=True)
class ListCommand:
    """Shows every person."""

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(SHOW_ALL_PERSONS)
        return CommandResult(feedback=MESSAGE_LIST_SUCCESS)


@dataclass(frozen=True)
class _AllOf:
    predicates: tuple[PersonPredicate, ...]

    def __call__(self, person: Person) -> bool:
        return all(predicate(person) for predicate in self.predicates)


@dataclass(frozen=True)
class FilterCommand:
    """Shows the persons matching every predicate."""

    predicates: tuple[PersonPredicate, ...]

    def __post_init__(self):
        object.__setattr__(self, "predicates", tuple(self.predicates))

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(_AllOf(self.predicates))
        count = len(model.get_filtered_person_list())
        return CommandResult(feedback=MESSAGE_PERSONS_LISTED_OVERVIEW % count)
