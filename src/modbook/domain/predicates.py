"""Person predicates used to filter the displayed list.

Each predicate is a frozen dataclass, so two predicates built from the same
keywords compare equal. Any ShowAllPersons() equals SHOW_ALL_PERSONS.
"""

from dataclasses import dataclass

from modbook.domain.entities import Person


@dataclass(frozen=True)
class ShowAllPersons:
    """Matches every person."""

    def __call__(self, person: Person) -> bool:
        return True


SHOW_ALL_PERSONS = ShowAllPersons()


def _unbracket(keyword: str) -> str:
    keyword = keyword.strip()
    if keyword.startswith("[") and keyword.endswith("]"):
        return keyword[1:-1].strip()
    return keyword


@dataclass(frozen=True)
class ModuleCodesContainsKeywordsPredicate:
    """
    Matches a person holding any of the given module codes.
    Keywords may be in the rendered form ([CS2040S]) or bare (CS2040S);
    comparison is case-insensitive and exact per code.
    """

    keywords: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "keywords", tuple(self.keywords))

    def __call__(self, person: Person) -> bool:
        wanted = {_unbracket(k).upper() for k in self.keywords}
        return any(code.value in wanted for code in person.module_codes)


@dataclass(frozen=True)
class TagsContainsKeywordsPredicate:
    """Matches a person whose tags cover every keyword (case-insensitive)."""

    keywords: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "keywords", tuple(self.keywords))

    def __call__(self, person: Person) -> bool:
        tag_names = {tag.name.lower() for tag in person.tags}
        return all(keyword.lower() in tag_names for keyword in self.keywords)


PersonPredicate = (
    ShowAllPersons
    | ModuleCodesContainsKeywordsPredicate
    | TagsContainsKeywordsPredicate
)
