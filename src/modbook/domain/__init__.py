"""Domain layer: entities, value objects and predicates. No dependencies on outer layers."""

from modbook.domain.entities import (
    Email,
    Index,
    ModuleCode,
    Name,
    Person,
    Phone,
    Remark,
    Tag,
    TeleHandle,
)
from modbook.domain.predicates import (
    SHOW_ALL_PERSONS,
    ModuleCodesContainsKeywordsPredicate,
    PersonPredicate,
    ShowAllPersons,
    TagsContainsKeywordsPredicate,
)

__all__ = [
    "SHOW_ALL_PERSONS",
    "Email",
    "Index",
    "ModuleCode",
    "ModuleCodesContainsKeywordsPredicate",
    "Name",
    "Person",
    "PersonPredicate",
    "Phone",
    "Remark",
    "ShowAllPersons",
    "Tag",
    "TagsContainsKeywordsPredicate",
    "TeleHandle",
]
