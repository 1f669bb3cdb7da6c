"""
Modbook core: clean-architecture layout.

- domain: Person, its value objects, and the predicates that filter it. No outer dependencies.
- application: commands (delete, list, filter), parsers, the Model port, CommandService.
- infrastructure: adapters (InMemoryModel, YAML address book loader, phone normalization).
"""

from modbook.application import (
    AddressBookParser,
    CommandError,
    CommandResult,
    CommandService,
    DeleteCommand,
    Model,
    ParseError,
)
from modbook.domain import ModuleCode, Person
from modbook.infrastructure import InMemoryModel, load_model

__all__ = [
    "AddressBookParser",
    "CommandError",
    "CommandResult",
    "CommandService",
    "DeleteCommand",
    "InMemoryModel",
    "Model",
    "ModuleCode",
    "ParseError",
    "Person",
    "load_model",
]
