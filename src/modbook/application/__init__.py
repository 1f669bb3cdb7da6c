"""Application layer: commands, parsers, ports and DTOs. Depends only on domain."""

from modbook.application.command_service import CommandService
from modbook.application.commands import (
    Command,
    DeleteCommand,
    FilterCommand,
    ListCommand,
)
from modbook.application.dto import (
    ByModuleCode,
    CommandResult,
    DeleteRequest,
    IndexRange,
    SingleIndex,
)
from modbook.application.errors import (
    CommandError,
    DuplicatePersonError,
    ParseError,
    PersonNotFoundError,
)
from modbook.application.parser import (
    AddressBookParser,
    DeleteCommandParser,
    FilterCommandParser,
    parse_index,
    parse_module_code,
    parse_tag,
    tokenize,
)
from modbook.application.ports import Model

__all__ = [
    "AddressBookParser",
    "ByModuleCode",
    "Command",
    "CommandError",
    "CommandResult",
    "CommandService",
    "DeleteCommand",
    "DeleteCommandParser",
    "DeleteRequest",
    "DuplicatePersonError",
    "FilterCommand",
    "FilterCommandParser",
    "IndexRange",
    "ListCommand",
    "Model",
    "ParseError",
    "PersonNotFoundError",
    "SingleIndex",
    "parse_index",
    "parse_module_code",
    "parse_tag",
    "tokenize",
]
