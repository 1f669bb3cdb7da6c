"""Turns command text into command objects.

Arguments follow a prefix syntax: `m/CS2040S t/friends`. A prefix only counts
when it starts the text or follows whitespace, so `abc m/x` has one prefix and
`abcm/x` has none.
"""

import re
from dataclasses import dataclass, field

from modbook.application.commands import (
    Command,
    DeleteCommand,
    FilterCommand,
    ListCommand,
)
from modbook.application.dto import ByModuleCode, IndexRange, SingleIndex
from modbook.application.errors import ParseError
from modbook.application.messages import (
    MESSAGE_DELETE_BY_MODULE_USAGE,
    MESSAGE_DELETE_USAGE,
    MESSAGE_FILTER_USAGE,
    MESSAGE_HELP,
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_INDEX,
    MESSAGE_LIST_USAGE,
    MESSAGE_UNKNOWN_COMMAND,
    PREFIX_MODULE_CODE,
    PREFIX_TAG,
)
from modbook.domain import (
    Index,
    ModuleCode,
    ModuleCodesContainsKeywordsPredicate,
    Tag,
    TagsContainsKeywordsPredicate,
)

_COMMAND_FORMAT = re.compile(r"^(?P<word>\S+)(?P<arguments>.*)$", re.DOTALL)


@dataclass
class ArgumentMultimap:
    """Values found for each prefix, in the order they appear, plus the text before the first prefix."""

    preamble: str = ""
    values: dict[str, list[str]] = field(default_factory=dict)

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self.values.get(prefix, []))

    def get_value(self, prefix: str) -> str | None:
        found = self.values.get(prefix)
        return found[-1] if found else None


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """Split args into preamble and per-prefix values. Values are stripped."""
    text = " " + (args or "")
    positions: list[tuple[int, str]] = []
    for prefix in prefixes:
        start = text.find(" " + prefix)
        while start != -1:
            positions.append((start + 1, prefix))
            start = text.find(" " + prefix, start + 1)
    positions.sort()

    argmap = ArgumentMultimap()
    if not positions:
        argmap.preamble = text.strip()
        return argmap

    argmap.preamble = text[: positions[0][0]].strip()
    for i, (pos, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(text)
        value = text[pos + len(prefix) : end].strip()
        argmap.values.setdefault(prefix, []).append(value)
    return argmap


def parse_index(one_based_index: str) -> Index:
    """Parse a one-based, non-zero unsigned integer. Raises ParseError."""
    trimmed = (one_based_index or "").strip()
    if not trimmed.isdigit() or not trimmed.isascii() or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def parse_module_code(module_code: str) -> ModuleCode:
    """Parse and validate a module code. Raises ParseError."""
    try:
        return ModuleCode((module_code or "").strip())
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def parse_tag(tag: str) -> Tag:
    """Parse and validate a tag. Raises ParseError."""
    try:
        return Tag((tag or "").strip())
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


class DeleteCommandParser:
    """Parses `delete` arguments: INDEX, START-END or m/MODULE_CODE."""

    def parse(self, args: str) -> DeleteCommand:
        argmap = tokenize(args, PREFIX_MODULE_CODE)
        module_codes = argmap.get_all_values(PREFIX_MODULE_CODE)

        if len(module_codes) > 1:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % MESSAGE_DELETE_BY_MODULE_USAGE)
        if len(module_codes) == 1:
            try:
                return self._delete_by_module_code(module_codes[0])
            except ParseError as exc:
                raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % MESSAGE_DELETE_USAGE) from exc
        try:
            return self._delete_by_index(args)
        except ParseError as exc:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % MESSAGE_DELETE_USAGE) from exc

    def _delete_by_index(self, args: str) -> DeleteCommand:
        text = (args or "").strip()
        if "-" in text:
            start_text, end_text = text.split("-", 1)
            return DeleteCommand(
                IndexRange(start=parse_index(start_text), end=parse_index(end_text))
            )
        return DeleteCommand(SingleIndex(index=parse_index(text)))

    def _delete_by_module_code(self, raw: str) -> DeleteCommand:
        module_code = parse_module_code(raw)
        predicate = ModuleCodesContainsKeywordsPredicate([str(module_code)])
        return DeleteCommand(ByModuleCode(module_code=module_code, predicate=predicate))


class FilterCommandParser:
    """Parses `filter` arguments: one or more t/TAG and m/MODULE_CODE."""

    def parse(self, args: str) -> FilterCommand:
        argmap = tokenize(args, PREFIX_TAG, PREFIX_MODULE_CODE)
        tags = argmap.get_all_values(PREFIX_TAG)
        module_codes = argmap.get_all_values(PREFIX_MODULE_CODE)
        if argmap.preamble or not (tags or module_codes):
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % MESSAGE_FILTER_USAGE)

        try:
            parsed_tags = [parse_tag(t) for t in tags]
            parsed_codes = [parse_module_code(m) for m in module_codes]
        except ParseError as exc:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % MESSAGE_FILTER_USAGE) from exc

        predicates = []
        if parsed_tags:
            predicates.append(TagsContainsKeywordsPredicate([t.name for t in parsed_tags]))
        if parsed_codes:
            predicates.append(ModuleCodesContainsKeywordsPredicate([str(m) for m in parsed_codes]))
        return FilterCommand(predicates=tuple(predicates))


class AddressBookParser:
    """Dispatches a full command line to the parser for its command word."""

    def parse_command(self, user_input: str) -> Command:
        match = _COMMAND_FORMAT.match((user_input or "").strip())
        if match is None:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % MESSAGE_HELP)

        word = match.group("word")
        arguments = match.group("arguments")
        if word == "delete":
            return DeleteCommandParser().parse(arguments)
        if word == "filter":
            return FilterCommandParser().parse(arguments)
        if word == "list":
            if arguments.strip():
                raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % MESSAGE_LIST_USAGE)
            return ListCommand()
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
