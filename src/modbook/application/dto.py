"""Command results and delete requests."""

from dataclasses import dataclass

from modbook.domain import Index, ModuleCode, ModuleCodesContainsKeywordsPredicate


@dataclass(frozen=True)
class CommandResult:
    """Feedback shown to the user after a command runs."""

    feedback: str


# --- delete requests: exactly one per DeleteCommand ---


@dataclass(frozen=True)
class SingleIndex:
    """Delete the person at one displayed index."""

    index: Index


@dataclass(frozen=True)
class IndexRange:
    """Delete every person from start to end (inclusive) in the displayed list."""

    start: Index
    end: Index


@dataclass(frozen=True)
class ByModuleCode:
    """Remove module_code from every person matching predicate; drop persons left with none."""

    module_code: ModuleCode
    predicate: ModuleCodesContainsKeywordsPredicate


DeleteRequest = SingleIndex | IndexRange | ByModuleCode
