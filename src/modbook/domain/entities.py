"""Domain entities: Person and the value objects it is built from."""

import re
from dataclasses import dataclass, field, replace

MODULE_CODE_PATTERN = re.compile(r"^[A-Z]{2,3}\d{4}[A-Z]?$")
TAG_PATTERN = re.compile(r"^[A-Za-z0-9]+$")
NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 ]*$")
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*$")
PHONE_PATTERN = re.compile(r"^\+?\d{3,}$")
TELE_HANDLE_PATTERN = re.compile(r"^@\w{5,32}$")

NAME_MAX_LENGTH = 500


@dataclass(frozen=True)
class Index:
    """
    Position in the displayed person list. Stored zero-based.
    Users type one-based numbers; use from_one_based for those.
    """

    zero_based: int

    def __post_init__(self):
        if self.zero_based < 0:
            raise ValueError("Index must be non-negative.")

    @classmethod
    def from_zero_based(cls, value: int) -> "Index":
        return cls(zero_based=value)

    @classmethod
    def from_one_based(cls, value: int) -> "Index":
        return cls(zero_based=value - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1


@dataclass(frozen=True)
class ModuleCode:
    """A course code such as CS2040S. Rendered in brackets: [CS2040S]."""

    value: str

    def __post_init__(self):
        code = (self.value or "").strip().upper()
        if not MODULE_CODE_PATTERN.match(code):
            raise ValueError(
                "Module codes should be 2-3 letters, 4 digits and an optional "
                "letter suffix, e.g. CS2040S."
            )
        object.__setattr__(self, "value", code)

    def __str__(self) -> str:
        return f"[{self.value}]"


@dataclass(frozen=True)
class Tag:
    """A single alphanumeric word attached to a person."""

    name: str

    def __post_init__(self):
        name = (self.name or "").strip()
        if not TAG_PATTERN.match(name):
            raise ValueError("Tag names should be alphanumeric.")
        object.__setattr__(self, "name", name)

    def __str__(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True)
class Name:
    value: str

    def __post_init__(self):
        name = (self.value or "").strip()
        if not name:
            raise ValueError("Person name must be non-empty.")
        if len(name) > NAME_MAX_LENGTH:
            raise ValueError(f"Person name must be at most {NAME_MAX_LENGTH} chars.")
        if not NAME_PATTERN.match(name):
            raise ValueError(
                "Names should only contain alphanumeric characters and spaces."
            )
        object.__setattr__(self, "value", name)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self):
        email = (self.value or "").strip()
        if not EMAIL_PATTERN.match(email):
            raise ValueError("Emails should be of the format local-part@domain.")
        object.__setattr__(self, "value", email)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    """Phone number with spaces and dashes removed. E.164 when normalized upstream."""

    value: str

    def __post_init__(self):
        phone = re.sub(r"[\s-]", "", (self.value or "").strip())
        if not PHONE_PATTERN.match(phone):
            raise ValueError(
                "Phone numbers should only contain digits, and be at least 3 digits long."
            )
        object.__setattr__(self, "value", phone)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TeleHandle:
    """Telegram handle (@username). Empty when the person has none."""

    value: str = ""

    def __post_init__(self):
        handle = (self.value or "").strip()
        if handle and not TELE_HANDLE_PATTERN.match(handle):
            raise ValueError(
                "Telegram handles should start with @ followed by 5-32 "
                "letters, digits or underscores."
            )
        object.__setattr__(self, "value", handle)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Remark:
    value: str = ""

    def __post_init__(self):
        if self.value is None:
            raise ValueError("Remark must not be None.")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Person:
    """
    A contact in the address book.
    Immutable: an edit builds a new Person that replaces the old one in the model.
    """

    name: Name
    email: Email
    module_codes: frozenset[ModuleCode] = field(default_factory=frozenset)
    phone: Phone | None = None
    tele_handle: TeleHandle = field(default_factory=TeleHandle)
    remark: Remark = field(default_factory=Remark)
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "module_codes", frozenset(self.module_codes))
        object.__setattr__(self, "tags", frozenset(self.tags))

    def without_module_code(self, module_code: ModuleCode) -> "Person":
        """Return a copy of this person with module_code removed."""
        return replace(self, module_codes=self.module_codes - {module_code})

    def __str__(self) -> str:
        parts = [
            f"{self.name}",
            f"Email: {self.email}",
            "Module Codes: " + "".join(_sorted_str(self.module_codes)),
        ]
        if self.phone is not None:
            parts.append(f"Phone: {self.phone}")
        if self.tele_handle.value:
            parts.append(f"Telegram: {self.tele_handle}")
        if self.remark.value:
            parts.append(f"Remark: {self.remark}")
        if self.tags:
            parts.append("Tags: " + "".join(_sorted_str(self.tags)))
        return "; ".join(parts)


def _sorted_str(items) -> list[str]:
    # frozensets have no order; sort so str(person) is stable
    return sorted(str(item) for item in items)
