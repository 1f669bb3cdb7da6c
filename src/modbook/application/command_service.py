"""Runs command text against a model. Single model per service instance."""

import logging

from modbook.application.dto import CommandResult
from modbook.application.errors import CommandError, ParseError
from modbook.application.parser import AddressBookParser
from modbook.application.ports import Model
from modbook.domain import Person

logger = logging.getLogger(__name__)


class CommandService:
    """Core flow: text -> parsed command -> executed against the model -> feedback."""

    def __init__(self, model: Model, *, parser: AddressBookParser | None = None) -> None:
        self._model = model
        self._parser = parser or AddressBookParser()

    @property
    def model(self) -> Model:
        return self._model

    def execute(self, command_text: str) -> CommandResult:
        """Parse and run one command. ParseError and CommandError propagate to the caller."""
        word = (command_text or "").strip().split(" ", 1)[0]
        try:
            command = self._parser.parse_command(command_text)
            result = command.execute(self._model)
        except (ParseError, CommandError) as exc:
            logger.info("Command %r failed: %s", word, exc)
            raise
        logger.info("Command %r succeeded", word)
        return result

    def displayed_persons(self) -> list[Person]:
        """Return the persons currently shown to the user."""
        return self._model.get_filtered_person_list()
