"""
Console REPL: type address book commands, read the feedback.
Run: python -m console (from repo root, with .env or env vars set).
"""
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/console/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from modbook.application import CommandError, CommandService, ParseError
from modbook.infrastructure import load_model

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
)
logger = logging.getLogger(__name__)

PROMPT = "> "
EXIT_WORDS = ("exit", "quit")


def _print_displayed(service: CommandService) -> None:
    for position, person in enumerate(service.displayed_persons(), start=1):
        print(f"{position}. {person}")


def run(service: CommandService, lines, out=print) -> None:
    """Feed each line to the service and print the feedback. Stops at exit/quit."""
    for line in lines:
        text = line.strip()
        if not text:
            continue
        if text.lower() in EXIT_WORDS:
            break
        try:
            result = service.execute(text)
        except (ParseError, CommandError) as exc:
            out(str(exc))
            continue
        out(result.feedback)


def _stdin_lines():
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def main() -> None:
    try:
        model = load_model()
    except ValueError as exc:
        raise SystemExit(f"Invalid address book: {exc}")
    service = CommandService(model)
    logger.info("Console running. Commands: delete, list, filter. Type exit to quit.")
    _print_displayed(service)
    try:
        run(service, _stdin_lines())
    except KeyboardInterrupt:
        print(file=sys.stderr)
    print("Goodbye!")


if __name__ == "__main__":
    main()
