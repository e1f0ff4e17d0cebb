"""Parse billing commands from input lines and files."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .models import ProgrammeKind, programme_kind

ADD_PROGRAMME = "ADD_PROGRAMME"
PRO_MEMBERSHIP = "PRO_MEMBERSHIP"
APPLY_COUPON = "APPLY_COUPON"
PRINT_BILL = "PRINT_BILL"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

logger = logging.getLogger("geekdemy.commands")


@dataclass(frozen=True)
class AddProgramme:
    """Purchase ``quantity`` units of one programme kind."""

    kind: ProgrammeKind
    quantity: int


@dataclass(frozen=True)
class ProMembership:
    """Enable pro membership."""


@dataclass(frozen=True)
class ApplyCoupon:
    """Redeem a coupon; ``code`` is None when the command had no argument."""

    code: str | None
    argument_count: int = 1


@dataclass(frozen=True)
class PrintBill:
    """Emit the bill for the current state."""


Command = AddProgramme | ProMembership | ApplyCoupon | PrintBill


def parse_command(line: str) -> Command | None:
    """Parse one input line. Lines that are not valid commands yield None."""
    tokens = _tokenize(line)
    if not tokens:
        return None

    name = tokens[0]
    if name == ADD_PROGRAMME:
        if len(tokens) != 3:
            logger.debug("Ignoring %s with %d arguments", ADD_PROGRAMME, len(tokens) - 1)
            return None
        return AddProgramme(kind=programme_kind(tokens[1]), quantity=_parse_quantity(tokens[2]))
    if name == PRO_MEMBERSHIP:
        return ProMembership()
    if name == APPLY_COUPON:
        return ApplyCoupon(code=tokens[1] if len(tokens) > 1 else None, argument_count=len(tokens) - 1)
    if name == PRINT_BILL:
        return PrintBill()

    logger.debug("Ignoring unrecognized command %r", name)
    return None


def parse_commands(lines: Iterable[str]) -> list[Command]:
    """Parse many lines, dropping the ones that are not commands."""
    commands: list[Command] = []
    for line in lines:
        command = parse_command(line)
        if command is not None:
            commands.append(command)
    return commands


def read_commands(path: Path | str) -> list[Command]:
    """Read and parse a command file. Raises OSError if it cannot be read.

    Undecodable bytes are replaced rather than rejected.
    """
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse_commands(text.splitlines())


def _parse_quantity(token: str) -> int:
    """Read the leading integer of ``token``; tokens without one count as 0."""
    match = _LEADING_INT.match(token)
    if match is None:
        logger.warning("Quantity %r is not a number; using 0", token)
        return 0
    return int(match.group(1))


def _tokenize(line: str) -> list[str]:
    return line.replace("\r", "").split()
