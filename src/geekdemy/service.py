"""Application service that runs billing commands against one invoice."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .commands import AddProgramme, ApplyCoupon, Command, PrintBill, ProMembership, read_commands
from .invoice import Bill, Invoice

NO_COUPON_LABEL = "NONE"

logger = logging.getLogger("geekdemy.service")


class BillingService:
    """Coordinates command handling for a single billing run."""

    def __init__(self, invoice: Invoice | None = None) -> None:
        """Initialize service with a fresh invoice unless one is given."""
        self.invoice = invoice if invoice is not None else Invoice()

    def apply(self, command: Command) -> Bill | None:
        """Apply one command. Returns a bill only for PRINT_BILL."""
        if isinstance(command, AddProgramme):
            self.invoice.add_item(command.kind, command.quantity)
        elif isinstance(command, ProMembership):
            self.invoice.activate_membership()
        elif isinstance(command, ApplyCoupon):
            applied = self.invoice.apply_coupon(command.code, sole_argument=command.argument_count == 1)
            if applied is not None:
                logger.info("Applied coupon %s", applied)
        elif isinstance(command, PrintBill):
            return self.invoice.bill()
        return None

    def run(self, commands: Iterable[Command]) -> list[Bill]:
        """Apply commands in order and collect every printed bill."""
        bills: list[Bill] = []
        for command in commands:
            bill = self.apply(command)
            if bill is not None:
                bills.append(bill)
        return bills

    def run_file(self, path: Path | str) -> list[Bill]:
        """Read a command file and run it."""
        commands = read_commands(path)
        logger.info("Loaded %d commands from %s", len(commands), path)
        return self.run(commands)


def format_bill(bill: Bill) -> list[str]:
    """Render the six bill lines with two-decimal amounts."""
    coupon = bill.coupon if bill.coupon is not None else NO_COUPON_LABEL
    return [
        f"SUB_TOTAL {bill.subtotal:.2f}",
        f"TOTAL_PRO_DISCOUNT {bill.membership_discount:.2f}",
        f"PRO_MEMBERSHIP_FEE {bill.membership_fee:.2f}",
        f"ENROLLMENT_FEE {bill.enrollment_fee:.2f}",
        f"COUPON_DISCOUNT {coupon} {bill.discount:.2f}",
        f"TOTAL {bill.total:.2f}",
    ]
