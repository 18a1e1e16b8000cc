"""
Currency ledger module for the tracker.
"""

from catchery import log_debug


class CurrencyLedger:
    """
    Holds the currency balance.

    The ledger performs no validation: negative balances and arbitrary
    amounts are accepted. Range and step policies belong to the input layer.
    """

    def __init__(self, balance: int = 0) -> None:
        self.balance: int = balance

    def adjust(self, amount: int) -> int:
        """
        Adds a signed amount to the balance.

        Args:
            amount (int): The amount to add; negative values subtract.

        Returns:
            int: The new balance.

        """
        self.balance += amount
        return self.balance

    def accrue_from_attribute(self, effective_value: int, multiplier: int) -> int:
        """
        Adds `effective_value * multiplier` to the balance.

        Args:
            effective_value (int):
                The effective (buffed) value of the source attribute.
            multiplier (int):
                Currency gained per point of the attribute.

        Returns:
            int: The amount accrued, which may be negative.

        """
        amount = effective_value * multiplier
        self.balance += amount
        log_debug(
            "Currency accrued",
            {"value": effective_value, "multiplier": multiplier, "amount": amount},
        )
        return amount

    def reset(self) -> None:
        self.balance = 0
