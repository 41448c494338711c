"""
Bank account builder.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from bankaccount.models.account import BankAccount

logger = logging.getLogger(__name__)


@dataclass
class BankAccountBuilder:
    """
    Fluent builder for BankAccount records.

    Every setter stores its value and returns the builder itself, so calls
    can be chained. Calling a setter again overwrites the previous value.

    Example:
        account = (
            BankAccountBuilder(1)
            .with_owner("Merge")
            .at_branch("Springfield")
            .opening_balance(100)
            .at_rate(2.5)
            .build()
        )

    Attributes:
        account_number: Identifier given at creation
        owner: Account holder name
        branch: Branch name
        balance: Opening balance
        interest_rate: Interest rate
    """

    account_number: int
    owner: Optional[str] = ""
    branch: Optional[str] = ""
    balance: float = 0.0
    interest_rate: float = 0.0

    def with_owner(self, owner: Optional[str]) -> "BankAccountBuilder":
        """Set the account holder name."""
        self.owner = owner
        return self

    def at_branch(self, branch: Optional[str]) -> "BankAccountBuilder":
        """Set the branch name."""
        self.branch = branch
        return self

    def opening_balance(self, balance: float) -> "BankAccountBuilder":
        """Set the opening balance."""
        self.balance = balance
        return self

    def at_rate(self, interest_rate: float) -> "BankAccountBuilder":
        """Set the interest rate."""
        self.interest_rate = interest_rate
        return self

    def build(self) -> BankAccount:
        """
        Build a BankAccount from the current values.

        The builder is left untouched, so it can be built again or
        modified further. Each call returns a new, independent account.

        Returns:
            BankAccount instance
        """
        account = BankAccount(
            account_number=self.account_number,
            owner=self.owner,
            branch=self.branch,
            balance=self.balance,
            interest_rate=self.interest_rate,
        )
        logger.debug(f"Built account {account.account_number}")
        return account
