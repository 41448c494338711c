"""
Bank account model.

Represents a single bank account with its owner, branch and balance terms.
"""

from typing import TYPE_CHECKING, Optional

from pydantic import Field

from bankaccount.models.base import DataModel

if TYPE_CHECKING:
    from bankaccount.builders.account import BankAccountBuilder


class BankAccount(DataModel):
    """
    A bank account record.

    Accounts are assembled through :class:`BankAccountBuilder`, usually
    obtained from :meth:`BankAccount.builder`. Fields stay writable after
    construction; values are stored as given, with no range checks.
    An owner or branch of None is kept and renders as 'None'.

    Attributes:
        account_number: Account identifier (64-bit integer)
        owner: Account holder name
        branch: Branch the account is held at
        balance: Opening balance
        interest_rate: Interest rate
    """

    account_number: int = Field(
        ...,
        description="Account identifier",
    )

    owner: Optional[str] = Field(
        default="",
        description="Account holder name",
    )

    branch: Optional[str] = Field(
        default="",
        description="Branch the account is held at",
    )

    balance: float = Field(
        default=0.0,
        description="Opening balance",
    )

    interest_rate: float = Field(
        default=0.0,
        description="Interest rate",
    )

    @classmethod
    def builder(cls, account_number: int) -> "BankAccountBuilder":
        """
        Start building an account.

        Args:
            account_number: Identifier of the account to build

        Returns:
            A new BankAccountBuilder for that account number
        """
        from bankaccount.builders.account import BankAccountBuilder

        return BankAccountBuilder(account_number)

    def __str__(self) -> str:
        """String representation."""
        return (
            f"BankAccount{{accountNumber={self.account_number}, "
            f"owner='{self.owner}', "
            f"branch='{self.branch}', "
            f"balance={self.balance}, "
            f"interestRate={self.interest_rate}}}"
        )
