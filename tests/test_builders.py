"""
Tests for the account builders.
"""

import logging

import pytest

from bankaccount.builders import BankAccountBuilder
from bankaccount.models import BankAccount


class TestBankAccountBuilder:
    """Tests for BankAccountBuilder."""

    def test_defaults(self):
        """Test a builder with no setter calls."""
        account = BankAccountBuilder(8).build()
        assert account.account_number == 8
        assert account.owner == ""
        assert account.branch == ""
        assert account.balance == 0.0
        assert account.interest_rate == 0.0

    @pytest.mark.parametrize("account_number", [0, -1, 2**63 - 1, -(2**63)])
    def test_any_account_number_accepted(self, account_number):
        """Test that the account number is taken as-is."""
        account = BankAccountBuilder(account_number).build()
        assert account.account_number == account_number

    def test_setters_return_builder(self):
        """Test that every setter returns the same builder."""
        builder = BankAccountBuilder(1)
        assert builder.with_owner("Merge") is builder
        assert builder.at_branch("Springfield") is builder
        assert builder.opening_balance(100) is builder
        assert builder.at_rate(2.5) is builder

    def test_build_returns_account(self):
        """Test that build produces a BankAccount."""
        account = BankAccountBuilder(1).with_owner("Merge").build()
        assert isinstance(account, BankAccount)
        assert account.owner == "Merge"

    def test_last_write_wins(self):
        """Test that repeated calls keep the last value per field."""
        account = (
            BankAccountBuilder(1)
            .with_owner("Abe")
            .opening_balance(5)
            .at_branch("Shelbyville")
            .with_owner("Mona")
            .at_rate(1.0)
            .opening_balance(15)
            .at_rate(3.25)
            .at_branch("Ogdenville")
            .build()
        )
        assert account.owner == "Mona"
        assert account.balance == 15.0
        assert account.interest_rate == 3.25
        assert account.branch == "Ogdenville"

    def test_none_text_fields_accepted(self):
        """Test that None owner and branch are built and rendered as None."""
        account = BankAccountBuilder(1).with_owner(None).at_branch(None).build()
        assert account.owner is None
        assert account.branch is None
        assert str(account) == (
            "BankAccount{accountNumber=1, owner='None', branch='None', "
            "balance=0.0, interestRate=0.0}"
        )

    @pytest.mark.parametrize(
        "calls",
        [
            [("with_owner", "Merge"), ("at_branch", "Springfield"), ("opening_balance", 100), ("at_rate", 2.5)],
            [("at_rate", 2.5), ("opening_balance", 100), ("at_branch", "Springfield"), ("with_owner", "Merge")],
            [("at_branch", "Springfield"), ("at_rate", 2.5), ("with_owner", "Merge"), ("opening_balance", 100)],
        ],
    )
    def test_order_across_fields_irrelevant(self, calls):
        """Test that the order of calls to different fields does not matter."""
        builder = BankAccountBuilder(1)
        for method, value in calls:
            getattr(builder, method)(value)

        assert str(builder.build()) == (
            "BankAccount{accountNumber=1, owner='Merge', branch='Springfield', "
            "balance=100.0, interestRate=2.5}"
        )

    def test_build_twice(self):
        """Test that building twice yields equal but independent accounts."""
        builder = BankAccountBuilder(4).with_owner("Patty").at_rate(0.5)
        first = builder.build()
        second = builder.build()
        assert first == second
        assert first is not second

    def test_builder_reusable_after_build(self):
        """Test that the builder can be changed and built again."""
        builder = BankAccountBuilder(4).with_owner("Patty")
        first = builder.build()
        second = builder.with_owner("Selma").build()
        assert first.owner == "Patty"
        assert second.owner == "Selma"

    def test_build_logs_at_debug(self, caplog):
        """Test that build logs the account number at debug level."""
        with caplog.at_level(logging.DEBUG, logger="bankaccount.builders.account"):
            BankAccountBuilder(77).build()
        assert "Built account 77" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
