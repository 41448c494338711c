"""
Bank Account Builder - Builder pattern example for a bank account record.

This package provides a bank account model and a fluent builder that
accumulates field values before producing the account.
"""

__version__ = "0.1.0"

from bankaccount.builders import BankAccountBuilder
from bankaccount.models import BankAccount

__all__ = [
    # Models
    "BankAccount",
    # Builders
    "BankAccountBuilder",
]
