"""
Builders for bank account records.

Each builder collects field values through chained calls and produces
a model instance on demand.
"""

from bankaccount.builders.account import BankAccountBuilder

__all__ = [
    "BankAccountBuilder",
]
