"""
Pydantic models for bank account records.
"""

from bankaccount.models.account import BankAccount
from bankaccount.models.base import DataModel

__all__ = [
    "DataModel",
    "BankAccount",
]
