"""
Base model for account records.

Provides the common Pydantic configuration shared by all records.
"""

from pydantic import BaseModel, ConfigDict


class DataModel(BaseModel):
    """
    Base model for all records.

    Provides:
    - Validation on assignment, so mutated fields keep their declared type
    """

    model_config = ConfigDict(
        # Re-run field coercion when an attribute is overwritten
        validate_assignment=True,
    )
