"""Filter rules that exclude bank transactions from reconciliation."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from ..utils.money import format_amount


class FilterRule(BaseModel):
    """
    Exclude transactions whose description matches ``pattern`` and whose
    amount lies within ``[min_amount, max_amount]`` (inclusive, in cents).

    The JSON keys are ``regex``, ``min`` and ``max``.
    """

    model_config = ConfigDict(populate_by_name=True)

    pattern: str = Field(alias="regex")
    min_amount: int = Field(alias="min")
    max_amount: int = Field(alias="max")

    _regex: re.Pattern = PrivateAttr()

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression {value!r}: {e}") from e
        return value

    def model_post_init(self, __context: Any) -> None:
        self._regex = re.compile(self.pattern)

    def matches(self, description: str, amount: int) -> bool:
        """Check the description against the pattern and the amount against the bounds."""
        return (
            self._regex.search(description) is not None
            and self.min_amount <= amount <= self.max_amount
        )

    def __str__(self) -> str:
        return (
            f"[filter:'{self.pattern}', min:{format_amount(self.min_amount)}, "
            f"max:{format_amount(self.max_amount)}]"
        )
