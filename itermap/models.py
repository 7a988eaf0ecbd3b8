"""
itermap - Pydantic Models

Data models describing what an adaptor knows about the elements it has left.
"""

from typing import Optional
from pydantic import BaseModel, Field, model_validator, ConfigDict
from enum import Enum


class Capability(str, Enum):
    """Optional capabilities an iterator may advertise"""
    DOUBLE_ENDED = "double_ended"
    EXACT_SIZE = "exact_size"
    FUSED = "fused"


class SizeHint(BaseModel):
    """Bounds on the number of elements an iterator has left"""
    lower: int = Field(
        0,
        description="Minimum number of remaining elements",
        ge=0
    )
    upper: Optional[int] = Field(
        None,
        description="Maximum number of remaining elements, None if unknown",
        ge=0
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "lower": 0,
                "upper": 5
            }
        }
    )

    @model_validator(mode='after')
    def validate_bounds(self):
        """Upper bound may not be below the lower bound"""
        if self.upper is not None and self.upper < self.lower:
            raise ValueError(f"upper bound {self.upper} is below lower bound {self.lower}")
        return self

    @classmethod
    def exact(cls, count: int) -> "SizeHint":
        return cls(lower=count, upper=count)

    @classmethod
    def unknown(cls) -> "SizeHint":
        return cls(lower=0, upper=None)

    @property
    def is_exact(self) -> bool:
        return self.upper == self.lower

    def without_lower(self) -> "SizeHint":
        """Same upper bound, but nothing guaranteed (what a filter can promise)"""
        return SizeHint(lower=0, upper=self.upper)
