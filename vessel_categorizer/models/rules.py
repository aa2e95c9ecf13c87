"""Models for name-based classification rules.

A rule pairs a case-folded substring with the vessel type it implies. A
rule set is the ordered, immutable collection the classifier scans; the
first rule whose pattern occurs in a vessel's name wins.
"""
from dataclasses import dataclass
from typing import Iterator, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vessel_categorizer.models.vessel_type import VesselType


class ClassificationRule(BaseModel):
    """A single naming rule.

    Attributes:
        pattern: Lowercased substring searched for in vessel names
        category: Vessel type assigned when the pattern matches
    """

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(..., min_length=1, description="Case-folded substring")
    category: VesselType

    @field_validator('pattern', mode='before')
    @classmethod
    def fold_pattern(cls, v):
        """Lowercase the pattern so matching is case-insensitive."""
        if isinstance(v, str):
            return v.lower()
        return v


@dataclass(frozen=True)
class RuleSet:
    """Ordered, read-only collection of classification rules.

    Declaration order is significant: earlier rules take priority.
    Duplicate patterns are kept as-is.
    """

    rules: Tuple[ClassificationRule, ...] = ()

    @classmethod
    def empty(cls) -> "RuleSet":
        """A rule set that never matches anything."""
        return cls()

    def __iter__(self) -> Iterator[ClassificationRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __getitem__(self, index: int) -> ClassificationRule:
        return self.rules[index]
