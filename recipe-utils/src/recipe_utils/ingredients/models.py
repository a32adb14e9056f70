import dataclasses
from typing import Any, Dict, Optional


@dataclasses.dataclass(frozen=True)
class Ingredient:
    amount: Optional[float]
    unit: Optional[str]
    name: str
    original_text: str
    amount_max: Optional[float] = None  # only set for ranges
    section: Optional[str] = None  # e.g. "For the sauce"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "amount": self.amount,
            "amountMax": self.amount_max,
            "unit": self.unit,
            "name": self.name,
            "section": self.section,
            "originalText": self.original_text,
        }
