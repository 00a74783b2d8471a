from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class FieldError:
    """A single failed field: the field identifier and its fixed message"""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
