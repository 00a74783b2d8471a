from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from ..constants import WHITESPACE, SignupFields


@dataclass
class SignupForm:
    """
    Pure domain model for one form-fill/submit cycle - never persisted.

    String values are held already normalized: trimmed, except the
    password and its confirmation which are kept verbatim.
    """
    fullname: str = ""
    email: str = ""
    username: str = ""
    password: str = ""
    confirm: str = ""
    phone: str = ""
    age: Optional[Union[int, str]] = None
    terms: bool = False

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> "SignupForm":
        """Build a form from raw field values, normalizing each one"""
        return cls(**{
            name: normalize_value(name, values.get(name))
            for name in SignupFields.ALL
            if name in values
        })

    def to_values(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in SignupFields.ALL}


def normalize_value(field: str, raw: Any) -> Any:
    """
    Normalize a raw field value the way the validators expect it.

    Checkbox values pass through as booleans, missing strings become "",
    and text is trimmed unless the field is compared verbatim.
    """
    if field in SignupFields.CHECKBOX:
        return raw is True
    if raw is None:
        return None if field == SignupFields.AGE else ""
    if isinstance(raw, str) and field not in SignupFields.UNTRIMMED:
        return raw.strip(WHITESPACE)
    return raw
