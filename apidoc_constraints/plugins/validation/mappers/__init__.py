"""Single-constraint mappers for the built-in constraint kinds."""

from .choice import ChoiceMapper
from .collection import AllMapper
from .comparison import LowerBoundMapper, RangeMapper, UpperBoundMapper
from .length import CountMapper, LengthMapper
from .regex import RegexMapper
from .required import NotBlankMapper, NotNullMapper

__all__ = [
    "AllMapper",
    "ChoiceMapper",
    "CountMapper",
    "LengthMapper",
    "LowerBoundMapper",
    "NotBlankMapper",
    "NotNullMapper",
    "RangeMapper",
    "RegexMapper",
    "UpperBoundMapper",
]
