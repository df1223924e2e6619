"""유틸리티 모듈."""

from .rounding import round_half_up, round_to_nearest
from .validation import validate_record_id, parse_choice, safe_filename

__all__ = [
    "round_half_up",
    "round_to_nearest",
    "validate_record_id",
    "parse_choice",
    "safe_filename",
]
