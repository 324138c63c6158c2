from .card_name_parser import base_name, variant, split_list, display_name, entry_key
from .fields import FIELD_ALIASES, first_present, get_field

__all__ = [
    "base_name", "variant", "split_list", "display_name", "entry_key",
    "FIELD_ALIASES", "first_present", "get_field",
]
