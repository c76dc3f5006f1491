from .attribute import HSI_NUMBER_MAX, HsiAttr, ensure_attr
from .flags import HsiAttrFlag, flag_from_string, flag_to_string, flags_to_suffix, iter_set_bits
from .variant import Variant

__all__ = [
    "HSI_NUMBER_MAX",
    "HsiAttr",
    "HsiAttrFlag",
    "Variant",
    "ensure_attr",
    "flag_from_string",
    "flag_to_string",
    "flags_to_suffix",
    "iter_set_bits",
]
