from .json_codec import DictJsonBuilder, JsonBuilder, to_json, to_json_dict, to_json_string
from .text import to_string
from .wire import array_from_variant, array_to_variant, from_variant, from_variant_strict, to_variant

__all__ = [
    "DictJsonBuilder",
    "JsonBuilder",
    "array_from_variant",
    "array_to_variant",
    "from_variant",
    "from_variant_strict",
    "to_json",
    "to_json_dict",
    "to_json_string",
    "to_string",
    "to_variant",
]
