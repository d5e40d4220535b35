from .dicts import deep_merge
from .paths import format_path, parse_path, to_key_path

__all__ = ["deep_merge", "format_path", "parse_path", "to_key_path"]
