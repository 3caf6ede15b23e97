from tokman.stylesheet.model import CustomProperty
from tokman.stylesheet.parser import extract_custom_properties, read_custom_properties

__all__ = ["CustomProperty", "extract_custom_properties", "read_custom_properties"]
