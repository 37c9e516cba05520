from cssvendor.prefix.defaults import PROPERTIES, VALUES, PrefixList
from cssvendor.prefix.expand import Engine, Expander, zip_declarations
from cssvendor.prefix.table import PrefixTable, apply_override

__all__ = [
    "PROPERTIES",
    "VALUES",
    "PrefixList",
    "Engine",
    "Expander",
    "zip_declarations",
    "PrefixTable",
    "apply_override",
]
