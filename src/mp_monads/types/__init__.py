"""Container types — public re-export surface.

Modules:
  result.py — Ok, Err, Result
  option.py — Some, Nothing, Option
"""

from mp_monads.types.option import Nothing, Option, Some
from mp_monads.types.result import Err, Ok, Result

__all__ = [
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
]
