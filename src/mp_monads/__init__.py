"""
mp_monads – Result and Option containers.

Import path convention::

    from mp_monads import Result, Option
    from mp_monads.errors import UnwrapError
    from mp_monads.observability import configure_logging
"""

import logging

from mp_monads.errors import ContractViolationError, InvalidOptionError, UnwrapError
from mp_monads.types import Err, Nothing, Ok, Option, Result, Some

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ContractViolationError",
    "Err",
    "InvalidOptionError",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
    "__version__",
]
