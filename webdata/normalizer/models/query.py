"""
Query value type.
"""

from typing import Literal, Union

from pydantic import StrictStr

# A decoded string, or True for a parameter given without '='.
QueryValue = Union[StrictStr, Literal[True]]
