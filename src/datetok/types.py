"""
Core types for format tokenization.
"""

from collections.abc import Callable, Mapping
from typing import TypeAlias

Byte: TypeAlias = int
TokenText: TypeAlias = str
Dictionary: TypeAlias = Mapping[TokenText, str]
PredicateFunc: TypeAlias = Callable[[Byte, Byte], bool]
