"""Media upload core domain layer.

Entities and exceptions only; no I/O and no framework dependencies.
"""

from .entities import *
from .exceptions import *
