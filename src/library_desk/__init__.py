"""
Library Desk.

Book inventory and member registry for a small library, with book issue and
return.

Key Components:
- models: Pydantic models for books, members and circulation notices
- catalog: The aggregate that owns books and members and enforces the rules
- results / errors: Success/Failure results and the error-kind vocabulary
- config: Settings with pydantic-settings
- cli: Text menu driver
- server, tools, resources: MCP surface built with FastMCP
"""

__version__ = "0.1.0"

from .catalog import Catalog
from .errors import ErrorKind
from .results import Failure, Result, Success

__all__ = [
    "Catalog",
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
    "__version__",
]
