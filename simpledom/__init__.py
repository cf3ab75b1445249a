"""Element wrappers, CSS lookup and markup replacement over BeautifulSoup trees."""

from .config import DEFAULT_OPTIONS, DomOptions, load_options
from .document import Document
from .element import Element
from .errors import (
    ConfigError,
    DetachedNodeError,
    DomError,
    InvalidSelectorError,
    MalformedInputError,
)
from .node_list import NodeList

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DEFAULT_OPTIONS",
    "DetachedNodeError",
    "Document",
    "DomError",
    "DomOptions",
    "Element",
    "InvalidSelectorError",
    "MalformedInputError",
    "NodeList",
    "load_options",
]
