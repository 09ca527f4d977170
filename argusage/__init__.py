__title__ = 'argusage'
__author__ = 'Eiko Reishin (影皇嶺臣)'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .patterns import *
from .grammar import *
from .argv import *
from .usage import *
from .faults import *
from .interface import *
from .utils import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the patterns
__all__ += patterns.__all__  # type: ignore[attr-defined]
# Load the exposed API of the grammar
__all__ += grammar.__all__  # type: ignore[attr-defined]
# Load the exposed API of the argv resolver
__all__ += argv.__all__  # type: ignore[attr-defined]
# Load the exposed API of the usage helpers
__all__ += usage.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the entry point
__all__ += interface.__all__  # type: ignore[attr-defined]
# Load the exposed API of the utilities
__all__ += utils.__all__  # type: ignore[attr-defined]
