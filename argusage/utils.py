"""
Argusage utilities: the "not given" sentinel.

- Unset / UnsetType
  • stands for a parameter the caller left out (docopt's ``argv`` and
    ``version``, a fault without a message) where None could be a real value.
  • falsy, prints as "Unset", one instance per process, sealed.
  • ``str | Unset`` builds a union usable with isinstance().

- coalesce(object, default=None)
  • swap Unset for a default; None, 0, "" and [] pass through.

    >>> coalesce(Unset, ["-h"])
    ['-h']
    >>> coalesce([], ["-h"])
    []
"""
import functools
from typing import final


@final
class UnsetType:
    """
    Type of the Unset sentinel; UnsetType() always returns the same object.
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        # str | Unset
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return ``default`` when ``object`` is Unset, else ``object`` unchanged.
    """
    return default if object is Unset else object


Unset = UnsetType()


__all__ = (
    "coalesce",
    "UnsetType",
    "Unset",
)
