from __future__ import annotations


class UndefinedType:
    """Marker produced by looking up an unbound symbol; flows as ordinary data."""

    def __repr__(self): return "undefined"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, UndefinedType)

    def __hash__(self):
        return hash(UndefinedType)


Undefined = UndefinedType()
