"""
Alignment and value kind enums for tprint tables
"""
from enum import Enum


class Alignment(Enum):
    """Horizontal alignment of a caption or data cell"""
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'

    @classmethod
    def parse(cls, value) -> 'Alignment':
        """Accept an Alignment, its name or its value ('l'/'c'/'r' too)"""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value, member.value[0]):
                return member
        raise ValueError(f"Unknown alignment: {value!r}")


class ValueKind(Enum):
    """Typed value kinds with their own format template"""
    INT32 = 'int32'
    UINT64 = 'uint64'
    STRING = 'string'
    DOUBLE = 'double'

    @classmethod
    def parse(cls, value) -> 'ValueKind':
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text == member.value:
                return member
        raise ValueError(f"Unknown value kind: {value!r}")
