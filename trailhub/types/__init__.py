from .language import Language
from .resolved import ABSENT, Absent, Inherited, Own, Resolved, Source

__all__ = [
    "ABSENT",
    "Absent",
    "Inherited",
    "Language",
    "Own",
    "Resolved",
    "Source",
]
