"""
Sum types (tagged unions) for Python.

    Maybe = define("Nothing", "Just")
    Maybe.Just(3).cases({"Just": lambda v: v+1, "Nothing": lambda: 0})  # --> 4

Shared behavior goes into `Maybe.shared`, and shows up on every value of `Maybe`.
"""
from .space import ELSE, AlreadyExists, ReservedName
from .values import Variant, NonExhaustiveCasesError
from .definition import SumType, Constructor, define
from .check import Matcher, ForeignValue, CaseCheckFailed
from .diagnostics import Report
