"""
Module whose import fails on a missing dependency.
"""
import dbconvert_missing_dependency  # noqa: F401


class Unreachable:
    pass
