"""Math utilities."""

from supertrunfo.utils.math import safe_div, safe_inverse

__all__ = ["safe_div", "safe_inverse"]
