"""CIE 1931 XYZ and Yxy colour spaces with standard illuminant white points."""

__version__ = "0.1.0"
__all__ = ["white_point", "xyz", "yxy"]