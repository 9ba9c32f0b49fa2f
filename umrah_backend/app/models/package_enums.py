"""
Package enumerations.
"""

import enum


class PackageKind(str, enum.Enum):
    """Pilgrimage kind a package (or cost simulation) is for."""
    UMRAH = "umrah"
    HAJI = "haji"
