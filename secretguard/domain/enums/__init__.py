"""Domain enums package.

Usage:
    from secretguard.domain.enums import RotationStep, VersionStage
"""

from secretguard.domain.enums.rotation_step import RotationStep
from secretguard.domain.enums.version_stage import VersionStage

__all__ = ["RotationStep", "VersionStage"]
