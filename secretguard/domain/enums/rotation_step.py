"""Rotation protocol steps.

Values match the ``Step`` field sent by Secrets Manager to a rotation
function. Steps are driven externally: createSecret -> setSecret ->
testSecret -> finishSecret, each possibly retried.
"""

from enum import Enum


class RotationStep(str, Enum):
    """Rotation steps in protocol order."""

    CREATE = "createSecret"
    SET = "setSecret"
    TEST = "testSecret"
    FINISH = "finishSecret"
