"""Handler for RotateSecret command.

Flow:
1. Check rotation is enabled for the secret (precondition for every step)
2. Parse the step; unknown step -> ROTATION_INVALID_STEP
3. Dispatch to the rotator:
   - createSecret: new PENDING version
   - setSecret: push PENDING to the CloudFront origin custom header
   - testSecret: validate the PENDING value
   - finishSecret: promote PENDING to CURRENT
4. Log and return the step's Result

On failure the error is returned unchanged; the caller surfaces it so
Secrets Manager retries the same step.
"""

from secretguard.application.commands.rotation_commands import RotateSecret
from secretguard.core.enums import ErrorCode
from secretguard.core.errors import DomainError
from secretguard.core.result import Failure, Result, Success
from secretguard.domain.enums import RotationStep
from secretguard.domain.errors import RotationError
from secretguard.domain.protocols import (
    DistributionUpdaterProtocol,
    LoggerProtocol,
    SecretRotatorProtocol,
)
from secretguard.infrastructure.cdn import update_custom_header


class RotateSecretHandler:
    """Dispatches rotation events to the rotator.

    Args:
        rotator: Rotation service.
        logger: Structured logger.
        distribution_updater: Updater used by the setSecret step.
        distribution_id: CloudFront distribution to update; setSecret is a
            logged no-op when unset.
        custom_header_name: Origin custom header carrying the API key.
    """

    def __init__(
        self,
        rotator: SecretRotatorProtocol,
        logger: LoggerProtocol,
        distribution_updater: DistributionUpdaterProtocol | None = None,
        distribution_id: str | None = None,
        custom_header_name: str | None = None,
    ) -> None:
        self._rotator = rotator
        self._logger = logger
        self._updater = distribution_updater
        self._distribution_id = distribution_id
        self._header_name = custom_header_name

    def handle(self, cmd: RotateSecret) -> Result[None, DomainError]:
        """Handle one rotation step.

        Args:
            cmd: RotateSecret command.

        Returns:
            Success(None) when the step completed (or was a safe replay).
            Failure(DomainError) otherwise.
        """
        log = self._logger.bind(secret_id=cmd.secret_id, token=cmd.token, step=cmd.step)

        result = self._dispatch(cmd)

        match result:
            case Success():
                log.info("Rotation step completed")
            case Failure(error=error):
                log.error(
                    "Rotation step failed",
                    error_code=error.code.value,
                    error_detail=error.message,
                )
        return result

    def _dispatch(self, cmd: RotateSecret) -> Result[None, DomainError]:
        enabled = self._rotator.rotation_enabled(cmd.secret_id)
        if isinstance(enabled, Failure):
            return enabled

        try:
            step = RotationStep(cmd.step)
        except ValueError:
            return Failure(
                error=RotationError(
                    code=ErrorCode.ROTATION_INVALID_STEP,
                    message=f"Invalid rotation step: {cmd.step}",
                    details={"secret_id": cmd.secret_id, "step": cmd.step},
                )
            )

        match step:
            case RotationStep.CREATE:
                return self._rotator.create_secret(cmd.secret_id, cmd.token)
            case RotationStep.SET:
                return self._rotator.set_secret(
                    cmd.secret_id, cmd.token, self._apply_pending
                )
            case RotationStep.TEST:
                return self._rotator.test_secret(
                    cmd.secret_id, cmd.token, self._test_pending
                )
            case RotationStep.FINISH:
                return self._rotator.finish_secret(cmd.secret_id, cmd.token)

    def _apply_pending(self, current: str, pending: str) -> Result[None, DomainError]:
        """Point the CloudFront origin header at the pending value."""
        if not self._distribution_id or not self._header_name or self._updater is None:
            self._logger.warning(
                "Distribution update skipped: distribution id or header name missing"
            )
            return Success(value=None)

        return self._updater.update(
            self._distribution_id,
            [update_custom_header(self._header_name, pending)],
        )

    def _test_pending(self, pending: str) -> Result[None, DomainError]:
        """Validate the pending value before it becomes current.

        The origin header already carries the pending value after setSecret;
        there is no end-to-end probe of the distribution yet, so only the
        value itself is checked.
        """
        if not pending:
            return Failure(
                error=RotationError(
                    code=ErrorCode.ROTATION_TEST_FAILED,
                    message="Pending secret value is empty",
                )
            )
        return Success(value=None)
