"""Handler for AuthorizeApiKey query.

Flow:
1. Trim the presented key
2. Ask the authorizer (cache first, store on cool-down)
3. Map the result: Success -> ALLOW, UNAUTHORIZED -> DENY, anything else -> ERROR
4. Record outcome and remote-call metrics
"""

from secretguard.application.queries.authorization_queries import (
    AuthorizationDecision,
    AuthorizationOutcome,
    AuthorizeApiKey,
)
from secretguard.core.enums import ErrorCode
from secretguard.core.result import Failure, Success
from secretguard.domain.protocols import LoggerProtocol, SecretAuthorizerProtocol
from secretguard.infrastructure.metrics import AuthorizationMetrics


class AuthorizeApiKeyHandler:
    """Authorizes API keys for a single configured secret.

    Args:
        secret_id: Secret ARN or name holding the API key.
        authorizer: Authorizer service.
        metrics: Outcome counters.
        logger: Structured logger.
    """

    def __init__(
        self,
        secret_id: str,
        authorizer: SecretAuthorizerProtocol,
        metrics: AuthorizationMetrics,
        logger: LoggerProtocol,
    ) -> None:
        self._secret_id = secret_id
        self._authorizer = authorizer
        self._metrics = metrics
        self._logger = logger

    def handle(self, query: AuthorizeApiKey) -> AuthorizationDecision:
        """Handle an authorization query.

        Args:
            query: AuthorizeApiKey query.

        Returns:
            AuthorizationDecision; never raises for authorization outcomes.
        """
        result, used_remote_call = self._authorizer.authorize(
            self._secret_id, query.api_key.strip()
        )
        if used_remote_call:
            self._metrics.record_secret_request()

        match result:
            case Success():
                self._metrics.record_outcome("authorized")
                return AuthorizationDecision(
                    outcome=AuthorizationOutcome.ALLOW,
                    used_remote_call=used_remote_call,
                )
            case Failure(error=error) if error.is_unauthorized:
                self._metrics.record_outcome("unauthorized")
                return AuthorizationDecision(
                    outcome=AuthorizationOutcome.DENY,
                    used_remote_call=used_remote_call,
                    error=error,
                )
            case Failure(error=error):
                if error.code == ErrorCode.INVALID_INPUT:
                    self._metrics.record_outcome("invalid_input")
                else:
                    self._metrics.record_outcome("internal_error")
                    self._logger.error(
                        "Authorization could not be confirmed",
                        secret_id=self._secret_id,
                        error_code=error.code.value,
                        cause=str(error.cause) if error.cause else None,
                    )
                return AuthorizationDecision(
                    outcome=AuthorizationOutcome.ERROR,
                    used_remote_call=used_remote_call,
                    error=error,
                )
