"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a principal lacks the role an operation needs."""

    def __init__(self, action: str, user_id: str):
        self.action = action
        self.user_id = user_id
        super().__init__(f"User {user_id} is not authorized to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PaymentNotRequiredError(DomainError):
    """Raised when a payment intent is requested by a user who needs none."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} does not require payment")


class StoreUnavailableError(DomainError):
    """The backing record store could not complete the operation.

    Fatal for the current request; recovery is left to the caller's retries.
    """

    pass


class PaymentProviderError(DomainError):
    """The payment provider failed to answer or rejected the request."""

    pass
