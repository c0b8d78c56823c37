"""
Domain errors raised by the store and services.
Mapped to HTTP responses by the exception handlers in app.main.
"""


class WasteAlertError(Exception):
    """Base class for all domain errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(WasteAlertError):
    """Operation targets an alert or form type id that does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ValidationFailure(WasteAlertError):
    """Missing or invalid input, detected before any mutation happens."""

    status_code = 400


class PersistenceUnavailable(WasteAlertError):
    """The durable record store could not be read or written."""

    status_code = 503
