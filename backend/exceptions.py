"""Domain errors raised by the service layer.

Every error is raised before the first write of an operation; the surrounding
transaction rolls back so nothing partial is persisted.
"""


class DomainError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EntityNotFound(DomainError):
    status_code = 404

    def __init__(self, entity: str, entity_id=None, message: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        if message is None:
            message = f"{entity} not found with id: {entity_id}"
        super().__init__(message)


class DuplicateEntity(DomainError):
    status_code = 409


class BusinessRule(DomainError):
    status_code = 422
