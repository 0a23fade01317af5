class APIError(Exception):
    def __init__(self, code: str, message: str, http_status: int = 400, details: dict = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status
        self.details = details


class NotFoundError(APIError):
    def __init__(self, message: str, details: dict = None):
        super().__init__("NOT_FOUND", message, 404, details)


class EntityNotFoundError(NotFoundError):
    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            f"{entity.capitalize()} not found ({entity_id})",
            {"entity": entity, "id": entity_id},
        )
