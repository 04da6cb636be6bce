class ConsultationError(Exception):
    """Base error for the consultation backend."""


class ValidationError(ConsultationError):
    """Caller input rejected at the service boundary (e.g. no symptoms selected)."""


class InvalidStatusTransitionError(ValidationError):
    """A status patch would move a consultation backwards or out of `reviewed`."""


class NotFoundError(ConsultationError):
    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} not found")
