class ProspectCRMError(Exception):
    """Base class for all CRM domain exceptions.

    Every custom exception in this module inherits from here so that a
    single ``except ProspectCRMError`` clause can catch any domain
    error.
    """

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(detail)


class ProspectNotFoundError(ProspectCRMError):
    """Raised when a requested prospect does not exist."""

    def __init__(self, detail: str = "Prospect not found"):
        super().__init__(detail)


class PhotoNotFoundError(ProspectCRMError):
    """Raised when a requested photo does not exist."""

    def __init__(self, detail: str = "Photo not found"):
        super().__init__(detail)


class InvalidProspectDataError(ProspectCRMError):
    """Raised when input passes schema parsing but is still unacceptable.

    Covers checks that need the stored row (immutable ``id`` /
    ``created_at`` being changed) or the raw upload payload.
    """

    def __init__(self, detail: str = "Invalid prospect data"):
        super().__init__(detail)
