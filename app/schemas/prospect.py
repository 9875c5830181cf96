"""Prospect Pydantic schemas (create, partial update, filter, response)."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    model_validator,
)
from typing_extensions import Annotated, Self

from app.schemas.activity import ActivityOut
from app.schemas.common import ProspectPriority, ProspectStatus
from app.schemas.photo import PhotoOut


# Fields backed by NOT NULL columns; an explicit ``null`` cannot clear them
_NON_NULLABLE_ON_UPDATE = frozenset(
    {"first_name", "last_name", "email", "status", "priority"}
)

# Accepted in an update body only so they can be checked for tampering
_IMMUTABLE_ON_UPDATE = frozenset({"id", "created_at"})


def _check_email(value: str) -> str:
    """Check ``local@domain.tld`` syntax; the address is returned as sent,
    not in the normalized form email-validator computes."""
    try:
        result = validate_email(
            value, check_deliverability=False, test_environment=True
        )
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from None
    if "." not in result.ascii_domain:
        raise ValueError("value is not a valid email address: domain needs a TLD")
    return value


Email = Annotated[str, AfterValidator(_check_email)]

# Decimal in Python, plain number in JSON
Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]

# Same precision and scale as the NUMERIC(15, 2) column
EstimatedValue = Annotated[Money, Field(gt=0, max_digits=15, decimal_places=2)]


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class ProspectCreate(BaseModel):
    """Payload for POST /api/v1/prospects."""

    model_config = ConfigDict(use_enum_values=True)

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: Email
    phone: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    status: ProspectStatus = Field(default=ProspectStatus.new, validate_default=True)
    priority: ProspectPriority = Field(
        default=ProspectPriority.medium, validate_default=True
    )
    estimated_value: Optional[EstimatedValue] = None
    notes: Optional[str] = None


class ProspectUpdate(BaseModel):
    """Payload for PATCH /api/v1/prospects/{prospect_id}.

    Every field is optional and the set of fields the client actually
    sent is significant: a field that is *absent* leaves the stored
    value alone, while a field sent as ``null`` clears it.  Pydantic
    tracks this in ``model_fields_set``, which is what
    :meth:`changes` reads, so ``None`` here never means "absent".
    """

    model_config = ConfigDict(use_enum_values=True)

    id: Optional[int] = None
    created_at: Optional[datetime] = None

    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[Email] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    status: Optional[ProspectStatus] = None
    priority: Optional[ProspectPriority] = None
    estimated_value: Optional[EstimatedValue] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def reject_null_for_required_columns(self) -> Self:
        cleared = sorted(
            name
            for name in self.model_fields_set & _NON_NULLABLE_ON_UPDATE
            if getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Fields cannot be set to null: {', '.join(cleared)}")
        return self

    def changes(self) -> Dict[str, Any]:
        """Return only the explicitly supplied, mutable fields."""
        return self.model_dump(
            include=set(self.model_fields_set - _IMMUTABLE_ON_UPDATE)
        )


class ProspectFilter(BaseModel):
    """Optional list predicates, combined with AND."""

    model_config = ConfigDict(use_enum_values=True)

    status: Optional[ProspectStatus] = None
    priority: Optional[ProspectPriority] = None
    company: Optional[str] = None
    search: Optional[str] = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ProspectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    status: ProspectStatus
    priority: ProspectPriority
    estimated_value: Optional[Money] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ProspectWithDetails(ProspectOut):
    """A prospect together with its photos and activity log, newest first."""

    photos: List[PhotoOut] = Field(default_factory=list)
    activities: List[ActivityOut] = Field(default_factory=list)


class DeleteProspectResponse(BaseModel):
    success: bool
    id: Optional[int] = None
    message: str
