"""
Signup Service Data Models

Canonical data structures for the signup funnel: the stored documents
(campaigns, pages, users, signups), the resolved page view handed to the
signup form, and the request/response models of the HTTP API.

Stored documents use camelCase keys; models expose snake_case attributes
and keep the document keys as aliases.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


# ====================
# Enums
# ====================


class ResolutionStatus(str, Enum):
    """Outcome of a page lookup"""
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


# ====================
# Base
# ====================


class DocumentModel(BaseModel):
    """Base model for documents read from the data store"""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )

    @field_validator("id", mode="before", check_fields=False)
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        # ObjectId and friends are exposed in their canonical string form
        return str(value) if value is not None else value

    @classmethod
    def from_document(cls, document: Optional[Dict[str, Any]]):
        """Build a model from a raw document, or None"""
        if document is None:
            return None
        return cls.model_validate(document)


# ====================
# Stored Documents
# ====================


class Campaign(DocumentModel):
    """Tenant scope grouping pages and users"""
    id: str = Field(..., alias="_id")
    domains: List[str] = Field(default_factory=list)
    name: str


class Page(DocumentModel):
    """A shareable signup landing page"""
    id: str = Field(..., alias="_id")
    code: str
    campaign: str
    title: str
    subtitle: str = ""
    background: str = ""
    created_by: Optional[str] = Field(None, alias="createdBy")

    @field_validator("campaign", "created_by", mode="before")
    @classmethod
    def _stringify_reference(cls, value: Any) -> Any:
        return str(value) if value is not None else value


class User(DocumentModel):
    """
    Campaign member.

    Only id and first_name are used by the funnel. The other fields are
    optional and loosely typed so older or newer records still load.
    """
    id: str = Field(..., alias="_id")
    campaign: Optional[str] = None
    email: Optional[str] = None
    password_hash: Optional[str] = Field(None, alias="password")
    first_name: str = Field(..., alias="firstName")
    zip: Optional[str] = None
    email_frequency: Optional[str] = Field(None, alias="emailFrequency")
    created_at: Optional[Any] = Field(None, alias="createdAt")
    last_updated_at: Optional[Any] = Field(None, alias="lastUpdatedAt")

    @field_validator("campaign", mode="before")
    @classmethod
    def _stringify_campaign(cls, value: Any) -> Any:
        return str(value) if value is not None else value


# ====================
# Page Resolution
# ====================


class ResolvedPageView(BaseModel):
    """Everything the signup form needs to render a page"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    code: str
    title: str
    subtitle: str = ""
    background: str = ""
    created_by_first_name: str = Field(..., alias="createdByFirstName")

    @property
    def share_text(self) -> str:
        return f"{self.title} {self.subtitle}"


@dataclass(frozen=True)
class PageResolution:
    """Tagged result of resolving a page code within a campaign"""
    status: ResolutionStatus
    code: str
    view: Optional[ResolvedPageView] = None
    error: Optional[Exception] = None

    @classmethod
    def found(cls, view: ResolvedPageView) -> "PageResolution":
        return cls(status=ResolutionStatus.FOUND, code=view.code, view=view)

    @classmethod
    def not_found(cls, code: str) -> "PageResolution":
        return cls(status=ResolutionStatus.NOT_FOUND, code=code)

    @classmethod
    def failed(cls, code: str, error: Exception) -> "PageResolution":
        return cls(status=ResolutionStatus.ERROR, code=code, error=error)

    @property
    def is_found(self) -> bool:
        return self.status == ResolutionStatus.FOUND


# ====================
# Signup Form
# ====================


class FieldDescriptor(BaseModel):
    """A single input of a signup step"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    input_type: str = "text"
    required: bool = True
    label_key: str = ""
    pattern: Optional[str] = None
    max_length: Optional[int] = Field(None, gt=0)


class StepDescriptor(BaseModel):
    """Serializable description of a signup step"""
    title: str
    subtitle: str
    button_copy_key: str
    fields: List[FieldDescriptor]
    show_sms_disclaimer: bool = False


class SubmissionResult(BaseModel):
    """Outcome of one step submission"""
    success: bool
    status_code: Optional[int] = None
    message: Optional[str] = None
    errors: List[Dict[str, Any]] = Field(default_factory=list)


class CompletionView(BaseModel):
    """What the completed form shows instead of a step"""
    created_by_first_name: str
    share_text: str
    create_link: str


# ====================
# Request/Response Models
# ====================


class SignupRequest(BaseModel):
    """Body of POST /api/v1/signup: the accumulated form values plus the page code"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=32)
    first_name: Optional[str] = Field(None, alias="firstName", max_length=100)
    last_name: Optional[str] = Field(None, alias="lastName", max_length=100)
    zip: Optional[str] = Field(None, max_length=10)

    def submitted_values(self) -> Dict[str, Any]:
        """Values to store, keyed like the stored documents"""
        values = self.model_dump(by_alias=True, exclude_none=True, exclude={"code"})
        values["email"] = str(self.email).lower()
        return values


class SignupResponse(BaseModel):
    """Response of POST /api/v1/signup"""
    success: bool = True
    message: str = "Signup recorded"


class PageMeta(BaseModel):
    """Share metadata for the page head"""
    title: str
    og_title: str
    og_description: str
    twitter_card: str = "summary_large_image"
    twitter_title: str
    twitter_description: str

    @classmethod
    def for_view(cls, view: ResolvedPageView) -> "PageMeta":
        return cls(
            title=view.title,
            og_title=view.title,
            og_description=view.subtitle,
            twitter_title=view.title,
            twitter_description=view.subtitle,
        )


class SignupPageResponse(BaseModel):
    """Response of GET /api/v1/pages/{code}"""
    page: ResolvedPageView
    meta: PageMeta
    steps: List[StepDescriptor]


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    service: str
    port: int
    version: str
    dependencies: Dict[str, str] = Field(default_factory=dict)


class ReadinessResponse(BaseModel):
    """Readiness check response"""
    ready: bool
    checks: Dict[str, bool] = Field(default_factory=dict)
    details: Dict[str, str] = Field(default_factory=dict)


class LivenessResponse(BaseModel):
    """Liveness check response"""
    alive: bool
    uptime_seconds: float

