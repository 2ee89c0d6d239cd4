"""
Job-related Pydantic schemas.

Request schemas are the declarative rules the validator checks payloads
against: strict types, declared bounds, and no unknown fields. Response
schemas serialise with camelCase keys.
"""
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


# ============================================================
# REQUEST SCHEMAS
# ============================================================

class RequestSchema(BaseModel):
    """Base for inbound schemas: camelCase keys only, no coercion, no extras."""
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid", strict=True)


class JobNew(RequestSchema):
    """Schema for creating a job posting."""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[float] = Field(default=None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(RequestSchema):
    """
    Schema for a partial job update.

    Only title, salary and equity are declared, so id, companyHandle or
    any other key fails as an extra field.
    """
    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[float] = Field(default=None, ge=0, le=1)

    @field_validator("title", mode="before")
    @classmethod
    def title_not_null(cls, value):
        if value is None:
            raise PydanticCustomError("null_title", "Input should not be null")
        return value

    @model_validator(mode="after")
    def check_fields_provided(self):
        if not self.model_fields_set:
            raise PydanticCustomError(
                "empty_update",
                "At least one of title, salary, equity must be provided"
            )
        return self


class JobSearch(RequestSchema):
    """Schema for normalized search filters (see services.filters)."""
    min_salary: Optional[int] = Field(default=None, ge=0)
    has_equity: bool = False
    title: Optional[str] = None


# ============================================================
# RESPONSE SCHEMAS
# ============================================================

class ResponseSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class CompanyResponse(ResponseSchema):
    """Company detail embedded in a single-job response."""
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class JobResponse(ResponseSchema):
    """Schema for a job record."""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company_handle: str


class JobListItem(JobResponse):
    """Search result row, with the joined company name."""
    company_name: str


class JobDetail(JobResponse):
    """Single job with its company."""
    company: CompanyResponse


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetail


class JobListEnvelope(BaseModel):
    jobs: List[JobListItem]


class DeletedResponse(BaseModel):
    deleted: int


class AppliedResponse(BaseModel):
    applied: int
