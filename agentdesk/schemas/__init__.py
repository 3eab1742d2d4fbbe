"""Pydantic schemas used across the project."""
from datetime import date, datetime
from typing import Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from agentdesk.core.crypto import check_password_policy
from agentdesk.modules.agents.models import Region

DataT = TypeVar("DataT")
RowT = TypeVar("RowT")


class ApiEnvelope(BaseModel, Generic[DataT]):
    status: Literal["ok", "error"] = "ok"
    data: Optional[DataT] = None
    message: Optional[str] = None


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input and serializes as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


# Users


class UserRegister(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def _password_policy(cls, value: str) -> str:
        return check_password_policy(value)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LogoutRequest(CamelModel):
    session_token: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
    created_at: Optional[datetime] = None


class LoginResponse(CamelModel):
    token: str
    session_token: str
    token_type: str = "bearer"
    user: UserResponse


class TokenValidation(CamelModel):
    valid: bool
    user: Optional[UserResponse] = None


class TokenData(BaseModel):
    user_id: str
    email: str


# Agents


class AgentCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    region: Region
    rating: float = Field(..., ge=0, le=100)
    fee: float = Field(..., ge=0)


class AgentUpdate(CamelModel):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    region: Optional[Region] = None
    rating: Optional[float] = Field(default=None, ge=0, le=100)
    fee: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _no_explicit_nulls(self) -> "AgentUpdate":
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} may be omitted but not null")
        return self


class AgentResponse(CamelModel):
    id: str
    first_name: str
    last_name: str
    name: str
    region: Region
    rating: float
    fee: float


# Transactions


class TransactionCreate(CamelModel):
    amount: float = Field(..., gt=0)
    agent_id: str = Field(..., min_length=1)
    date: Optional[datetime] = None


class TransactionResponse(CamelModel):
    id: str
    amount: float
    date: datetime
    agent_id: Optional[str] = None


class TransactionRowResponse(CamelModel):
    id: str
    amount: float
    date: datetime
    agent_id: Optional[str] = None
    agent_first_name: Optional[str] = None
    agent_last_name: Optional[str] = None
    agent_region: Optional[str] = None
    agent_name: str


class ListingResponse(CamelModel):
    transactions: list[TransactionRowResponse]
    agents: list[AgentResponse]


# Reports


class AgentTotalResponse(CamelModel):
    agent_id: str
    agent_name: str
    total_amount: float


class DailyTotalResponse(CamelModel):
    date: date
    daily_total: float


class ReportResponse(CamelModel):
    agent_bar_data: list[AgentTotalResponse]
    transaction_line_data: list[DailyTotalResponse]
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ChartDatasetResponse(CamelModel):
    label: str
    data: list[float]


class ChartSeriesResponse(CamelModel):
    labels: list[str]
    datasets: list[ChartDatasetResponse]


class ReportSummaryResponse(CamelModel):
    total_amount: float
    max_agent_total: Optional[float] = None
    min_agent_total: Optional[float] = None


class ChartsResponse(CamelModel):
    bar: ChartSeriesResponse
    line: ChartSeriesResponse
    summary: ReportSummaryResponse


# Views


class ViewStateResponse(CamelModel):
    search_term: str
    region_filter: Optional[str] = None
    sort_key: str
    sort_direction: Literal["asc", "desc"]
    view_mode: Literal["paged", "scroll"]
    current_page: int


class ViewPageResponse(CamelModel, Generic[RowT]):
    rows: list[RowT]
    page: int
    total_pages: int
    page_size: int
    total_rows: int
    has_previous: bool
    has_next: bool
    state: ViewStateResponse


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
