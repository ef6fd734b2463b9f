"""Configuration schemas for the configurable pattern examples."""

from pydantic import BaseModel, Field, field_validator, model_validator


class NotificationConfig(BaseModel):
    """Notification factory configuration."""

    default_channel: str = Field(
        "email", description="Channel used when an unknown channel is requested"
    )

    @field_validator("default_channel")
    @classmethod
    def normalize_channel(cls, v: str) -> str:
        """Channels are matched case-insensitively."""
        channel = v.strip().lower()
        if not channel:
            raise ValueError("Default channel must not be empty")
        return channel


class LoanApprovalConfig(BaseModel):
    """Approval limits for the loan approval chain."""

    clerk_limit: float = Field(10000, description="Clerk approves amounts below this")
    senior_clerk_limit: float = Field(
        30000, description="Senior clerk approves amounts below this"
    )

    @field_validator("clerk_limit", "senior_clerk_limit")
    @classmethod
    def validate_limit(cls, v: float) -> float:
        """Validate a single approval limit."""
        if v <= 0:
            raise ValueError("Approval limits must be positive")
        return v

    @model_validator(mode="after")
    def validate_ordering(self) -> "LoanApprovalConfig":
        """Each approver in the chain must handle larger amounts than the last."""
        if self.senior_clerk_limit <= self.clerk_limit:
            raise ValueError("senior_clerk_limit must be greater than clerk_limit")
        return self
