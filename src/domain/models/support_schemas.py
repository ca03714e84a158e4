from enum import Enum

from pydantic import EmailStr, Field, field_validator

from src.domain.models.form_base import FormModel

MAX_ATTACHMENT_BYTES = 5 * 1024 * 1024


class InquiryType(Enum):
    TECHNICAL_ISSUE = "technical_issue"
    BILLING_QUESTION = "billing_question"
    FEATURE_REQUEST = "feature_request"
    GENERAL_INQUIRY = "general_inquiry"
    ACCOUNT_ACCESS = "account_access"


class FeedbackType(Enum):
    SUGGESTION = "suggestion"
    BUG_REPORT = "bug_report"
    COMPLIMENT = "compliment"
    OTHER = "other"


class ContactSupportForm(FormModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=5, max_length=100)
    inquiry_type: InquiryType
    message: str = Field(..., min_length=20, max_length=2000)

    def to_fields(self) -> dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "subject": self.subject,
            "inquiryType": self.inquiry_type.value,
            "message": self.message,
        }


class FeedbackForm(FormModel):
    feedback_type: FeedbackType
    email: EmailStr | None = None
    subject: str = Field(..., min_length=5, max_length=100)
    message: str = Field(..., min_length=10, max_length=1000)

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return v
