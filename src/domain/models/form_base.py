from typing import Any, ClassVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class FormModel(BaseModel):
    """Base for console forms: camelCase on the wire, snake_case in code."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }

    # Field names never echoed back to the page when a submission fails.
    secret_fields: ClassVar[frozenset[str]] = frozenset()

    def to_backend(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)

    def redacted(self) -> dict[str, Any]:
        """Submitted values without secrets, to repopulate the form after an error."""
        return self.model_dump(
            by_alias=True,
            mode="json",
            exclude=set(self.secret_fields),
            exclude_none=True,
        )
