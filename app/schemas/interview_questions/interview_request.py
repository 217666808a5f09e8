"""
Description:
Schema for the job-role parameters sent to the question generation endpoint.

Every field is optional and accepts any JSON value. Missing fields stay None and
are rendered as empty text in the prompt; strings pass through unchanged and any
other value (number, boolean, object, array) is kept as its JSON text, e.g.
"workExperience": 3 becomes "3" and "jobType": true becomes "true".

Dependencies:
- pydantic: For data validation and settings management.
- json: For rendering non-string values as text.
"""
import json
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, field_validator

class InterviewRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    jobType: Optional[str] = None
    workExperience: Optional[str] = None
    companyType: Optional[str] = None
    location: Optional[str] = None

    @field_validator("jobType", "workExperience", "companyType", "location", mode="before")
    @classmethod
    def as_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value)
