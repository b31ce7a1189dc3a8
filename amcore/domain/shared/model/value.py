from pydantic import BaseModel, ConfigDict


class Payload(BaseModel):
    """Incoming request body. Unknown keys are dropped, never trusted."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)
