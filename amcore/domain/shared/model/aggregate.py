from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    return datetime.now(UTC)


class Aggregate(BaseModel):
    """Mutable root entity loaded from and saved through a repository port."""

    model_config = ConfigDict(validate_assignment=True)

    id: str
    created_at: datetime
    updated_at: datetime

    def touch(self) -> None:
        self.updated_at = utc_now()
