"""Advertisement aggregate."""

from datetime import UTC, datetime
from typing import Any

from pydantic import field_validator

from newsroom.domain.advertisement.model.value import AdvertisementId
from newsroom.domain.shared.model.aggregate import Aggregate


class Advertisement(Aggregate):
    """A banner shown on the site while active and not expired."""

    id: AdvertisementId
    title: str
    image_url: str
    link: str | None = None
    is_active: bool = True
    expiry_date: datetime | None = None
    created_at: datetime

    @field_validator("expiry_date")
    @classmethod
    def _expiry_in_utc(cls, value: datetime | None) -> datetime | None:
        # Naive values are taken as UTC; stored expiries compare against the UTC clock
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    @classmethod
    def create(
        cls,
        title: str,
        image_url: str,
        link: str | None = None,
        is_active: bool = True,
        expiry_date: datetime | None = None,
    ) -> "Advertisement":
        return cls(
            id=AdvertisementId.generate(),
            title=title,
            image_url=image_url,
            link=link,
            is_active=is_active,
            expiry_date=expiry_date,
            created_at=datetime.now(UTC),
        )

    def update(self, changes: dict[str, Any]) -> None:
        for field, value in changes.items():
            setattr(self, field, value)
