"""Newspaper aggregate: one printed issue, published as a PDF."""

from datetime import UTC, date, datetime
from typing import Any

from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.shared.model.aggregate import Aggregate


class Newspaper(Aggregate):
    id: NewspaperId
    title: str
    issue_date: date
    pdf_url: str
    cover_image: str | None = None
    created_at: datetime

    @classmethod
    def create(
        cls,
        title: str,
        issue_date: date,
        pdf_url: str,
        cover_image: str | None = None,
    ) -> "Newspaper":
        return cls(
            id=NewspaperId.generate(),
            title=title,
            issue_date=issue_date,
            pdf_url=pdf_url,
            cover_image=cover_image,
            created_at=datetime.now(UTC),
        )

    def update(self, changes: dict[str, Any]) -> None:
        for field, value in changes.items():
            setattr(self, field, value)
