"""Tests for the public listing filters on advertisements and newspapers."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.domain.advertisement.model.advertisement import Advertisement
from newsroom.domain.newspaper.model.newspaper import Newspaper
from newsroom.infrastructure.persistence.repository.advertisement import (
    SqlAdvertisementRepository,
)
from newsroom.infrastructure.persistence.repository.newspaper import SqlNewspaperRepository


def _ad(title: str, **fields) -> Advertisement:
    return Advertisement.create(title=title, image_url=f"/uploads/{title}.png", **fields)


@pytest.mark.asyncio
async def test_expired_ads_are_hidden(session: AsyncSession) -> None:
    repo = SqlAdvertisementRepository(session)
    now = datetime.now(UTC)
    running = _ad("running", expiry_date=now + timedelta(days=1))
    open_ended = _ad("open-ended")
    expired = _ad("expired", expiry_date=now - timedelta(minutes=1))
    for ad in (running, open_ended, expired):
        await repo.save(ad)

    listed = {ad.id for ad in await repo.list()}

    assert listed == {running.id, open_ended.id}


@pytest.mark.asyncio
async def test_inactive_ads_only_when_requested(session: AsyncSession) -> None:
    repo = SqlAdvertisementRepository(session)
    active = _ad("active")
    paused = _ad("paused", is_active=False)
    paused_expired = _ad(
        "paused-expired", is_active=False, expiry_date=datetime(2000, 1, 1, tzinfo=UTC)
    )
    for ad in (active, paused, paused_expired):
        await repo.save(ad)

    assert [ad.id for ad in await repo.list()] == [active.id]
    assert [ad.id for ad in await repo.list(is_active=False)] == [paused.id]


def test_expiry_is_normalised_to_utc() -> None:
    tashkent = timezone(timedelta(hours=5))
    ad = _ad("local", expiry_date=datetime(2030, 6, 1, 12, 0, tzinfo=tashkent))

    assert ad.expiry_date == datetime(2030, 6, 1, 7, 0, tzinfo=UTC)
    assert ad.expiry_date.utcoffset() == timedelta(0)


@pytest.mark.asyncio
async def test_newspapers_within_inclusive_date_range(session: AsyncSession) -> None:
    repo = SqlNewspaperRepository(session)
    for day in (1, 10, 20, 30):
        await repo.save(
            Newspaper.create(title=f"Son {day}", issue_date=date(2024, 4, day), pdf_url="/a.pdf")
        )

    ranged = await repo.list(from_date=date(2024, 4, 10), to_date=date(2024, 4, 20))
    from_only = await repo.list(from_date=date(2024, 4, 20))
    everything = await repo.list()

    assert [n.issue_date.day for n in ranged] == [20, 10]
    assert [n.issue_date.day for n in from_only] == [30, 20]
    assert len(everything) == 4
