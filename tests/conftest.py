"""テスト共通フィクスチャ"""

from datetime import datetime, timedelta, timezone

import pytest

from golf_stats.models import (
    FairwayHit,
    FairwayNotApplicable,
    GreenHitLocation,
    Hole,
    Round,
)

JST = timezone(timedelta(hours=9))


@pytest.fixture
def round_date() -> datetime:
    return datetime(2025, 4, 28, 9, 0, tzinfo=JST)


@pytest.fixture
def three_hole_round(round_date: datetime) -> Round:
    """パー3/4/5の3ホールだけのラウンド"""
    return Round(
        date=round_date,
        course_name="テストゴルフ場",
        holes=[
            Hole(
                number=1,
                par=3,
                score=3,
                putts=2,
                fairway=FairwayNotApplicable(),
                green_hit_location=GreenHitLocation.CENTER,
            ),
            Hole(
                number=2,
                par=4,
                score=4,
                putts=2,
                fairway=FairwayHit(),
                green_hit_location=GreenHitLocation.CENTER,
            ),
            Hole(
                number=3,
                par=5,
                score=6,
                putts=3,
                fairway=FairwayHit(),
                green_hit_location=GreenHitLocation.SHORT,
            ),
        ],
    )


@pytest.fixture
def full_round(round_date: datetime) -> Round:
    """全ホールをパー・2パット・パーオンで回った18ホールのラウンド"""
    played = Round.create_new(18, date=round_date, course_name="テストゴルフ場")
    for hole in played.holes:
        hole.score = hole.par
        hole.putts = 2
        if not hole.is_par3:
            hole.fairway = FairwayHit()
    return played
