"""サンプルデータモジュール

動作確認・デモ用のラウンドデータを生成する。
"""

import random
from datetime import datetime, timedelta

from .models import (
    Club,
    ClubType,
    GreenHitLocation,
    Hole,
    Round,
    default_par,
    fairway_from_legacy,
)


def _nine_hole_round(rng: random.Random, date: datetime) -> Round:
    holes = []
    for number in range(1, 10):
        par = default_par(number)
        holes.append(
            Hole(
                number=number,
                par=par,
                score=par + rng.choice([-1, 0, 0, 1]),
                tee_club=Club.find("Driver"),
                fairway=fairway_from_legacy(rng.random() < 0.5),
                approach_distance=rng.randint(100, 180),
                approach_club=Club.find("7 Iron"),
                green_hit_location=rng.choice(
                    [
                        GreenHitLocation.CENTER,
                        GreenHitLocation.CENTER,
                        GreenHitLocation.SHORT,
                        GreenHitLocation.LONG_RIGHT,
                    ]
                ),
                putts=rng.randint(1, 3),
                first_putt_distance=rng.randint(3, 30),
            )
        )
    return Round(date=date, course_name="Local Course", holes=holes)


def _championship_round(rng: random.Random, date: datetime) -> Round:
    clubs = Club.catalog()
    # パーオン多めに重み付け
    locations = [
        GreenHitLocation.CENTER,
        GreenHitLocation.CENTER,
        GreenHitLocation.CENTER,
        GreenHitLocation.LONG,
        GreenHitLocation.SHORT,
        GreenHitLocation.LEFT,
        GreenHitLocation.RIGHT,
    ]
    holes = []
    for number in range(1, 19):
        par = default_par(number)
        fairway_hit = None if par == 3 else rng.random() < 0.5
        holes.append(
            Hole(
                number=number,
                par=par,
                score=par + rng.choice([-1, 0, 0, 1, 2]),
                tee_club=rng.choice(clubs),
                fairway=fairway_from_legacy(fairway_hit),
                approach_distance=rng.randint(80, 200),
                approach_club=Club.find("8 Iron"),
                green_hit_location=rng.choice(locations),
                putts=rng.randint(1, 3),
                first_putt_distance=rng.randint(2, 25),
            )
        )
    return Round(date=date, course_name="Championship Course", holes=holes)


def _recent_round(rng: random.Random, date: datetime) -> Round:
    driver = next(club for club in Club.catalog() if club.type is ClubType.DRIVER)
    locations = [
        GreenHitLocation.CENTER,
        GreenHitLocation.CENTER,
        GreenHitLocation.CENTER,
        GreenHitLocation.CENTER,
        GreenHitLocation.LONG,
        GreenHitLocation.SHORT,
    ]
    holes = []
    for number in range(1, 19):
        par = default_par(number)
        fairway_hit = None if par == 3 else rng.choice([True, True, False])
        holes.append(
            Hole(
                number=number,
                par=par,
                score=par + rng.choice([-2, -1, 0, 0, 0, 1]),
                tee_club=driver,
                fairway=fairway_from_legacy(fairway_hit),
                approach_distance=rng.randint(90, 180),
                approach_club=Club.find("9 Iron"),
                green_hit_location=rng.choice(locations),
                putts=rng.choice([1, 2, 2]),
                first_putt_distance=rng.randint(3, 20),
            )
        )
    return Round(date=date, course_name="City Links", holes=holes)


def sample_rounds(today: datetime | None = None, seed: int | None = None) -> list[Round]:
    """サンプルラウンドを生成する

    2週間前の9ホール、1週間前の18ホール、2日前の18ホールの3ラウンド。

    Args:
        today: 基準日時(省略時は現在時刻)
        seed: 乱数シード(同じシードならホールの内容が同じになる)

    Returns:
        list[Round]: サンプルラウンドのリスト(古い順)
    """
    if today is None:
        today = datetime.now().astimezone()
    rng = random.Random(seed)

    return [
        _nine_hole_round(rng, today - timedelta(days=14)),
        _championship_round(rng, today - timedelta(days=7)),
        _recent_round(rng, today - timedelta(days=2)),
    ]
