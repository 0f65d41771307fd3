"""statistics.pyのテスト"""

import math
from datetime import datetime, timedelta, timezone

import pytest

from golf_stats.models import (
    FairwayHit,
    FairwayMissDirection,
    FairwayMissed,
    FairwayNotApplicable,
    GreenHitLocation,
    Hole,
    Round,
)
from golf_stats.statistics import Statistics, compute

RATIO_FIELDS = [
    "average_score",
    "gir_percentage",
    "fairway_hit_percentage",
    "fairways_missed_left_percentage",
    "fairways_missed_right_percentage",
    "average_putts_per_hole",
    "average_putts_per_round",
    "avg_putts_on_gir",
    "avg_putts_off_gir",
    "one_putt_percentage",
    "three_putt_percentage",
    "avg_score_par3",
    "avg_score_par4",
    "avg_score_par5",
    "avg_putts_par3",
    "avg_putts_par4",
    "avg_putts_par5",
    "gir_percentage_par3",
    "gir_percentage_par4",
    "gir_percentage_par5",
]


def _round_with_putts(date: datetime, putts: list[int]) -> Round:
    holes = [
        Hole(number=i, par=4, score=4, putts=p) for i, p in enumerate(putts, start=1)
    ]
    return Round(date=date, holes=holes)


class TestEmptyInput:
    """空入力のテスト"""

    def test_empty_list(self):
        """空のリストではすべて0の統計になること"""
        result = compute([])

        assert result.total_rounds == 0
        assert result.total_holes == 0
        for field in RATIO_FIELDS:
            assert getattr(result, field) == 0.0, field
        assert result.rounds_with_score_by_date == []
        assert result.rounds_with_putts_by_date == []
        assert result.gir_percentage_by_date == []
        assert result.fairway_percentage_by_date == []

    def test_equals_default_statistics(self):
        """空入力の結果がStatistics()と等しいこと"""
        assert compute([]) == Statistics()

    def test_accepts_generator(self, three_hole_round: Round):
        """リスト以外のイテラブルも受け付けること"""
        result = compute(r for r in [three_hole_round])

        assert result.total_rounds == 1

    def test_round_without_holes(self, round_date: datetime):
        """ホールの無いラウンドでも例外にならず値が有限であること"""
        result = compute([Round(date=round_date)])

        assert result.total_rounds == 1
        assert result.average_score == 0.0
        for field in RATIO_FIELDS:
            assert math.isfinite(getattr(result, field)), field
        assert result.gir_percentage_by_date[0].percentage == 0.0


class TestOverall:
    """全体集計のテスト"""

    def test_three_hole_round(self, three_hole_round: Round):
        """3ホールのラウンドの集計値"""
        result = compute([three_hole_round])

        assert result.total_rounds == 1
        assert result.total_holes == 3
        assert result.total_strokes == 13
        assert result.gir_percentage == pytest.approx(66.67, abs=0.01)
        assert result.fairway_opportunities == 2
        assert result.fairway_hit_percentage == 100.0
        assert result.average_putts_per_hole == pytest.approx(2.33, abs=0.01)
        assert result.average_putts_per_round == 7.0
        # 3ホール = 1/6ラウンド換算
        assert result.average_score == pytest.approx(78.0)

    def test_gir_percentage_counts_every_hole(self, three_hole_round: Round):
        """パーオン率の分母がすべてのホールであること"""
        result = compute([three_hole_round])

        assert result.gir_hits == 2
        assert result.gir_percentage == pytest.approx(100 * 2 / 3)

    def test_one_and_three_putts(self, round_date: datetime):
        """1パット率と3パット以上の率"""
        result = compute([_round_with_putts(round_date, [1, 3, 2])])

        assert result.one_putt_percentage == pytest.approx(33.33, abs=0.01)
        assert result.three_putt_percentage == pytest.approx(33.33, abs=0.01)

    def test_four_putts_count_as_three_putts(self, round_date: datetime):
        """4パット以上も3パットとして数えること"""
        result = compute([_round_with_putts(round_date, [4, 0, 2, 1])])

        assert result.three_putt_percentage == 25.0
        assert result.one_putt_percentage == 25.0

    def test_putts_per_round_uses_actual_round_count(self, round_date: datetime):
        """ラウンド平均パット数は実ラウンド数で割ること"""
        nine = _round_with_putts(round_date, [2] * 9)
        eighteen = _round_with_putts(round_date, [2] * 18)

        result = compute([nine, eighteen])

        assert result.average_putts_per_round == pytest.approx(54 / 2)
        assert result.average_putts_per_hole == 2.0


class TestAverageScore:
    """18ホール換算平均スコアのテスト"""

    def test_two_nines_equal_one_eighteen(self, full_round: Round, round_date: datetime):
        """9ホール2つと同じ内容の18ホール1つで平均スコアが一致すること"""
        front = Round(date=round_date, holes=full_round.holes[:9])
        back = Round(date=round_date, holes=full_round.holes[9:])

        eighteen = compute([full_round])
        nines = compute([front, back])

        assert eighteen.average_score == 72.0
        assert nines.average_score == eighteen.average_score

    def test_nine_hole_round_counts_half(self, round_date: datetime):
        """9ホールのラウンドは0.5ラウンドとして換算すること"""
        nine = Round(
            date=round_date,
            holes=[Hole(number=i, par=4, score=5) for i in range(1, 10)],
        )

        result = compute([nine])

        assert result.average_score == 90.0


class TestFairway:
    """フェアウェイ集計のテスト"""

    def test_all_par3_round(self, round_date: datetime):
        """パー3だけのラウンドはフェアウェイ判定対象が0であること"""
        par3_round = Round(
            date=round_date,
            holes=[Hole(number=i, par=3, score=3) for i in range(1, 10)],
        )

        result = compute([par3_round])

        assert result.fairway_opportunities == 0
        assert result.fairway_hit_percentage == 0.0
        assert result.fairways_missed_left_percentage == 0.0

    def test_par3_with_recorded_fairway_is_excluded(self, round_date: datetime):
        """パー3にフェアウェイ結果が入っていても対象外とすること"""
        holes = [
            Hole(number=1, par=3, fairway=FairwayHit()),
            Hole(number=2, par=4, fairway=FairwayMissed()),
        ]

        result = compute([Round(date=round_date, holes=holes)])

        assert result.fairway_opportunities == 1
        assert result.fairway_hits == 0
        assert result.fairway_hit_percentage == 0.0

    def test_not_applicable_on_par4_is_excluded(self, round_date: datetime):
        """パー4でも対象外のホールは分母に含めないこと"""
        holes = [
            Hole(number=1, par=4, fairway=FairwayNotApplicable()),
            Hole(number=2, par=4, fairway=FairwayHit()),
        ]

        result = compute([Round(date=round_date, holes=holes)])

        assert result.fairway_opportunities == 1
        assert result.fairway_hit_percentage == 100.0

    def test_miss_directions(self, round_date: datetime):
        """左右のミス率の分母が判定対象ホール数であること"""
        holes = [
            Hole(number=1, par=4, fairway=FairwayHit()),
            Hole(
                number=2,
                par=4,
                fairway=FairwayMissed(direction=FairwayMissDirection.LEFT),
            ),
            Hole(
                number=3,
                par=5,
                fairway=FairwayMissed(direction=FairwayMissDirection.RIGHT),
            ),
            Hole(number=4, par=4, fairway=FairwayMissed()),
            Hole(number=5, par=3),
        ]

        result = compute([Round(date=round_date, holes=holes)])

        assert result.fairway_opportunities == 4
        assert result.fairway_hit_percentage == 25.0
        assert result.fairways_missed_left_percentage == 25.0
        assert result.fairways_missed_right_percentage == 25.0


class TestByPar:
    """パー別集計のテスト"""

    def test_by_par_averages(self, three_hole_round: Round):
        """パー別の平均スコア・パット・パーオン率"""
        result = compute([three_hole_round])

        assert result.avg_score_par3 == 3.0
        assert result.avg_score_par4 == 4.0
        assert result.avg_score_par5 == 6.0
        assert result.avg_putts_par3 == 2.0
        assert result.avg_putts_par5 == 3.0
        assert result.gir_percentage_par3 == 100.0
        assert result.gir_percentage_par5 == 0.0

    def test_no_par3_holes(self, round_date: datetime):
        """パー3が無い場合はパー3の値が0.0になること"""
        holes = [Hole(number=i, par=4, score=5, putts=2) for i in range(1, 5)]

        result = compute([Round(date=round_date, holes=holes)])

        assert result.gir_percentage_par3 == 0.0
        assert not math.isnan(result.gir_percentage_par3)
        assert result.avg_score_par3 == 0.0
        assert result.avg_putts_par3 == 0.0
        assert result.avg_score_par4 == 5.0

    def test_unusual_par_skipped_from_buckets(self, round_date: datetime):
        """パー6のホールは全体集計に含まれ、パー別集計からは除かれること"""
        holes = [
            Hole(number=1, par=6, score=7, putts=3),
            Hole(number=2, par=4, score=4, putts=2),
        ]

        result = compute([Round(date=round_date, holes=holes)])

        assert result.total_holes == 2
        assert result.total_strokes == 11
        assert result.total_putts == 5
        assert result.avg_score_par4 == 4.0
        assert result.avg_score_par5 == 0.0
        assert result.avg_putts_par4 == 2.0


class TestPuttingBreakdown:
    """パーオン有無別パット数のテスト"""

    def test_putts_on_and_off_gir(self, three_hole_round: Round):
        """パーオンしたホールとしなかったホールで分けて平均すること"""
        result = compute([three_hole_round])

        assert result.avg_putts_on_gir == 2.0
        assert result.avg_putts_off_gir == 3.0

    def test_all_gir(self, full_round: Round):
        """全ホールパーオンの場合はパーオン外の平均が0.0になること"""
        result = compute([full_round])

        assert result.avg_putts_on_gir == 2.0
        assert result.avg_putts_off_gir == 0.0


class TestTrends:
    """推移データのテスト"""

    def test_sorted_by_date(self, full_round: Round, three_hole_round: Round):
        """入力順に関わらず日付の昇順に並ぶこと"""
        later = full_round.model_copy(
            update={"date": full_round.date + timedelta(days=7)}
        )
        earlier = three_hole_round.model_copy(
            update={"date": three_hole_round.date - timedelta(days=7)}
        )

        result = compute([later, earlier])

        scores = result.rounds_with_score_by_date
        assert [pair.date for pair in scores] == [earlier.date, later.date]
        assert scores[0].score == 13
        assert scores[0].score_relative_to_par == 1
        assert scores[1].score == 72
        assert scores[1].score_relative_to_par == 0
        assert [pair.putts for pair in result.rounds_with_putts_by_date] == [7, 36]
        assert result.gir_percentage_by_date[0].percentage == pytest.approx(200 / 3)
        assert result.gir_percentage_by_date[1].percentage == 100.0
        assert [p.percentage for p in result.fairway_percentage_by_date] == [
            100.0,
            100.0,
        ]

    def test_same_date_keeps_input_order(self, round_date: datetime):
        """同じ日付のラウンドは入力順のまま並ぶこと"""
        first = _round_with_putts(round_date, [2, 2])
        second = _round_with_putts(round_date, [1, 1, 1])
        second.holes[0].score = 6
        earliest = _round_with_putts(round_date - timedelta(days=1), [3])

        result = compute([first, second, earliest])

        assert [p.score for p in result.rounds_with_score_by_date] == [4, 8, 14]
        assert [p.putts for p in result.rounds_with_putts_by_date] == [3, 4, 3]
        assert [p.date for p in result.gir_percentage_by_date] == [
            earliest.date,
            first.date,
            second.date,
        ]

    def test_mixed_timezone_dates(self):
        """タイムゾーン付きと無しの日付が混在しても集計できること"""
        aware = Round.create_new(
            18, date=datetime(2025, 4, 28, 9, 0, tzinfo=timezone.utc)
        )
        naive = Round.create_new(9, date=datetime(2025, 4, 26, 9, 0))

        result = compute([aware, naive])

        assert result.total_rounds == 2
        assert [p.date for p in result.rounds_with_score_by_date] == [
            naive.date,
            aware.date,
        ]
        assert [p.putts for p in result.rounds_with_putts_by_date] == [0, 0]

    def test_one_entry_per_round(self, full_round: Round, round_date: datetime):
        """ラウンドごとに1件ずつ追加されること"""
        rounds = [
            full_round.model_copy(update={"date": round_date + timedelta(days=i)})
            for i in range(3)
        ]

        result = compute(rounds)

        assert len(result.rounds_with_score_by_date) == 3
        assert len(result.rounds_with_putts_by_date) == 3
        assert len(result.gir_percentage_by_date) == 3
        assert len(result.fairway_percentage_by_date) == 3

    def test_per_round_fairway_percentage(self, round_date: datetime):
        """ラウンドごとのフェアウェイキープ率"""
        holes = [
            Hole(number=1, par=4, fairway=FairwayHit()),
            Hole(number=2, par=4, fairway=FairwayMissed()),
            Hole(number=3, par=3),
        ]

        result = compute([Round(date=round_date, holes=holes)])

        assert result.fairway_percentage_by_date[0].percentage == 50.0


class TestPurity:
    """入力を変更しないことのテスト"""

    def test_input_not_mutated(self, three_hole_round: Round, full_round: Round):
        """集計前後でラウンドの内容が変わらないこと"""
        rounds = [full_round, three_hole_round]
        before = [r.model_dump() for r in rounds]

        compute(rounds)

        assert [r.model_dump() for r in rounds] == before
        assert rounds == [full_round, three_hole_round]

    def test_repeated_calls_are_equal(self, three_hole_round: Round):
        """同じ入力からは同じ結果になること"""
        assert compute([three_hole_round]) == compute([three_hole_round])

    def test_to_dict(self, three_hole_round: Round):
        """to_dict()で日付がISO形式の文字列になること"""
        result = compute([three_hole_round]).to_dict()

        assert result["total_rounds"] == 1
        assert result["rounds_with_score_by_date"][0]["date"] == "2025-04-28T09:00:00+09:00"


class TestGreenHitLocations:
    """着弾位置とパーオンの関係のテスト"""

    @pytest.mark.parametrize("location", list(GreenHitLocation))
    def test_gir_iff_center(self, location: GreenHitLocation, round_date: datetime):
        """CENTERのときのみパーオンとして数えること"""
        hole = Hole(number=1, par=4, green_hit_location=location)

        result = compute([Round(date=round_date, holes=[hole])])

        expected = 100.0 if location is GreenHitLocation.CENTER else 0.0
        assert hole.is_gir is (location is GreenHitLocation.CENTER)
        assert result.gir_percentage == expected
