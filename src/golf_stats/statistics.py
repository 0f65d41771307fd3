"""統計集計モジュール

ラウンドの一覧からスコア・ショット精度・パットの集計値と
日付順の推移データを算出する。入出力を持たない純粋関数として実装する。
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, Field

from .models import FairwayMissDirection, Round

logger = logging.getLogger(__name__)

STANDARD_HOLE_COUNT = 18
PAR_BUCKETS = (3, 4, 5)


class DateScorePair(BaseModel):
    """ラウンドごとのスコア推移データ"""

    date: datetime
    score: int
    score_relative_to_par: int


class DatePuttsPair(BaseModel):
    """ラウンドごとのパット数推移データ"""

    date: datetime
    putts: int


class DatePercentPair(BaseModel):
    """ラウンドごとの割合(%)推移データ"""

    date: datetime
    percentage: float


class Statistics(BaseModel):
    """集計結果

    割合・平均値は分母が0の場合0.0とする(NaN/無限大にはならない)。
    推移データはすべて日付の昇順に並ぶ。
    """

    # 件数
    total_rounds: int = 0
    total_holes: int = 0
    total_strokes: int = 0
    total_putts: int = 0
    gir_hits: int = 0
    fairway_opportunities: int = 0
    fairway_hits: int = 0

    # スコア・ショット精度
    average_score: float = Field(default=0.0, description="18ホール換算の平均スコア")
    gir_percentage: float = 0.0
    fairway_hit_percentage: float = 0.0
    fairways_missed_left_percentage: float = 0.0
    fairways_missed_right_percentage: float = 0.0

    # パット
    average_putts_per_hole: float = 0.0
    average_putts_per_round: float = 0.0
    avg_putts_on_gir: float = 0.0
    avg_putts_off_gir: float = 0.0
    one_putt_percentage: float = 0.0
    three_putt_percentage: float = Field(default=0.0, description="3パット以上の割合")

    # パー別
    avg_score_par3: float = 0.0
    avg_score_par4: float = 0.0
    avg_score_par5: float = 0.0
    avg_putts_par3: float = 0.0
    avg_putts_par4: float = 0.0
    avg_putts_par5: float = 0.0
    gir_percentage_par3: float = 0.0
    gir_percentage_par4: float = 0.0
    gir_percentage_par5: float = 0.0

    # 推移
    rounds_with_score_by_date: list[DateScorePair] = Field(default_factory=list)
    rounds_with_putts_by_date: list[DatePuttsPair] = Field(default_factory=list)
    gir_percentage_by_date: list[DatePercentPair] = Field(default_factory=list)
    fairway_percentage_by_date: list[DatePercentPair] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """辞書形式に変換(JSON出力用)

        Returns:
            dict: 集計結果の辞書表現
        """
        return self.model_dump(mode="json")


@dataclass
class _ParBucket:
    holes: int = 0
    strokes: int = 0
    putts: int = 0
    gir_hits: int = 0


def _ratio(numerator: float, denominator: float, scale: float = 1.0) -> float:
    """分母0を0.0として割り算する"""
    if denominator == 0:
        return 0.0
    return numerator / denominator * scale


def _percent(numerator: float, denominator: float) -> float:
    return _ratio(numerator, denominator, 100.0)


def compute(rounds: Iterable[Round]) -> Statistics:
    """ラウンドの一覧から統計を算出する

    全ラウンドの全ホールを1回ずつ走査して集計する。入力は変更しない。

    Args:
        rounds: ラウンドの一覧(空でもよい、日付順である必要はない)

    Returns:
        Statistics: 集計結果(空入力の場合はすべて0の統計)
    """
    total_rounds = 0
    equivalent_rounds = 0.0
    total_holes = 0
    total_strokes = 0
    total_putts = 0
    gir_hits = 0
    fairway_opportunities = 0
    fairway_hits = 0
    missed_left = 0
    missed_right = 0
    one_putts = 0
    three_putts = 0
    putts_on_gir = 0
    putts_off_gir = 0
    buckets = {par: _ParBucket() for par in PAR_BUCKETS}

    score_trend: list[DateScorePair] = []
    putts_trend: list[DatePuttsPair] = []
    gir_trend: list[DatePercentPair] = []
    fairway_trend: list[DatePercentPair] = []

    for round_ in rounds:
        total_rounds += 1
        # 9ホールのラウンドは0.5ラウンドとして数える
        equivalent_rounds += round_.hole_count / STANDARD_HOLE_COUNT

        for hole in round_.holes:
            total_holes += 1
            total_strokes += hole.score
            total_putts += hole.putts

            if hole.is_gir:
                gir_hits += 1
                putts_on_gir += hole.putts
            else:
                putts_off_gir += hole.putts

            if hole.putts == 1:
                one_putts += 1
            elif hole.putts >= 3:
                three_putts += 1

            fairway_hit = hole.fairway_hit
            if not hole.is_par3 and fairway_hit is not None:
                fairway_opportunities += 1
                if fairway_hit:
                    fairway_hits += 1
                elif hole.fairway_miss_direction is FairwayMissDirection.LEFT:
                    missed_left += 1
                elif hole.fairway_miss_direction is FairwayMissDirection.RIGHT:
                    missed_right += 1

            bucket = buckets.get(hole.par)
            if bucket is not None:
                bucket.holes += 1
                bucket.strokes += hole.score
                bucket.putts += hole.putts
                bucket.gir_hits += 1 if hole.is_gir else 0

        score_trend.append(
            DateScorePair(
                date=round_.date,
                score=round_.total_score,
                score_relative_to_par=round_.score_relative_to_par,
            )
        )
        putts_trend.append(DatePuttsPair(date=round_.date, putts=round_.total_putts))
        gir_trend.append(
            DatePercentPair(date=round_.date, percentage=round_.gir_percentage)
        )
        fairway_trend.append(
            DatePercentPair(date=round_.date, percentage=round_.fairway_hit_percentage)
        )

    logger.debug("統計を算出しました: %dラウンド, %dホール", total_rounds, total_holes)

    gir_holes = gir_hits
    off_gir_holes = total_holes - gir_hits
    par3, par4, par5 = (buckets[par] for par in PAR_BUCKETS)

    return Statistics(
        total_rounds=total_rounds,
        total_holes=total_holes,
        total_strokes=total_strokes,
        total_putts=total_putts,
        gir_hits=gir_hits,
        fairway_opportunities=fairway_opportunities,
        fairway_hits=fairway_hits,
        average_score=_ratio(total_strokes, equivalent_rounds),
        gir_percentage=_percent(gir_hits, total_holes),
        fairway_hit_percentage=_percent(fairway_hits, fairway_opportunities),
        fairways_missed_left_percentage=_percent(missed_left, fairway_opportunities),
        fairways_missed_right_percentage=_percent(missed_right, fairway_opportunities),
        average_putts_per_hole=_ratio(total_putts, total_holes),
        average_putts_per_round=_ratio(total_putts, total_rounds),
        avg_putts_on_gir=_ratio(putts_on_gir, gir_holes),
        avg_putts_off_gir=_ratio(putts_off_gir, off_gir_holes),
        one_putt_percentage=_percent(one_putts, total_holes),
        three_putt_percentage=_percent(three_putts, total_holes),
        avg_score_par3=_ratio(par3.strokes, par3.holes),
        avg_score_par4=_ratio(par4.strokes, par4.holes),
        avg_score_par5=_ratio(par5.strokes, par5.holes),
        avg_putts_par3=_ratio(par3.putts, par3.holes),
        avg_putts_par4=_ratio(par4.putts, par4.holes),
        avg_putts_par5=_ratio(par5.putts, par5.holes),
        gir_percentage_par3=_percent(par3.gir_hits, par3.holes),
        gir_percentage_par4=_percent(par4.gir_hits, par4.holes),
        gir_percentage_par5=_percent(par5.gir_hits, par5.holes),
        # 日付が同じ場合は入力順を保つ
        rounds_with_score_by_date=sorted(score_trend, key=lambda p: p.date),
        rounds_with_putts_by_date=sorted(putts_trend, key=lambda p: p.date),
        gir_percentage_by_date=sorted(gir_trend, key=lambda p: p.date),
        fairway_percentage_by_date=sorted(fairway_trend, key=lambda p: p.date),
    )
