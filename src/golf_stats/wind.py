"""風の影響計算モジュール

風速・風向からショット距離への影響(メートル)を見積もる。
風向は気象の慣例に従い「吹いてくる方向」(0度 = 正面からの向かい風)。
"""

import math

HEADWIND_FACTOR = 2.5
CROSSWIND_FACTOR = 0.8


def wind_components(
    wind_speed_ms: float, wind_direction_degrees: float
) -> tuple[float, float]:
    """風を向かい風成分と横風成分に分解する

    Args:
        wind_speed_ms: 風速(m/s)
        wind_direction_degrees: 風向(度)

    Returns:
        tuple[float, float]: (向かい風成分, 横風成分)。追い風は向かい風成分が負
    """
    radians = math.radians(wind_direction_degrees)
    return math.cos(radians) * wind_speed_ms, math.sin(radians) * wind_speed_ms


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def wind_impact(
    distance_meters: int, wind_speed_ms: float, wind_direction_degrees: float
) -> int:
    """風によるショット距離の増減を計算する

    正の値は飛距離が伸びる(追い風)、負の値は縮む(向かい風・横風)ことを表す。
    distance_metersは呼び出し側とのインターフェースを揃えるための引数で、
    計算には使わない。

    Args:
        distance_meters: ショット距離(メートル)
        wind_speed_ms: 風速(m/s)
        wind_direction_degrees: 風向(度)

    Returns:
        int: 距離への影響(メートル)。無風の場合は0
    """
    if wind_speed_ms <= 0:
        return 0

    headwind, crosswind = wind_components(wind_speed_ms, wind_direction_degrees)
    impact = -headwind * HEADWIND_FACTOR - abs(crosswind) * CROSSWIND_FACTOR
    return _round_half_away_from_zero(impact)


def playing_distance(
    distance_meters: int, wind_speed_ms: float, wind_direction_degrees: float
) -> int:
    """風を考慮した実質距離(プレーズライク)を返す

    向かい風では実際の距離より長く、追い風では短くなる。
    """
    impact = wind_impact(distance_meters, wind_speed_ms, wind_direction_degrees)
    return max(distance_meters - impact, 0)
