"""データモデルモジュール

ラウンド・ホール・クラブの型定義とバリデーションを提供する。
JSON(日付はISO-8601文字列)とフィールド単位で相互変換できる。
"""

from datetime import datetime
from enum import Enum, IntEnum
from typing import Annotated, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

# デフォルトのパー配置(18ホール基準。9ホールは先頭9ホール分を使う)
PAR3_HOLES = frozenset({3, 6, 11, 16})
PAR5_HOLES = frozenset({4, 8, 13, 18})


class ClubType(str, Enum):
    """クラブ種別"""

    DRIVER = "Driver"
    WOOD = "Wood"
    HYBRID = "Hybrid"
    IRON = "Iron"
    WEDGE = "Wedge"
    PUTTER = "Putter"


class GreenHitLocation(IntEnum):
    """グリーンに対する着弾位置(3x3グリッド)

    CENTERのみパーオン(GIR)として扱う。
    """

    CENTER = 0
    LONG_LEFT = 1
    LONG = 2
    LONG_RIGHT = 3
    LEFT = 4
    RIGHT = 5
    SHORT_LEFT = 6
    SHORT = 7
    SHORT_RIGHT = 8

    @property
    def is_gir(self) -> bool:
        return self is GreenHitLocation.CENTER

    @property
    def description(self) -> str:
        if self is GreenHitLocation.CENTER:
            return "Green in Reg"
        return "Missed " + self.name.replace("_", " ").title()

    @property
    def short_description(self) -> str:
        return _GREEN_SHORT_DESCRIPTIONS[self]


_GREEN_SHORT_DESCRIPTIONS = {
    GreenHitLocation.CENTER: "GIR",
    GreenHitLocation.LONG_LEFT: "L/L",
    GreenHitLocation.LONG: "Long",
    GreenHitLocation.LONG_RIGHT: "L/R",
    GreenHitLocation.LEFT: "Left",
    GreenHitLocation.RIGHT: "Right",
    GreenHitLocation.SHORT_LEFT: "S/L",
    GreenHitLocation.SHORT: "Short",
    GreenHitLocation.SHORT_RIGHT: "S/R",
}


class FairwayMissDirection(str, Enum):
    """フェアウェイを外した方向"""

    LEFT = "left"
    RIGHT = "right"
    NONE = "none"

    @property
    def description(self) -> str:
        if self is FairwayMissDirection.NONE:
            return "Hit Fairway"
        return f"Missed {self.value.title()}"


class Club(BaseModel):
    """クラブ"""

    id: UUID = Field(default_factory=uuid4, description="クラブID")
    type: ClubType = Field(..., description="クラブ種別")
    name: str = Field(..., description="表示名(例: 7 Iron)")

    @property
    def short_name(self) -> str:
        """スコアカード表示用の短縮名

        Returns:
            str: 短縮名(例: "Dr", "3W", "7i", "PW")
        """
        if self.type is ClubType.DRIVER:
            return "Dr"
        if self.type is ClubType.WOOD:
            return self.name.replace(" Wood", "W")
        if self.type is ClubType.HYBRID:
            return self.name.replace(" Hybrid", "H")
        if self.type is ClubType.IRON:
            return self.name.replace(" Iron", "i")
        if self.type is ClubType.PUTTER:
            return "Pt"
        # ウェッジは名前がそのまま短縮名
        return self.name

    @classmethod
    def catalog(cls) -> list["Club"]:
        """クイック選択用の標準クラブセットを返す"""
        return [cls(type=club_type, name=name) for club_type, name in _CLUB_CATALOG]

    @classmethod
    def find(cls, name: str) -> "Club | None":
        """標準クラブセットから名前でクラブを探す

        Args:
            name: クラブ名

        Returns:
            Club | None: 見つからない場合はNone
        """
        for club_type, club_name in _CLUB_CATALOG:
            if club_name == name:
                return cls(type=club_type, name=club_name)
        return None


_CLUB_CATALOG = [
    (ClubType.DRIVER, "Driver"),
    (ClubType.WOOD, "3 Wood"),
    (ClubType.WOOD, "5 Wood"),
    (ClubType.HYBRID, "3 Hybrid"),
    (ClubType.HYBRID, "4 Hybrid"),
    (ClubType.IRON, "4 Iron"),
    (ClubType.IRON, "5 Iron"),
    (ClubType.IRON, "6 Iron"),
    (ClubType.IRON, "7 Iron"),
    (ClubType.IRON, "8 Iron"),
    (ClubType.IRON, "9 Iron"),
    (ClubType.WEDGE, "PW"),
    (ClubType.WEDGE, "GW"),
    (ClubType.WEDGE, "SW"),
    (ClubType.WEDGE, "LW"),
    (ClubType.PUTTER, "Putter"),
]


# フェアウェイ結果(N/A・キープ・ミス(方向付き)の3状態)
class FairwayNotApplicable(BaseModel):
    """フェアウェイ判定対象外(パー3など)"""

    result: Literal["n/a"] = "n/a"


class FairwayHit(BaseModel):
    """フェアウェイキープ"""

    result: Literal["hit"] = "hit"


class FairwayMissed(BaseModel):
    """フェアウェイミス"""

    result: Literal["missed"] = "missed"
    direction: FairwayMissDirection = Field(
        default=FairwayMissDirection.NONE,
        description="外した方向(none: 未記録)",
    )


FairwayResult = Annotated[
    FairwayNotApplicable | FairwayHit | FairwayMissed,
    Field(discriminator="result"),
]


def fairway_from_legacy(
    hit: bool | None,
    direction: FairwayMissDirection = FairwayMissDirection.NONE,
) -> FairwayNotApplicable | FairwayHit | FairwayMissed:
    """真偽値+方向の旧形式からフェアウェイ結果を作成する

    Args:
        hit: True(キープ), False(ミス), None(対象外)
        direction: ミス方向。hitがFalseの場合のみ使われる

    Returns:
        フェアウェイ結果
    """
    if hit is None:
        return FairwayNotApplicable()
    if hit:
        return FairwayHit()
    return FairwayMissed(direction=direction)


class Hole(BaseModel):
    """1ホール分のプレーデータ"""

    number: int = Field(..., ge=1, description="ホール番号(1始まり)")
    par: int = Field(..., description="パー(3/4/5以外も許容)")
    score: int = Field(default=0, ge=0, description="打数(0: 未入力)")

    # ティーショット
    tee_club: Club | None = Field(default=None, description="ティーショット使用クラブ")
    fairway: FairwayResult = Field(
        default_factory=FairwayNotApplicable, description="フェアウェイ結果"
    )

    # アプローチ
    approach_distance: int | None = Field(
        default=None, ge=0, description="アプローチ残り距離(メートル)"
    )
    approach_club: Club | None = Field(default=None, description="アプローチ使用クラブ")
    green_hit_location: GreenHitLocation = Field(
        default=GreenHitLocation.CENTER, description="グリーン着弾位置"
    )

    # パット
    putts: int = Field(default=0, ge=0, description="パット数")
    first_putt_distance: int | None = Field(
        default=None, ge=0, description="ファーストパット距離(フィート)"
    )

    # 風(手入力)
    wind_speed: float = Field(default=0.0, ge=0, description="風速(m/s)")
    wind_direction: float = Field(
        default=0.0, ge=0, le=360, description="風向(度, 吹いてくる方向)"
    )

    # ストロークスゲインド用の予約フィールド(集計では未使用)
    strokes_gained_off_tee: float | None = None
    strokes_gained_approach: float | None = None
    strokes_gained_putting: float | None = None

    @property
    def is_par3(self) -> bool:
        return self.par == 3

    @property
    def is_gir(self) -> bool:
        return self.green_hit_location.is_gir

    @property
    def fairway_hit(self) -> bool | None:
        """フェアウェイ結果の真偽値表現(対象外はNone)"""
        if isinstance(self.fairway, FairwayHit):
            return True
        if isinstance(self.fairway, FairwayMissed):
            return False
        return None

    @property
    def fairway_miss_direction(self) -> FairwayMissDirection:
        if isinstance(self.fairway, FairwayMissed):
            return self.fairway.direction
        return FairwayMissDirection.NONE


class Round(BaseModel):
    """1ラウンド分のデータ

    holesの並び順がホール順。9/18ホールが通常だが、任意のホール数を許容する。
    """

    id: UUID = Field(default_factory=uuid4, description="ラウンドID")
    date: datetime = Field(..., description="プレー日時")
    course_name: str = Field(default="My Course", description="コース名")
    holes: list[Hole] = Field(default_factory=list, description="ホールごとのデータ")
    notes: str = Field(default="", description="メモ")

    @field_validator("date")
    @classmethod
    def _attach_local_timezone(cls, value: datetime) -> datetime:
        """タイムゾーンの無い日時はローカルタイムとして扱う"""
        if value.tzinfo is None or value.utcoffset() is None:
            return value.astimezone()
        return value

    @property
    def hole_count(self) -> int:
        return len(self.holes)

    @property
    def is_nine_holes(self) -> bool:
        return self.hole_count <= 9

    @property
    def total_score(self) -> int:
        return sum(hole.score for hole in self.holes)

    @property
    def total_par(self) -> int:
        return sum(hole.par for hole in self.holes)

    @property
    def score_relative_to_par(self) -> int:
        return self.total_score - self.total_par

    @property
    def total_putts(self) -> int:
        return sum(hole.putts for hole in self.holes)

    @property
    def gir_count(self) -> int:
        return sum(1 for hole in self.holes if hole.is_gir)

    @property
    def fairway_opportunities(self) -> int:
        """フェアウェイ判定対象ホール数(パー3と対象外を除く)"""
        return sum(
            1
            for hole in self.holes
            if not hole.is_par3 and hole.fairway_hit is not None
        )

    @property
    def fairway_hits(self) -> int:
        return sum(1 for hole in self.holes if not hole.is_par3 and hole.fairway_hit)

    @property
    def gir_percentage(self) -> float:
        if not self.holes:
            return 0.0
        return self.gir_count / self.hole_count * 100

    @property
    def fairway_hit_percentage(self) -> float:
        opportunities = self.fairway_opportunities
        if opportunities == 0:
            return 0.0
        return self.fairway_hits / opportunities * 100

    @classmethod
    def create_new(
        cls,
        hole_count: int,
        date: datetime | None = None,
        course_name: str = "My Course",
    ) -> "Round":
        """デフォルトのパー配置でホールを用意した新規ラウンドを作成する

        Args:
            hole_count: ホール数(通常9または18)
            date: プレー日時(省略時は現在時刻)
            course_name: コース名

        Returns:
            Round: 新規ラウンド

        Raises:
            ValueError: ホール数が1未満の場合
        """
        if hole_count < 1:
            raise ValueError(f"ホール数は1以上を指定してください: {hole_count}")

        holes = [Hole(number=i, par=default_par(i)) for i in range(1, hole_count + 1)]
        return cls(
            date=date if date is not None else datetime.now().astimezone(),
            course_name=course_name,
            holes=holes,
        )

    def to_dict(self) -> dict:
        """辞書形式に変換(JSON出力用)

        Returns:
            dict: ラウンドデータの辞書表現
        """
        return self.model_dump(mode="json")


def default_par(number: int) -> int:
    """ホール番号からデフォルトのパーを返す

    Examples:
        >>> default_par(3)
        3
        >>> default_par(8)
        5
        >>> default_par(1)
        4
    """
    if number in PAR3_HOLES:
        return 3
    if number in PAR5_HOLES:
        return 5
    return 4
