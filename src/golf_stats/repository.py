"""ラウンド保存モジュール

ラウンドデータの読み書きを行うリポジトリと、
現在のラウンド一覧を保持するRoundBookを提供する。
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol
from uuid import UUID

from pydantic import ValidationError

from .models import Round
from .statistics import Statistics, compute

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """ラウンドデータの読み書き失敗時の例外"""

    pass


class RoundRepository(Protocol):
    """ラウンドの保存先"""

    def load(self) -> list[Round]: ...

    def save(self, rounds: Iterable[Round]) -> None: ...

    def delete(self, round_id: UUID) -> bool: ...


class JsonRoundRepository:
    """JSONファイルにラウンドを保存するリポジトリ"""

    def __init__(self, path: Path):
        """初期化

        Args:
            path: JSONファイルのパス
        """
        self.path = path

    def load(self) -> list[Round]:
        """JSONファイルからラウンドを読み込む

        Returns:
            list[Round]: ラウンドのリスト(ファイルが無い場合は空)

        Raises:
            RepositoryError: ファイルの内容が不正な場合
        """
        if not self.path.exists():
            logger.info("ラウンドデータが見つかりません。空のリストを返します: %s", self.path)
            return []

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            rounds = [Round.model_validate(item) for item in data]
        except (
            json.JSONDecodeError,
            UnicodeDecodeError,
            ValidationError,
            TypeError,
        ) as e:
            raise RepositoryError(
                f"ラウンドデータの読み込みに失敗しました: {self.path}"
            ) from e

        logger.info("ラウンドデータを読み込みました: %s (%d件)", self.path, len(rounds))
        return rounds

    def save(self, rounds: Iterable[Round]) -> None:
        """ラウンドをJSONファイルに保存する

        Args:
            rounds: ラウンドのリスト
        """
        rounds_dict = [round_.to_dict() for round_ in rounds]
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # 書き込み途中で壊れないよう一時ファイル経由で置き換える
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(rounds_dict, f, ensure_ascii=False, indent=2)
        tmp_path.replace(self.path)

        logger.info("ラウンドデータを保存しました: %s (%d件)", self.path, len(rounds_dict))

    def delete(self, round_id: UUID) -> bool:
        """指定IDのラウンドを削除する

        Args:
            round_id: ラウンドID

        Returns:
            bool: 削除した場合True
        """
        rounds = self.load()
        remaining = [round_ for round_ in rounds if round_.id != round_id]
        if len(remaining) == len(rounds):
            return False
        self.save(remaining)
        return True


class InMemoryRoundRepository:
    """メモリ上にラウンドを保持するリポジトリ"""

    def __init__(self, rounds: Iterable[Round] = ()):
        self._rounds = [round_.model_copy(deep=True) for round_ in rounds]

    def load(self) -> list[Round]:
        return [round_.model_copy(deep=True) for round_ in self._rounds]

    def save(self, rounds: Iterable[Round]) -> None:
        self._rounds = [round_.model_copy(deep=True) for round_ in rounds]

    def delete(self, round_id: UUID) -> bool:
        before = len(self._rounds)
        self._rounds = [round_ for round_ in self._rounds if round_.id != round_id]
        return len(self._rounds) < before


class RoundBook:
    """ラウンド一覧の保持と更新を行うクラス

    変更のたびにリポジトリへ保存する。
    """

    def __init__(self, repository: RoundRepository):
        """初期化

        Args:
            repository: ラウンドの保存先
        """
        self.repository = repository
        self._rounds = repository.load()

    @property
    def rounds(self) -> list[Round]:
        """現在のラウンド一覧(変更しても保持内容には影響しない)"""
        return [round_.model_copy(deep=True) for round_ in self._rounds]

    def add_round(self, new_round: Round) -> None:
        logger.info("ラウンドを追加します: %s", new_round.id)
        self._rounds.append(new_round)
        self.repository.save(self._rounds)

    def update_round(self, updated_round: Round) -> bool:
        """既存のラウンドを置き換える

        Args:
            updated_round: 更新後のラウンド(IDで対象を特定する)

        Returns:
            bool: 更新した場合True
        """
        for index, round_ in enumerate(self._rounds):
            if round_.id == updated_round.id:
                logger.info("ラウンドを更新します: %s", updated_round.id)
                self._rounds[index] = updated_round
                self.repository.save(self._rounds)
                return True

        logger.warning("更新対象のラウンドが見つかりません: %s", updated_round.id)
        return False

    def delete_round(self, round_id: UUID) -> bool:
        """ラウンドを削除する

        Args:
            round_id: ラウンドID

        Returns:
            bool: 削除した場合True
        """
        remaining = [round_ for round_ in self._rounds if round_.id != round_id]
        if len(remaining) == len(self._rounds):
            logger.warning("削除対象のラウンドが見つかりません: %s", round_id)
            return False

        logger.info("ラウンドを削除します: %s", round_id)
        self._rounds = remaining
        self.repository.save(self._rounds)
        return True

    def statistics(self) -> Statistics:
        """現在のラウンド一覧から統計を算出する"""
        return compute(self._rounds)
