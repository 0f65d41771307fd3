"""CLIエントリーポイントモジュール

コマンドラインからラウンドの記録・統計の表示を行うためのインターフェース。
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .config import Settings, get_settings
from .models import Round
from .repository import JsonRoundRepository, RepositoryError, RoundBook
from .sample_data import sample_rounds
from .wind import playing_distance, wind_impact


def setup_logging(debug: bool = False) -> None:
    """ロギングを設定する

    Args:
        debug: デバッグモードの場合True
    """
    level = logging.DEBUG if debug else logging.INFO
    format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """コマンドライン引数をパースする

    Args:
        argv: 引数リスト(省略時はsys.argv)

    Returns:
        argparse.Namespace: パース済み引数
    """
    parser = argparse.ArgumentParser(
        prog="golf-stats",
        description="ゴルフのラウンドを記録し、統計を表示するツール",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="デバッグモードを有効にする",
    )

    parser.add_argument(
        "--data-file",
        "-f",
        type=Path,
        default=None,
        help="ラウンドデータのJSONファイル(デフォルト: DATA_DIR/ROUNDS_FILENAME)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("stats", help="統計をJSONで表示する")

    new_parser = subparsers.add_parser("new", help="新しいラウンドを作成する")
    new_parser.add_argument(
        "--holes",
        type=int,
        choices=[9, 18],
        default=18,
        help="ホール数(デフォルト: 18)",
    )
    new_parser.add_argument(
        "--course",
        type=str,
        default=None,
        help="コース名(デフォルト: 環境変数DEFAULT_COURSE_NAME)",
    )

    sample_parser = subparsers.add_parser("sample", help="サンプルラウンドを追加する")
    sample_parser.add_argument("--seed", type=int, default=None, help="乱数シード")

    wind_parser = subparsers.add_parser("wind", help="風の影響を計算する")
    wind_parser.add_argument("--distance", type=int, required=True, help="距離(メートル)")
    wind_parser.add_argument("--speed", type=float, required=True, help="風速(m/s)")
    wind_parser.add_argument(
        "--direction", type=float, required=True, help="風向(度, 0 = 向かい風)"
    )

    return parser.parse_args(argv)


def _run_command(args: argparse.Namespace, settings: Settings) -> None:
    logger = logging.getLogger(__name__)

    if args.command == "wind":
        impact = wind_impact(args.distance, args.speed, args.direction)
        plays_like = playing_distance(args.distance, args.speed, args.direction)
        print(json.dumps({"impact": impact, "playing_distance": plays_like}))
        return

    data_file = args.data_file or settings.rounds_path
    book = RoundBook(JsonRoundRepository(data_file))

    if args.command == "stats":
        statistics = book.statistics()
        print(json.dumps(statistics.to_dict(), ensure_ascii=False, indent=2))
    elif args.command == "new":
        new_round = Round.create_new(
            args.holes,
            course_name=args.course or settings.default_course_name,
        )
        book.add_round(new_round)
        logger.info("%dホールのラウンドを作成しました: %s", args.holes, new_round.id)
    elif args.command == "sample":
        for round_ in sample_rounds(seed=args.seed):
            book.add_round(round_)
        logger.info("サンプルラウンドを追加しました(合計 %d件)", len(book.rounds))


def main(argv: list[str] | None = None) -> int:
    """メインエントリーポイント

    Returns:
        int: 終了コード(0: 成功, 1: 失敗)
    """
    args = parse_args(argv)

    # 設定を読み込み
    try:
        settings = get_settings()
    except Exception as e:
        print(f"設定の読み込みに失敗しました: {e}", file=sys.stderr)
        print("環境変数または.envファイルを確認してください。", file=sys.stderr)
        return 1

    # コマンドライン引数で設定を上書き
    if args.debug:
        settings = settings.model_copy(update={"debug": True})

    setup_logging(settings.debug)
    logger = logging.getLogger(__name__)

    try:
        _run_command(args, settings)
    except RepositoryError as e:
        logger.exception("ラウンドデータの読み書きに失敗しました: %s", e)
        return 1
    except Exception as e:
        logger.exception("予期しないエラーが発生しました: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
