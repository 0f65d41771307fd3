"""ゴルフラウンド記録・統計集計パッケージ"""

__version__ = "0.1.0"
