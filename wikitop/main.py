"""Wikipedia 閲覧数ランキング — メインエントリーポイント.

処理フロー:
  1. 今日の日付を表示
  2. -lang オプションから言語を決定
  3. 閲覧数ランキングを取得・表示
  4. 標準入力から記事のインデックスを読む
  5. 選んだ記事の URL を取得・表示

どこかで失敗したらメッセージを表示して終了する。
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import TextIO

from wikitop.config import DATE_FORMAT, DEFAULT_LANG, LOG_DIR, LOG_LEVEL
from wikitop.errors import WikiTopError
from wikitop.fetcher import Fetcher, HttpFetcher
from wikitop.prompt import prompt_index
from wikitop.wiki import fetch_article_url, fetch_most_viewed

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """ロギングの初期設定.

    標準出力は一覧と入力プロンプトに使うため、ログはファイルにのみ出す。
    ログファイルを作れない場合はログを捨てて処理を続ける。
    """
    log_file = LOG_DIR / f"wikitop_{datetime.now().strftime('%Y%m%d')}.log"
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    logging.basicConfig(
        level=resolve_log_level(LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[handler],
    )


def resolve_log_level(name: str) -> int:
    """ログレベル名を数値に変換する. 不明な名前なら INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def print_today(out: TextIO, now: datetime | None = None) -> None:
    """今日の日付を YYYY-MM-DD 形式で表示する."""
    now = now or datetime.now()
    print(now.strftime(DATE_FORMAT), file=out)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """コマンドライン引数 (-lang) を解析する."""
    parser = argparse.ArgumentParser(
        prog="wikitop",
        description="Show the most viewed Wikipedia articles and look up one of them",
    )
    parser.add_argument(
        "-lang", "--lang",
        dest="lang",
        default=DEFAULT_LANG,
        help="Specify the language (e.g., 'ja' for Japanese, 'en' for English)",
    )
    return parser.parse_args(argv)


def run(
    argv: list[str] | None = None,
    fetcher: Fetcher | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """メイン処理."""
    fetcher = fetcher or HttpFetcher()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print_today(stdout)
    lang = parse_args(argv).lang
    logger.info("=== 開始: lang=%s ===", lang)

    try:
        articles = fetch_most_viewed(lang, fetcher)
    except WikiTopError as e:
        logger.error("ランキング取得失敗: %s", e)
        print(f"Error: fetching popular articles failed: {e}", file=stdout)
        return

    for i, article in enumerate(articles):
        print(f"{i}: Title: {article.title}, View Count: {article.view_count}", file=stdout)

    # 空リストなら bound=0 なので必ず ValidationError になる
    try:
        index = prompt_index(len(articles), stdin, stdout)
    except WikiTopError as e:
        logger.warning("入力エラー: %s", e)
        print(f"Exiting due to: {e}", file=stdout)
        return

    title = articles[index].title
    try:
        url = fetch_article_url(lang, title, fetcher)
    except WikiTopError as e:
        logger.error("記事 URL 取得失敗: title=%s, error=%s", title, e)
        print(f"Failed to fetch article details: {e}", file=stdout)
        return

    print(f'Details for "{title}": {url}', file=stdout)
    logger.info("=== 完了 ===")


def main() -> None:
    setup_logging()
    run()


if __name__ == "__main__":
    main()
