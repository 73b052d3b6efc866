"""設定モジュール — 環境変数・定数定義."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# .env はカレントディレクトリから上位に向かって探す
load_dotenv(find_dotenv(usecwd=True))

# --- 言語 ---
DEFAULT_LANG: str = os.environ.get("WIKITOP_LANG", "ja")

# --- Wikipedia API ---
MOST_VIEWED_URL_TEMPLATE = (
    "https://{lang}.wikipedia.org/w/api.php"
    "?action=query&list=mostviewed&format=json"
)
ARTICLE_DETAIL_URL_TEMPLATE = (
    "https://{lang}.wikipedia.org/w/api.php"
    "?action=query&format=json&titles={title}&prop=info&inprop=url"
)

# --- 表示 ---
DATE_FORMAT = "%Y-%m-%d"

# --- ログ ---
LOG_DIR = Path(os.environ.get("WIKITOP_LOG_DIR", Path.cwd() / "logs"))
LOG_LEVEL: str = os.environ.get("WIKITOP_LOG_LEVEL", "INFO")
