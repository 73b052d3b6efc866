"""インデックス入力モジュール."""

from __future__ import annotations

import re
from typing import TextIO

from wikitop.errors import InputError, ValidationError

# 全角数字 (U+FF10〜U+FF19) と ASCII 数字のオフセット
_FULLWIDTH_ZERO = ord("０")
_FULLWIDTH_NINE = ord("９")
_FULLWIDTH_OFFSET = _FULLWIDTH_ZERO - ord("0")

_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


def normalize_digits(text: str) -> str:
    """全角数字を半角数字に変換する. それ以外の文字はそのまま."""
    return "".join(
        chr(ord(c) - _FULLWIDTH_OFFSET) if _FULLWIDTH_ZERO <= ord(c) <= _FULLWIDTH_NINE else c
        for c in text
    )


def parse_index(text: str, bound: int) -> int:
    """入力文字列を 0 <= index < bound のインデックスに変換する.

    数値でない場合も範囲外の場合も、同じ ValidationError を送出する。
    """
    normalized = normalize_digits(text.strip())
    if not _INDEX_PATTERN.fullmatch(normalized):
        raise ValidationError()
    index = int(normalized)
    if index < 0 or index >= bound:
        raise ValidationError()
    return index


def prompt_index(bound: int, stdin: TextIO, stdout: TextIO) -> int:
    """標準入力から1行読み、記事のインデックスを返す."""
    # bound=0 のときは入力に関係なく ValidationError になる
    choices = f"0-{bound - 1}" if bound > 0 else "no articles listed"
    print(
        f"Enter the index of the article to view its details ({choices}):",
        file=stdout,
        flush=True,
    )
    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"failed to read input: {e}") from e
    if not line:
        raise InputError("failed to read input: EOF")
    return parse_index(line, bound)
