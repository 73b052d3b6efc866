"""例外定義.

各処理は最初に発生したエラーをそのまま送出する。リトライは行わない。
"""


class WikiTopError(Exception):
    """wikitop の全例外の基底クラス."""


class TransportError(WikiTopError):
    """接続・DNS・読み込みの失敗."""


class DecodeError(WikiTopError):
    """応答が JSON でない、または想定した構造でない."""


class RemoteAPIError(WikiTopError):
    """API が error オブジェクトを返した."""

    def __init__(self, code: str, info: str):
        super().__init__(f"API error: {code} - {info}")
        self.code = code
        self.info = info


class NotFoundError(WikiTopError):
    """記事情報の pages が空だった."""


class InputError(WikiTopError):
    """標準入力が読めなかった."""


class ValidationError(WikiTopError):
    """入力されたインデックスが数値でない、または範囲外."""

    def __init__(self, message: str = "invalid input"):
        super().__init__(message)
