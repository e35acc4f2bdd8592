# core/runtime.py
import random
import re
from dataclasses import dataclass
from typing import Optional

from config import Config

# 可选正负号 + 十进制数字；不允许空格、下划线、小数
_INT_RE = re.compile(r"[+-]?[0-9]+")

# 与 64 位有符号整数同范围，超出视为不合法
INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1

MESSAGES = {
    "high": ("太大了！", "error"),
    "low": ("太小了！", "error"),
    "equal": ("恭喜猜对！", "success"),
}


@dataclass(frozen=True)
class Verdict:
    outcome: str    # high / low / equal
    message: str
    css_class: str


def parse_int(raw) -> Optional[int]:
    """严格解析十进制整数；不合法返回 None"""
    if raw is None:
        return None
    raw = str(raw)
    if not _INT_RE.fullmatch(raw):
        return None
    # 先按位数挡掉超长输入，避免 int() 的位数上限报错
    sign = "-" if raw.startswith("-") else ""
    digits = raw.lstrip("+-").lstrip("0") or "0"
    if len(digits) > 19:
        return None
    value = int(sign + digits)
    if not (INT_MIN <= value <= INT_MAX):
        return None
    return value


class GameRuntime:
    @staticmethod
    def draw_secret(low=None, high=None) -> int:
        low = Config.SECRET_MIN if low is None else low
        high = Config.SECRET_MAX if high is None else high
        return random.randint(low, high)

    @staticmethod
    def judge(guess: int, secret: int) -> Verdict:
        if guess > secret:
            outcome = "high"
        elif guess < secret:
            outcome = "low"
        else:
            outcome = "equal"
        message, css_class = MESSAGES[outcome]
        return Verdict(outcome, message, css_class)
