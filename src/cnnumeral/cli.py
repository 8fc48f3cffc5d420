from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from loguru import logger

from .config import Settings
from .money import fen_to_yuan, yuan_to_fen
from .numeral import AMOUNT_TOO_LARGE, DATA_ERROR, NUMBER_TOO_LARGE, currency_to_cn, number_to_cn

_FAILURES = frozenset({DATA_ERROR, NUMBER_TOO_LARGE, AMOUNT_TOO_LARGE, ""})


def _setup_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), colorize=False, backtrace=False, diagnose=False)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cnnumeral", description="阿拉伯数字 / 金额转换为中文大写")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("number", help="数字转中文大写，例如 10000800 -> 壹仟万零捌佰")
    p.add_argument("values", nargs="+")

    p = sub.add_parser("currency", help="金额（元）转人民币大写，例如 1.01 -> 壹元零壹分")
    p.add_argument("values", nargs="+")
    p.add_argument("--empty-format", default=None, help="空值时的输出（默认 零元整）")

    p = sub.add_parser("fen2yuan", help="分转元，例如 2000 -> 20.00")
    p.add_argument("values", nargs="+")
    p.add_argument("--empty-format", default="0.00", help="空值时的输出")
    p.add_argument("--cut-zero", action="store_true", help="去掉小数末尾多余的零")

    p = sub.add_parser("yuan2fen", help="元转分，例如 10.02 -> 1002")
    p.add_argument("values", nargs="+")
    p.add_argument("--empty-format", default="0", help="空值时的输出")
    return parser


def _converter(args: argparse.Namespace, settings: Settings) -> Callable[[str], str]:
    if args.command == "number":
        return number_to_cn
    if args.command == "currency":
        return lambda v: currency_to_cn(v, args.empty_format, settings=settings)
    if args.command == "fen2yuan":
        return lambda v: fen_to_yuan(v, args.empty_format, cut_zero=args.cut_zero)
    return lambda v: yuan_to_fen(v, args.empty_format)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings()
    _setup_logging("DEBUG" if args.verbose else settings.log_level)

    convert = _converter(args, settings)
    failed = 0
    for value in args.values:
        out = convert(value)
        if out in _FAILURES:
            failed += 1
            logger.warning(f"{args.command}: 无法转换 {value!r} -> {out!r}")
        print(out)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
