# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
nlpdate 命令行

    nlpdate --text "明後日の午後3時"
    nlpdate --file cases.jsonl --output result.txt
"""

import argparse
import json
import os
import sys
import time
from typing import Callable, Optional

from .core.config import Config
from .core.logger import get_logger, setup_logging
from .japanese.date_extractor import DateExtractor

logger = get_logger(__name__)

Writer = Callable[[str], None]


def run_case(extractor: DateExtractor, case: dict):
    """执行一条用例，返回 (计算结果, 耗时秒)"""
    started = time.time()
    result = extractor.extract(case["query"]).as_string(case.get("format"))
    return result, time.time() - started


def write_summary(writer: Writer, total: int, failed: int) -> None:
    writer("\n" + "=" * 80)
    writer("BENCHMARK SUMMARY")
    writer("=" * 80)
    writer(f"Total test cases: {total}")
    if not total:
        return
    passed = total - failed
    writer(f"Success cases: {passed} ({passed / total * 100:.2f}%)")
    writer(f"Error cases: {failed} ({failed / total * 100:.2f}%)")


def benchmark(extractor: DateExtractor, input_file: str, show_all_cases: bool = True, writer: Writer = print) -> int:
    """
    批量测试

    输入为JSONL，每行 {"query": ..., "expects": ..., "format": ...(可选)}，
    query 可以是字符串、字符串列表或整数。

    Returns:
        int: 不一致的用例数
    """
    total = 0
    failed = 0
    with open(input_file, encoding="utf-8") as fin:
        for line_num, line in enumerate(fin, 1):
            if not line.strip():
                continue
            case = json.loads(line)
            total += 1
            result, cost = run_case(extractor, case)

            if result != case["expects"]:
                failed += 1
                writer(f"Line {line_num}: ✗ Mismatch | total={cost:.6f}s")
                writer(f"  Query: {case['query']}")
                writer(f"  Format: {case.get('format')}")
                writer(f"  Calculated: {result}")
                writer(f"  Expected: {case['expects']}")
            elif show_all_cases:
                writer(f"Line {line_num}: ✓ Success | total={cost:.6f}s")
                writer(f"  Query: {case['query']}")
                writer(f"  Result: {result}")

    write_summary(writer, total, failed)
    return failed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nlpdate",
        description="Natural-language date parser - 日语自然语言日期解析",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例：
  nlpdate --text "明後日の午後3時"
  nlpdate --text "2019/5/1" --format "[YYYY-MM-dd]"
  nlpdate --text "令和元年5月1日" --format "和暦の年月日"
  nlpdate --text "明日" --epoch_ms 1584234000000 --time_zone "UTC+09:00"
  nlpdate --file cases.jsonl --output result.txt
""",
    )
    source = parser.add_argument_group("input")
    source.add_argument("--text", help="Expression to parse")
    source.add_argument("--file", help="JSONL benchmark file")
    source.add_argument("--output", help="Mirror --file results to this path")
    source.add_argument("--show_all", action="store_true", help="Also print passing cases in --file mode")

    options = parser.add_argument_group("parse options")
    options.add_argument("--format", help='Output description (e.g. "年月日") or "[pattern]"')
    options.add_argument("--time_zone", help="IANA time zone name or UTC±HH:MM")
    options.add_argument("--epoch_ms", type=int, help="Epoch milliseconds used as now")
    options.add_argument("--language", help="Locale key (default: jp)")
    options.add_argument("--log_level", help="DEBUG, INFO, WARNING, ERROR")
    return parser


def validate_args(args: argparse.Namespace) -> Optional[str]:
    """参数组合错误时返回错误信息"""
    if not args.text and not args.file:
        return "必须提供 --text 或 --file 参数之一"
    if args.text and args.file:
        return "--text 和 --file 参数不能同时使用"
    if args.output and not args.file:
        return "--output 参数只能与 --file 参数一起使用"
    if args.file and not os.path.exists(args.file):
        return f"文件不存在: {args.file}"
    return None


def tee(stream) -> Writer:
    """同时写到标准输出和文件"""

    def write(message: str) -> None:
        try:
            print(message)
        except BrokenPipeError:
            pass
        stream.write(message + "\n")

    return write


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        setup_logging(level=args.log_level, force=True)

    error = validate_args(args)
    if error:
        print(f"错误：{error}\n")
        parser.print_help()
        return 1

    config = Config(
        time_zone=args.time_zone,
        language=args.language,
        epoch_time_milliseconds=args.epoch_ms,
    )
    extractor = DateExtractor(config)
    logger.debug(f"配置: {config}")

    if args.text:
        parsed = extractor.extract(args.text)
        point = parsed.get_point_in_time()
        print(f"Query: {args.text}")
        print(f"TimeZone: {config.get_time_zone().display}")
        print(f"Result: {parsed.as_string(args.format)}")
        print(f"Precision: {point.precision.name if point is not None else None}")
        return 0

    started = time.time()
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fout:
            benchmark(extractor, args.file, show_all_cases=args.show_all, writer=tee(fout))
    else:
        benchmark(extractor, args.file, show_all_cases=args.show_all)
    print(f"Total time: {time.time() - started:.3f}s")
    print(f"Split time: {extractor.split_time:.3f}s")
    print(f"Parse time: {extractor.parse_time:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
