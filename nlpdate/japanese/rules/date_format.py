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
格式描述规则："年月日"、"ISO"、"和暦" 等描述转换为格式化模式

每条规则只携带 extra：
    type          骨架类型（iso / hyphen / slash / none / japanese）
    unit.<单位>   输出该单位
    format.<单位> 覆盖该单位的默认模式
"""

import re
from typing import Dict, Iterable

from ...core.grammar import DateFormatRule

DATE_FORMAT_RULES = (
    DateFormatRule(names={"jp": ["スラッシュ", "コロン"]}, extra={"type": "slash"}),
    DateFormatRule(names={"jp": ["ハイフン"]}, extra={"type": "hyphen"}),
    DateFormatRule(names={"jp": ["ISO8601", "ISO", "アイエスオー"]}, extra={"type": "iso"}),
    DateFormatRule(names={"jp": ["日本語", "漢字"]}, extra={"type": "japanese"}),
    DateFormatRule(
        names={"jp": ["和暦", "令和", "平成", "昭和", "大正", "明治"]},
        extra={"format.year": "w", "type": "japanese"},
    ),
    DateFormatRule(
        names={"jp": ["区切りなし", "区切り文字なし", "数字", "区切らない"]},
        extra={"type": "none"},
    ),
    DateFormatRule(names={"jp": ["年"]}, extra={"unit.year": "true"}),
    DateFormatRule(names={"jp": ["月"]}, extra={"unit.month": "true"}),
    DateFormatRule(names={"jp": ["日"]}, extra={"unit.date": "true"}),
    DateFormatRule(names={"jp": ["時"]}, extra={"unit.hour": "true"}),
    DateFormatRule(names={"jp": ["分"]}, extra={"unit.minute": "true"}),
    DateFormatRule(names={"jp": ["秒"]}, extra={"unit.second": "true"}),
    DateFormatRule(names={"jp": ["ミリ秒"]}, extra={"unit.millisecond": "true"}),
    DateFormatRule(names={"jp": ["曜日"]}, extra={"unit.weekday": "true"}),
    DateFormatRule(
        names={"jp": ["エポック", "ユニックス", "エポック秒", "ユニックス時間", "ユニックスタイム"]},
        extra={"unit.epoch": "true"},
    ),
    DateFormatRule(names={"jp": ["エポックミリ", "エポックミリ秒"]}, extra={"unit.epoch_ms": "true"}),
)

# 描述中可以不加分隔连写的单位词（"年月日"），长的在前
UNIT_WORDS = (
    "日本語",
    "エポック秒",
    "エポックミリ秒",
    "ユニックス時間",
    "ミリ秒",
    "曜日",
    "年",
    "月",
    "日",
    "時",
    "分",
    "秒",
)

DEFAULT_DESCRIPTION = "ISO8601"

SKELETONS = {
    "iso": "[{year}][-{month}][-{date}][T{hour}][:{minute}][:{second}][.{millisecond}][{timezone}]",
    "hyphen": "[{year}][-{month}][-{date}][ {hour}][:{minute}][:{second}][.{millisecond}][ {weekday}曜日]",
    "slash": "[{year}][/{month}][/{date}][ {hour}][:{minute}][:{second}][.{millisecond}][ {weekday}曜日]",
    "none": "[{year}][{month}][{date}][{hour}][{minute}][{second}][{millisecond}]",
    "japanese": "[{year}年][{month}月][{date}日][ {hour}時][{minute}分][{second}秒][.{millisecond}ミリ秒][{weekday}曜日]",
}

# 单位及其默认模式（输出顺序）
DEFAULT_UNIT_FORMATS = (
    ("year", "YYYY"),
    ("month", "MM"),
    ("date", "dd"),
    ("hour", "HH"),
    ("minute", "mm"),
    ("second", "ss"),
    ("millisecond", "fff"),
    ("weekday", "EEE"),
    ("timezone", "Z"),
    ("epoch", "p"),
    ("epoch_ms", "P"),
)

_ISO_UNITS = ("year", "month", "date", "hour", "minute", "second", "timezone")

_SEGMENT_SEPARATOR = re.compile(r"\[|\]")


def split_unit_words(description: str) -> str:
    """
    把连写的单位词移到末尾并用 "@" 分隔

    例如 "年月日" -> "@年@月@日"，"数字の年" -> "数字の@年"
    """
    rest = description or DEFAULT_DESCRIPTION
    words = []
    for word in UNIT_WORDS:
        if word in rest:
            words.append(f"@{word}")
        rest = rest.replace(word, "", 1)
    return rest + "".join(words)


def append_format(unit: str, skeleton: str, value: str, should_write_prefix: bool) -> str:
    """
    把单位的模式嵌入骨架中对应的片段

    Args:
        unit: 单位名称（例如 "month"）
        skeleton: 骨架（例如 "[{year}][-{month}]"）
        value: 该单位的模式（例如 "MM"）
        should_write_prefix: 是否保留片段中 "{" 之前的文字（第一个单位不保留）
    """
    placeholder = "{%s}" % unit
    segment = next(
        (item for item in _SEGMENT_SEPARATOR.split(skeleton) if placeholder in item), None
    )
    if segment is None:
        return value
    if not should_write_prefix:
        segment = segment[segment.index("{"):]
    return segment.replace(placeholder, value)


class DateFormat:
    @staticmethod
    def get_query_map(rules: Iterable[DateFormatRule]) -> Dict[str, str]:
        """合并规则的extra，后出现的优先"""
        query_map: Dict[str, str] = {}
        for rule in rules:
            query_map.update(rule.extra)
        return query_map

    @staticmethod
    def get_date_format_from_map(query_map: Dict[str, str]) -> str:
        """
        由合并后的extra生成格式化模式

        Args:
            query_map: 合并后的extra

        Returns:
            str: 例如 {"type": "hyphen", "unit.year": ..., "unit.month": ...} -> "YYYY-MM"
        """
        query_map = dict(query_map)
        skeleton_type = query_map.get("type", "japanese")
        if skeleton_type not in SKELETONS or skeleton_type == "iso":
            skeleton_type = "iso"
            for unit in _ISO_UNITS:
                query_map[f"unit.{unit}"] = "true"
        skeleton = SKELETONS[skeleton_type]

        unit_count = sum(1 for key in query_map if key.startswith("unit."))
        result = []
        for unit, default_format in DEFAULT_UNIT_FORMATS:
            unit_format = query_map.get(f"format.{unit}", default_format)
            # 只有一个单位时不做零填充
            if unit_count <= 1:
                unit_format = unit_format[:1]
            if f"unit.{unit}" in query_map:
                result.append(append_format(unit, skeleton, unit_format, bool(result)))
        return "".join(result)
