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
时区解析

解析顺序：
1. 内置的标准偏移表（data/timezone/utc_offset.tsv）
2. "UTC+09:00" / "+09:00" 形式的字面偏移
3. dateutil 可解析的其他 IANA 时区（按参考时刻计算偏移）
4. 以上均失败时为 UTC，显示为 "Z"
"""

import re
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Dict, Optional

from dateutil import tz
from importlib_resources import files

from .logger import get_logger

logger = get_logger(__name__)

_OFFSET_PATTERN = re.compile(r"^(?:UTC)?([+-])(\d{1,2}):(\d{1,2})$")


@lru_cache(maxsize=1)
def load_utc_offset_table() -> Dict[str, str]:
    """读取时区名 -> "UTC±HH:MM" 的对应表"""
    text = files("nlpdate.core").joinpath("data/timezone/utc_offset.tsv").read_text(encoding="utf-8")
    table = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        name, offset = line.split("\t")
        table[name.strip()] = offset.strip()
    return table


def to_offset_string(milliseconds: int) -> str:
    prefix = "-" if milliseconds < 0 else "+"
    hours, minutes = divmod(abs(milliseconds) // 60000, 60)
    return f"{prefix}{hours:02d}:{minutes:02d}"


class TimeZoneOffset:
    """时区偏移（毫秒）及其显示字符串"""

    __slots__ = ("milliseconds", "display", "query")

    def __init__(self, milliseconds: int = 0, display: str = "Z", query: str = "UTC"):
        self.milliseconds = int(milliseconds)
        self.display = display
        self.query = query

    @classmethod
    def parse(cls, query: str, reference_ms: Optional[int] = None) -> "TimeZoneOffset":
        """
        解析时区字符串

        Args:
            query: 时区名（例如 Asia/Tokyo）或偏移（例如 UTC-09:00）
            reference_ms: 计算夏令时等可变偏移时使用的参考时刻（UTC纪元毫秒）

        Returns:
            TimeZoneOffset: 解析结果，无法解析时为UTC
        """
        query = (query or "").strip()
        literal = load_utc_offset_table().get(query, query)
        offset = cls._parse_literal(literal)
        if offset is not None:
            return cls(offset, to_offset_string(offset), query)

        zone = tz.gettz(query) if query else None
        if zone is not None:
            if reference_ms is None:
                reference = datetime.now(timezone.utc)
            else:
                reference = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(
                    milliseconds=reference_ms
                )
            delta = zone.utcoffset(reference.astimezone(zone))
            if delta is not None:
                offset = int(delta.total_seconds() * 1000)
                return cls(offset, to_offset_string(offset), query)

        logger.warning(f"无法解析时区 {query!r}，使用UTC")
        return cls(0, "Z", query)

    @staticmethod
    def _parse_literal(text: str) -> Optional[int]:
        match = _OFFSET_PATTERN.match(text)
        if not match:
            return None
        sign, hours, minutes = match.groups()
        milliseconds = (int(hours) * 60 + int(minutes)) * 60 * 1000
        return -milliseconds if sign == "-" else milliseconds

    @classmethod
    def from_hour_minutes(cls, prefix: str, hour: int, minute: int) -> "TimeZoneOffset":
        """从符号和时分构造，例如 ("+", 9, 0) -> +09:00"""
        return cls.parse(f"{prefix}{hour:02d}:{minute:02d}")

    def __eq__(self, other):
        if not isinstance(other, TimeZoneOffset):
            return NotImplemented
        return self.milliseconds == other.milliseconds and self.display == other.display

    def __hash__(self):
        return hash((self.milliseconds, self.display))

    def __repr__(self):
        return f"TimeZoneOffset({self.query!r}, {self.display})"
