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
格式化模式

连续相同的字母为一组，组长度决定零填充宽度：
    Y 年  M 月  d 日  H 时  m 分  s 秒  f 毫秒
    w 和历年  E 星期  Z 时区(±HH:MM)  p 纪元秒  P 纪元毫秒
其他字符原样输出。
"""

from itertools import groupby
from typing import Callable, Dict

from .point_in_time import PointInTime
from .wareki import Wareki
from .weekday import WeekDayUnit

_PADDED_FIELDS: Dict[str, Callable[[PointInTime, int], str]] = {
    "Y": PointInTime.get_full_year_string,
    "M": PointInTime.get_month_string,
    "d": PointInTime.get_date_string,
    "H": PointInTime.get_hours_string,
    "m": PointInTime.get_minutes_string,
    "s": PointInTime.get_seconds_string,
    "f": PointInTime.get_milliseconds_string,
}


def format_date(date: PointInTime, pattern: str, language: str = "jp") -> str:
    """
    按模式格式化日期

    Args:
        date: 日期
        pattern: 模式，例如 "YYYY-MM-dd"
        language: 星期名称使用的语言

    Returns:
        str: 格式化结果
    """
    result = []
    for char, group in groupby(pattern):
        length = len(list(group))
        if char in _PADDED_FIELDS:
            result.append(_PADDED_FIELDS[char](date, length))
        elif char == "w":
            result.append(Wareki.parse(date))
        elif char == "E":
            result.append(WeekDayUnit.to_weekday_string(language, date.get_weekday()))
        elif char == "Z":
            result.append(date.get_time_zone_string())
        elif char == "p":
            result.append(str(date.get_time(True) // 1000))
        elif char == "P":
            result.append(str(date.get_time(True)))
        else:
            result.append(char * length)
    return "".join(result)
