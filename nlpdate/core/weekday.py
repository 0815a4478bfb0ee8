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

from enum import IntEnum
from typing import Dict, Sequence


class WeekDayType(IntEnum):
    """星期（0=星期日）"""

    SUN = 0
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6


# 各语言的星期名称
WEEKDAY_NAMES: Dict[str, Sequence[str]] = {
    "jp": ("日", "月", "火", "水", "木", "金", "土"),
}


class WeekDayUnit:
    @staticmethod
    def get_weekday(day: int) -> WeekDayType:
        """任意整数归一化为星期（0～6）"""
        return WeekDayType(day % 7)

    @staticmethod
    def get_weekday_delta(from_day: int, to_day: int) -> int:
        """
        从from_day前进到to_day所需的天数

        Returns:
            int: 0～6
        """
        return WeekDayUnit.get_weekday(to_day - from_day)

    @staticmethod
    def from_python_weekday(weekday: int) -> WeekDayType:
        """datetime.weekday()（0=星期一）转换为WeekDayType"""
        return WeekDayUnit.get_weekday(weekday + 1)

    @staticmethod
    def to_weekday_string(locale: str, weekday: int) -> str:
        return WEEKDAY_NAMES[locale][WeekDayUnit.get_weekday(weekday)]
