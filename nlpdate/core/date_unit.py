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
日期时间单位定义

单位同时用作精度（precision）：数值越大精度越细。
"""

from enum import IntEnum


class DateUnitType(IntEnum):
    """日期时间单位"""

    UNKNOWN = 0  # 未定义（全部字段有效）
    YEAR = 1
    MONTH = 2
    DATE = 3
    HOUR = 4
    MINUTE = 5
    SECOND = 6
    MILLISECOND = 7
    END_OF_MONTH = 8
    END_OF_YEAR = 9
    WEEK_NUMBER = 10
    WEEKDAY = 11


# 可以换算成固定毫秒数的单位（年、月长度不固定）
_UNIT_MILLISECONDS = {
    DateUnitType.DATE: 24 * 60 * 60 * 1000,
    DateUnitType.HOUR: 60 * 60 * 1000,
    DateUnitType.MINUTE: 60 * 1000,
    DateUnitType.SECOND: 1000,
    DateUnitType.MILLISECOND: 1,
}

# 表示精度的单位
PRECISION_UNITS = (
    DateUnitType.YEAR,
    DateUnitType.MONTH,
    DateUnitType.DATE,
    DateUnitType.HOUR,
    DateUnitType.MINUTE,
    DateUnitType.SECOND,
    DateUnitType.MILLISECOND,
)


class DateUnit:
    """单位换算工具"""

    @staticmethod
    def milliseconds(unit: DateUnitType) -> int:
        """
        获取单位对应的毫秒数

        Args:
            unit: 日期时间单位

        Returns:
            int: 1单位的毫秒数，年、月等长度不固定的单位返回-1
        """
        return _UNIT_MILLISECONDS.get(unit, -1)

    @staticmethod
    def is_fixed_length(unit: DateUnitType) -> bool:
        return unit in _UNIT_MILLISECONDS

    @staticmethod
    def to_milliseconds(value: int, unit: DateUnitType) -> int:
        """
        将带单位的数值换算为毫秒

        Args:
            value: 数值
            unit: 单位（日、时、分、秒、毫秒）

        Returns:
            int: 毫秒数

        Raises:
            ValueError: 单位长度不固定时
        """
        if unit not in _UNIT_MILLISECONDS:
            raise ValueError(f"单位 {unit.name} 无法换算为毫秒")
        return value * _UNIT_MILLISECONDS[unit]
