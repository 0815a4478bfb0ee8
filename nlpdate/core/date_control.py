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
日期运算引擎

Add 为相对运算，Set 为绝对运算。运算在本地时间（纪元毫秒 + 时区偏移）上进行，
结果再换算回 UTC 纪元毫秒。每个运算同时更新精度：Add 不改变精度，
Set 取当前精度与运算单位精度中较细的一个。
"""

import time
from datetime import datetime, timedelta
from typing import Callable, Iterable, TYPE_CHECKING

from dateutil.relativedelta import relativedelta

from .date_unit import DateUnit, DateUnitType, PRECISION_UNITS
from .point_in_time import PointInTime, from_local_datetime, to_local_datetime
from .weekday import WeekDayUnit

if TYPE_CHECKING:
    from .timezone import TimeZoneOffset


# 可用于相对运算的单位
ADDABLE_UNITS = PRECISION_UNITS

# 以"日"为精度的特殊单位
_DATE_PRECISION_UNITS = (
    DateUnitType.END_OF_MONTH,
    DateUnitType.END_OF_YEAR,
    DateUnitType.WEEK_NUMBER,
    DateUnitType.WEEKDAY,
)


class DateControl:
    """日期运算基类"""

    def __init__(self, unit: DateUnitType, value: int = 0):
        self.unit = DateUnitType(unit)
        self.value = int(value)

    def apply(self, epoch_time_milliseconds: int, time_offset: int) -> int:
        raise NotImplementedError

    def update_precision(self, current: DateUnitType) -> DateUnitType:
        raise NotImplementedError

    @staticmethod
    def _control_local(
        epoch_time_milliseconds: int,
        time_offset: int,
        callback: Callable[[datetime], datetime],
    ) -> int:
        local_date = to_local_datetime(epoch_time_milliseconds, time_offset)
        return from_local_datetime(callback(local_date), time_offset)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.unit == other.unit and self.value == other.value

    def __hash__(self):
        return hash((type(self).__name__, self.unit, self.value))

    def __repr__(self):
        return f"{type(self).__name__}({self.unit.name}, {self.value})"


class Add(DateControl):
    """相对运算：在指定单位上加减"""

    def __init__(self, unit: DateUnitType, value: int):
        super().__init__(unit, value)
        if self.unit not in ADDABLE_UNITS:
            raise ValueError(f"单位 {self.unit.name} 不支持相对运算")

    def apply(self, epoch_time_milliseconds: int, time_offset: int) -> int:
        if DateUnit.is_fixed_length(self.unit):
            return epoch_time_milliseconds + DateUnit.to_milliseconds(self.value, self.unit)

        # 年、月长度不固定，按日历运算（日超出月末时取月末）
        if self.unit == DateUnitType.YEAR:
            delta = relativedelta(years=self.value)
        else:
            delta = relativedelta(months=self.value)
        return self._control_local(
            epoch_time_milliseconds, time_offset, lambda local_date: local_date + delta
        )

    def update_precision(self, current: DateUnitType) -> DateUnitType:
        return current


class Set(DateControl):
    """绝对运算：将指定单位设为给定值"""

    def apply(self, epoch_time_milliseconds: int, time_offset: int) -> int:
        return self._control_local(epoch_time_milliseconds, time_offset, self._set)

    def _set(self, local_date: datetime) -> datetime:
        unit, value = self.unit, self.value
        if unit == DateUnitType.YEAR:
            day = min(local_date.day, DateUtility.max_date_in_calendar(value, local_date.month))
            return local_date.replace(year=value, day=day)
        if unit == DateUnitType.MONTH:
            # 超出1～12的月份进位到年
            carry, month_index = divmod(value - 1, 12)
            year = local_date.year + carry
            month = month_index + 1
            day = min(local_date.day, DateUtility.max_date_in_calendar(year, month))
            return local_date.replace(year=year, month=month, day=day)
        if unit == DateUnitType.DATE:
            return local_date.replace(day=1) + timedelta(days=value - 1)
        if unit == DateUnitType.HOUR:
            return local_date.replace(hour=0) + timedelta(hours=value)
        if unit == DateUnitType.MINUTE:
            return local_date.replace(minute=0) + timedelta(minutes=value)
        if unit == DateUnitType.SECOND:
            return local_date.replace(second=0) + timedelta(seconds=value)
        if unit == DateUnitType.MILLISECOND:
            return local_date.replace(microsecond=0) + timedelta(milliseconds=value)
        if unit == DateUnitType.END_OF_MONTH:
            return local_date.replace(
                day=DateUtility.max_date_in_calendar(local_date.year, local_date.month)
            )
        if unit == DateUnitType.END_OF_YEAR:
            return local_date.replace(month=12, day=31)
        if unit == DateUnitType.WEEK_NUMBER:
            first_day = local_date.replace(day=1)
            offset = DateUtility.day_offset_from_week_number(
                WeekDayUnit.from_python_weekday(first_day.weekday()),
                WeekDayUnit.from_python_weekday(local_date.weekday()),
                value,
            )
            return first_day + timedelta(days=offset)
        if unit == DateUnitType.WEEKDAY:
            current = WeekDayUnit.from_python_weekday(local_date.weekday())
            return local_date + timedelta(days=WeekDayUnit.get_weekday_delta(current, value))
        return local_date

    def update_precision(self, current: DateUnitType) -> DateUnitType:
        if self.unit in PRECISION_UNITS:
            required = self.unit
        elif self.unit in _DATE_PRECISION_UNITS:
            required = DateUnitType.DATE
        else:
            return current
        return max(current, required)


class DateUtility:
    @staticmethod
    def now_epoch() -> int:
        """当前UTC纪元毫秒"""
        return time.time_ns() // 1_000_000

    @staticmethod
    def control(date: PointInTime, controls: Iterable[DateControl]) -> PointInTime:
        """
        按顺序对日期执行运算

        Args:
            date: 运算对象
            controls: 运算列表

        Returns:
            PointInTime: 新的时间点（精度随运算更新）

        Raises:
            ValueError / OverflowError: 运算结果超出可表示范围时
        """
        epoch_time_milliseconds = date.get_time(False)
        time_offset = date.get_time_offset()
        precision = date.precision
        for control in controls:
            epoch_time_milliseconds = control.apply(epoch_time_milliseconds, time_offset)
            precision = control.update_precision(precision)
        return PointInTime(epoch_time_milliseconds, time_offset, precision)

    @staticmethod
    def date_from_set(time_zone: "TimeZoneOffset", controls: Iterable[DateControl]) -> PointInTime:
        """从纪元0开始执行运算得到日期，精度由Set决定"""
        origin = PointInTime(0, time_zone.milliseconds, DateUnitType.UNKNOWN)
        return DateUtility.control(origin, controls)

    @staticmethod
    def date_from_epoch(epoch_time_milliseconds: int, time_zone: "TimeZoneOffset") -> PointInTime:
        return PointInTime(epoch_time_milliseconds, time_zone.milliseconds, DateUnitType.UNKNOWN)

    @staticmethod
    def max_date_in_calendar(year: int, month: int) -> int:
        """
        月的最后一天

        Args:
            year: 年
            month: 月（1～12）
        """
        first_day = datetime(year, month, 1)
        return (first_day + relativedelta(months=1, days=-1)).day

    @staticmethod
    def day_offset_from_week_number(month_origin_weekday: int, weekday: int, week_number: int) -> int:
        """
        第N周的指定星期相对于月初1日的天数偏移（星期日开始一周）

        Args:
            month_origin_weekday: 1日的星期
            weekday: 目标星期
            week_number: 周序号（小于1时按1处理）

        Returns:
            int: 偏移天数，第1周可能为负（落在上个月）
        """
        week_number = max(week_number, 1)
        # 第1周剩余天数 + 中间整周 - 从星期六退回目标星期
        remaining = WeekDayUnit.get_weekday(6 - month_origin_weekday)
        return remaining + 7 * (week_number - 1) - (6 - WeekDayUnit.get_weekday(weekday))
