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
时间点（PointInTime）

以 UTC 纪元毫秒 + 时区偏移毫秒 + 精度 表示一个时间点。
精度以下的字段读取时返回固定默认值（年1900、月1、日1、时分秒毫秒0），
内部保存的毫秒值仍保留完整信息，便于后续相对运算。
"""

from datetime import datetime, timedelta, timezone

from .date_unit import DateUnit, DateUnitType, PRECISION_UNITS
from .weekday import WeekDayType, WeekDayUnit

# 本地时间计算的基准（无时区）
EPOCH = datetime(1970, 1, 1)
EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)

DEFAULT_YEAR = 1900


def to_local_datetime(epoch_time_milliseconds: int, time_offset: int) -> datetime:
    """
    纪元毫秒 + 时区偏移 -> 本地时间（naive datetime）

    Args:
        epoch_time_milliseconds: UTC纪元毫秒
        time_offset: 时区偏移毫秒

    Returns:
        datetime: 本地时间
    """
    return EPOCH + timedelta(milliseconds=epoch_time_milliseconds + time_offset)


def from_local_datetime(local_date: datetime, time_offset: int) -> int:
    """本地时间（naive datetime）-> UTC纪元毫秒"""
    delta = local_date - EPOCH
    milliseconds = (delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds // 1000
    return milliseconds - time_offset


def zero_padding_string(length: int, value: int) -> str:
    """零填充到指定长度，数值更长时保持原样"""
    return str(value).zfill(length)


class PointInTime:
    """带精度的时间点，不可变"""

    __slots__ = ("_epoch_time_milliseconds", "_time_offset", "_precision", "_local_date")

    def __init__(
        self,
        epoch_time_milliseconds: int,
        time_offset: int,
        precision: DateUnitType = DateUnitType.UNKNOWN,
    ) -> None:
        self._epoch_time_milliseconds = int(epoch_time_milliseconds)
        self._time_offset = int(time_offset)
        self._precision = DateUnitType(precision)
        self._local_date = to_local_datetime(self._epoch_time_milliseconds, self._time_offset)

    @property
    def precision(self) -> DateUnitType:
        return self._precision

    @property
    def local_date(self) -> datetime:
        """精度不影响的本地时间"""
        return self._local_date

    def _is_enough_precision(self, request: DateUnitType) -> bool:
        # UNKNOWN 表示所有字段都有效
        if self._precision not in PRECISION_UNITS:
            return True
        return self._precision >= request

    def get_full_year(self) -> int:
        if self._is_enough_precision(DateUnitType.YEAR):
            return self._local_date.year
        return DEFAULT_YEAR

    def get_month(self) -> int:
        if self._is_enough_precision(DateUnitType.MONTH):
            return self._local_date.month
        return 1

    def get_date(self) -> int:
        if self._is_enough_precision(DateUnitType.DATE):
            return self._local_date.day
        return 1

    def get_hours(self) -> int:
        if self._is_enough_precision(DateUnitType.HOUR):
            return self._local_date.hour
        return 0

    def get_minutes(self) -> int:
        if self._is_enough_precision(DateUnitType.MINUTE):
            return self._local_date.minute
        return 0

    def get_seconds(self) -> int:
        if self._is_enough_precision(DateUnitType.SECOND):
            return self._local_date.second
        return 0

    def get_milliseconds(self) -> int:
        if self._is_enough_precision(DateUnitType.MILLISECOND):
            return self._local_date.microsecond // 1000
        return 0

    def get_full_year_string(self, length: int) -> str:
        return zero_padding_string(length, self.get_full_year())

    def get_month_string(self, length: int) -> str:
        return zero_padding_string(length, self.get_month())

    def get_date_string(self, length: int) -> str:
        return zero_padding_string(length, self.get_date())

    def get_hours_string(self, length: int) -> str:
        return zero_padding_string(length, self.get_hours())

    def get_minutes_string(self, length: int) -> str:
        return zero_padding_string(length, self.get_minutes())

    def get_seconds_string(self, length: int) -> str:
        return zero_padding_string(length, self.get_seconds())

    def get_milliseconds_string(self, length: int) -> str:
        return zero_padding_string(length, self.get_milliseconds())

    def get_weekday(self) -> WeekDayType:
        return WeekDayUnit.from_python_weekday(self._local_date.weekday())

    def get_time(self, is_affect_precision: bool) -> int:
        """
        获取纪元毫秒

        Args:
            is_affect_precision: True时按精度截断（时分秒向下取整，年月日取本地零点）

        Returns:
            int: UTC纪元毫秒
        """
        if not is_affect_precision:
            return self._epoch_time_milliseconds
        if self._precision in (DateUnitType.HOUR, DateUnitType.MINUTE, DateUnitType.SECOND):
            # 按本地时间取整，非整点时区的分钟不外露
            unit = DateUnit.milliseconds(self._precision)
            local = self._epoch_time_milliseconds + self._time_offset
            return (local // unit) * unit - self._time_offset
        if self._precision in (DateUnitType.YEAR, DateUnitType.MONTH, DateUnitType.DATE):
            midnight = datetime(self.get_full_year(), self.get_month(), self.get_date())
            return from_local_datetime(midnight, self._time_offset)
        return self._epoch_time_milliseconds

    def get_local_date(self) -> datetime:
        """返回带时区的 datetime（按精度截断）"""
        tz = timezone(timedelta(milliseconds=self._time_offset))
        return (EPOCH_UTC + timedelta(milliseconds=self.get_time(True))).astimezone(tz)

    def get_time_offset(self) -> int:
        return self._time_offset

    def get_time_zone_string(self) -> str:
        """时区偏移格式化为 ±HH:MM"""
        prefix = "-" if self._time_offset < 0 else "+"
        minutes = abs(self._time_offset) // (60 * 1000)
        hour, minute = divmod(minutes, 60)
        return f"{prefix}{zero_padding_string(2, hour)}:{zero_padding_string(2, minute)}"

    def __eq__(self, other):
        if not isinstance(other, PointInTime):
            return NotImplemented
        return (
            self._epoch_time_milliseconds == other._epoch_time_milliseconds
            and self._time_offset == other._time_offset
            and self._precision == other._precision
        )

    def __hash__(self):
        return hash((self._epoch_time_milliseconds, self._time_offset, self._precision))

    def __repr__(self):
        return (
            f"PointInTime({self._local_date.isoformat()}{self.get_time_zone_string()}, "
            f"precision={self._precision.name})"
        )
