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
PointInTime 精度与字段读取测试

基准时刻 1584234000000 = 2020-03-15T10:00:00+09:00（星期日）
"""

from datetime import datetime, timedelta, timezone

from nlpdate.core.date_unit import DateUnitType
from nlpdate.core.point_in_time import PointInTime, zero_padding_string
from nlpdate.core.weekday import WeekDayType

NOW = 1584234000000
JST = 9 * 60 * 60 * 1000


def test_fields_without_precision():
    date = PointInTime(NOW, JST)
    assert date.precision == DateUnitType.UNKNOWN
    assert (date.get_full_year(), date.get_month(), date.get_date()) == (2020, 3, 15)
    assert (date.get_hours(), date.get_minutes(), date.get_seconds()) == (10, 0, 0)
    assert date.get_weekday() == WeekDayType.SUN


def test_fields_below_precision_use_defaults():
    date = PointInTime(NOW + 1234, JST, DateUnitType.MONTH)
    assert date.get_full_year() == 2020
    assert date.get_month() == 3
    assert date.get_date() == 1
    assert date.get_hours() == 0
    assert date.get_milliseconds() == 0
    # 内部的毫秒值不受精度影响
    assert date.get_time(False) == NOW + 1234


def test_get_time_truncates_by_precision():
    # 年月日精度：本地零点
    assert PointInTime(NOW, JST, DateUnitType.DATE).get_time(True) == NOW - 10 * 3600 * 1000
    assert PointInTime(NOW, JST, DateUnitType.MONTH).get_time(True) == 1582988400000
    # 时分秒精度：向下取整
    assert PointInTime(NOW + 1234, JST, DateUnitType.HOUR).get_time(True) == NOW
    assert PointInTime(NOW + 61234, JST, DateUnitType.MINUTE).get_time(True) == NOW + 60000
    assert PointInTime(NOW + 1234, JST, DateUnitType.MILLISECOND).get_time(True) == NOW + 1234


def test_time_zone_string():
    assert PointInTime(NOW, JST).get_time_zone_string() == "+09:00"
    assert PointInTime(NOW, 0).get_time_zone_string() == "+00:00"
    assert PointInTime(NOW, -(9 * 60 + 30) * 60 * 1000).get_time_zone_string() == "-09:30"
    assert PointInTime(NOW, (5 * 60 + 45) * 60 * 1000).get_time_zone_string() == "+05:45"


def test_local_date_is_time_zone_aware():
    date = PointInTime(NOW, JST, DateUnitType.DATE)
    expected = datetime(2020, 3, 15, tzinfo=timezone(timedelta(hours=9)))
    assert date.get_local_date() == expected
    assert date.get_local_date().utcoffset() == timedelta(hours=9)


def test_string_getters_pad_with_zero():
    date = PointInTime(NOW + 5, JST)
    assert date.get_month_string(2) == "03"
    assert date.get_month_string(1) == "3"
    assert date.get_milliseconds_string(3) == "005"
    assert date.get_full_year_string(2) == "2020"
    assert zero_padding_string(4, 7) == "0007"


def test_equality():
    assert PointInTime(NOW, JST) == PointInTime(NOW, JST)
    assert PointInTime(NOW, JST) != PointInTime(NOW, JST, DateUnitType.DATE)
    assert len({PointInTime(NOW, JST), PointInTime(NOW, JST)}) == 1


def test_precision_floors_local_time_in_half_hour_zone():
    # UTC+05:30：基准时刻为本地 06:30
    ist = (5 * 60 + 30) * 60 * 1000
    date = PointInTime(NOW, ist, DateUnitType.HOUR)
    assert date.get_time(True) == NOW - 30 * 60 * 1000
    local_date = date.get_local_date()
    assert (local_date.hour, local_date.minute) == (6, 0)

    date = PointInTime(NOW + 90 * 1000, (5 * 60 + 45) * 60 * 1000, DateUnitType.MINUTE)
    assert date.get_time(True) == NOW + 60 * 1000
