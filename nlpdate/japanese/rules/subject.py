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
主语规则：作为基准的日期（纪元秒、年月日等ASCII表达）
"""

from typing import List, Sequence

from ...core.config import Config
from ...core.date_control import DateUtility, Set
from ...core.date_unit import DateUnit, DateUnitType
from ...core.grammar import SubjectRule
from ...core.point_in_time import PointInTime
from ...core.timezone import TimeZoneOffset

# 纯数字主语按位数判断格式
EPOCH_SECONDS_LENGTH = 10
EPOCH_MILLISECONDS_LENGTH = 13
YEAR_MONTH_DATE_LENGTH = 8
YEAR_MONTH_DATE_TIME_LENGTH = 14

_FIELD_UNITS = (
    DateUnitType.YEAR,
    DateUnitType.MONTH,
    DateUnitType.DATE,
    DateUnitType.HOUR,
    DateUnitType.MINUTE,
    DateUnitType.SECOND,
    DateUnitType.MILLISECOND,
)


def date_from_fields(time_zone: TimeZoneOffset, values: Sequence[int]) -> PointInTime:
    """按 年、月、日、时、分、秒、毫秒 的顺序设置字段"""
    return DateUtility.date_from_set(
        time_zone, [Set(unit, value) for unit, value in zip(_FIELD_UNITS, values)]
    )


def _split_digits(number: int, widths: Sequence[int]) -> List[int]:
    text = str(number)
    values = []
    position = 0
    for width in widths:
        values.append(int(text[position:position + width]))
        position += width
    return values


def parse_number(args: List[int], config: Config) -> PointInTime:
    length = len(str(args[0]))
    time_zone = config.get_time_zone()
    if length == EPOCH_MILLISECONDS_LENGTH:
        return DateUtility.date_from_epoch(args[0], time_zone)
    if length == EPOCH_SECONDS_LENGTH:
        return DateUtility.date_from_epoch(
            DateUnit.to_milliseconds(args[0], DateUnitType.SECOND), time_zone
        )
    if length == YEAR_MONTH_DATE_LENGTH:
        return date_from_fields(time_zone, _split_digits(args[0], (4, 2, 2)))
    if length == YEAR_MONTH_DATE_TIME_LENGTH:
        return date_from_fields(time_zone, _split_digits(args[0], (4, 2, 2, 2, 2, 2)))
    # 未定义的位数视为现在
    return DateUtility.date_from_epoch(config.get_epoch_time_milliseconds(), time_zone)


def parse_year_month_date(args: List[int], config: Config) -> PointInTime:
    return date_from_fields(config.get_time_zone(), args[:3])


def parse_month_date(args: List[int], config: Config) -> PointInTime:
    # 13以上的数字开头时为 年/月
    if args[0] >= 13:
        return date_from_fields(config.get_time_zone(), args[:2])
    now = DateUtility.date_from_epoch(config.get_epoch_time_milliseconds(), config.get_time_zone())
    return date_from_fields(config.get_time_zone(), [now.get_full_year(), args[0], args[1]])


def parse_date_time(args: List[int], config: Config) -> PointInTime:
    return date_from_fields(config.get_time_zone(), args[:6])


def parse_date_time_millisecond(args: List[int], config: Config) -> PointInTime:
    return date_from_fields(config.get_time_zone(), args[:7])


def parse_date_time_utc(args: List[int], config: Config) -> PointInTime:
    return date_from_fields(TimeZoneOffset.from_hour_minutes("+", 0, 0), args[:7])


def _with_offset(prefix: str):
    # 最后两个参数为时区的时、分
    def parse(args: List[int], config: Config) -> PointInTime:
        fields, (hour, minute) = args[:-2], args[-2:]
        return date_from_fields(TimeZoneOffset.from_hour_minutes(prefix, hour, minute), fields)

    return parse


SUBJECT_RULES = (
    SubjectRule(
        names={"jp": ["${0}"]},
        handler=parse_number,
    ),
    SubjectRule(
        names={
            "jp": [
                "${0}/${1}/${2}",
                "${0}-${1}-${2}",
            ]
        },
        handler=parse_year_month_date,
    ),
    SubjectRule(
        names={
            "jp": [
                "${0}/${1}",
                "${0}-${1}",
            ]
        },
        handler=parse_month_date,
    ),
    SubjectRule(
        names={
            "jp": [
                "${0}/${1}/${2} ${3}:${4}:${5}",
                "${0}/${1}/${2}T${3}:${4}:${5}",
                "${0}-${1}-${2} ${3}:${4}:${5}",
                "${0}-${1}-${2}T${3}:${4}:${5}",
            ]
        },
        handler=parse_date_time,
    ),
    SubjectRule(
        names={
            "jp": [
                "${0}/${1}/${2}T${3}:${4}:${5}.${6}",
                "${0}-${1}-${2}T${3}:${4}:${5}.${6}",
            ]
        },
        handler=parse_date_time_millisecond,
    ),
    SubjectRule(
        names={
            "jp": [
                "${0}/${1}/${2}T${3}:${4}:${5}Z",
                "${0}-${1}-${2}T${3}:${4}:${5}Z",
                "${0}-${1}-${2}T${3}:${4}:${5}.${6}Z",
            ]
        },
        handler=parse_date_time_utc,
    ),
    SubjectRule(
        names={
            "jp": [
                "${0}/${1}/${2}T${3}:${4}:${5}+${6}:${7}",
                "${0}-${1}-${2}T${3}:${4}:${5}+${6}:${7}",
                "${0}-${1}-${2}T${3}:${4}:${5}.${6}+${7}:${8}",
            ]
        },
        handler=_with_offset("+"),
    ),
    SubjectRule(
        names={
            "jp": [
                "${0}/${1}/${2}T${3}:${4}:${5}-${6}:${7}",
                "${0}-${1}-${2}T${3}:${4}:${5}-${6}:${7}",
                "${0}-${1}-${2}T${3}:${4}:${5}.${6}-${7}:${8}",
            ]
        },
        handler=_with_offset("-"),
    ),
)
