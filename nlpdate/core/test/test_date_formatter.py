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
格式化模式与和历测试
"""

from nlpdate.core.config import Config
from nlpdate.core.date_control import DateUtility, Set
from nlpdate.core.date_formatter import format_date
from nlpdate.core.date_unit import DateUnitType
from nlpdate.core.point_in_time import PointInTime
from nlpdate.core.timezone import TimeZoneOffset
from nlpdate.core.wareki import Wareki
from nlpdate.japanese.date_extractor import nlp_date

NOW = 1584234000000
JST = 9 * 60 * 60 * 1000


def make_date(year, month, day):
    return DateUtility.date_from_set(
        TimeZoneOffset.parse("Asia/Tokyo"),
        [Set(DateUnitType.YEAR, year), Set(DateUnitType.MONTH, month), Set(DateUnitType.DATE, day)],
    )


def test_padded_fields():
    date = PointInTime(NOW + 5, JST)
    test_cases = [
        ("YYYY-MM-dd HH:mm:ss", "2020-03-15 10:00:00"),
        ("Y/M/d", "2020/3/15"),
        ("YYYY年M月d日", "2020年3月15日"),
        ("HH:mm:ss.fff", "10:00:00.005"),
    ]
    for pattern, expected in test_cases:
        assert format_date(date, pattern) == expected, pattern


def test_special_fields():
    date = PointInTime(NOW, JST)
    assert format_date(date, "E") == "日"
    assert format_date(date, "E曜日") == "日曜日"
    assert format_date(date, "Z") == "+09:00"
    assert format_date(date, "p") == "1584234000"
    assert format_date(date, "P") == "1584234000000"
    assert format_date(date, "w") == "令和2"


def test_literal_runs_are_kept():
    date = PointInTime(NOW, JST)
    assert format_date(date, "T") == "T"
    assert format_date(date, "YYYY--MM") == "2020--03"
    assert format_date(date, "") == ""


def test_epoch_fields_follow_precision():
    date = PointInTime(NOW, JST, DateUnitType.DATE)
    assert format_date(date, "P") == str(NOW - 10 * 3600 * 1000)
    assert format_date(date, "HH:mm") == "00:00"


def test_formatted_text_parses_back():
    config = Config(time_zone="Asia/Tokyo", epoch_time_milliseconds=NOW)
    date = nlp_date(NOW, config)
    patterns = [
        "[YYYY/MM/dd HH:mm:ss]",
        "[YYYY-MM-dd]",
        "[YYYYMMdd]",
        "[P]",
        "[p]",
        "[YYYY-MM-ddTHH:mm:ss.fffZ]",
        "[YYYY年MM月dd日]",
    ]
    for pattern in patterns:
        text = date.as_string(pattern)
        assert nlp_date(text, config).as_string(pattern) == text, pattern


def test_wareki_era_boundaries():
    test_cases = [
        ((1989, 1, 7), "昭和64"),
        ((1989, 1, 8), "平成1"),
        ((2019, 4, 30), "平成31"),
        ((2019, 5, 1), "令和1"),
        ((1926, 12, 25), "昭和1"),
        ((1912, 7, 29), "明治45"),
        ((1850, 1, 1), "西暦1850"),
    ]
    for (year, month, day), expected in test_cases:
        assert Wareki.parse(make_date(year, month, day)) == expected, expected


def test_wareki_to_full_year():
    assert Wareki.to_full_year("令和", 2) == 2020
    assert Wareki.to_full_year("平成", 1) == 1989
    assert Wareki.to_full_year("昭和", 64) == 1989
    assert Wareki.to_full_year("不明", 1) is None
