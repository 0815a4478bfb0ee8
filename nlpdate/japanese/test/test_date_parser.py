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
日期解析端到端测试

基准时刻 1584234000000 = 2020-03-15T10:00:00+09:00（星期日）
"""

from datetime import datetime, timedelta, timezone

import pytest

from nlpdate import Config, nlp_date
from nlpdate.core.date_unit import DateUnitType
from nlpdate.japanese.date_extractor import DateExtractor

NOW = 1584234000000


@pytest.fixture
def config():
    return Config(time_zone="Asia/Tokyo", epoch_time_milliseconds=NOW)


def test_relative_words(config):
    test_cases = [
        ("今日", "2020-03-15T00:00:00+09:00"),
        ("明日", "2020-03-16T00:00:00+09:00"),
        ("あした", "2020-03-16T00:00:00+09:00"),
        ("明後日", "2020-03-17T00:00:00+09:00"),
        ("昨日", "2020-03-14T00:00:00+09:00"),
        ("一昨日", "2020-03-13T00:00:00+09:00"),
        ("来月", "2020-04-15T00:00:00+09:00"),
        ("去年", "2019-03-15T00:00:00+09:00"),
        ("月末", "2020-03-31T00:00:00+09:00"),
        ("年末", "2020-12-31T00:00:00+09:00"),
    ]
    for query, expected in test_cases:
        assert nlp_date(query, config).as_string() == expected, query


def test_offsets(config):
    test_cases = [
        ("3日後", "2020-03-18T10:00:00+09:00"),
        ("3日前", "2020-03-12T10:00:00+09:00"),
        ("2週間後", "2020-03-29T10:00:00+09:00"),
        ("1ヶ月後", "2020-04-15T10:00:00+09:00"),
        ("3か月前", "2019-12-15T10:00:00+09:00"),
        ("5時間前", "2020-03-15T05:00:00+09:00"),
    ]
    for query, expected in test_cases:
        assert nlp_date(query, config).as_string() == expected, query


def test_absolute_fields(config):
    test_cases = [
        ("2020年3月15日", "2020-03-15T00:00:00+09:00"),
        ("明後日の午後3時", "2020-03-17T15:00:00+09:00"),
        ("明日 10:00", "2020-03-16T10:00:00+09:00"),
        ("午前9時30分", "2020-03-15T09:30:00+09:00"),
        ("今", "2020-03-15T10:00:00+09:00"),
    ]
    for query, expected in test_cases:
        assert nlp_date(query, config).as_string() == expected, query


def test_subject_with_predicates(config):
    assert nlp_date("2020/3/15の3日前", config).as_string("[YYYY-MM-dd]") == "2020-03-12"
    assert nlp_date(["2020/3/15", "3日前"], config).as_string("[YYYY-MM-dd]") == "2020-03-12"
    assert nlp_date("2019/5/1", config).as_string("[YYYY-MM-dd]") == "2019-05-01"
    assert nlp_date("5/1", config).as_string("[YYYY-MM-dd]") == "2020-05-01"
    assert nlp_date("2019/5", config).as_string("[YYYY-MM]") == "2019-05"


def test_numeric_subjects(config):
    assert nlp_date(NOW, config).as_string() == "2020-03-15T10:00:00+09:00"
    assert nlp_date(1584234000, config).as_string() == "2020-03-15T10:00:00+09:00"
    date = nlp_date(20200315, config)
    assert date.get_point_in_time().precision == DateUnitType.DATE
    assert date.as_string("[YYYY/MM/dd]") == "2020/03/15"
    assert nlp_date("20200315103000", config).as_string("[HH:mm:ss]") == "10:30:00"


def test_iso_subjects_keep_their_offset(config):
    date = nlp_date("2020-03-16T00:00:00+09:00", config)
    assert date.as_string() == "2020-03-16T00:00:00+09:00"
    date = nlp_date("2020-03-15T01:00:00Z", config)
    assert date.as_string("[Z]") == "+00:00"
    assert date.as_number("エポックミリ秒") == NOW
    date = nlp_date("2020-03-15T10:00:00-05:00", config)
    assert date.as_string("[HH Z]") == "10 -05:00"


def test_wareki(config):
    assert nlp_date("令和2年", config).as_string("[YYYY]") == "2020"
    assert nlp_date("令和元年", config).as_string("[YYYY]") == "2019"
    assert nlp_date("平成31年4月30日", config).as_string("[YYYY-MM-dd]") == "2019-04-30"
    assert nlp_date("令和元年5月1日", config).as_string("和暦の年月日") == "令和1年05月01日"


def test_weekdays(config):
    test_cases = [
        ("金曜日", "2020-03-20"),
        ("日曜日", "2020-03-15"),
        ("次の金曜日", "2020-03-20"),
        ("次の日曜日", "2020-03-22"),
        ("前の金曜日", "2020-03-13"),
        ("第3金曜日", "2020-03-20"),
        ("次の第3金曜日", "2020-03-20"),
        ("前の第3金曜日", "2020-02-14"),
        ("4月の第2月曜日", "2020-04-06"),
        ("3月15日（金）", "2020-03-20"),
    ]
    for query, expected in test_cases:
        assert nlp_date(query, config).as_string("[YYYY-MM-dd]") == expected, query


def test_precision(config):
    assert nlp_date("明日", config).get_point_in_time().precision == DateUnitType.DATE
    assert nlp_date("10時", config).get_point_in_time().precision == DateUnitType.HOUR
    assert nlp_date("3日後", config).get_point_in_time().precision == DateUnitType.UNKNOWN
    assert nlp_date("来月", config).as_string("[HH:mm]") == "00:00"


def test_format_descriptions(config):
    date = nlp_date("明日", config)
    test_cases = [
        ("年月日", "2020年03月16日"),
        ("日本語の年月日", "2020年03月16日"),
        ("ハイフンの年月日", "2020-03-16"),
        ("スラッシュの年月日", "2020/03/16"),
        ("数字の年月日", "20200316"),
        ("曜日", "月曜日"),
        ("ISO", "2020-03-16T00:00:00+09:00"),
        ("[YYYY年M月d日(E)]", "2020年3月16日(月)"),
    ]
    for description, expected in test_cases:
        assert date.as_string(description) == expected, description


def test_as_number(config):
    date = nlp_date("明日", config)
    assert date.as_number("年月日") == 20200316
    assert date.as_number("年") == 2020
    assert date.as_number("エポック秒") == (NOW + 14 * 3600 * 1000) // 1000
    # 数值化失败时为按精度截断的纪元毫秒
    assert date.as_number("曜日") == NOW + 14 * 3600 * 1000


def test_as_date(config):
    expected = datetime(2020, 3, 16, tzinfo=timezone(timedelta(hours=9)))
    assert nlp_date("明日", config).as_date() == expected


def test_unparseable_subject(config):
    date = nlp_date("abc", config)
    assert date.get_point_in_time() is None
    assert date.as_string() is None
    assert date.as_date() is None
    assert date.as_number("年月日") == 0


def test_failing_tokens_are_skipped(config):
    # 0年 无法表示，忽略后为现在
    assert nlp_date("0年", config).as_string() == "2020-03-15T10:00:00+09:00"
    assert nlp_date("よくわからない", config).as_string() == "2020-03-15T10:00:00+09:00"
    assert nlp_date("99999999999999", config).as_string() is None


def test_config_as_dict():
    params = {"time_zone": "UTC+00:00", "epoch_time_milliseconds": NOW}
    assert nlp_date("明日", params).as_string() == "2020-03-16T00:00:00+00:00"


def test_dynamic_mode():
    config = Config(time_zone="Asia/Tokyo", mode="dynamic")
    date = nlp_date("明日", config)
    first = date.get_point_in_time()
    assert first is not None
    assert first.precision == DateUnitType.DATE
    assert first.get_time(True) > NOW


def test_extractor_query_list():
    extractor = DateExtractor(Config(time_zone="Asia/Tokyo", epoch_time_milliseconds=NOW))
    assert extractor.get_query_list("明後日の午後3時") == ["明後日", "午後", "3時"]
    assert extractor.get_query_list(20200315) == ["20200315"]
    assert extractor.get_query_list(["第３金曜日", "明日 10:00"]) == ["第3@5曜日", "明日@10:00"]


def test_half_hour_zone_hides_minutes():
    config = Config(time_zone="Asia/Kolkata", epoch_time_milliseconds=NOW)
    date = nlp_date("午後3時", config)
    assert date.as_string() == "2020-03-15T15:00:00+05:30"
    local_date = date.as_date()
    assert (local_date.hour, local_date.minute) == (15, 0)
    assert date.as_number("エポックミリ秒") == NOW + 8 * 3600 * 1000 + 30 * 60 * 1000


def test_unrepresentable_now_gives_no_result():
    config = Config(time_zone="Asia/Tokyo", epoch_time_milliseconds=10 ** 17)
    date = nlp_date("明日", config)
    assert date.get_point_in_time() is None
    assert date.as_string() is None
    assert date.as_number("年月日") == 0
