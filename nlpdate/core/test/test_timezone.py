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
时区解析与配置测试
"""

from nlpdate.core.config import Config, MODE_DYNAMIC
from nlpdate.core.timezone import TimeZoneOffset, load_utc_offset_table

NOW = 1584234000000


def test_parse_from_table():
    offset = TimeZoneOffset.parse("Asia/Tokyo")
    assert offset.milliseconds == 9 * 60 * 60 * 1000
    assert offset.display == "+09:00"
    assert TimeZoneOffset.parse("UTC").display == "+00:00"
    assert "Asia/Tokyo" in load_utc_offset_table()


def test_parse_literal_offset():
    offset = TimeZoneOffset.parse("UTC-09:30")
    assert offset.milliseconds == -(9 * 60 + 30) * 60 * 1000
    assert offset.display == "-09:30"
    assert TimeZoneOffset.parse("+05:45").milliseconds == (5 * 60 + 45) * 60 * 1000
    assert TimeZoneOffset.from_hour_minutes("-", 3, 0) == TimeZoneOffset.parse("UTC-03:00")


def test_parse_falls_back_to_dateutil():
    # 2020-03-15 罗马尚未进入夏令时
    offset = TimeZoneOffset.parse("Europe/Rome", reference_ms=NOW)
    assert offset.milliseconds == 60 * 60 * 1000
    assert offset.display == "+01:00"


def test_parse_unknown_is_utc():
    offset = TimeZoneOffset.parse("Nowhere/Land")
    assert offset.milliseconds == 0
    assert offset.display == "Z"
    assert TimeZoneOffset.parse("").display == "Z"


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("NLPDATE_TIME_ZONE", raising=False)
    monkeypatch.delenv("NLPDATE_LANGUAGE", raising=False)
    config = Config()
    assert config.get_language() == "jp"
    assert config.get_time_zone().display == "+09:00"
    assert not config.is_dynamic()


def test_config_environment_override(monkeypatch):
    monkeypatch.setenv("NLPDATE_TIME_ZONE", "UTC-05:00")
    assert Config().get_time_zone().milliseconds == -5 * 60 * 60 * 1000
    # 构造参数优先
    assert Config(time_zone="Asia/Tokyo").get_time_zone().display == "+09:00"


def test_config_epoch_time():
    assert Config(epoch_time_milliseconds=NOW).get_epoch_time_milliseconds() == NOW
    assert Config(epoch_time_milliseconds=0).get_epoch_time_milliseconds() == 0
    # 负数表示现在
    assert Config(epoch_time_milliseconds=-1).get_epoch_time_milliseconds() > NOW


def test_config_dict_round_trip():
    params = {
        "time_zone": "UTC+09:00",
        "language": "jp",
        "mode": MODE_DYNAMIC,
        "epoch_time_milliseconds": NOW,
    }
    config = Config.from_dict(params)
    assert config.is_dynamic()
    assert config.to_dict() == params
    assert Config.from_dict(None).get_language() == "jp"
