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
日期处理核心模块

与语言无关的组件：时间点与精度、日期运算引擎、格式化、和历换算、
时区解析、配置、基于编辑距离的规则查找和FST重写处理器。

主要组件:
- PointInTime: 带精度的时间点
- DateUtility / Add / Set: 日期运算
- format_date: 模式格式化
- Config / TimeZoneOffset: 配置与时区
- BaseParser: 规则查找
- Processor: FST重写处理器基类
"""

from .config import Config
from .date_control import Add, DateControl, DateUtility, Set
from .date_formatter import format_date
from .date_unit import DateUnit, DateUnitType
from .grammar import DateFormatRule, MatchedPredicate, PredicateRule, SubjectRule
from .logger import auto_setup, get_logger, setup_logging
from .point_in_time import PointInTime
from .processor import Processor
from .resolver import BaseParser
from .timezone import TimeZoneOffset
from .wareki import Wareki
from .weekday import WeekDayType, WeekDayUnit

__all__ = [
    "Add",
    "BaseParser",
    "Config",
    "DateControl",
    "DateFormatRule",
    "DateUnit",
    "DateUnitType",
    "DateUtility",
    "MatchedPredicate",
    "PointInTime",
    "PredicateRule",
    "Processor",
    "Set",
    "SubjectRule",
    "TimeZoneOffset",
    "Wareki",
    "WeekDayType",
    "WeekDayUnit",
    "auto_setup",
    "format_date",
    "get_logger",
    "setup_logging",
]
