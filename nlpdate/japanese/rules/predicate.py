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
谓语规则：对日期的变换（"3日後"、"明日"、"午後"、"第3金曜日" 等）

谓语按出现顺序执行，可以通过之前已匹配谓语的 extra 读取上下文：
    wareki        年号（"令和" + "2年"）
    ampm          上午/下午（"午後" + "3時"）
    index_number  第N（"第3" + "金曜日"）
    relation      次/前（"次の" + "金曜日"）
"""

import json
from datetime import datetime
from typing import Any, Dict, List

from dateutil.relativedelta import relativedelta

from ...core.config import Config
from ...core.date_control import Add, DateUtility, Set
from ...core.date_unit import DateUnit, DateUnitType, PRECISION_UNITS
from ...core.grammar import MatchedPredicate, PredicateRule
from ...core.point_in_time import PointInTime, to_local_datetime
from ...core.wareki import Wareki
from ...core.weekday import WeekDayUnit

RELATION_NEXT = "next"
RELATION_PREVIOUS = "previous"


def last_predicate_extra(prior_matches: List[MatchedPredicate], index: int = 1) -> Dict[str, Any]:
    """倒数第index个已匹配谓语的extra，不存在时为空"""
    if len(prior_matches) >= index:
        return prior_matches[-index].extra
    return {}


def now_control_set(
    config: Config,
    accuracy: DateUnitType,
    days: int = 0,
    years: int = 0,
    months: int = 0,
) -> List[Set]:
    """
    将日期设为"现在"（加上偏移）的运算列表

    Args:
        config: 配置（提供现在时刻和时区）
        accuracy: 设置到哪个单位为止
        days: 天数偏移
        years: 年偏移
        months: 月偏移（日超出月末时取月末）

    Returns:
        List[Set]: 从年开始到accuracy为止的Set运算
    """
    now = to_local_datetime(
        config.get_epoch_time_milliseconds() + DateUnit.to_milliseconds(days, DateUnitType.DATE),
        config.get_time_zone().milliseconds,
    )
    target: datetime = now + relativedelta(years=years, months=months)
    values = (
        target.year,
        target.month,
        target.day,
        target.hour,
        target.minute,
        target.second,
        target.microsecond // 1000,
    )
    return [Set(unit, value) for unit, value in zip(PRECISION_UNITS, values) if unit <= accuracy]


def _add(unit: DateUnitType, sign: int = 1):
    def parse(date, args, config, prior_matches):
        return DateUtility.control(date, [Add(unit, sign * args[0])])

    return parse


def _add_weeks(sign: int):
    def parse(date, args, config, prior_matches):
        return DateUtility.control(date, [Add(DateUnitType.DATE, sign * args[0] * 7)])

    return parse


def _now(accuracy: DateUnitType = DateUnitType.DATE, **offset):
    def parse(date, args, config, prior_matches):
        return DateUtility.control(date, now_control_set(config, accuracy, **offset))

    return parse


def _set(unit: DateUnitType):
    def parse(date, args, config, prior_matches):
        return DateUtility.control(date, [Set(unit, args[0])])

    return parse


def _set_fixed(unit: DateUnitType):
    def parse(date, args, config, prior_matches):
        return DateUtility.control(date, [Set(unit, 0)])

    return parse


def _keep(date, args, config, prior_matches):
    return date


def parse_current_time(date, args, config, prior_matches):
    # 只设置时分秒和毫秒
    controls = now_control_set(config, DateUnitType.MILLISECOND)
    return DateUtility.control(date, [c for c in controls if c.unit >= DateUnitType.HOUR])


def parse_year(date, args, config, prior_matches):
    year = args[0]
    wareki = last_predicate_extra(prior_matches).get("wareki")
    if wareki:
        year = Wareki.to_full_year(wareki, year) or year
    return DateUtility.control(date, [Set(DateUnitType.YEAR, year)])


def _era(name: str):
    def parse(date, args, config, prior_matches):
        return DateUtility.control(date, [Set(DateUnitType.YEAR, Wareki.to_full_year(name, 1))])

    return parse


def parse_hour(date, args, config, prior_matches):
    ampm = int(last_predicate_extra(prior_matches).get("ampm", "0"))
    return DateUtility.control(date, [Set(DateUnitType.HOUR, args[0] + ampm)])


def parse_hour_minute(date, args, config, prior_matches):
    return DateUtility.control(
        date, [Set(DateUnitType.HOUR, args[0]), Set(DateUnitType.MINUTE, args[1])]
    )


def parse_pm_hour_minute(date, args, config, prior_matches):
    return DateUtility.control(
        date, [Set(DateUnitType.HOUR, args[0] + 12), Set(DateUnitType.MINUTE, args[1])]
    )


def parse_weekday(
    date: PointInTime, args: List[int], config: Config, prior_matches: List[MatchedPredicate]
) -> PointInTime:
    """
    星期

    "第N" 之后：第N周的该星期（"次"/"前" 再往前时按月移动）
    "次"/"前" 之后：下一个/上一个该星期
    """
    weekday = WeekDayUnit.get_weekday(args[0])
    last = last_predicate_extra(prior_matches)
    controls = []

    if last.get("index_number"):
        week_number = json.loads(last.get("argv", "[0]"))[0]
        relation = last_predicate_extra(prior_matches, 2).get("relation")
        if relation:
            local_date = date.local_date
            origin = WeekDayUnit.from_python_weekday(local_date.replace(day=1).weekday())
            target_date = 1 + DateUtility.day_offset_from_week_number(origin, weekday, week_number)
            # 本月的目标日还没到：次=本月 前=上个月；已经过了：次=下个月 前=本月
            if local_date.day < target_date:
                if relation == RELATION_PREVIOUS:
                    controls.append(Add(DateUnitType.MONTH, -1))
            elif relation == RELATION_NEXT:
                controls.append(Add(DateUnitType.MONTH, 1))
        controls += [
            Set(DateUnitType.DATE, 1),
            Set(DateUnitType.WEEKDAY, weekday),
            Set(DateUnitType.WEEK_NUMBER, week_number),
        ]
        return DateUtility.control(date, controls)

    relation = last.get("relation")
    controls.append(Set(DateUnitType.WEEKDAY, weekday))
    if relation == RELATION_NEXT and date.get_weekday() == weekday:
        controls.append(Add(DateUnitType.DATE, 7))
    elif relation == RELATION_PREVIOUS:
        controls.append(Add(DateUnitType.DATE, -7))
    return DateUtility.control(date, controls)


_MONTH_SUFFIXES = ("月", "カ月", "ヶ月", "ヵ月", "ケ月")

PREDICATE_RULES = (
    PredicateRule(names={"jp": ["${0}日前"]}, handler=_add(DateUnitType.DATE, -1)),
    PredicateRule(names={"jp": ["${0}年前"]}, handler=_add(DateUnitType.YEAR, -1)),
    PredicateRule(names={"jp": ["${0}週間前", "${0}週前"]}, handler=_add_weeks(-1)),
    PredicateRule(names={"jp": ["${0}時間前"]}, handler=_add(DateUnitType.HOUR, -1)),
    PredicateRule(names={"jp": ["${0}分前"]}, handler=_add(DateUnitType.MINUTE, -1)),
    PredicateRule(names={"jp": ["${0}秒前"]}, handler=_add(DateUnitType.SECOND, -1)),
    PredicateRule(names={"jp": ["${0}日後"]}, handler=_add(DateUnitType.DATE)),
    PredicateRule(
        names={"jp": ["${0}%s後" % suffix for suffix in _MONTH_SUFFIXES]},
        handler=_add(DateUnitType.MONTH),
    ),
    PredicateRule(
        names={"jp": ["${0}%s前" % suffix for suffix in _MONTH_SUFFIXES]},
        handler=_add(DateUnitType.MONTH, -1),
    ),
    PredicateRule(names={"jp": ["${0}年後"]}, handler=_add(DateUnitType.YEAR)),
    PredicateRule(names={"jp": ["${0}週間後", "${0}週後"]}, handler=_add_weeks(1)),
    PredicateRule(names={"jp": ["${0}時間後"]}, handler=_add(DateUnitType.HOUR)),
    PredicateRule(names={"jp": ["${0}分後"]}, handler=_add(DateUnitType.MINUTE)),
    PredicateRule(names={"jp": ["${0}秒後"]}, handler=_add(DateUnitType.SECOND)),
    PredicateRule(names={"jp": ["今日", "きょう"]}, handler=_now()),
    PredicateRule(
        names={"jp": ["現在", "今", "今頃", "げんざい", "いま", "いまごろ"]},
        handler=parse_current_time,
    ),
    PredicateRule(names={"jp": ["来年"]}, handler=_now(years=1)),
    PredicateRule(names={"jp": ["再来年", "さ来年"]}, handler=_now(years=2)),
    PredicateRule(names={"jp": ["来月"]}, handler=_now(months=1)),
    PredicateRule(names={"jp": ["今月"]}, handler=_now(months=0)),
    PredicateRule(names={"jp": ["今年"]}, handler=_now(years=0)),
    PredicateRule(names={"jp": ["再来月", "さ来月"]}, handler=_now(months=2)),
    PredicateRule(names={"jp": ["明日", "あした", "あす"]}, handler=_now(days=1)),
    PredicateRule(names={"jp": ["明後日", "あさって"]}, handler=_now(days=2)),
    PredicateRule(names={"jp": ["しあさって"]}, handler=_now(days=3)),
    PredicateRule(names={"jp": ["やのあさって", "やまあさって"]}, handler=_now(days=4)),
    PredicateRule(names={"jp": ["去年", "昨年"]}, handler=_now(years=-1)),
    # "一昨年" 的 "一" 规范化后为数字，参数不参与计算
    PredicateRule(names={"jp": ["${0}昨年", "おととし"]}, handler=_now(years=-2)),
    PredicateRule(names={"jp": ["先月"]}, handler=_now(months=-1)),
    PredicateRule(names={"jp": ["昨日"]}, handler=_now(days=-1)),
    PredicateRule(
        names={"jp": ["${0}昨日", "おととい", "おとつい", "いっさくじつ"]},
        handler=_now(days=-2),
    ),
    PredicateRule(names={"jp": ["月末"]}, handler=_set_fixed(DateUnitType.END_OF_MONTH)),
    PredicateRule(names={"jp": ["年末"]}, handler=_set_fixed(DateUnitType.END_OF_YEAR)),
    PredicateRule(names={"jp": ["${0}年"]}, handler=parse_year),
    *(
        PredicateRule(names={"jp": [era, f"{era}元年"]}, handler=_era(era), extra={"wareki": era})
        for era in ("令和", "平成", "昭和", "大正", "明治")
    ),
    PredicateRule(names={"jp": ["${0}月"]}, handler=_set(DateUnitType.MONTH)),
    PredicateRule(names={"jp": ["${0}日"]}, handler=_set(DateUnitType.DATE)),
    PredicateRule(names={"jp": ["${0}時"]}, handler=parse_hour),
    PredicateRule(names={"jp": ["午前", "午前中", "AM"]}, handler=_keep, extra={"ampm": "0"}),
    PredicateRule(names={"jp": ["午後", "PM"]}, handler=_keep, extra={"ampm": "12"}),
    PredicateRule(names={"jp": ["${0}分"]}, handler=_set(DateUnitType.MINUTE)),
    PredicateRule(names={"jp": ["${0}:${1}", "AM${0}:${1}"]}, handler=parse_hour_minute),
    PredicateRule(names={"jp": ["PM${0}:${1}"]}, handler=parse_pm_hour_minute),
    PredicateRule(names={"jp": ["${0}秒"]}, handler=_set(DateUnitType.SECOND)),
    PredicateRule(names={"jp": ["${0}ミリ秒"]}, handler=_set(DateUnitType.MILLISECOND)),
    PredicateRule(names={"jp": ["${0}曜", "${0}曜日"]}, handler=parse_weekday),
    PredicateRule(names={"jp": ["第${0}"]}, handler=_keep, extra={"index_number": "argv"}),
    PredicateRule(names={"jp": ["次", "今度"]}, handler=_keep, extra={"relation": RELATION_NEXT}),
    PredicateRule(names={"jp": ["前", "以前"]}, handler=_keep, extra={"relation": RELATION_PREVIOUS}),
)
