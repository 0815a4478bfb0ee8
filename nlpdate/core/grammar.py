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
语法规则定义

规则名称使用模板语法：${n} 表示第n个数字参数，例如 "${0}日後"。
同一规则可以有多个名称（表记揺れ），按语言分组。
"""

import json
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config
    from .point_in_time import PointInTime


class GrammarRule:
    """规则基类"""

    def __init__(
        self,
        names: Mapping[str, Sequence[str]],
        extra: Optional[Mapping[str, str]] = None,
    ):
        self.names = {locale: tuple(values) for locale, values in names.items()}
        self.extra = dict(extra or {})

    def names_for(self, locale: str) -> Sequence[str]:
        return self.names.get(locale, ())

    def __repr__(self):
        first = next(iter(self.names.values()), ())
        return f"{type(self).__name__}({list(first)[:3]})"


class SubjectRule(GrammarRule):
    """主语规则：由参数生成起始日期"""

    def __init__(
        self,
        names: Mapping[str, Sequence[str]],
        handler: Callable[[List[int], "Config"], "PointInTime"],
        extra: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(names, extra)
        self.handler = handler

    def parse(self, params: List[int], config: "Config") -> "PointInTime":
        return self.handler(params, config)


class PredicateRule(GrammarRule):
    """谓语规则：对日期做变换，可参考之前已匹配的谓语"""

    def __init__(
        self,
        names: Mapping[str, Sequence[str]],
        handler: Callable[
            ["PointInTime", List[int], "Config", List["MatchedPredicate"]], "PointInTime"
        ],
        extra: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(names, extra)
        self.handler = handler

    def parse(
        self,
        date: "PointInTime",
        params: List[int],
        config: "Config",
        prior_matches: List["MatchedPredicate"],
    ) -> "PointInTime":
        return self.handler(date, params, config, prior_matches)


class DateFormatRule(GrammarRule):
    """格式规则：只携带 extra（type、unit.*、format.*）"""


class MatchedPredicate:
    """已匹配的谓语，包含调用参数及标注（extra + argv）"""

    __slots__ = ("rule", "params", "extra")

    def __init__(self, rule: PredicateRule, params: List[int]):
        self.rule = rule
        self.params = list(params)
        self.extra: Dict[str, Any] = dict(rule.extra, argv=json.dumps(self.params))

    def get(self, key: str, default: Any = None) -> Any:
        return self.extra.get(key, default)

    def __repr__(self):
        return f"MatchedPredicate({self.rule!r}, {self.extra})"
