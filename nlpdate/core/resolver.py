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

import math
from typing import Callable, Optional, Sequence, Tuple, TypeVar

from rapidfuzz.distance import Levenshtein

from .grammar import GrammarRule

R = TypeVar("R", bound=GrammarRule)
T = TypeVar("T")


def acceptable_distance(query: str) -> int:
    """可接受的编辑距离上限（不含），查询长度的一半，至少为1"""
    return max(math.ceil(len(query) * 0.5), 1)


def find_closest_rule(rules: Sequence[R], locale: str, query: str) -> Tuple[Optional[R], int]:
    """
    查找编辑距离最小的规则

    Returns:
        Tuple[Optional[R], int]: (规则, 距离)，距离相同时取靠前的规则
    """
    min_distance = None
    target = None
    for rule in rules:
        for name in rule.names_for(locale):
            distance = Levenshtein.distance(name, query)
            if min_distance is None or distance < min_distance:
                target = rule
                min_distance = distance
    return target, min_distance if min_distance is not None else -1


class BaseParser:
    """解析器基类，提供基于编辑距离的规则查找"""

    @staticmethod
    def find_target_with_levenshtein(
        rules: Sequence[R],
        locale: str,
        query: str,
        when_exist: Callable[[R], T],
    ) -> Optional[T]:
        """
        查找最接近查询的规则并回调

        Args:
            rules: 规则列表
            locale: 语言
            query: 查询（模板文本，例如 "${0}日後"）
            when_exist: 找到规则时的回调

        Returns:
            Optional[T]: 回调的返回值，未找到时为None
        """
        target, distance = find_closest_rule(rules, locale, query)
        if target is not None and distance < acceptable_distance(query):
            return when_exist(target)
        return None
