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
日期解析器

词序列的第一个词如果是ASCII（例如 "2020/3/15"、纪元秒），作为主语解析为基准日期；
否则基准日期为现在。之后的词作为谓语依次作用于日期。
"""

from datetime import datetime
from typing import List, Optional

from ..core.config import Config
from ..core.date_control import DateUtility
from ..core.date_formatter import format_date
from ..core.grammar import DateFormatRule, MatchedPredicate, PredicateRule
from ..core.logger import get_logger
from ..core.point_in_time import PointInTime
from ..core.resolver import BaseParser
from .normalizer import TextNormalizer
from .pre_escape import pre_escape
from .rules import DATE_FORMAT_RULES, PREDICATE_RULES, SUBJECT_RULES, DateFormat
from .rules.date_format import split_unit_words
from .splitter import Splitter

# 日历运算超出可表示范围等错误
RECOVERABLE_ERRORS = (ValueError, OverflowError, IndexError)

NUMBER_DESCRIPTION_PREFIX = "数字の"


class DateParser(BaseParser):
    """
    日期解析器

    Args:
        query: 词序列
        config: 配置
    """

    def __init__(self, query: List[str], config: Config):
        self.logger = get_logger(__name__)
        self.query = list(query)
        self.config = config
        self.static_epoch_time_milliseconds = config.get_epoch_time_milliseconds()
        self.static_result = self.parse_query(self.static_epoch_time_milliseconds, self.query)

    @staticmethod
    def is_implicit_date(subject_query: str) -> bool:
        """第一个词为空或含有非ASCII字符时，主语省略（现在）"""
        return not subject_query or any(ord(char) > 127 for char in subject_query)

    def subject(self, subject_query: str) -> Optional[PointInTime]:
        normalized = TextNormalizer(normalized_text=subject_query)
        template = normalized.get_template_text()

        def when_exist(rule):
            self.logger.debug(f"主语: {subject_query!r} -> {rule!r}")
            return rule.parse(normalized.get_template_parameters(), self.config)

        try:
            return self.find_target_with_levenshtein(
                SUBJECT_RULES, self.config.get_language(), template, when_exist
            )
        except RECOVERABLE_ERRORS as e:
            self.logger.warning(f"主语解析错误: {subject_query!r}, {str(e)}")
            return None

    def predicate(
        self, predicate_query: str, date: PointInTime, prior_matches: List[MatchedPredicate]
    ) -> Optional[PointInTime]:
        """
        解析谓语并作用于日期

        Returns:
            Optional[PointInTime]: 变换后的日期，没有匹配或解析失败时为None
        """
        normalized = TextNormalizer(normalized_text=predicate_query)
        template = normalized.get_template_text()
        parameters = normalized.get_template_parameters()

        def when_exist(rule: PredicateRule):
            result = rule.parse(date, parameters, self.config, prior_matches)
            prior_matches.append(MatchedPredicate(rule, parameters))
            self.logger.debug(f"谓语: {predicate_query!r} -> {rule!r}")
            return result

        try:
            result = self.find_target_with_levenshtein(
                PREDICATE_RULES, self.config.get_language(), template, when_exist
            )
        except RECOVERABLE_ERRORS as e:
            self.logger.warning(f"谓语解析错误: {predicate_query!r}, {str(e)}")
            return None
        if result is None:
            self.logger.debug(f"忽略无法匹配的词: {predicate_query!r}")
        return result

    def parse_query(self, epoch_time_milliseconds: int, query_list: List[str]) -> Optional[PointInTime]:
        """
        解析词序列

        Args:
            epoch_time_milliseconds: 基准时刻（"现在"）
            query_list: 词序列

        Returns:
            Optional[PointInTime]: 解析结果，主语无法解析时为None
        """
        subject_query = query_list[0] if query_list else ""
        start = 0
        if self.is_implicit_date(subject_query):
            try:
                date = DateUtility.date_from_epoch(epoch_time_milliseconds, self.config.get_time_zone())
            except RECOVERABLE_ERRORS as e:
                self.logger.warning(f"基准时刻无法表示: {epoch_time_milliseconds}, {str(e)}")
                return None
        else:
            start = 1
            date = self.subject(subject_query)
        if date is None:
            return None

        prior_matches: List[MatchedPredicate] = []
        for predicate_query in query_list[start:]:
            if not predicate_query:
                continue
            result = self.predicate(predicate_query, date, prior_matches)
            if result is not None:
                date = result
        return date

    def get_point_in_time(self) -> Optional[PointInTime]:
        if self.config.is_dynamic():
            return self.parse_query(DateUtility.now_epoch(), self.query)
        return self.static_result

    def as_date(self) -> Optional[datetime]:
        """转换为带时区的datetime"""
        date = self.get_point_in_time()
        if date is None:
            return None
        return date.get_local_date()

    def as_string(self, format_query: Optional[str] = None) -> Optional[str]:
        """
        转换为字符串

        Args:
            format_query: "[YYYY-MM-dd]" 形式的模式，或 "年月日"、"和暦" 等描述，默认为ISO8601

        Returns:
            Optional[str]: 格式化结果，没有解析结果时为None
        """
        date = self.get_point_in_time()
        if date is None:
            return None
        language = self.config.get_language()
        if format_query and format_query.startswith("[") and format_query.endswith("]"):
            return format_date(date, format_query[1:-1], language)

        description = split_unit_words(format_query)
        tokens = (
            Splitter(pre_escape(description))
            .with_escape_rules(DATE_FORMAT_RULES, language)
            .split()
        )
        matched: List[DateFormatRule] = []
        for token in tokens:
            self.find_target_with_levenshtein(DATE_FORMAT_RULES, language, token, matched.append)
        pattern = DateFormat.get_date_format_from_map(DateFormat.get_query_map(matched))
        self.logger.debug(f"格式: {format_query!r} -> {pattern!r}")
        return format_date(date, pattern, language)

    def as_number(self, format_query: str = "") -> int:
        """
        转换为数值，例如 "年月日" -> 20200315

        无法转换时返回按精度截断的纪元毫秒，没有解析结果时为0
        """
        try:
            return int(self.as_string(NUMBER_DESCRIPTION_PREFIX + (format_query or "")))
        except (TypeError, ValueError):
            date = self.get_point_in_time()
            return date.get_time(True) if date is not None else 0
