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

import time
from typing import Any, Dict, List, Optional, Sequence, Union

from ..core.config import Config
from ..core.logger import get_logger
from .date_parser import DateParser
from .pre_escape import pre_escape
from .rules import PREDICATE_RULES, SUBJECT_RULES
from .splitter import Splitter

Query = Union[str, int, Sequence[str]]


class DateExtractor:
    """整合分词和解析的日期提取器"""

    def __init__(self, config: Optional[Config] = None):
        self.logger = get_logger(__name__)
        self.config = config or Config()
        self.split_time = 0.0
        self.parse_time = 0.0

    def get_query_list(self, query: Query) -> List[str]:
        """
        输入转换为词序列

        字符串：特殊处理后分词；列表：每个元素只做特殊处理；整数：转换为字符串
        """
        if isinstance(query, str):
            language = self.config.get_language()
            return (
                Splitter(pre_escape(query))
                .with_escape_rules(SUBJECT_RULES, language)
                .with_escape_rules(PREDICATE_RULES, language)
                .split()
            )
        if isinstance(query, int):
            return [str(query)]
        return [pre_escape(item) for item in query]

    def extract(self, query: Query) -> DateParser:
        """
        解析日期

        Args:
            query: 文本、词列表或整数（纪元秒等）

        Returns:
            DateParser: 解析结果
        """
        start_time = time.time()
        query_list = self.get_query_list(query)
        self.split_time += time.time() - start_time
        self.logger.debug(f"分词: {query!r} -> {query_list}")

        start_time = time.time()
        parser = DateParser(query_list, self.config)
        self.parse_time += time.time() - start_time
        return parser


def nlp_date(query: Query, config: Union[Config, Dict[str, Any], None] = None) -> DateParser:
    """
    入口函数

    Args:
        query: 例如 "明後日の午後3時"、["2020/3/15", "3日前"]、1584234000000
        config: Config 或者 {"time_zone": ..., "language": ..., "epoch_time_milliseconds": ..., "mode": ...}

    Returns:
        DateParser: 通过 as_date() / as_string() / as_number() 取得结果

    Example:
        >>> nlp_date("2019/5/1").as_string("[YYYY-MM-dd]")
        '2019-05-01'
    """
    if not isinstance(config, Config):
        config = Config.from_dict(config)
    return DateExtractor(config).extract(query)
