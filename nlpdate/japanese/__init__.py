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
日语日期解析

主要组件:
- TextNormalizer: 文本规范化与模板化
- pre_escape / Splitter: 分词
- DateParser: 主语 + 谓语解析，as_date / as_string / as_number
- nlp_date: 入口函数
"""

from .date_extractor import DateExtractor, nlp_date
from .date_parser import DateParser
from .normalizer import TextNormalizer
from .pre_escape import pre_escape
from .splitter import Splitter

__all__ = [
    "DateExtractor",
    "DateParser",
    "Splitter",
    "TextNormalizer",
    "nlp_date",
    "pre_escape",
]
