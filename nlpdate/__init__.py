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
nlpdate: 自然语言日期解析与格式化

    >>> from nlpdate import nlp_date
    >>> nlp_date("明後日の午後3時").as_string("日本語")
"""

from .core.config import Config
from .core.point_in_time import PointInTime
from .japanese.date_extractor import nlp_date
from .japanese.date_parser import DateParser

__version__ = "1.0.0"
__author__ = "Ming Yu"
__email__ = "yuming@oppo.com"

__all__ = [
    "Config",
    "DateParser",
    "PointInTime",
    "nlp_date",
]
