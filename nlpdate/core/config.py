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
解析配置

优先级：构造参数 > 环境变量（NLPDATE_TIME_ZONE / NLPDATE_LANGUAGE）> 语言默认值
"""

import os
from typing import Any, Dict, Optional

from .date_control import DateUtility
from .timezone import TimeZoneOffset

DEFAULT_LANGUAGE = "jp"

# 各语言的默认配置
DEFAULT_CONFIG: Dict[str, Dict[str, str]] = {
    "jp": {
        "time_zone": "Asia/Tokyo",
        "language": "jp",
        "mode": "static",
    },
}

MODE_STATIC = "static"
MODE_DYNAMIC = "dynamic"


class Config:
    """
    解析配置

    Attributes:
        time_zone_query: 时区字符串（例如 Asia/Tokyo、UTC-09:00）
        language: 语言（例如 jp）
        mode: static（解析结果固定）或 dynamic（每次读取时重新计算"现在"）
    """

    def __init__(
        self,
        time_zone: Optional[str] = None,
        language: Optional[str] = None,
        epoch_time_milliseconds: Optional[int] = None,
        mode: Optional[str] = None,
    ):
        language = language or os.environ.get("NLPDATE_LANGUAGE") or DEFAULT_LANGUAGE
        defaults = DEFAULT_CONFIG.get(language, DEFAULT_CONFIG[DEFAULT_LANGUAGE])

        self.language = language
        self.mode = mode or defaults.get("mode", MODE_STATIC)
        self.set_epoch_time_milliseconds(epoch_time_milliseconds)
        self.set_time_zone(
            time_zone or os.environ.get("NLPDATE_TIME_ZONE") or defaults.get("time_zone", "UTC")
        )

    @classmethod
    def from_dict(cls, params: Optional[Dict[str, Any]]) -> "Config":
        params = params or {}
        return cls(
            time_zone=params.get("time_zone"),
            language=params.get("language"),
            epoch_time_milliseconds=params.get("epoch_time_milliseconds"),
            mode=params.get("mode"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "time_zone": self.time_zone_query,
            "language": self.language,
            "mode": self.mode,
        }
        if self._epoch_time_milliseconds is not None:
            result["epoch_time_milliseconds"] = self._epoch_time_milliseconds
        return result

    def set_time_zone(self, time_zone_query: str) -> None:
        self.time_zone_query = time_zone_query
        self.time_zone = TimeZoneOffset.parse(time_zone_query, self._epoch_time_milliseconds)

    def set_epoch_time_milliseconds(self, epoch_time_milliseconds: Optional[int]) -> None:
        """固定"现在"的时刻，None 或负数表示使用当前时间"""
        if epoch_time_milliseconds is None or epoch_time_milliseconds < 0:
            self._epoch_time_milliseconds = None
        else:
            self._epoch_time_milliseconds = int(epoch_time_milliseconds)

    def get_time_zone(self) -> TimeZoneOffset:
        return self.time_zone

    def get_language(self) -> str:
        return self.language

    def get_epoch_time_milliseconds(self) -> int:
        if self._epoch_time_milliseconds is None:
            return DateUtility.now_epoch()
        return self._epoch_time_milliseconds

    def is_dynamic(self) -> bool:
        return self.mode == MODE_DYNAMIC

    def __repr__(self):
        return f"Config({self.to_dict()})"
