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
和历（日本年号）转换

年号列表按从新到旧排列，查找时取第一个开始日期不晚于目标日期的年号。
"""

from typing import NamedTuple, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .point_in_time import PointInTime


class Era(NamedTuple):
    display: str
    year: int
    month: int
    date: int

    def start(self):
        return (self.year, self.month, self.date)

    def year_to(self, year: int) -> str:
        # 年号元年为1
        return f"{self.display}{year - self.year + 1}"


ERAS = (
    Era("令和", 2019, 5, 1),
    Era("平成", 1989, 1, 8),
    Era("昭和", 1926, 12, 25),
    Era("大正", 1912, 7, 30),
    Era("明治", 1868, 1, 25),
)


class Wareki:
    @staticmethod
    def parse(date: "PointInTime") -> str:
        """
        将日期转换为和历年份字符串

        Args:
            date: 日期

        Returns:
            str: 例如 "令和2"，早于明治时返回 "西暦1850"
        """
        year = date.get_full_year()
        today = (year, date.get_month(), date.get_date())
        for era in ERAS:
            if era.start() <= today:
                return era.year_to(year)
        return f"西暦{year}"

    @staticmethod
    def to_full_year(wareki: str, year: int) -> Optional[int]:
        """
        和历年份转换为公历年份

        Args:
            wareki: 年号名称，例如 "令和"
            year: 和历年份（元年为1）

        Returns:
            Optional[int]: 公历年份，未知年号返回None
        """
        for era in ERAS:
            if era.display == wareki:
                return era.year + year - 1
        return None
