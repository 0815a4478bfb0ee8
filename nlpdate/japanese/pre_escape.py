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
分词前的特殊文本处理

按顺序执行：
1. 展开 "（月）" 等星期缩写
2. 与非ASCII字符相邻的空格替换为 "@"
3. 换行、制表符、括号替换为 "@"
4. "1か月" 之类的表达改写为 "1ヵ月"（平假名会被当作分隔符）
5. 紧跟在非ASCII字符后面的数字前插入 "@"（"第" 之后除外）
"""

import re

from .normalizer import TextNormalizer, build_template, normalize

_EXPAND_TOKENS = (
    ("（月）", "月曜日"),
    ("（火）", "火曜日"),
    ("（水）", "水曜日"),
    ("（木）", "木曜日"),
    ("（金）", "金曜日"),
    ("（土）", "土曜日"),
    ("（日）", "日曜日"),
)

_ERASE_WORD = re.compile(r"[\r\n\t（）「」]")
_NUMBER = re.compile(r"\d+", re.ASCII)


class PreEscape:
    def __init__(self, text: str):
        self.replaced_text = TextNormalizer(original=text).get_normalized_text()

    def with_expand_token(self) -> "PreEscape":
        for abbreviation, weekday in _EXPAND_TOKENS:
            # 展开后的星期同样需要规范化（"月曜日" -> "@1曜日"）
            self.replaced_text = self.replaced_text.replace(abbreviation, f"@{normalize(weekday)}@")
        return self

    def with_erase_white_space(self) -> "PreEscape":
        text = self.replaced_text
        chars = []
        for index, char in enumerate(text):
            if char == " ":
                before = ord(text[index - 1]) if index > 0 else 0
                after = ord(text[index + 1]) if index + 1 < len(text) else 0
                if before > 127 or after > 127:
                    char = "@"
            chars.append(char)
        self.replaced_text = "".join(chars)
        return self

    def with_erase_word(self) -> "PreEscape":
        self.replaced_text = _ERASE_WORD.sub("@", self.replaced_text)
        return self

    def with_unnormal_hiragana(self) -> "PreEscape":
        template = build_template(self.replaced_text).template
        if "}か年" in template:
            self.replaced_text = self.replaced_text.replace("か年", "ヵ年")
        if "}か月" in template:
            self.replaced_text = self.replaced_text.replace("か月", "ヵ月")
        return self

    def with_number_value_to_separated(self) -> "PreEscape":
        def separate(match: re.Match) -> str:
            index = match.start()
            if index == 0:
                return match.group()
            previous = match.string[index - 1]
            if ord(previous) <= 127 or previous == "第":
                return match.group()
            return "@" + match.group()

        self.replaced_text = _NUMBER.sub(separate, self.replaced_text)
        return self

    def get_result(self) -> str:
        return self.replaced_text


def pre_escape(text: str) -> str:
    """
    分词前的特殊文本处理

    Args:
        text: 原始文本

    Returns:
        str: 处理后的文本，例如 "明日 10:00" -> "明日@10:00"
    """
    return (
        PreEscape(text)
        .with_expand_token()
        .with_erase_white_space()
        .with_erase_word()
        .with_unnormal_hiragana()
        .with_number_value_to_separated()
        .get_result()
    )
