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
分词器

平假名视为分隔符，但规则名称中含平假名的词（例如 "あさって"）需要保留：
    1. 输入 "あさっては2月15日の土曜日です"
    2. 含平假名的规则名称按长度从长到短替换为占位符：
       "${R:1}は2月15日の土曜日です"
    3. 剩余平假名替换为 "@"，还原占位符
    4. 按 "@" 切分：["あさって", "2月15日", "土曜日"]
"""

import re
from typing import Dict, List, Sequence

from ..core.grammar import GrammarRule

_HIRAGANA = re.compile(r"[ぁ-ん、。　]")


class Splitter:
    def __init__(self, text: str):
        self.text = text
        self.escaped_text = text
        self.replacement: Dict[str, str] = {}
        self.replacement_index = 1

    def with_escape_rules(self, rules: Sequence[GrammarRule], locale: str) -> "Splitter":
        """
        保留规则名称中含平假名的词

        Args:
            rules: 规则列表
            locale: 语言
        """
        names = [name for rule in rules for name in rule.names_for(locale) if _HIRAGANA.search(name)]
        current_text = self.escaped_text
        for name in sorted(names, key=len, reverse=True):
            if name in current_text:
                key = "${R:%d}" % self.replacement_index
                self.replacement[key] = name
                self.replacement_index += 1
                current_text = current_text.replace(name, key, 1)
        self.escaped_text = current_text
        return self

    def split(self) -> List[str]:
        target = _HIRAGANA.sub("@", self.escaped_text)
        for key, value in self.replacement.items():
            target = target.replace(key, value, 1)
        return [item for item in target.split("@") if item]
