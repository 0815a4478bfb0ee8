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
文本规范化与模板化

1. 规范化（FST）：
   - "曜" 前面的星期汉字替换为 "@序号"（例如 "金曜" -> "@5曜"），
     避免 "第3金曜日" 的数字粘连，得到 "第3@5曜日"
   - 全角数字、汉字数字（零～九）、全角字母转换为半角
2. 模板化：连续的半角数字替换为 ${n}，数值存入参数列表；"@" 只作分隔，不进入模板
"""

from typing import List, NamedTuple, Optional

from pynini import Fst, string_file
from importlib_resources import files

from ..core.processor import Processor


class NormalizedText(NamedTuple):
    normalized_text: str
    template: str
    parameters: List[int]


class CharNormalizer(Processor):
    """字符级规范化FST"""

    def __init__(self):
        super().__init__(name="jp_char_normalizer")

    @staticmethod
    def _data_path(name: str) -> str:
        return str(files("nlpdate.japanese").joinpath(f"data/char/{name}"))

    def build_rewriter(self) -> Fst:
        weekday = string_file(self._data_path("weekday.tsv"))
        full_to_half = string_file(self._data_path("fullwidth_to_halfwidth.tsv"))

        processor = self.build_rule(weekday, "", "曜")
        processor @= self.build_rule(full_to_half)
        return processor


_char_normalizer = CharNormalizer()


def normalize(text: str) -> str:
    return _char_normalizer.rewrite(text)


def build_template(normalized_text: str) -> NormalizedText:
    """
    将规范化文本转换为模板

    Args:
        normalized_text: 规范化后的文本

    Returns:
        NormalizedText: 例如 "3日後" -> ("3日後", "${0}日後", [3])
    """
    template = []
    parameters: List[int] = []
    digits = []

    def flush():
        if digits:
            template.append("${%d}" % len(parameters))
            parameters.append(int("".join(digits)))
            digits.clear()

    for char in normalized_text:
        if char == "@":
            flush()
        elif "0" <= char <= "9":
            digits.append(char)
        else:
            flush()
            template.append(char)
    flush()
    return NormalizedText(normalized_text, "".join(template), parameters)


class TextNormalizer:
    """
    文本规范化

    Args:
        original: 原始文本（先规范化再模板化）
        normalized_text: 已规范化的文本（只做模板化）
    """

    def __init__(self, original: Optional[str] = None, normalized_text: Optional[str] = None):
        if normalized_text:
            self.result = build_template(normalized_text)
        else:
            self.result = build_template(normalize(original or ""))

    def get_template_text(self) -> str:
        return self.result.template

    def get_template_parameters(self) -> List[int]:
        return list(self.result.parameters)

    def get_normalized_text(self) -> str:
        return self.result.normalized_text
