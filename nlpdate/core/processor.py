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
FST文本重写处理器模块

提供基于有限状态转换器(FST)的字符级重写功能。
"""

import threading
from typing import Optional

from pynini import Fst, cdrewrite, escape, shortestpath
from pynini.lib import utf8

from .logger import get_logger


class Processor:
    """
    FST重写处理器基类

    子类实现 build_rewriter()，返回一个由上下文相关重写规则组合而成的FST。
    FST在第一次使用时构建，之后只读。

    Attributes:
        name: 处理器名称，用于日志
        rewriter: 构建完成的重写FST，构建前为None
        VSIGMA: 任意UTF-8字符序列，作为cdrewrite的字母表
    """

    def __init__(self, name: str) -> None:
        self.VSIGMA = utf8.VALID_UTF8_CHAR.star

        self.name = name
        self.rewriter: Optional[Fst] = None
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def build_rule(self, fst: Fst, left_context: str = "", right_context: str = "") -> Fst:
        """fst 在 left_context 与 right_context 之间时重写（cdrewrite）"""
        return cdrewrite(fst, left_context, right_context, self.VSIGMA)

    def build_rewriter(self) -> Fst:
        """返回重写FST，由子类实现"""
        raise NotImplementedError("子类必须实现 build_rewriter 方法")

    def ensure_built(self) -> Fst:
        if self.rewriter is None:
            with self._lock:
                if self.rewriter is None:
                    self.logger.debug(f"为 {self.name} 构建FST...")
                    self.rewriter = self.build_rewriter().optimize()
        return self.rewriter

    def rewrite(self, text: str) -> str:
        """
        对文本执行一次FST重写

        Args:
            text: 输入文本

        Returns:
            str: 重写后的文本
        """
        if not text:
            return text
        rewriter = self.ensure_built()
        lattice = escape(text) @ rewriter
        return shortestpath(lattice, nshortest=1).string()
