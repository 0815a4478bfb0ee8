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
nlpdate 日志

所有模块通过 get_logger(__name__) 获取日志器；第一次获取时按环境变量配置：
    NLPDATE_LOG_LEVEL   DEBUG / INFO / WARNING（默认）/ ERROR / CRITICAL
    NLPDATE_LOG_FILE    同时写入的日志文件
    NLPDATE_LOG_FORMAT  default / simple
只配置 "nlpdate" 日志器，不改动调用方的根日志器。
"""

import logging
import os
import sys
from typing import List, Optional

PACKAGE_LOGGER = "nlpdate"

ENV_LEVEL = "NLPDATE_LOG_LEVEL"
ENV_FILE = "NLPDATE_LOG_FILE"
ENV_FORMAT = "NLPDATE_LOG_FORMAT"

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

_configured = False


def _to_level(name: Optional[str]) -> int:
    level = logging.getLevelName((name or DEFAULT_LEVEL).upper())
    return level if isinstance(level, int) else logging.WARNING


def _build_handlers(log_file: Optional[str], console_output: bool) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    return handlers


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    console_output: bool = True,
    force: bool = False,
):
    """
    配置 nlpdate 日志器

    Args:
        level: 日志级别名称，None 时读取 NLPDATE_LOG_LEVEL
        log_file: 日志文件路径
        format_string: 日志格式
        console_output: 是否输出到标准错误
        force: 已经配置过时是否重新配置
    """
    global _configured

    if _configured and not force:
        return

    log_level = _to_level(level if level is not None else os.environ.get(ENV_LEVEL))
    formatter = logging.Formatter(format_string)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(log_file, console_output):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    _configured = True


def auto_setup():
    """按环境变量配置"""
    format_string = SIMPLE_FORMAT if os.environ.get(ENV_FORMAT) == "simple" else DEFAULT_FORMAT
    setup_logging(
        level=os.environ.get(ENV_LEVEL, DEFAULT_LEVEL),
        log_file=os.environ.get(ENV_FILE),
        format_string=format_string,
    )


def get_logger(name: str) -> logging.Logger:
    if not _configured:
        auto_setup()
    return logging.getLogger(name)
