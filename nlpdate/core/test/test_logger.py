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

import logging

from nlpdate.core.logger import get_logger, setup_logging


def test_setup_logging_reconfigures_package_logger(tmp_path):
    log_file = tmp_path / "nlpdate.log"
    try:
        setup_logging(level="DEBUG", log_file=str(log_file), console_output=False, force=True)
        package_logger = logging.getLogger("nlpdate")
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

        get_logger("nlpdate.core.test").debug("解析开始")
        for handler in package_logger.handlers:
            handler.flush()
        assert "解析开始" in log_file.read_text(encoding="utf-8")

        # 未配置过时才生效
        setup_logging(level="ERROR")
        assert package_logger.level == logging.DEBUG
    finally:
        setup_logging(level="WARNING", force=True)
    assert logging.getLogger("nlpdate").level == logging.WARNING


def test_unknown_level_falls_back_to_warning():
    try:
        setup_logging(level="VERBOSE", force=True)
        assert logging.getLogger("nlpdate").level == logging.WARNING
    finally:
        setup_logging(level="WARNING", force=True)
