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
命令行与批量测试
"""

import json

from nlpdate.core.config import Config
from nlpdate.japanese.date_extractor import DateExtractor
from nlpdate.main import benchmark, main

NOW = 1584234000000


def test_main_text(capsys):
    code = main(["--text", "明日", "--epoch_ms", str(NOW), "--time_zone", "Asia/Tokyo"])
    output = capsys.readouterr().out
    assert code == 0
    assert "Result: 2020-03-16T00:00:00+09:00" in output
    assert "Precision: DATE" in output


def test_main_text_with_format(capsys):
    code = main(
        ["--text", "令和元年5月1日", "--format", "[YYYY-MM-dd]", "--epoch_ms", str(NOW)]
    )
    assert code == 0
    assert "Result: 2019-05-01" in capsys.readouterr().out


def test_main_argument_errors(tmp_path, capsys):
    assert main([]) == 1
    assert main(["--text", "明日", "--file", "cases.jsonl"]) == 1
    assert main(["--text", "明日", "--output", "out.txt"]) == 1
    assert main(["--file", str(tmp_path / "missing.jsonl")]) == 1
    capsys.readouterr()


def test_benchmark(tmp_path):
    cases = [
        {"query": "明日", "expects": "2020-03-16T00:00:00+09:00"},
        {"query": ["2020/3/15", "3日前"], "expects": "2020-03-12", "format": "[YYYY-MM-dd]"},
        {"query": "明後日", "expects": "2020-03-16T00:00:00+09:00"},
    ]
    input_file = tmp_path / "cases.jsonl"
    input_file.write_text(
        "\n".join(json.dumps(case, ensure_ascii=False) for case in cases) + "\n", encoding="utf-8"
    )
    extractor = DateExtractor(Config(time_zone="Asia/Tokyo", epoch_time_milliseconds=NOW))
    lines = []
    error_cases = benchmark(extractor, str(input_file), show_all_cases=False, writer=lines.append)
    assert error_cases == 1
    assert "Total test cases: 3" in lines
    assert any("Line 3: ✗ Mismatch" in line for line in lines)


def test_main_file_with_output(tmp_path, capsys):
    input_file = tmp_path / "cases.jsonl"
    input_file.write_text(
        json.dumps({"query": "今日", "expects": "2020-03-15T00:00:00+09:00"}, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    output_file = tmp_path / "result.txt"
    code = main(
        [
            "--file", str(input_file),
            "--output", str(output_file),
            "--epoch_ms", str(NOW),
            "--time_zone", "Asia/Tokyo",
            "--show_all",
        ]
    )
    capsys.readouterr()
    assert code == 0
    content = output_file.read_text(encoding="utf-8")
    assert "Line 1: ✓ Success" in content
    assert "Success cases: 1 (100.00%)" in content
