"""
Tests for the command line entry point.
"""

import json

import pytest

from lucky.main import build_parser, main


@pytest.fixture(autouse=True)
def isolated_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LUCKY_DEBUG", raising=False)


class TestCli:
    """lucky --name ... --birth-date ..."""

    def test_parser_requires_name(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--birth-date", "1990-01-28"])

    def test_local_report_json(self, capsys):
        code = main([
            "--name", "小明",
            "--birth-date", "1990-01-28",
            "--date", "2024-05-01",
            "--local",
        ])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["zodiac"]["sign"] == "水瓶座"
        assert data["chineseZodiac"]["animal"] == "马"
        assert data["luckyItems"]["number"] == "3"
        assert data["isFallback"] is True
        assert len(data["celebrityMatch"]) == 5

    def test_output_is_deterministic(self, capsys):
        argv = ["--name", "小明", "--birth-date", "1990-01-28", "--date", "2024-05-01", "--local"]
        main(argv)
        first = capsys.readouterr().out
        main(argv)
        assert capsys.readouterr().out == first

    def test_share_text(self, capsys):
        code = main([
            "--name", "小明",
            "--birth-date", "1990-01-28",
            "--date", "2024-05-01",
            "--local",
            "--share",
        ])

        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith("✨ 幸运点点 · 好运投递 📨")
        assert "小明" in out

    def test_mbti_flag(self, capsys):
        main([
            "--name", "Alice",
            "--birth-date", "2000-07-15",
            "--mbti", "infp",
            "--date", "2024-05-01",
            "--local",
        ])
        assert json.loads(capsys.readouterr().out)["mbtiAnalysis"]["type"] == "INFP"

    @pytest.mark.parametrize(
        "argv",
        [
            ["--name", "小明", "--birth-date", "1990-13-01", "--local"],
            ["--name", "小明", "--birth-date", "19900128", "--local"],
            ["--name", "  ", "--birth-date", "1990-01-28", "--local"],
            ["--name", "小明", "--birth-date", "1990-01-28", "--mbti", "ABCD", "--local"],
            ["--name", "小明", "--birth-date", "1990-01-28", "--date", "soon", "--local"],
        ],
    )
    def test_invalid_input_exit_code(self, argv, capsys):
        assert main(argv) == 2
        assert capsys.readouterr().out == ""
