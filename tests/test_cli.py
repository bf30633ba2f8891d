import json

import pytest

from access_analytics.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args(["access.log"])
    assert args.top_ips == 4
    assert args.top_urls == 3
    assert args.clamp is False
    assert args.json is False


def test_main_json_output(data_dir, capsys):
    code = main([str(data_dir / "top-3-most-visited-urls.log"), "--json", "--top-ips", "0"])

    assert code == 0
    report = json.loads(capsys.readouterr().out)
    assert report["unique_ip_count"] == 17
    assert report["most_visited_urls"] == [
        "/intranet-analytics/",
        "http://example.net/faq/",
        "/docs/manage-websites/",
    ]
    assert report["most_active_ips"] == []


def test_main_writes_report_file(data_dir, tmp_path, capsys):
    out = tmp_path / "report.json"
    code = main([str(data_dir / "programming-task.log"), "-o", str(out)])

    assert code == 0
    report = json.loads(out.read_text())
    assert report["unique_ip_count"] == 11
    assert len(report["most_active_ips"]) == 4
    assert "Report saved to:" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    code = main([str(tmp_path / "nope.log")])
    assert code == 1
    assert "error opening file" in capsys.readouterr().err


def test_main_rank_out_of_range_and_clamp(data_dir, capsys):
    path = str(data_dir / "programming-task.log")

    assert main([path, "--top-ips", "20", "--json"]) == 1
    assert "requested more top results" in capsys.readouterr().err

    assert main([path, "--top-ips", "20", "--json", "--clamp"]) == 0
    assert len(json.loads(capsys.readouterr().out)["most_active_ips"]) == 11


def test_main_invalid_pattern(data_dir, capsys):
    assert main([str(data_dir / "programming-task.log"), "--pattern", "(unclosed"]) == 2
    assert "invalid pattern" in capsys.readouterr().err


def test_main_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "AccessAnalytics v" in capsys.readouterr().out
