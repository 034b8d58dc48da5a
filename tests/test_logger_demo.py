import re

from embedsim.logger_demo import main

LINE = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[([A-Z]+)\] (.*)$")


def run_demo(tmp_path, capsys):
    path = tmp_path / "demo.log"
    assert main([str(path)]) == 0
    return path.read_text(encoding="utf-8").splitlines(), capsys.readouterr().out


def test_levels_in_order(tmp_path, capsys):
    lines, _ = run_demo(tmp_path, capsys)
    levels = [LINE.match(line).group(1) for line in lines]
    assert levels == [
        "INFO",
        "WARNING",
        "ERROR",
        "DEBUG",
        "ALERT",
        "EMERGENCY",
        "ERROR",
    ]


def test_filtered_debug_missing(tmp_path, capsys):
    lines, out = run_demo(tmp_path, capsys)
    text = "\n".join(lines)
    assert "This debug message should not appear." not in text
    assert "This debug message should not appear." not in out
    assert lines[-1].endswith("This error message should appear.")


def test_stdout_matches_file(tmp_path, capsys):
    lines, out = run_demo(tmp_path, capsys)
    assert out.splitlines() == lines


def test_file_is_appended(tmp_path, capsys):
    path = tmp_path / "demo.log"
    main([str(path)])
    first = path.read_text(encoding="utf-8").splitlines()
    main([str(path)])
    second = path.read_text(encoding="utf-8").splitlines()
    assert len(second) == 2 * len(first)