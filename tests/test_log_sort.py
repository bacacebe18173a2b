import io
import sys

from structkit.log import LogRecord, parse_log_line
from structkit.log_sort import date_bound, logs_between, main, sort_by_date

LINES = [
    "Oct 9 2020 10:32:24 10.14.1.1:4381 Failed password for illegal user guest",
    "Jun 3 2020 08:23:45 10.14.2.2:6166 Failed password for admin",
    "Aug 4 2020 03:18:56 10.14.3.3:6710 Failed password for root",
    "Jun 3 2020 07:00:00 10.14.4.4:1111 Illegal user",
]


def _records():
    return [parse_log_line(line) for line in LINES]


def test_date_bound_fields():
    bound = date_bound("2020", "Jun", "3", "08")
    assert bound.time == "08:00:00"
    assert (bound.year, bound.month, bound.day, bound.ip, bound.message) == ("2020", "Jun", "3", "", "")


def test_sort_by_date_orders_keys():
    ordered = sort_by_date(_records())
    keys = [r.date_key for r in ordered]
    assert keys == sorted(keys)
    assert sorted(map(id, ordered)) != [] and len(ordered) == len(LINES)


def test_sort_by_date_leaves_input_untouched():
    records = _records()
    copy = list(records)
    sort_by_date(records)
    assert records == copy


def test_sort_by_date_months_order():
    ordered = sort_by_date(_records())
    assert [r.month for r in ordered] == ["Jun", "Jun", "Aug", "Oct"]


def test_logs_between_is_strict():
    records = _records()
    start = date_bound("2020", "Jun", "3", "08")
    end = date_bound("2020", "Oct", "9", "10")
    selected = logs_between(records, start, end)
    assert all(start < r < end for r in selected)
    assert {r.ip for r in selected} == {"10.14.2.2:6166", "10.14.3.3:6710"}


def test_logs_between_excludes_equal_bound():
    record = LogRecord("2020", "Jan", "1", "10:00:00", "1.1.1.1", "x")
    bound = date_bound("2020", "Jan", "1", "10")
    assert logs_between([record], bound, date_bound("2021", "Jan", "1", "10")) == []


def test_main_writes_sorted_and_range(tmp_path, monkeypatch, capsys):
    log_file = tmp_path / "log.txt"
    log_file.write_text("\n".join(LINES) + "\n", encoding="utf-8")
    sorted_out = tmp_path / "sorted.txt"
    range_out = tmp_path / "range.txt"
    monkeypatch.setattr(sys, "stdin", io.StringIO("2020 Jun 3 08\n2020 Oct 9 10\n"))
    code = main([str(log_file), "--sorted-out", str(sorted_out), "--range-out", str(range_out)])
    assert code == 0

    expected_sorted = [r.format_line() for r in sort_by_date(_records())]
    assert sorted_out.read_text(encoding="utf-8").splitlines() == expected_sorted

    range_lines = range_out.read_text(encoding="utf-8").splitlines()
    assert range_lines == expected_sorted[1:3]

    out = capsys.readouterr().out
    assert f"La cantidad de registros es: {len(LINES)}" in out
    assert all(line in out for line in range_lines)


def test_main_stops_without_input(tmp_path, monkeypatch):
    log_file = tmp_path / "log.txt"
    log_file.write_text(LINES[0] + "\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("2020 Jun\n"))
    code = main([str(log_file), "--sorted-out", str(tmp_path / "s.txt"),
                 "--range-out", str(tmp_path / "r.txt")])
    assert code == 1
    assert (tmp_path / "s.txt").read_text(encoding="utf-8").strip() == parse_log_line(LINES[0]).format_line()