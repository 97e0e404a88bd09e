import pytest

from omnical.cli import DisplayOptions, list_lines, main, month_lines, query_lines, year_lines
from omnical.gregorian import GregorianCalendar

HEADER = " Mon Tue Wed Thu Fri Sat Sun"


def _month(y, m):
    month = GregorianCalendar.from_ym(y, m)
    assert month is not None
    return month


def _date(y, m, d):
    return GregorianCalendar.from_ymd(y, m, d).to_date()


def test_month_lines_partial_weeks():
    lines = month_lines(_month(1985, 9), None)
    assert lines == [
        HEADER,
        " " * 24 + "  1 ",
        "  2   3   4   5   6   7   8 ",
        "  9  10  11  12  13  14  15 ",
        " 16  17  18  19  20  21  22 ",
        " 23  24  25  26  27  28  29 ",
        " 30 ",
    ]


def test_month_lines_marks_today():
    today = GregorianCalendar.from_ymd(1985, 9, 15)
    lines = month_lines(_month(1985, 9), today)
    assert lines[3] == "  9  10  11  12  13  14 [15]"
    assert sum("[" in line for line in lines) == 1


def test_month_lines_full_weeks():
    lines = month_lines(_month(2021, 2), None)
    assert len(lines) == 5
    assert lines[1] == "  1   2   3   4   5   6   7 "
    assert lines[-1] == " 22  23  24  25  26  27  28 "


def test_list_lines_plain():
    lines = list_lines([_month(1985, 9)], DisplayOptions())
    assert len(lines) == 30
    assert lines[0] == "1985年9月1日"
    assert lines[-1] == "1985年9月30日"


def test_list_lines_weekday():
    lines = list_lines([_month(1985, 9)], DisplayOptions(weekday=True))
    assert lines[14] == "1985年9月15日 星期日"


def test_list_lines_astronomy():
    options = DisplayOptions(lunar_phase=True, lunar_phase_emoji=True, solar_term=True)
    lines = list_lines([_month(2023, 12)], options)
    assert lines[12] == "2023年12月13日 新月 🌑"
    assert lines[21].endswith(" 冬至")
    assert sum(line.endswith("冬至") for line in lines) == 1


def test_list_lines_chinese_continues_across_new_year():
    lines = list_lines([_month(2023, 1)], DisplayOptions(chinese=True))
    assert lines[21] == "2023年1月22日 癸卯年正月初一"
    assert lines[22] == "2023年1月23日 癸卯年正月初二"
    assert lines[20].startswith("2023年1月21日 壬寅年十二月")


def test_query_lines_default_is_chinese():
    assert query_lines(_date(2023, 1, 22), DisplayOptions()) == ["癸卯年正月初一"]


def test_query_lines_order():
    options = DisplayOptions(weekday=True, lunar_phase=True, solar_term=True)
    lines = query_lines(_date(2023, 12, 22), options)
    assert lines[0] == "Friday"
    assert lines[-1] == "冬至"
    assert len(lines) == 3


def test_query_lines_without_solar_term():
    assert query_lines(_date(2023, 12, 20), DisplayOptions(solar_term=True)) == []


def test_main_print_month(capsys):
    assert main(["print", "1985", "9"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == " " * 7 + "September 1985" + " " * 7
    assert lines[1] == HEADER
    assert lines[-1] == " 30 "


def test_main_without_command_prints(capsys):
    main(["1985", "9"])
    first = capsys.readouterr().out
    main(["print", "1985", "9"])
    second = capsys.readouterr().out
    assert first == second


def test_main_print_year(capsys):
    main(["print", "2023"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == " " * 9 + "Year 2023" + " " * 10
    assert lines.count(HEADER) == 12


def test_main_list(capsys):
    main(["list", "2023", "12", "-s"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 31
    assert lines[21] == "2023年12月22日 冬至"


def test_main_query(capsys):
    main(["query", "20231222", "-w", "-s"])
    assert capsys.readouterr().out == "Friday\n冬至\n"


def test_main_invalid_month():
    with pytest.raises(SystemExit) as exc:
        main(["print", "2024", "13"])
    assert exc.value.code == 2


def test_main_invalid_date():
    with pytest.raises(SystemExit) as exc:
        main(["query", "2023"])
    assert exc.value.code == 2


def test_main_nonexistent_date():
    with pytest.raises(SystemExit) as exc:
        main(["query", "20220229"])
    assert exc.value.code == 2