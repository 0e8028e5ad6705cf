import pytest

from slbar.util import fmt_human, read_int, read_text, warn


def _unscale(text, base):
    value, prefix = text.split(" ")
    prefixes = ["", "k", "M", "G", "T", "P", "E", "Z", "Y"]
    if base == 1024:
        prefixes = [""] + [p + "i" for p in prefixes[1:]]
    return float(value) * base ** prefixes.index(prefix)


def test_warn_writes_line_to_stderr(capsys):
    warn("something failed")
    captured = capsys.readouterr()
    assert captured.err == "something failed\n"
    assert captured.out == ""


@pytest.mark.parametrize("num", [0, 1, 999])
def test_fmt_human_small_values_have_no_prefix(num):
    result = fmt_human(num, 1000)
    assert result == f"{num:.1f} "


def test_fmt_human_kibi_prefix():
    assert fmt_human(1024, 1024) == "1.0 Ki"


@pytest.mark.parametrize("base", [1000, 1024])
@pytest.mark.parametrize("num", [5, 12345, 7 * 10**9, 3 * 2**40])
def test_fmt_human_round_trip(base, num):
    result = fmt_human(num, base)
    scaled = float(result.split(" ")[0])
    assert scaled < base
    assert _unscale(result, base) == pytest.approx(num, rel=0.05)


def test_fmt_human_largest_prefix_is_capped():
    result = fmt_human(1024**10, 1024)
    assert result.endswith(" Yi")
    assert float(result.split(" ")[0]) >= 1024


def test_fmt_human_rejects_other_bases():
    with pytest.raises(ValueError):
        fmt_human(100, 10)


def test_read_text_round_trip(tmp_path):
    path = tmp_path / "file"
    path.write_text("alpha\nbeta\n")
    assert read_text(path) == "alpha\nbeta\n"


def test_read_text_missing_file_warns(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert read_text(missing) is None
    assert str(missing) in capsys.readouterr().err


def test_read_int_parses_leading_number(tmp_path):
    path = tmp_path / "value"
    path.write_text("  42 trailing\n")
    assert read_int(path) == 42


def test_read_int_without_number(tmp_path):
    path = tmp_path / "value"
    path.write_text("abc\n")
    assert read_int(path) is None


def test_read_int_missing_file(tmp_path):
    assert read_int(tmp_path / "missing") is None