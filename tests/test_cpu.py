import pytest

from slbar.cpu import CpuUsage, cpu_freq


def write_stat(path, values):
    path.write_text(
        "cpu  " + " ".join(str(v) for v in values) + " 0 0 0\n"
        "cpu0 1 2 3 4 5 6 7 0 0 0\n"
    )


def test_first_sample_has_no_result(tmp_path):
    stat = tmp_path / "stat"
    write_stat(stat, [100, 0, 100, 800, 0, 0, 0])
    assert CpuUsage(str(stat)).sample() is None


def test_usage_between_samples(tmp_path):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    write_stat(stat, [100, 0, 100, 800, 0, 0, 0])
    assert usage.sample() is None
    write_stat(stat, [200, 0, 200, 1600, 0, 0, 0])
    assert usage.sample() == "20"


@pytest.mark.parametrize(
    "before, after",
    [
        ([10, 5, 10, 100, 3, 1, 1], [50, 9, 30, 300, 7, 2, 4]),
        ([1000, 0, 0, 0, 0, 0, 0], [1100, 0, 0, 500, 0, 0, 0]),
    ],
)
def test_usage_is_a_percentage(tmp_path, before, after):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    write_stat(stat, before)
    usage.sample()
    write_stat(stat, after)
    result = int(usage.sample())
    assert 0 <= result <= 100


def test_unchanged_counters_give_none(tmp_path):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    write_stat(stat, [100, 0, 100, 800, 0, 0, 0])
    usage.sample()
    assert usage.sample() is None


def test_zero_user_time_gives_none(tmp_path):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    write_stat(stat, [0, 0, 100, 800, 0, 0, 0])
    usage.sample()
    write_stat(stat, [50, 0, 200, 900, 0, 0, 0])
    assert usage.sample() is None


def test_malformed_stat(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 1 2 three\n")
    assert CpuUsage(str(stat)).sample() is None


def test_missing_stat(tmp_path):
    assert CpuUsage(str(tmp_path / "absent")).sample() is None


def test_cpu_freq_in_hertz(tmp_path):
    freq = tmp_path / "scaling_cur_freq"
    freq.write_text("2400000\n")
    assert cpu_freq(str(freq)) == "2.4 G"


def test_cpu_freq_missing(tmp_path):
    assert cpu_freq(str(tmp_path / "absent")) is None