import pytest

from gfmul128.bench import (
    BENCHMARK_NAMES,
    KEY,
    MESSAGE,
    BenchResult,
    format_result,
    main,
    run_benchmarks,
)
from gfmul128.schoolbook import mul_lle


@pytest.fixture(scope="module")
def results():
    return run_benchmarks(3)


def test_fixed_vectors_match_source(results):
    key = bytes.fromhex("0123456789abcdeffedcba9876543210")
    message = bytes.fromhex("0f1e2d3c4b5a69788070605040302010")
    by_name = {r.name: r.product for r in results}
    assert by_name["school"] == mul_lle(message, key)
    assert mul_lle(MESSAGE, KEY) == mul_lle(message, key)


def test_results_in_source_order(results):
    assert [r.name for r in results] == list(BENCHMARK_NAMES)
    assert [r.name for r in results] == [
        "school", "koa", "lut-4k", "lut-64k", "hybrid-4k", "hybrid-64k",
    ]


def test_results_record_rounds_and_time(results):
    for result in results:
        assert result.rounds == 3
        assert result.total_ns >= 0
        assert result.ns_per_op == result.total_ns // 3
        assert len(result.product) == 16


def test_table_products_agree_with_schoolbook(results):
    by_name = {r.name: r.product for r in results}
    expected = mul_lle(MESSAGE, KEY)
    assert by_name["school"] == expected
    assert by_name["lut-4k"] == expected
    assert by_name["lut-64k"] == expected


@pytest.mark.parametrize("rounds", [0, -5])
def test_non_positive_rounds_rejected(rounds):
    with pytest.raises(ValueError):
        run_benchmarks(rounds)


def test_non_integer_rounds_rejected():
    with pytest.raises(TypeError):
        run_benchmarks(2.5)


def test_format_result_matches_report_layout():
    result = BenchResult("school", 1500, 10, bytes(16))
    assert format_result(result) == "gf128mul-bench: school       1500 ns  (150 ns/op)"


def test_format_result_pads_long_name():
    result = BenchResult("hybrid-64k", 40, 4, bytes(16))
    assert format_result(result) == "gf128mul-bench: hybrid-64k   40 ns  (10 ns/op)"


def test_ns_per_op_truncates():
    assert BenchResult("koa", 7, 2, bytes(16)).ns_per_op == 3


def test_main_prints_header_and_all_lines(capsys):
    assert main(["--rounds", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "gf128mul-bench: Starting benchmark with 2 iterations"
    assert len(lines) == 1 + len(BENCHMARK_NAMES)
    for line, name in zip(lines[1:], BENCHMARK_NAMES):
        assert line.startswith(f"gf128mul-bench: {name}")
        assert line.endswith(" ns/op)")


@pytest.mark.parametrize("value", ["0", "abc"])
def test_main_rejects_bad_rounds(value, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--rounds", value])
    assert info.value.code == 2