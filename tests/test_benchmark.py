import benchmark


def test_build_matches_trace():
    st = benchmark.build()
    assert len(st) == 10
    assert st.get("E") == 12


def test_run_benchmarks_reports_every_operation():
    results = benchmark.run_benchmarks(number=3)
    assert list(results) == ["put", "get", "delete_min", "delete_max", "delete", "keys", "len", "str"]
    assert all(secs >= 0 for secs in results.values())


def test_main_prints_table(capsys):
    assert benchmark.main(["benchmark", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(benchmark.BENCHMARKS)
    assert lines[0].startswith("put")
    assert all(line.endswith("ns/op") for line in lines)
