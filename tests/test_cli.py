from logwindow.cli import main


def _time(second):
    hours, rest = divmod(second, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"01/Jul/1995:{hours:02d}:{minutes:02d}:{seconds:02d} +0000"


def _log(second, request="/a", status=200):
    return f'host - - [{_time(second)}] "GET {request} HTTP/1.0" {status} 100\n'


def _write_errors_log(path):
    lines = (
        [_log(1, "/a", 500)] * 3
        + [_log(2, "/b", 503)] * 2
        + [_log(3, "/c", 502), _log(4, "/d", 200)]
    )
    path.write_text("".join(lines))


def test_stats_report(tmp_path, capsys):
    log = tmp_path / "access.log"
    out = tmp_path / "errors.log"
    _write_errors_log(log)

    status = main([str(log), "-o", str(out)])

    captured = capsys.readouterr().out
    assert status == 0
    assert "[5XX stats]:" in captured
    assert '*  "GET /a HTTP/1.0" - 3 request(s)' in captured
    assert '*  "GET /b HTTP/1.0" - 2 request(s)' in captured
    assert len(out.read_text().splitlines()) == 6


def test_stats_limit_and_print(tmp_path, capsys):
    log = tmp_path / "access.log"
    out = tmp_path / "errors.log"
    _write_errors_log(log)

    status = main([str(log), f"--output={out}", "--stats=1", "-p"])

    captured = capsys.readouterr().out
    assert status == 0
    assert '"GET /b HTTP/1.0" - 2' not in captured
    assert captured.count('"GET /c HTTP/1.0" 502') == 1


def test_window_report(tmp_path, capsys):
    log = tmp_path / "access.log"
    log.write_text("".join(_log(second) for second in range(1030)))

    status = main([str(log), "-w", "3"])

    captured = capsys.readouterr().out
    assert status == 0
    assert "[Maximum requests in window]:" in captured
    assert "for window: 3\n" in captured
    assert "maximum will be: 3\n" in captured


def test_bad_flag_fails(capsys):
    assert main(["--bogus=1"]) == 1
    assert "[FATAL] provided incorrect flag: --bogus" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, capsys):
    status = main([str(tmp_path / "missing.log"), "-w", "5"])
    assert status == 1
    assert "[ERROR] error while opening file" in capsys.readouterr().err


def test_nothing_requested_prints_nothing(tmp_path, capsys):
    log = tmp_path / "access.log"
    _write_errors_log(log)
    assert main([str(log)]) == 0
    assert capsys.readouterr().out == ""