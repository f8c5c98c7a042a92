# logwindow

A small command-line tool for access logs in the common log format. Each
line looks like this:

```
host - - [03/Jul/1995:10:55:30 -0400] "GET /index.html HTTP/1.0" 500 1234
```

It does two jobs:

1. **Collect server errors.** It goes through the log and writes every line
   with a status code starting with `5` to an output file, if the line's time
   lies strictly between `--from` and `--to`. Lines of 50 characters or
   fewer are skipped. Reading stops at the first line whose time is after
   `--to`. It then lists the requests (the first quoted part of each line)
   that failed most often, with a count for each.
2. **Find the busiest window.** Given a window length in seconds, it reports
   the largest number of requests that fall within one window. It also
   reports the first and last time of that window. Here `--from` and `--to`
   are inclusive.

Times are converted to Unix seconds. Only the hours of the time zone offset
are taken into account.

## Installation

```
pip install .
```

## Usage

```
logwindow LOGFILE [options]
```

You can also run it as `python -m logwindow.cli LOGFILE [options]`.

| Option | Short | Meaning |
|---|---|---|
| `--output=PATH` | `-o PATH` | Write 5XX lines to PATH, overwriting it. Errors are collected and stats printed only when this is given. |
| `--print` | `-p` | Also echo each 5XX line to standard output. |
| `--stats=N` | `-s N` | How many of the most frequent failing requests to list (default 10). |
| `--window=SECONDS` | `-w SECONDS` | Report the busiest window of this length. |
| `--from=TIME` | `-f TIME` | Lower time bound in Unix seconds (default 0). |
| `--to=TIME` | `-e TIME` | Upper time bound in Unix seconds (default 1000000000000). |

Long options take their value after `=`. Short options other than `-p` take
their value from the next argument. Any argument that does not start with `-`
names the log file. Numeric values are read from their digits alone.

An unknown option stops the program. It then prints
`[FATAL] provided incorrect flag: ...` and exits with status 1. A short
option left without a value at the end of the command line is ignored.

If the log file or the output file cannot be opened, the program prints
`[ERROR] error while opening file` and exits with status 1.

### Examples

Write all 5XX lines to `errors.log` and show the five requests that failed
most often:

```
logwindow access.log --output=errors.log --stats=5
```

Find the busiest 60-second window within a time range:

```
logwindow access.log -w 60 -f 804556800 -e 804643200
```

## Limits

- **Ranking of failing requests.** The least frequent entry of the ranking
  is never listed. Among requests with equal counts, the one seen later comes
  first.
- **Busiest window.** The search keeps the latest 1024 times in range. It
  only starts measuring once that buffer is full. A log with 1024 or fewer
  lines in range therefore reports `from 0 to 0 maximum will be: 0`.
- **Log formats.** Only the bracketed time layout shown above is understood.
  The tool offers no other log formats and no output other than plain text.

## Library use

You can also import the pieces behind the command:

- `logwindow.timestamp`
  - `parse_timestamp("03/Jul/1995:10:55:30 -0400")` returns Unix seconds.
  - It also provides `parse_uint`, `is_leap`, `month_index` and
    `days_in_month`.
- `logwindow.options`
  - `parse_args(argv)` builds an `Options` dataclass from arguments,
    without the program name. Its fields are `file`, `output`, `print`,
    `stats`, `window`, `start` and `end`.
  - It raises `OptionError`, a `ValueError`, for an unknown flag.
- `logwindow.requests`
  - `RequestCounter` counts request strings with `add(request)`.
  - `most_common(limit)` ranks them, and `len()` gives the number of
    distinct requests.
- `logwindow.analyzer`
  - `extract_time` and `extract_request` pull the fields out of a log line.
  - `filter_server_errors(lines, start, end)` yields the 5XX lines.
  - `write_server_errors(options, out)` copies them to the output file.
  - `count_requests(path, limit)` counts the requests in a file.
  - `format_stats(counter, limit)` renders the stats report.
  - `longest_window(lines, window, start, end)` returns a `WindowResult`
    with `count`, `start` and `end`, and `format_window(result, window)`
    renders it.
- `logwindow.cli.main(argv=None)` runs the command and returns its exit
  status.