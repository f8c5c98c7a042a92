from logwindow.requests import RequestCounter


def _counter(*requests):
    counter = RequestCounter()
    for request in requests:
        counter.add(request)
    return counter


def test_empty_counter():
    counter = RequestCounter()
    assert len(counter) == 0
    assert counter.most_common(10) == []


def test_repeats_share_an_entry():
    counter = _counter("GET /a", "GET /a", "GET /b")
    assert len(counter) == 2


def test_most_common_orders_by_count_and_drops_least():
    counter = _counter("GET /b", "GET /a", "GET /a", "GET /c", "GET /c", "GET /c")
    assert counter.most_common(10) == [("GET /c", 3), ("GET /a", 2)]


def test_single_entry_is_never_reported():
    counter = _counter("GET /a", "GET /a")
    assert len(counter) == 1
    assert counter.most_common(10) == []


def test_ties_put_later_first():
    counter = _counter("x", "y", "z")
    assert counter.most_common(10) == [("z", 1), ("y", 1)]


def test_limit_caps_result():
    counter = _counter("a", "a", "a", "b", "b", "c")
    assert counter.most_common(1) == [("a", 3)]
    assert counter.most_common(0) == []


def test_counts_sum_to_added_minus_dropped():
    requests = ["p", "q", "p", "r", "q", "p", "s"]
    counter = _counter(*requests)
    reported = counter.most_common(100)
    assert len(reported) == len(counter) - 1
    assert sum(count for _, count in reported) <= len(requests)
    counts = [count for _, count in reported]
    assert counts == sorted(counts, reverse=True)


def test_long_request_is_truncated():
    counter = _counter("q" * 300, "z", "z")
    assert counter.most_common(10) == [("z", 2)]
    counter.add("z")
    ranked = _counter("q" * 300, "q" * 300, "z").most_common(10)
    assert all(len(request) <= 255 for request, _ in ranked)


def test_long_request_never_matches_itself():
    counter = _counter("q" * 300, "q" * 300)
    assert len(counter) == 2


def test_short_request_matches_truncated_long_one():
    counter = _counter("q" * 300, "q" * 255, "x")
    assert len(counter) == 2
    assert counter.most_common(10) == [("q" * 255, 2)]