from stormkit.time.timer import Timer, now


def _clock(values):
    it = iter(values)
    return lambda: next(it)


def test_now_is_monotonic():
    a = now()
    b = now()
    assert b >= a


def test_stop_accumulates_without_report():
    timer = Timer("work", clock=_clock([0, 0, 10, 110, 200, 450]))
    timer.start()
    assert timer.stop() is None
    timer.start()
    assert timer.stop() is None
    assert timer.invocations == 2
    assert timer.duration_ns == (110 - 10) + (450 - 200)


def test_report_after_a_second():
    timer = Timer("work", clock=_clock([0, 0, 10, 110, 1_000_000_000, 1_000_000_300]))
    timer.start()
    assert timer.stop() is None
    timer.start()
    report = timer.stop()
    assert report.label == "work"
    assert report.invocations == 2
    assert report.average_ns == 200.0
    assert report.max_tps == 5_000_000
    assert timer.invocations == 0
    assert timer.duration_ns == 0


def test_zero_length_spans_do_not_divide_by_zero():
    timer = Timer("fast", clock=_clock([0, 0, 2_000_000_000, 2_000_000_000]))
    timer.start()
    report = timer.stop()
    assert report.average_ns == 0.0
    assert report.max_tps == 1_000_000_000