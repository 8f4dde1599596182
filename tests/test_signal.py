from nodekit.core.signal import Signal


def test_callbacks_run_in_connection_order():
    signal = Signal("changed")
    calls = []
    signal.connect(lambda value: calls.append(("a", value)))
    signal.connect(lambda value: calls.append(("b", value)))
    signal.emit(1)
    assert calls == [("a", 1), ("b", 1)]


def test_one_shot_fires_once():
    signal = Signal()
    calls = []
    connection = signal.connect(lambda: calls.append(1), one_shot=True)
    signal.emit()
    signal.emit()
    assert calls == [1]
    assert not connection.connected
    assert signal.get_connection_count() == 0


def test_one_shot_reentrant_emit_does_not_refire():
    signal = Signal()
    calls = []

    def handler():
        calls.append(1)
        signal.emit()

    signal.connect(handler, one_shot=True)
    signal.emit()
    assert calls == [1]


def test_disconnect():
    signal = Signal()
    calls = []
    connection = signal.connect(lambda: calls.append(1))
    connection.disconnect()
    signal.emit()
    assert calls == []
    # Disconnecting twice is harmless
    signal.disconnect(connection)


def test_failing_callback_is_logged_and_others_still_run(caplog):
    signal = Signal("boom")
    calls = []

    def broken():
        raise RuntimeError("bad handler")

    signal.connect(broken)
    signal.connect(lambda: calls.append("ok"))
    signal.emit()

    assert calls == ["ok"]
    assert any("bad handler" in record.getMessage() for record in caplog.records)


def test_disconnect_all():
    signal = Signal()
    first = signal.connect(lambda: None)
    second = signal.connect(lambda: None, one_shot=True)
    signal.disconnect_all()
    assert signal.get_connection_count() == 0
    assert not first.connected and not second.connected
