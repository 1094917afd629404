from recordable import Store, recordable, HistoryState


def test_store_apply_undo_redo(counter_reducer):
    store = Store(recordable(counter_reducer))

    store.apply({"type": "INCREMENT"})
    store.apply({"type": "INCREMENT"})
    assert store.present == 2

    store.undo()
    assert store.present == 1

    store.redo()
    assert store.present == 2


def test_store_with_custom_action_types(counter_reducer):
    store = Store(recordable(counter_reducer, {
        "BACK": "UNDO", "FORWARD": "REDO",
        "TOGGLE_RECORDING": "PAUSE", "CLEAR_RECORDING": "RESET",
    }))
    store.apply({"type": "INCREMENT"})
    store.undo()
    assert store.present == 0
    assert store.state.future == [1]


def test_store_recording_switch_and_clear(counter_reducer):
    store = Store(recordable(counter_reducer))
    store.apply({"type": "INCREMENT"})
    store.toggle_recording()
    store.apply({"type": "INCREMENT"})
    assert store.state.past == [0]
    assert store.present == 2

    store.clear_history()
    assert store.state == HistoryState(present=2, recording_enabled=False)


def test_store_accepts_existing_state(counter_reducer):
    start = HistoryState(past=[0, 1], present=2)
    store = Store(recordable(counter_reducer), start)
    store.undo()
    assert store.present == 1
    assert store.state.future == [2]
