from flybird.core.state import GameMode, StateMachine


def test_starts_in_menu():
    assert StateMachine().mode == GameMode.MENU


def test_round_trip_transitions():
    machine = StateMachine()
    assert machine.transition(GameMode.PLAYING)
    assert machine.transition(GameMode.ENDING)
    assert machine.transition(GameMode.PLAYING)
    assert machine.mode == GameMode.PLAYING


def test_restart_from_playing_allowed():
    machine = StateMachine(GameMode.PLAYING)
    assert machine.can_transition(GameMode.PLAYING)


def test_invalid_transition_rejected(caplog):
    machine = StateMachine()
    assert not machine.transition(GameMode.ENDING)
    assert machine.mode == GameMode.MENU
    assert "Invalid transition" in caplog.text


def test_listener_receives_old_and_new_mode():
    seen = []
    machine = StateMachine()
    machine.add_listener(lambda old, new: seen.append((old, new)))
    machine.transition(GameMode.PLAYING)
    assert seen == [(GameMode.MENU, GameMode.PLAYING)]


def test_failing_listener_does_not_block_transition():
    seen = []

    def broken(old, new):
        raise RuntimeError("boom")

    machine = StateMachine()
    machine.add_listener(broken)
    machine.add_listener(lambda old, new: seen.append(new))
    assert machine.transition(GameMode.PLAYING)
    assert seen == [GameMode.PLAYING]


def test_remove_listener():
    seen = []

    def listener(old, new):
        seen.append(new)

    machine = StateMachine()
    machine.add_listener(listener)
    machine.remove_listener(listener)
    machine.transition(GameMode.PLAYING)
    assert seen == []


def test_no_way_back_to_menu():
    machine = StateMachine()
    machine.transition(GameMode.PLAYING)
    assert not machine.can_transition(GameMode.MENU)
    machine.transition(GameMode.ENDING)
    assert not machine.transition(GameMode.MENU)
    assert machine.mode == GameMode.ENDING
    assert not hasattr(machine, "reset")
