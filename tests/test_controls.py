from shooter.controls import MovementControls


def test_press_sets_axis_velocity():
    c = MovementControls(speed=0.2)
    c.apply_actions(["up", "right"])
    assert c.velocity() == (0.2, -0.2)


def test_release_zeroes_axis():
    c = MovementControls(speed=0.2)
    c.apply_actions(["left"])
    c.apply_actions(["stop_left"])
    assert c.velocity() == (0.0, 0.0)


def test_release_keeps_opposite_key_held():
    c = MovementControls(speed=0.2)
    c.apply_actions(["left", "right"])
    assert c.velocity() == (0.0, 0.0)
    c.apply_actions(["stop_right"])
    assert c.velocity() == (-0.2, 0.0)


def test_press_and_release_in_one_frame():
    c = MovementControls()
    c.apply_actions(["down", "stop_down"])
    assert c.held == frozenset()


def test_fire_is_consumed_once():
    c = MovementControls()
    c.apply_actions(["fire"])
    assert c.consume_fire() is True
    assert c.consume_fire() is False


