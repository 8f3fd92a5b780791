import pytest

from algokit.traffic_lights import TrafficLights


def test_defaults_to_all_off():
    assert TrafficLights().value == 0


def test_value_out_of_byte_range_rejected():
    with pytest.raises(ValueError):
        TrafficLights(256)
    with pytest.raises(ValueError):
        TrafficLights(-1)


def test_negative_light_rejected():
    lights = TrafficLights()
    with pytest.raises(ValueError):
        lights.turn_on(-1)
    with pytest.raises(ValueError):
        lights.turn_off(-1)


def test_turn_on_light_zero_sets_lowest_bit():
    lights = TrafficLights()
    lights.turn_on(0)
    assert lights.value == 1


@pytest.mark.parametrize("light", range(8))
def test_turn_on_then_off_restores(light):
    lights = TrafficLights()
    lights.turn_on(light)
    assert lights.value != 0
    lights.turn_off(light)
    assert lights.value == 0


def test_turn_on_is_idempotent():
    lights = TrafficLights()
    lights.turn_on(3)
    once = lights.value
    lights.turn_on(3)
    assert lights.value == once


def test_turn_off_leaves_other_lights():
    lights = TrafficLights()
    lights.turn_on(1)
    alone = lights.value
    lights.turn_on(2)
    lights.turn_off(2)
    assert lights.value == alone


def test_light_beyond_byte_has_no_effect():
    lights = TrafficLights(5)
    lights.turn_on(9)
    assert lights.value == 5


def test_reverse_twice_is_identity():
    lights = TrafficLights(0b10100110)
    lights.reverse()
    lights.reverse()
    assert lights.value == 0b10100110


def test_reverse_of_zero_lights_low_four():
    lights = TrafficLights()
    lights.reverse()
    expected = TrafficLights()
    for light in range(4):
        expected.turn_on(light)
    assert lights.value == expected.value


def test_next_step_moves_light_up():
    lights = TrafficLights()
    lights.turn_on(0)
    lights.next_step()
    expected = TrafficLights()
    expected.turn_on(1)
    assert lights.value == expected.value


def test_next_step_wraps_light_three():
    lights = TrafficLights()
    lights.turn_on(3)
    lights.next_step()
    assert lights.value == 0x11


def test_next_step_clears_high_lights():
    lights = TrafficLights()
    lights.turn_on(6)
    lights.next_step()
    assert lights.value == 0


def test_swap_exchanges_values():
    first, second = TrafficLights(3), TrafficLights(12)
    first.swap(second)
    assert (first.value, second.value) == (12, 3)


def test_swap_equal_values_keeps_them():
    first, second = TrafficLights(7), TrafficLights(7)
    first.swap(second)
    assert (first.value, second.value) == (7, 7)