from __future__ import annotations

import random

import pytest

from games.yes_or_no.models import RoundState


def _running(controller, cursor=None, dots=None):
    controller.start()
    if cursor is not None:
        controller.cursor.x, controller.cursor.y, controller.cursor.r = cursor
    if dots is not None:
        controller.obstacles = list(dots)
    return controller


def test_idle_at_load(make_controller, scheduler) -> None:
    c = make_controller()
    assert c.state == RoundState.Idle
    assert c.obstacles == []
    assert scheduler.pending == 0
    assert not c.confirm_listener_attached


@pytest.mark.parametrize("size", [(0, 720), (1280, 0), (-5, 10)])
def test_invalid_surface_size_is_rejected(make_controller, size) -> None:
    with pytest.raises(ValueError):
        make_controller(size=size)


def test_start_populates_round(make_controller, scheduler) -> None:
    c = make_controller()
    c.start()
    assert c.state == RoundState.Running
    assert len(c.obstacles) == 20
    assert c.cursor.r == 30
    assert (c.cursor.x, c.cursor.y) == (640, 360)
    assert c.confirm_listener_attached
    assert c.tick_pending
    assert scheduler.pending == 1
    for d in c.obstacles:
        assert 15 <= d.r <= 80


def test_start_again_resets_after_any_outcome(make_controller, make_dot, scheduler) -> None:
    c = make_controller()
    _running(c, cursor=(100, 100, 30), dots=[make_dot(115, 100, 40)])
    c.tick()
    assert c.state == RoundState.Lost

    c.start()
    assert c.cursor.r == 30
    assert len(c.obstacles) == 20
    assert scheduler.pending == 1

    c.cursor.r = 55
    c.on_confirm(-1000, -1000)
    assert c.state == RoundState.Won
    c.restart()
    assert c.state == RoundState.Running
    assert c.cursor.r == 30
    assert len(c.obstacles) == 20


def test_start_while_running_keeps_a_single_tick(make_controller, scheduler) -> None:
    c = make_controller()
    c.start()
    c.start()
    assert scheduler.pending == 1


def test_consume_smaller_dot(make_controller, make_dot) -> None:
    c = make_controller()
    eaten = make_dot(110, 100, 20)
    far = make_dot(1000, 600, 70)
    _running(c, cursor=(100, 100, 30), dots=[far, eaten])

    c.resolve_collisions()

    assert c.state == RoundState.Running
    assert c.cursor.r == pytest.approx(36)
    assert all(d is not eaten for d in c.obstacles)
    assert far in c.obstacles
    # below target and still smaller than the largest dot: one replacement
    assert len(c.obstacles) == 2


def test_larger_dot_is_fatal(make_controller, make_dot, scheduler) -> None:
    c = make_controller()
    dots = [make_dot(115, 100, 40)]
    _running(c, cursor=(100, 100, 30), dots=dots)

    c.tick()

    assert c.state == RoundState.Lost
    assert c.cursor.r == 30
    assert c.obstacles == dots
    assert scheduler.pending == 0
    assert not c.confirm_listener_attached


def test_equal_radius_is_fatal(make_controller, make_dot) -> None:
    c = make_controller()
    _running(c, cursor=(100, 100, 30), dots=[make_dot(120, 100, 30)])
    c.resolve_collisions()
    assert c.state == RoundState.Lost


def test_touching_is_not_overlapping(make_controller, make_dot) -> None:
    c = make_controller()
    _running(c, cursor=(100, 100, 30), dots=[make_dot(150, 100, 20)])
    c.resolve_collisions()
    assert c.state == RoundState.Running
    assert c.cursor.r == 30


def test_loss_stops_remaining_checks(make_controller, make_dot) -> None:
    c = make_controller()
    small = make_dot(95, 100, 10)
    big = make_dot(105, 100, 50)
    # checked back to front: the big one comes first, the small one is never eaten
    _running(c, cursor=(100, 100, 30), dots=[small, big])
    c.resolve_collisions()
    assert c.state == RoundState.Lost
    assert small in c.obstacles
    assert c.cursor.r == 30


def test_eating_last_dot_wins_in_the_same_tick(make_controller, make_dot, scheduler) -> None:
    c = make_controller()
    outcomes = []
    c.add_round_listener(outcomes.append)
    _running(c, cursor=(100, 100, 30), dots=[make_dot(110, 100, 20)])

    scheduler.run_frame(None)

    assert c.state == RoundState.Won
    assert c.obstacles == []
    assert outcomes == [RoundState.Won]
    assert scheduler.pending == 0
    scheduler.run_frame(None)
    assert c.state == RoundState.Won


def test_eating_several_dots_in_one_tick(make_controller, make_dot) -> None:
    c = make_controller(target_count=3)
    dots = [make_dot(90, 100, 10), make_dot(110, 100, 10), make_dot(100, 110, 10)]
    _running(c, cursor=(100, 100, 30), dots=dots)
    c.resolve_collisions()
    assert c.state == RoundState.Won
    assert c.cursor.r == pytest.approx(39)


def test_no_replacement_once_cursor_is_biggest(make_controller, make_dot) -> None:
    c = make_controller()
    _running(c, cursor=(100, 100, 50), dots=[make_dot(1000, 600, 40), make_dot(110, 100, 20)])

    c.resolve_collisions()

    assert c.cursor.r == pytest.approx(56)
    assert len(c.obstacles) == 1
    assert not c.can_spawn()


def test_no_replacement_at_target_count(make_controller, make_dot) -> None:
    c = make_controller(target_count=2)
    dots = [make_dot(1000, 600, 70), make_dot(110, 100, 20)]
    _running(c, cursor=(100, 100, 30), dots=dots)
    # already over target before eating: 3 dots, eat one, back to 2
    c.obstacles.append(make_dot(1100, 100, 70))
    c.resolve_collisions()
    assert len(c.obstacles) == 2


def test_replacement_spawns_anywhere(make_controller, make_dot) -> None:
    c = make_controller()
    _running(c, cursor=(100, 100, 30), dots=[make_dot(1000, 600, 70), make_dot(110, 100, 20)])
    c.resolve_collisions()
    new = c.obstacles[-1]
    assert 15 <= new.r <= 80
    assert 0 <= new.x < 1280 and 0 <= new.y < 720


def test_confirm_on_empty_space_wins(make_controller, make_dot, scheduler) -> None:
    c = make_controller()
    outcomes = []
    c.add_round_listener(outcomes.append)
    _running(c, dots=[make_dot(500, 500, 50)])

    assert c.on_confirm(10, 10) is True

    assert c.state == RoundState.Won
    assert outcomes == [RoundState.Won]
    assert scheduler.pending == 0
    assert not c.confirm_listener_attached


def test_confirm_near_a_dot_is_ignored(make_controller, make_dot) -> None:
    c = make_controller()
    _running(c, dots=[make_dot(500, 500, 50)])
    # inside radius + hit radius (55)
    assert c.on_confirm(554, 500) is False
    assert c.on_confirm(500, 450) is False
    assert c.state == RoundState.Running
    assert c.on_confirm(556, 500) is True


def test_confirm_ignored_on_touch_devices(make_controller, make_dot, scheduler) -> None:
    c = make_controller(coarse_pointer=True)
    _running(c, dots=[make_dot(500, 500, 50)])
    assert not c.confirm_listener_attached
    assert c.on_confirm(10, 10) is False
    assert c.state == RoundState.Running
    assert scheduler.pending == 1


def test_confirm_ignored_outside_a_round(make_controller, make_dot) -> None:
    c = make_controller()
    assert c.on_confirm(10, 10) is False
    assert c.state == RoundState.Idle

    _running(c, cursor=(100, 100, 30), dots=[make_dot(115, 100, 40)])
    c.resolve_collisions()
    assert c.on_confirm(10, 10) is False
    assert c.state == RoundState.Lost


def test_touch_device_sizes(make_controller) -> None:
    c = make_controller(coarse_pointer=True)
    c.start()
    assert c.cursor.r == pytest.approx(19.5)
    for d in c.obstacles:
        assert 15 * 0.65 <= d.r <= 80 * 0.65


def test_pointer_moves_position_only(make_controller) -> None:
    c = make_controller()
    c.start()
    c.on_pointer_move(12, 34)
    assert (c.cursor.x, c.cursor.y, c.cursor.r) == (12, 34, 30)


def test_resize_keeps_the_round(make_controller) -> None:
    c = make_controller()
    c.start()
    dots = list(c.obstacles)
    c.resize((800, 600))
    c.resize((800, 600))
    assert c.surface_size == (800, 600)
    assert c.state == RoundState.Running
    assert c.obstacles == dots
    with pytest.raises(ValueError):
        c.resize((0, 600))
    assert c.surface_size == (800, 600)


def test_reset_is_a_fresh_load(make_controller, scheduler) -> None:
    c = make_controller()
    c.start()
    c.cursor.r = 70
    c.reset()
    assert c.state == RoundState.Idle
    assert c.obstacles == []
    assert c.cursor.r == 30
    assert scheduler.pending == 0
    assert not c.confirm_listener_attached


def test_tick_renders_then_resolves(make_controller, make_dot, scheduler) -> None:
    seen = []

    def renderer(surface, game):
        seen.append((surface, len(game.obstacles)))

    c = make_controller(renderer=renderer)
    _running(c, cursor=(100, 100, 30), dots=[make_dot(110, 100, 20)])
    scheduler.run_frame("surface")
    # drawn with the dot still there, then eaten
    assert seen == [("surface", 1)]
    assert c.state == RoundState.Won


def test_random_play_invariants(make_controller, scheduler) -> None:
    c = make_controller(size=(800, 600), seed=42)
    moves = random.Random(99)
    for _ in range(20):
        c.start()
        radius = c.cursor.r
        gate_closed = False
        for _ in range(400):
            c.on_pointer_move(moves.uniform(0, 800), moves.uniform(0, 600))
            before = len(c.obstacles)
            scheduler.run_frame(None)
            if c.state != RoundState.Running:
                break
            assert c.cursor.r >= radius
            radius = c.cursor.r
            assert len(c.obstacles) <= c.target_count
            for d in c.obstacles:
                assert c.sizes.min_dot <= d.r <= c.sizes.max_dot
            if gate_closed:
                assert len(c.obstacles) <= before
            if c.obstacles and c.cursor.r > c.largest_obstacle_radius():
                gate_closed = True
        if c.state == RoundState.Lost:
            assert scheduler.pending == 0


def test_largest_obstacle_radius(make_controller, make_dot) -> None:
    c = make_controller()
    assert c.largest_obstacle_radius() == 0.0
    c.obstacles = [make_dot(0, 0, 20), make_dot(10, 10, 61.5), make_dot(5, 5, 40)]
    assert c.largest_obstacle_radius() == 61.5
