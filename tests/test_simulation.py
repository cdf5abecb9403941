import random

import pytest

from flappy_duel.data_models import Flyer, Trail
from flappy_duel.simulation import GameState, PlayerInput, Simulation, prune_trails

from conftest import HeldKeys, park_obstacles


def arm_collision(sim, index, loser, x=100.0):
    """Places obstacle `index` in the window with its top pipe on `loser`'s flyer."""
    obstacle = sim.obstacles[index]
    obstacle.x = x
    obstacle.gap_top, obstacle.gap_bottom = 200.0, 500.0
    sim.flyers[loser - 1].height = 100.0
    sim.flyers[2 - loser].height = 300.0


def test_initial_roster(sim):
    assert sim.state is GameState.PLAYING
    assert [o.x for o in sim.obstacles] == [300, 600, 800, 1000, 1200]
    assert sim.hits == [0, 0]
    assert sim.score == 0
    assert sim.trails == ([], [])


def test_step_accumulates_score(sim, nothing_held):
    for _ in range(10):
        sim.step(0.01, nothing_held)
    assert sim.score == pytest.approx(0.1)


def test_collision_credits_the_other_player(sim):
    park_obstacles(sim)
    arm_collision(sim, 0, loser=1)

    assert sim.evaluate_collisions() == 1
    assert sim.hits == [0, 1]
    assert sim.state is GameState.GAME_OVER


def test_second_collision_in_same_pass_is_not_counted(sim):
    park_obstacles(sim)
    arm_collision(sim, 0, loser=1)
    arm_collision(sim, 1, loser=1, x=110.0)

    sim.evaluate_collisions()
    assert sim.hits == [0, 1]

    sim.evaluate_collisions()
    assert sim.hits == [0, 1]


def test_simultaneous_hit_credits_player_one(sim):
    park_obstacles(sim)
    arm_collision(sim, 0, loser=2)
    sim.flyers[0].height = 100.0

    assert sim.evaluate_collisions() == 1
    assert sim.hits == [0, 1]


def test_collision_during_step_ends_round(sim, nothing_held):
    park_obstacles(sim)
    arm_collision(sim, 0, loser=2)
    sim.step(0.001, nothing_held)

    assert sim.game_over
    assert sim.hits == [1, 0]


def test_game_over_freezes_physics(sim, nothing_held):
    sim.state = GameState.GAME_OVER
    flyer_before = Flyer(**vars(sim.flyers[0]))
    xs_before = [o.x for o in sim.obstacles]

    sim.step(0.05, HeldKeys(PlayerInput.JUMP_P1))

    assert sim.flyers[0] == flyer_before
    assert [o.x for o in sim.obstacles] == xs_before
    assert sim.score == 0


def test_trails_keep_spawning_during_game_over(sim, nothing_held):
    sim.state = GameState.GAME_OVER
    sim.step(0.01, nothing_held)
    sim.step(0.01, nothing_held)
    assert len(sim.trails[0]) == len(sim.trails[1]) == 2


def test_trail_spawn_waits_for_threshold(sim, nothing_held):
    park_obstacles(sim)
    sim.step(0.005, nothing_held)
    assert sim.trails == ([], [])

    sim.step(0.005, nothing_held)
    assert len(sim.trails[0]) == 1
    assert len(sim.trails[1]) == 1

    # the timer is never reset, so every later step spawns as well
    sim.step(0.001, nothing_held)
    assert len(sim.trails[0]) == 2


def test_trail_spawns_at_owner_height(sim, nothing_held):
    park_obstacles(sim)
    sim.flyers[1].height = 420.0
    sim.step(0.01, nothing_held)
    trail = sim.trails[1][0]
    assert trail.height == 420.0
    assert trail.x == pytest.approx(80 - 300 * 0.01)


def test_trail_intensity_follows_score(sim, nothing_held):
    park_obstacles(sim)
    sim.score = 2.5
    sim.step(0.01, nothing_held)
    assert all(t.intensity == 2.5 for t in sim.trails[0])


def test_expired_trails_are_pruned(sim, nothing_held):
    park_obstacles(sim)
    sim.trails[0].append(Trail(x=0.0, height=10.0))
    sim.step(0.01, nothing_held)

    assert len(sim.trails[0]) == 1
    assert sim.trails[0][0].x == pytest.approx(77)


def test_prune_trails_filters_in_order():
    trails = [Trail(x=5, height=1), Trail(x=-3, height=2), Trail(x=0, height=3)]
    assert [t.height for t in prune_trails(trails)] == [1, 3]
    assert prune_trails([]) == []


def test_held_jump_is_not_cumulative(sim):
    park_obstacles(sim)
    held = HeldKeys(PlayerInput.JUMP_P1)
    velocities = []
    for _ in range(5):
        sim.step(0.01, held)
        velocities.append(sim.flyers[0].velocity)

    assert velocities == pytest.approx([-400 + 1471.5 * 0.01] * 5)
    assert sim.flyers[1].velocity > 0


def test_player_two_jump(sim):
    park_obstacles(sim)
    sim.step(0.01, HeldKeys(PlayerInput.JUMP_P2))
    assert sim.flyers[1].velocity == pytest.approx(-400 + 14.715)
    assert sim.flyers[0].velocity == pytest.approx(14.715)


def test_obstacles_scroll_with_player_one_speed(sim, nothing_held):
    sim.flyers[1].speed = 10_000.0
    xs_before = [o.x for o in sim.obstacles]
    sim.step(0.01, nothing_held)

    expected_shift = sim.flyers[0].speed * 0.01
    for before, obstacle in zip(xs_before, sim.obstacles):
        assert before - obstacle.x == pytest.approx(expected_shift)


def test_flyers_clamped_after_step(sim, nothing_held):
    park_obstacles(sim)
    sim.flyers[0].height = 569.0
    sim.flyers[0].velocity = 500.0
    sim.step(0.05, nothing_held)
    assert sim.flyers[0].height == 570
    assert sim.flyers[0].velocity == 0


def test_large_dt_is_capped(sim, nothing_held):
    park_obstacles(sim)
    sim.step(3.0, nothing_held)
    assert sim.score == pytest.approx(0.1)


def test_negative_dt_is_ignored(sim, nothing_held):
    height = sim.flyers[0].height
    sim.step(-1.0, nothing_held)
    assert sim.score == 0
    assert sim.flyers[0].height == height


def test_restart_restores_defaults_and_keeps_hits(sim, nothing_held):
    park_obstacles(sim)
    for _ in range(20):
        sim.step(0.01, nothing_held)
    sim.hits[:] = [3, 4]
    sim.state = GameState.GAME_OVER

    sim.restart()

    for flyer in sim.flyers:
        assert (flyer.height, flyer.velocity, flyer.speed, flyer.intensity) == (285, 0, 210, 0)
    assert sim.trails == ([], [])
    assert sim.score == 0
    assert sim.spawn_timer == 0
    assert sim.hits == [3, 4]
    assert sim.state is GameState.PLAYING
    assert [o.x for o in sim.obstacles] == [300, 600, 800, 1000, 1200]
    assert all(o.gap_width == pytest.approx(300) for o in sim.obstacles)


def test_restart_input_resumes_play(sim):
    sim.hits[:] = [2, 5]
    sim.state = GameState.GAME_OVER
    sim.step(0.01, HeldKeys(PlayerInput.RESTART))

    assert sim.state is GameState.PLAYING
    assert sim.hits == [2, 5]
    assert sim.score == pytest.approx(0.01)


def test_winner_is_first_to_reach_win_score():
    sim = Simulation(rng=random.Random(0), win_score=3)
    park_obstacles(sim)
    sim.hits[:] = [2, 2]
    assert sim.winner is None

    arm_collision(sim, 0, loser=1)
    sim.evaluate_collisions()
    assert sim.hits == [2, 3]
    assert sim.winner == 2


def test_won_match_ignores_restart():
    sim = Simulation(rng=random.Random(0), win_score=3)
    restart = HeldKeys(PlayerInput.RESTART)
    for _ in range(3):
        park_obstacles(sim)
        arm_collision(sim, 0, loser=1)
        sim.evaluate_collisions()
        sim.step(0.01, restart)
    assert sim.hits == [0, 3]
    assert sim.winner == 2

    # keep hammering restart with player 2 in the pipe: nothing changes
    for _ in range(5):
        park_obstacles(sim)
        arm_collision(sim, 0, loser=2)
        sim.step(0.01, restart)
        sim.evaluate_collisions()

    assert sim.hits == [0, 3]
    assert sim.winner == 2
    assert sim.game_over


def test_direct_restart_after_win_credits_nothing():
    sim = Simulation(rng=random.Random(0), win_score=1)
    park_obstacles(sim)
    arm_collision(sim, 0, loser=2)
    sim.evaluate_collisions()
    assert sim.winner == 1

    sim.restart()
    park_obstacles(sim)
    arm_collision(sim, 0, loser=1)
    assert sim.evaluate_collisions() is None
    assert sim.hits == [1, 0]
    assert sim.winner == 1


def test_new_match_resets_hits(sim):
    sim.hits[:] = [10, 6]
    sim.rounds_played = 16
    sim.match_winner = 1
    sim.state = GameState.GAME_OVER
    sim.step(0.01, HeldKeys(PlayerInput.NEW_MATCH))

    assert sim.hits == [0, 0]
    assert sim.rounds_played == 0
    assert sim.winner is None
    assert sim.state is GameState.PLAYING


def test_gravity_flips_on_odd_rounds_when_enabled(nothing_held):
    sim = Simulation(rng=random.Random(0), flip_gravity=True)
    park_obstacles(sim)
    sim.step(0.01, nothing_held)
    assert sim.gravity_sign == 1.0

    sim.rounds_played = 1
    sim.step(0.01, nothing_held)
    assert sim.gravity_sign == -1.0


def test_gravity_never_flips_by_default(sim, nothing_held):
    park_obstacles(sim)
    sim.rounds_played = 1
    sim.step(0.01, nothing_held)
    assert sim.gravity_sign == 1.0


def test_rounds_played_counts_credited_hits(sim):
    park_obstacles(sim)
    arm_collision(sim, 0, loser=1)
    sim.evaluate_collisions()
    assert sim.rounds_played == 1
