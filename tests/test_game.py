import io

import pytest

from poolkit.actor_pool import MissilePool, default_actor_pool
from poolkit.actors import Alien, Missile
from poolkit.game import Game, main


class _Ticks:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


def _pool_game():
    pool = default_actor_pool()
    out = io.StringIO()
    ticks = _Ticks()
    game = Game(
        [lambda: pool.acquire("missile"), lambda: pool.acquire("alien")],
        tick=ticks,
        out=out,
    )
    return game, pool, out, ticks


def test_fire_brings_missile_and_alien_on_screen():
    game, _, _, _ = _pool_game()
    game.fire()
    kinds = [type(actor) for actor in game.actors]
    assert kinds == [Missile, Alien]
    assert all(actor.visible for actor in game.actors)


def test_fire_skips_missing_actors():
    pool = default_actor_pool()
    game = Game([lambda: pool.acquire("unknown"), lambda: pool.acquire("alien")], tick=_Ticks())
    game.fire()
    assert [type(actor) for actor in game.actors] == [Alien]


def test_animate_draws_every_actor():
    game, _, out, _ = _pool_game()
    game.fire()
    game.animate()
    assert out.getvalue() == "-> @ "


def test_explode_hides_and_clears():
    game, _, out, ticks = _pool_game()
    game.fire()
    fired = game.actors
    game.explode()
    assert game.actors == ()
    assert not any(actor.visible for actor in fired)
    assert out.getvalue() == "X\n\n\n"
    assert ticks.calls == [1]


def test_one_round_output():
    game, _, out, ticks = _pool_game()
    game.run(1)
    assert out.getvalue() == "-> @ " * 5 + "X\n" + "\n\n"
    assert len(ticks.calls) == 7
    assert game.actors == ()


def test_second_round_reuses_pooled_actors():
    game, pool, _, _ = _pool_game()
    game.run(1)
    game.fire()
    second = game.actors
    assert len(pool) == len(second)
    game.explode()
    game.run(2)
    assert len(pool) == len(second)


def test_missile_pool_keeps_two_missiles_over_rounds():
    missiles = MissilePool()
    out = io.StringIO()
    game = Game([missiles.acquire, missiles.acquire], tick=_Ticks(), out=out)
    game.run(3)
    assert len(missiles) == 2
    assert out.getvalue().count("X\n") == 3


def test_fresh_missiles_are_new_each_round():
    out = io.StringIO()
    game = Game([Missile, Missile], tick=_Ticks(), out=out)
    game.fire()
    first = set(map(id, game.actors))
    game.explode()
    kept = [*game.actors]
    game.fire()
    assert kept == []
    assert len(game.actors) == 2
    assert first.isdisjoint(map(id, game.actors)) or len(first) == 2


def test_zero_rounds_does_nothing():
    game, _, out, ticks = _pool_game()
    game.run(0)
    assert out.getvalue() == ""
    assert ticks.calls == []


def test_negative_rounds_rejected():
    game, _, _, _ = _pool_game()
    with pytest.raises(ValueError):
        game.run(-1)


def test_main_runs_game(capsys):
    assert main(["--rounds", "1", "--tick", "0"]) == 0
    captured = capsys.readouterr().out
    assert captured == "-> @ " * 5 + "X\n" + "\n\n"


def test_main_missiles_mode(capsys):
    assert main(["--mode", "missiles", "--rounds", "1", "--tick", "0"]) == 0
    assert capsys.readouterr().out.startswith("-> -> ")


def test_main_basic_mode(capsys):
    assert main(["--mode", "basic"]) == 0
    captured = capsys.readouterr().out
    assert captured.count("MethodA") == 3
    assert captured.count("MethodB") == 3
    assert captured.count("Resetting the state") == 1


def test_main_rejects_negative_rounds():
    with pytest.raises(SystemExit):
        main(["--rounds", "-2"])