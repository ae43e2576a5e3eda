import pygame
import pytest

from flappy import images
from flappy.game import (Game, SPAWN_PIPES_EVENT, SKY_COLOR, start_button_rect, restart_button_rect,
                         hit_test)
from flappy.simulation import GameState, BOARD_WIDTH, BOARD_HEIGHT, HIGHSCORE_KEY

from conftest import MemoryStore


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


@pytest.fixture
def game():
    g = Game(store=MemoryStore({HIGHSCORE_KEY: 3}))
    yield g
    g.quit()
    images.clear_cache()


def test_button_regions():
    start = start_button_rect()
    restart = restart_button_rect()
    cx, cy = BOARD_WIDTH // 2, BOARD_HEIGHT // 2

    # limites inclusivos
    assert hit_test(start, (cx - 50, cy - 30))
    assert hit_test(start, (cx + 50, cy + 20))
    assert not hit_test(start, (cx + 51, cy))
    assert not hit_test(start, (cx, cy - 31))

    assert hit_test(restart, (cx, cy + 20))
    assert hit_test(restart, (cx + 50, cy + 70))
    assert not hit_test(restart, (cx, cy + 71))
    assert not hit_test(restart, (cx - 51, cy + 40))


def test_click_on_start_starts_the_game(game):
    game.handle_event(click((10, 10)))
    assert game.sim.state == GameState.NOT_STARTED

    game.handle_event(click((BOARD_WIDTH // 2, BOARD_HEIGHT // 2)))
    assert game.sim.state == GameState.RUNNING
    assert game.spawn_timer_armed
    assert game.sim.highest_score == 3


def test_jump_ignored_before_start(game):
    game.handle_event(key(pygame.K_SPACE))
    assert game.sim.bird.velocity == 0


def test_spawn_event_adds_a_pair(game):
    game.start_game()
    game.handle_event(pygame.event.Event(SPAWN_PIPES_EVENT))
    assert [p.role for p in game.sim.pipes] == ["top", "bottom"]


def test_space_and_click_jump_while_running(game):
    game.start_game()
    game.sim.bird.velocity = 3.0
    game.handle_event(key(pygame.K_SPACE))
    assert game.sim.bird.velocity == -6

    game.sim.bird.velocity = 3.0
    game.handle_event(click((5, 5)))
    assert game.sim.bird.velocity == -6


def test_game_over_stops_the_clocks(game):
    game.start_game()
    game.sim.bird.pos.y = 639
    game.sim.bird.velocity = 1.0
    game.update()
    assert game.sim.state == GameState.OVER
    assert not game.spawn_timer_armed

    y = game.sim.bird.y
    game.update()
    game.handle_event(pygame.event.Event(SPAWN_PIPES_EVENT))
    game.handle_event(key(pygame.K_SPACE))
    assert game.sim.bird.y == y
    assert len(game.sim.pipes) == 0


def test_restart_after_game_over(game):
    game.start_game()
    game.sim.spawn_pipes()
    game.sim.score = 7.5
    game.sim.bird.pos.y = 700
    game.update()
    assert game.sim.state == GameState.OVER
    assert game.sim.highest_score == 7

    # fora do botão: nada acontece
    game.handle_event(click((10, 10)))
    assert game.sim.state == GameState.OVER

    game.handle_event(click((BOARD_WIDTH // 2, BOARD_HEIGHT // 2 + 45)))
    assert game.sim.state == GameState.RUNNING
    assert game.sim.score == 0
    assert game.sim.highest_score == 7
    assert len(game.sim.pipes) == 0
    assert game.spawn_timer_armed


def test_escape_quits(game):
    game.handle_event(key(pygame.K_ESCAPE))
    assert not game.running


def test_draw_every_state(game):
    game.draw()
    game.start_game()
    game.sim.spawn_pipes()
    game.update()
    game.draw()
    game.sim.finish()
    game.draw()


def test_draw_blits_the_sprites(game):
    game.start_game()
    top, bottom = game.sim.place_pipe_pair(-100)
    top.pos.x = bottom.pos.x = 200
    game.update()
    game.draw()

    sky = pygame.Color(*SKY_COLOR)
    bird = game.sim.bird
    assert game.screen.get_at(bird.rect.center) != sky
    assert game.screen.get_at((top.rect.centerx, 200)) != sky
    # entre os canos (no vão) só céu
    assert game.screen.get_at((top.rect.centerx, 492)) == sky
