import random

import pygame
import pytest

from bomby_explody import theme
from bomby_explody.app import Game
from bomby_explody.components import Vec2
from bomby_explody.menus import CREDITS_MUSIC, Menu
from bomby_explody.screens import SPLASH_BACKGROUND_COLOR, Screen
from bomby_explody.world import LEVEL_MUSIC


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(game, pos):
    game.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1))
    game.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1))


def button_pos(game, label):
    b = next(b for b in game.buttons if b.label == label)
    return tuple(int(v) for v in b.center)


def to_title(game):
    game.handle_event(key(pygame.K_ESCAPE))
    game.update(0.0)


def to_gameplay(game):
    to_title(game)
    click(game, button_pos(game, "Play"))
    game.update(0.0)


@pytest.fixture
def game():
    return Game(rng=random.Random(7))


def test_starts_on_splash_and_escape_skips(game):
    assert game.navigator.screen is Screen.SPLASH
    game.handle_event(key(pygame.K_ESCAPE))
    assert game.navigator.screen is Screen.TITLE
    assert game.navigator.menu is Menu.MAIN


def test_splash_times_out(game):
    game.update(2.0)
    assert game.navigator.screen is Screen.TITLE


def test_quit_event_stops(game):
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert game.running is False


def test_debug_toggle(game):
    game.handle_event(key(pygame.K_BACKQUOTE))
    assert game.debug is True
    game.handle_event(key(pygame.K_BACKQUOTE))
    assert game.debug is False


def test_main_menu_buttons_match_navigator(game):
    to_title(game)
    assert [b.label for b in game.buttons] == list(game.navigator.buttons())


def test_play_reaches_gameplay_with_world(game):
    to_gameplay(game)
    assert game.navigator.screen is Screen.GAMEPLAY
    assert game.world is not None
    assert game.music == LEVEL_MUSIC


def test_click_in_gameplay_places_bomb(game):
    to_gameplay(game)
    click(game, (640, 360))
    click(game, (740, 260))
    targets = [b.target for b in game.world.bombs]
    assert targets == [Vec2(0.0, 0.0), Vec2(100.0, 100.0)]


def test_pause_freezes_world(game):
    to_gameplay(game)
    click(game, (640, 360))
    bomb = game.world.bombs[0]
    game.handle_event(key(pygame.K_p))
    assert game.navigator.paused is True
    before = bomb.position
    game.update(0.1)
    assert bomb.position == before
    game.handle_event(key(pygame.K_p))
    assert game.navigator.paused is False
    game.update(0.1)
    assert bomb.position != before and bomb.position.x > before.x


def test_quit_to_title_drops_world(game):
    to_gameplay(game)
    game.handle_event(key(pygame.K_ESCAPE))
    click(game, button_pos(game, "Quit to title"))
    assert game.navigator.screen is Screen.TITLE
    assert game.world is None


def test_exit_button_stops(game):
    to_title(game)
    click(game, button_pos(game, "Exit"))
    assert game.running is False


def test_credits_music(game):
    to_title(game)
    click(game, button_pos(game, "Credits"))
    assert game.navigator.menu is Menu.CREDITS
    assert game.music == CREDITS_MUSIC


def test_hover_sound_only_after_initial_assets(game):
    game.handle_event(key(pygame.K_ESCAPE))
    pos = button_pos(game, "Play")
    game.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=pos))
    assert list(game.sounds_played) == []
    game.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0)))
    game.update(0.0)
    game.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=pos))
    assert list(game.sounds_played) == [(theme.HOVER_SOUND, 1.0)]


def test_settings_raise_volume(game):
    to_title(game)
    click(game, button_pos(game, "Settings"))
    click(game, button_pos(game, "+"))
    assert game.navigator.volume > 1.0
    assert game.sounds_played[-1][0] == theme.CLICK_SOUND


def test_draw_clears_to_background(game):
    surface = pygame.Surface((1280, 720))
    game.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == theme.to_rgb255(SPLASH_BACKGROUND_COLOR)


def test_pause_overlay_darkens(game):
    to_gameplay(game)
    surface = pygame.Surface((1280, 720))
    game.draw(surface)
    bright = surface.get_at((0, 0))[0]
    game.handle_event(key(pygame.K_p))
    game.draw(surface)
    assert surface.get_at((0, 0))[0] < bright


def test_hovered_button_uses_hover_colour(game):
    to_title(game)
    pos = button_pos(game, "Play")
    game.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=pos))
    play = next(b for b in game.buttons if b.label == "Play")
    assert play.interaction is theme.Interaction.HOVERED
    assert play.background == theme.BUTTON_HOVERED_BACKGROUND