from __future__ import annotations

from types import SimpleNamespace

import pytest

from imagesource import ConfigError, RemoteImage

from gallery import app as gallery_app
from gallery.app import GalleryApp
from gallery.controller import VIEW_STATE, SlideshowController
from gallery.slideshow import Slideshow

CONFIG = {
    "bg_color": [0, 0, 0],
    "countdown_font_size": 20,
    "pause": 5,
    "tick_interval": 0.1,
}


def make_handles(count):
    # Decoded images without texture. Kivy does not draw them, which keeps
    # the tests independent of an OpenGL context.
    return [SimpleNamespace(name=f"image-{i}", texture=None) for i in range(count)]


@pytest.fixture()
def controller(clock):
    return SlideshowController(CONFIG["pause"], clock=clock)


@pytest.fixture()
def slideshow(controller):
    slideshow = Slideshow(CONFIG, controller)
    yield slideshow
    slideshow.stop()


def test_injected_controller_is_used(slideshow, controller):
    assert slideshow.controller is controller


def test_controller_is_created_from_pause():
    slideshow = Slideshow(dict(CONFIG, pause=8))
    assert slideshow.controller.interval == 8
    assert slideshow.controller.state == VIEW_STATE.EMPTY


def test_empty_slideshow_shows_placeholder(slideshow):
    assert slideshow._box.children == [slideshow._placeholder]
    assert slideshow._placeholder.text == Slideshow.PLACEHOLDER


def test_show_switches_to_image_and_countdown(slideshow, controller):
    handles = make_handles(2)
    slideshow.show(handles)

    assert controller.images == tuple(handles)
    assert slideshow._placeholder not in slideshow._box.children
    assert slideshow._image in slideshow._box.children
    assert slideshow._countdown in slideshow._box.children
    assert slideshow._countdown.text == "5"


def test_countdown_follows_clock_ticks(slideshow, controller, clock):
    slideshow.show(make_handles(3))

    clock.advance(2.5)
    slideshow._clock_callback(0.1)
    assert controller.index == 0
    assert slideshow._countdown.text == "3"

    clock.advance(2.5)
    slideshow._clock_callback(0.1)
    assert controller.index == 1
    assert slideshow._countdown.text == "5"


def test_single_image_countdown_stops_at_zero(slideshow, controller, clock):
    slideshow.show(make_handles(1))
    clock.advance(12)
    slideshow._clock_callback(0.1)
    assert controller.index == 0
    assert slideshow._countdown.text == "0"


def test_empty_reload_returns_to_placeholder(slideshow):
    slideshow.show(make_handles(2))
    slideshow.show([])
    assert slideshow._box.children == [slideshow._placeholder]


def test_play_and_stop(slideshow):
    assert not slideshow.playing
    slideshow.play()
    event = slideshow._next_event
    assert slideshow.playing
    # Playing twice does not schedule a second event.
    slideshow.play()
    assert slideshow._next_event is event
    slideshow.stop()
    assert not slideshow.playing
    slideshow.stop()
    assert not slideshow.playing


def test_label_color_contrasts_with_background():
    dark = Slideshow(CONFIG)
    bright = Slideshow(dict(CONFIG, bg_color=[1, 1, 1]))
    assert list(dark._countdown.color) == pytest.approx([1, 1, 1, 1])
    assert list(bright._countdown.color) == pytest.approx([0, 0, 0, 1])


@pytest.mark.parametrize(
    "key, value",
    [
        ("pause", 0),
        ("tick_interval", -1),
        ("bg_color", [0, 0]),
        ("countdown_font_size", 1.5),
    ],
)
def test_invalid_parameters_are_rejected(key, value):
    with pytest.raises(ConfigError):
        Slideshow(dict(CONFIG, **{key: value}))


def test_missing_parameter_is_rejected():
    config = dict(CONFIG)
    del config["pause"]
    with pytest.raises(ConfigError):
        Slideshow(config)


def test_app_decodes_and_shows_loaded_images(monkeypatch, slideshow, controller):
    decoded = []

    def decode_images(images):
        handles = [SimpleNamespace(name=image.name, texture=None) for image in images]
        decoded.extend(handles)
        return handles

    monkeypatch.setattr(gallery_app, "decode_images", decode_images)
    app = GalleryApp()
    app._slideshow = slideshow

    app.on_images_loaded([RemoteImage("/a.jpg", b"a"), RemoteImage("/b.png", b"b")])

    assert [handle.name for handle in controller.images] == ["a.jpg", "b.png"]
    assert controller.images == tuple(decoded)
    assert slideshow._countdown.text == "5"
