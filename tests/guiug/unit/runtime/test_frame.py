from __future__ import annotations

import logging

import pytest

from guiug.layout.anchor import FULL
from guiug.layout.geometry import Dimension
from guiug.layout.size import Weight
from guiug.runtime.errors import BrokenReferenceError, LayoutConfigurationError
from guiug.runtime.frame import FrameDriver
from guiug.scene.nodes import Column, Layer, RectNode, TextureNode
from guiug.scene.store import Scene
from tests.guiug.conftest import FakeRenderer

RED = (1.0, 0.0, 0.0, 1.0)


def _scene() -> Scene:
    scene = Scene()
    rect = scene.insert_node(RectNode(RED))
    texture = scene.insert_node(TextureNode(0))
    scene.set_root(scene.insert_node(Layer(((FULL, rect), (FULL, texture)))))
    return scene


def test_render_frame_submits_primitives_in_order() -> None:
    renderer = FakeRenderer()
    driver = FrameDriver(_scene(), renderer, screen=Dimension(640, 480))

    stats = driver.render_frame()

    assert stats is not None
    assert (stats.frame_index, stats.flat_count, stats.textured_count, stats.z_index) == (
        0,
        1,
        1,
        2,
    )
    assert [name for name, _ in renderer.calls] == [
        "begin_frame",
        "draw_flat",
        "draw_textured",
        "end_frame",
    ]
    assert renderer.calls[0][1] == (Dimension(640, 480), 3)
    assert (renderer.flat[0].width, renderer.flat[0].height) == (640, 480)
    assert renderer.textured[0].z == 1


def test_resize_applies_to_next_frame() -> None:
    renderer = FakeRenderer()
    driver = FrameDriver(_scene(), renderer, screen=Dimension(640, 480))
    driver.render_frame()

    assert driver.handle_resize_event({"size": (1024.0, 768.0)}) is True
    stats = driver.render_frame()

    assert driver.screen == Dimension(1024, 768)
    assert stats is not None and stats.frame_index == 1
    assert (renderer.flat[0].width, renderer.flat[0].height) == (1024, 768)


def test_resize_event_without_size_is_ignored() -> None:
    driver = FrameDriver(_scene(), FakeRenderer(), screen=Dimension(640, 480))
    assert driver.handle_resize_event({"kind": "resize"}) is False
    assert driver.screen == Dimension(640, 480)


def test_minimised_window_keeps_one_pixel_extent() -> None:
    driver = FrameDriver(_scene(), FakeRenderer(), screen=Dimension(640, 480))
    assert driver.resize(0, 0) == Dimension(1, 1)


def _broken_weights_scene() -> Scene:
    scene = Scene()
    leaf = scene.insert_node(RectNode(RED))
    scene.set_root(scene.insert_node(Column(((Weight(0), leaf),))))
    return scene


def test_failed_layout_skips_frame_and_logs(caplog) -> None:
    renderer = FakeRenderer()
    driver = FrameDriver(_broken_weights_scene(), renderer, screen=Dimension(100, 100))

    with caplog.at_level(logging.WARNING, logger="guiug.runtime.frame"):
        assert driver.render_frame() is None

    assert renderer.calls == []
    assert driver.frame_index == 1
    assert any("frame_skipped" in rec.getMessage() for rec in caplog.records)


def test_failed_layout_propagates_when_skipping_disabled() -> None:
    driver = FrameDriver(
        _broken_weights_scene(),
        FakeRenderer(),
        screen=Dimension(100, 100),
        skip_failed_frames=False,
    )
    with pytest.raises(LayoutConfigurationError):
        driver.render_frame()


def test_strict_driver_reports_dangling_reference() -> None:
    scene = Scene()
    scene.set_root(scene.insert_node(Layer(((FULL, 12),))))
    driver = FrameDriver(
        scene, FakeRenderer(), screen=Dimension(10, 10), strict=True, skip_failed_frames=False
    )
    with pytest.raises(BrokenReferenceError):
        driver.render_frame()
