import random

from scene_engine.components.component import Component
from scene_engine.components.screen import build_screen
from scene_engine.context import LayoutContext
from scene_engine.models import classes
from scene_engine.models.enums import UIFamily
from scene_engine.models.jobs import DrawOperation
from scene_engine.pipeline import RenderPass, SceneGenerator
from scene_engine.render.surface import RasterSurface


def render(family, resources, seed):
    generator = SceneGenerator(build_screen(family), resources).prepare()
    return generator.generate(random.Random(seed))


def test_same_seed_same_scene(resources):
    first = render('mac', resources, 42)
    second = render('mac', resources, 42)
    assert first.annotations == second.annotations
    assert first.candidates == second.candidates
    assert first.image.tobytes() == second.image.tobytes()


def test_generator_is_reusable_across_seeds(no_resources):
    generator = SceneGenerator(build_screen('windows'), no_resources).prepare()
    a = generator.generate(random.Random(1))
    generator.generate(random.Random(2))
    again = generator.generate(random.Random(1))
    assert a.annotations == again.annotations
    assert a.image.tobytes() == again.image.tobytes()


def test_survivors_are_clipped_to_canvas(no_resources):
    generator = SceneGenerator(build_screen('mac'), no_resources).prepare()
    for seed in range(5):
        scene = generator.generate(random.Random(seed))
        assert scene.image.size == (scene.width, scene.height)
        for annotation in scene.annotations:
            rect = annotation.rect
            assert 0 <= rect.x and 0 <= rect.y
            assert rect.x2 <= scene.width and rect.y2 <= scene.height
            assert rect.width > 0 and rect.height > 0


def test_mac_scene_contents(no_resources):
    generator = SceneGenerator(build_screen(UIFamily.MAC), no_resources).prepare()
    scene = generator.generate(random.Random(3))
    names = {a.class_name for a in scene.candidates}
    assert {classes.DOCK, classes.MENUBAR, classes.APPLICATION, classes.FILE} <= names
    assert classes.TASKBAR not in names
    assert {a.class_name for a in scene.annotations} <= set(classes.MAC_CLASSES)


def test_windows_scene_contents(no_resources):
    generator = SceneGenerator(build_screen(UIFamily.WINDOWS), no_resources).prepare()
    scene = generator.generate(random.Random(3))
    names = {a.class_name for a in scene.candidates}
    assert {classes.TASKBAR, classes.APPLICATION} <= names
    assert classes.DOCK not in names and classes.MENUBAR not in names
    # the taskbar is above every file and window
    assert classes.TASKBAR in {a.class_name for a in scene.annotations}


def test_background_only_screen_has_no_labels(no_resources):
    generator = SceneGenerator(build_screen('mac', background_only=True), no_resources).prepare()
    scene = generator.generate(random.Random(0))
    assert scene.annotations == []
    assert scene.candidates == []


class Painter(Component):
    def __init__(self, log):
        super().__init__()
        self.log = log

    def draw(self, surface, region, context):
        self.log.append(region)


def test_render_pass_sorts_by_layer_keeping_traversal_order():
    log = []
    painter = Painter(log)
    context = LayoutContext(rng=random.Random(0), surface=RasterSurface(10, 10))
    operations = [
        DrawOperation(30, painter, 'dock'),
        DrawOperation(0, painter, 'screen'),
        DrawOperation(20, painter, 'app-frame'),
        DrawOperation(20, painter, 'app-popup'),
        DrawOperation(10, painter, 'file'),
    ]
    RenderPass().run(operations, context)
    assert log == ['screen', 'file', 'app-frame', 'app-popup', 'dock']
