import random

import pytest

from scene_engine.components.component import Component
from scene_engine.context import LayoutContext, MenuBarSection
from scene_engine.errors import ContextSectionMissing, ContractViolation
from scene_engine.models.enums import Appearance
from scene_engine.models.geometry import Rectangle


class Recorder(Component):
    def __init__(self, label, log, layer=0):
        super().__init__()
        self.label = label
        self.log = log
        self.layer = layer

    def layout(self, context):
        self.log.append(self.label)
        return self.label


class NeedsMenuBar(Component):
    def layout(self, context):
        return context.require('menu_bar', self.name)


def test_missing_section_is_a_contract_violation():
    context = LayoutContext(rng=random.Random(0))
    with pytest.raises(ContextSectionMissing) as excinfo:
        NeedsMenuBar().collect(context)
    assert excinfo.value.section == 'menu_bar'
    assert isinstance(excinfo.value, ContractViolation)


def test_written_section_is_readable():
    context = LayoutContext(rng=random.Random(0))
    context.menu_bar = MenuBarSection(Rectangle(0, 0, 100, 24), Appearance.DARK)
    operations = NeedsMenuBar().collect(context)
    assert operations[0].region is context.menu_bar


def test_extras_sections():
    context = LayoutContext(rng=random.Random(0))
    with pytest.raises(ContextSectionMissing):
        context.require('browser')
    context.extras['browser'] = {'tabs': 3}
    assert context.require('browser') == {'tabs': 3}


def test_collect_is_pre_order_and_annotations_accumulate():
    log = []
    root = Recorder('root', log)
    child = root.add_component(Recorder('child', log, layer=5))
    child.add_component(Recorder('grandchild', log, layer=1))
    root.add_component(Recorder('sibling', log, layer=2))

    context = LayoutContext(rng=random.Random(0))
    operations = root.collect(context)
    assert log == ['root', 'child', 'grandchild', 'sibling']
    assert [op.region for op in operations] == log
    assert [op.layer for op in operations] == [0, 5, 1, 2]


def test_add_and_remove_children():
    root = Component()
    child = Component()
    root.add_component(child)
    root.add_component(child)
    assert root.children == [child]
    root.remove_component(child)
    assert root.children == []
