import asyncio

import pytest

from scene_engine.components.component import Component, settle


class Loader(Component):
    def __init__(self, error=None):
        super().__init__()
        self.error = error
        self.loaded = False

    async def load_own_resources(self, resources):
        if self.error is not None:
            raise self.error
        self.loaded = True


def test_failed_child_load_does_not_block_the_tree():
    root = Loader()
    bad = root.add_component(Loader(OSError('unreadable')))
    good = root.add_component(Loader())
    nested = good.add_component(Loader())

    asyncio.run(root.load_resources(None))

    assert not bad.loaded
    assert good.loaded
    assert nested.loaded
    assert root.loaded


def test_settle_returns_successful_results_only():
    async def value(v):
        return v

    async def failure():
        raise ValueError('bad asset')

    assert asyncio.run(settle([value(1), failure(), value(2)])) == [1, 2]


def test_settle_does_not_swallow_cancellation():
    async def cancelled():
        raise asyncio.CancelledError()

    async def value():
        return 1

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(settle([value(), cancelled()]))
