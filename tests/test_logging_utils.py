import logging

import numpy as np
import pytest

from frameshapes import Rectangle, default_scene, union_frame_rect
from frameshapes.logging_utils import apply_debug_logging, debug_log_call, safe_repr


def test_safe_repr_summarizes_arrays():
    assert safe_repr(np.zeros((2, 2))) == 'ndarray(shape=(2, 2), dtype=float64), values=[[0.0, 0.0], [0.0, 0.0]]'
    big = safe_repr(np.arange(100, dtype=float).reshape(50, 2))
    assert 'shape=(50, 2)' in big
    assert 'min=0' in big and 'max=99' in big


def test_safe_repr_truncates_long_sequences():
    rendered = safe_repr(list(range(10)), max_items=3)

    assert rendered == '[0, 1, 2, ... +7]'


def test_debug_log_call_logs_entry_exit_and_exceptions(caplog):
    logger = logging.getLogger('frameshapes.tests.debug')

    @debug_log_call(logger)
    def halve(value):
        if value < 0:
            raise ValueError('negative')
        return value / 2

    with caplog.at_level(logging.DEBUG, logger='frameshapes.tests.debug'):
        assert halve(4) == 2
        with pytest.raises(ValueError):
            halve(-1)

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith('Entering ') and 'halve (args=[4])' in m for m in messages)
    assert any(m.endswith('halve -> 2.0') for m in messages)
    assert any('Exception in' in m for m in messages)
    assert debug_log_call(logger)(halve) is halve


def test_apply_debug_logging_wraps_module_functions_and_methods():
    def area_of(rect):
        return rect.area()

    area_of.__module__ = 'fake_module'

    class Holder:
        def grow(self):
            return 1

    Holder.__module__ = 'fake_module'
    Holder.grow.__module__ = 'fake_module'
    namespace = {'__name__': 'fake_module', 'area_of': area_of, 'Holder': Holder, '_private': area_of}

    apply_debug_logging(namespace)

    assert namespace['area_of'] is not area_of
    assert namespace['area_of'](Rectangle(2, 3, (0, 0))) == 6.0
    assert namespace['_private'] is area_of
    assert getattr(Holder.grow, '_frameshapes_debug_wrapped', False)


def test_operations_emit_debug_trace(caplog):
    with caplog.at_level(logging.DEBUG, logger='frameshapes.operations'):
        union_frame_rect(default_scene())

    assert 'Entering union_frame_rect' in caplog.text
    assert 'Exiting union_frame_rect -> FrameRect(' in caplog.text


def test_apply_debug_logging_leaves_private_and_class_level_methods_alone():
    class Holder:
        def grow(self):
            return 1

        def _helper(self):
            return 2

        @classmethod
        def build(cls):
            return cls()

    Holder.__module__ = 'fake_module'
    for func in (Holder.grow, Holder._helper, Holder.build.__func__):
        func.__module__ = 'fake_module'
    build = vars(Holder)['build']

    apply_debug_logging({'__name__': 'fake_module', 'Holder': Holder}, skip={'Holder.grow'})

    assert not hasattr(Holder.grow, '_frameshapes_debug_wrapped')
    assert not hasattr(Holder._helper, '_frameshapes_debug_wrapped')
    assert vars(Holder)['build'] is build
