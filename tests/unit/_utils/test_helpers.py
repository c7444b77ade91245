import logging

import pytest

from blockliquid._utils import collect_duplicate_ids, iter_elements, temp_log_level
from blockliquid.types import Element


# tests for temp_log_level

def test_temp_log_level_restores_level():
    logger = logging.getLogger("blockliquid.test_helpers")
    logger.setLevel(logging.WARNING)
    with temp_log_level(logger, logging.DEBUG):
        assert logger.level == logging.DEBUG
    assert logger.level == logging.WARNING

def test_temp_log_level_restores_level_on_error():
    logger = logging.getLogger("blockliquid.test_helpers_error")
    logger.setLevel(logging.ERROR)
    with pytest.raises(RuntimeError):
        with temp_log_level(logger, logging.INFO):
            raise RuntimeError("boom")
    assert logger.level == logging.ERROR

# tests for tree helpers

def test_iter_elements_pre_order():
    tree = [
        Element(id="a", children=[
            Element(id="a1", children=[Element(id="a1x")]),
            Element(id="a2")]),
        Element(id="b"),
    ]
    assert [el.id for el in iter_elements(tree)] == ["a", "a1", "a1x", "a2", "b"]

def test_collect_duplicate_ids_reports_each_once():
    tree = [Element(id="a"), Element(id="a"), Element(id="a"), Element(id="b")]
    assert collect_duplicate_ids(tree) == ["a"]

def test_collect_duplicate_ids_empty_tree():
    assert collect_duplicate_ids([]) == []
