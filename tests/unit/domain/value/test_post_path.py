"""Unit tests for PostPath."""

import pytest
from pydantic import ValidationError

from forum.domain.value import PostId, PostPath


class TestPostPathConstruction:
    """Tests for building paths."""

    def test_root_path_holds_only_own_id(self):
        path = PostPath.for_root(PostId(7))

        assert path.root == (7,)
        assert path.root_id == 7

    def test_child_extends_parent_path(self):
        parent = PostPath((1, 4))

        child = parent.child(PostId(9))

        assert child.root == (1, 4, 9)
        assert child.root_id == 1

    def test_empty_path_is_rejected(self):
        with pytest.raises(ValidationError):
            PostPath(())


class TestPostPathOrdering:
    """Paths sort depth-first."""

    def test_prefix_sorts_before_its_extensions(self):
        assert PostPath((1,)) < PostPath((1, 2))
        assert PostPath((1, 2)) < PostPath((1, 2, 3))

    def test_subtree_sorts_before_next_sibling(self):
        assert PostPath((1, 2, 99)) < PostPath((1, 3))
        assert PostPath((1, 50)) < PostPath((2,))

    def test_elements_compare_numerically(self):
        assert PostPath((2,)) < PostPath((10,))
        assert PostPath((1, 9)) < PostPath((1, 10))

    def test_sorting_yields_depth_first_order(self):
        paths = [
            PostPath((3,)),
            PostPath((1, 2)),
            PostPath((1,)),
            PostPath((1, 2, 5)),
            PostPath((1, 4)),
        ]

        ordered = sorted(paths)

        assert [p.root for p in ordered] == [
            (1,),
            (1, 2),
            (1, 2, 5),
            (1, 4),
            (3,),
        ]

