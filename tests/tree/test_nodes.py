"""Tests for TreeNode dataclass and Color StrEnum.

Verifies:
- Color has exactly 2 members with lowercase string values (StrEnum property)
- Leaf/internal classification is derived from the children list
- children is a read-only ordered view
- Equality and hashing follow the (value, color, depth) identity triple
"""

import dataclasses

import pytest

from tree_visitors.tree.nodes import Color, TreeNode


class TestColor:
    """Tests for the Color StrEnum."""

    def test_has_exactly_two_members(self) -> None:
        assert len(Color) == 2

    def test_values_are_lowercased(self) -> None:
        """auto() on StrEnum yields the lowercased member name."""
        assert Color.RED == "red"
        assert Color.GREEN == "green"

    def test_members_are_str_instances(self) -> None:
        for member in Color:
            assert isinstance(member, str), f"{member!r} is not a str instance"


class TestTreeNode:
    """Tests for the TreeNode dataclass."""

    def test_construction_stores_fields(self) -> None:
        node = TreeNode(value=4, color=Color.RED, depth=0)
        assert node.value == 4
        assert node.color == Color.RED
        assert node.depth == 0

    def test_new_node_is_leaf(self) -> None:
        node = TreeNode(value=1, color=Color.GREEN, depth=3)
        assert node.is_leaf is True
        assert node.is_internal is False
        assert node.children == ()

    def test_add_child_makes_node_internal(self) -> None:
        parent = TreeNode(value=1, color=Color.RED, depth=0)
        child = TreeNode(value=2, color=Color.GREEN, depth=1)
        parent.add_child(child)
        assert parent.is_leaf is False
        assert parent.is_internal is True
        assert child.is_leaf is True

    def test_children_preserve_insertion_order(self) -> None:
        parent = TreeNode(value=0, color=Color.RED, depth=0)
        kids = [TreeNode(value=v, color=Color.GREEN, depth=v) for v in (3, 1, 2)]
        for kid in kids:
            parent.add_child(kid)
        assert [c.value for c in parent.children] == [3, 1, 2]
        assert all(a is b for a, b in zip(parent.children, kids, strict=True))

    def test_children_view_is_read_only(self) -> None:
        parent = TreeNode(value=0, color=Color.RED, depth=0)
        parent.add_child(TreeNode(value=1, color=Color.RED, depth=1))
        view = parent.children
        assert isinstance(view, tuple)
        with pytest.raises(AttributeError):
            view.append(TreeNode(value=2, color=Color.RED, depth=2))  # type: ignore[attr-defined]
        assert len(parent.children) == 1

    def test_children_lists_are_independent_per_instance(self) -> None:
        node_a = TreeNode(value=1, color=Color.RED, depth=0)
        node_b = TreeNode(value=1, color=Color.RED, depth=1)
        node_a.add_child(TreeNode(value=2, color=Color.RED, depth=2))
        assert len(node_a.children) == 1
        assert len(node_b.children) == 0

    def test_cannot_attach_node_to_itself(self) -> None:
        node = TreeNode(value=1, color=Color.RED, depth=0)
        with pytest.raises(ValueError, match="own child"):
            node.add_child(node)

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError, match="depth"):
            TreeNode(value=1, color=Color.RED, depth=-1)

    def test_children_not_accepted_by_constructor(self) -> None:
        with pytest.raises(TypeError):
            TreeNode(value=1, color=Color.RED, depth=0, _children=[])  # type: ignore[call-arg]

    def test_uses_slots(self) -> None:
        assert hasattr(TreeNode, "__slots__")

    @pytest.mark.parametrize(
        ("name", "new_value"), [("value", 99), ("color", Color.GREEN), ("depth", 5)]
    )
    def test_fields_are_frozen(self, name: str, new_value: object) -> None:
        """A built node cannot be reassigned, so its hash stays stable."""
        node = TreeNode(value=4, color=Color.RED, depth=0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(node, name, new_value)
        assert node.identity == (4, Color.RED, 0)

    def test_frozen_node_still_accepts_children(self) -> None:
        """add_child works on a frozen node; only fields are frozen."""
        node = TreeNode(value=4, color=Color.RED, depth=0)
        node.add_child(TreeNode(value=1, color=Color.GREEN, depth=1))
        assert len(node.children) == 1

    def test_set_membership_survives_attempted_mutation(self) -> None:
        """A node stays findable in a set after a rejected reassignment."""
        node = TreeNode(value=4, color=Color.RED, depth=0)
        bucket = {node}
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.value = 99  # type: ignore[misc]
        assert node in bucket


class TestIdentity:
    """Equality and hashing use (value, color, depth) only."""

    def test_identity_triple(self) -> None:
        node = TreeNode(value=7, color=Color.GREEN, depth=1)
        assert node.identity == (7, Color.GREEN, 1)

    def test_equal_when_all_three_match(self) -> None:
        a = TreeNode(value=7, color=Color.GREEN, depth=1)
        b = TreeNode(value=7, color=Color.GREEN, depth=1)
        a.add_child(TreeNode(value=9, color=Color.RED, depth=2))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    @pytest.mark.parametrize(
        "other",
        [
            TreeNode(value=8, color=Color.GREEN, depth=1),
            TreeNode(value=7, color=Color.RED, depth=1),
            TreeNode(value=7, color=Color.GREEN, depth=2),
        ],
    )
    def test_differs_when_any_field_differs(self, other: TreeNode) -> None:
        node = TreeNode(value=7, color=Color.GREEN, depth=1)
        assert node != other

    def test_not_equal_to_plain_tuple(self) -> None:
        node = TreeNode(value=7, color=Color.GREEN, depth=1)
        assert node != (7, Color.GREEN, 1)


class TestIterPreorder:
    def test_parent_before_children_in_child_order(self) -> None:
        root = TreeNode(value=0, color=Color.RED, depth=0)
        left = TreeNode(value=1, color=Color.RED, depth=1)
        right = TreeNode(value=2, color=Color.RED, depth=2)
        grandchild = TreeNode(value=3, color=Color.RED, depth=3)
        root.add_child(left)
        root.add_child(right)
        left.add_child(grandchild)
        assert [n.value for n in root.iter_preorder()] == [0, 1, 3, 2]

    def test_single_node(self) -> None:
        node = TreeNode(value=5, color=Color.GREEN, depth=0)
        assert list(node.iter_preorder()) == [node]
