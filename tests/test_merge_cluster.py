"""Tests for threshold clustering of Lab colors."""

import pytest

from chromamerge.color.code import parse_color_code
from chromamerge.color.lab import LabColor, color_to_lab
from chromamerge.merge.cluster import ColorGroup, build_groups, cluster_labs
from chromamerge.merge.distance import delta_e


def _labs(codes):
    return [color_to_lab(parse_color_code(code)) for code in codes]


class TestColorGroup:
    def test_color_group_immutable(self):
        """Test that ColorGroup is immutable."""
        group = ColorGroup(group_id="grp_001", indices=[0, 1], members=["#f00", "#ff0000"], canonical="#f00")

        with pytest.raises(AttributeError):
            group.group_id = "grp_002"  # type: ignore

    def test_size(self):
        """Test that size counts members."""
        group = ColorGroup(group_id="grp_001", indices=[0, 3], members=["#f00", "#fe0000"], canonical="#f00")
        assert group.size == 2


class TestClusterLabs:
    def test_empty_input(self):
        """Test clustering with no colors."""
        uf = cluster_labs([], threshold=2.0)
        assert uf.count == 0
        assert uf.group_count == 0

    def test_negative_threshold_rejected(self):
        """Test that a negative threshold is refused."""
        with pytest.raises(ValueError):
            cluster_labs([LabColor(50.0, 0.0, 0.0)], threshold=-1.0)

    def test_zero_threshold_merges_identical_only(self):
        """Test that threshold 0 only merges exact duplicates."""
        uf = cluster_labs(_labs(["#fff", "#ffffff", "#fefefe"]), threshold=0.0)
        assert uf.connected(0, 1)
        assert not uf.connected(0, 2)

    def test_threshold_is_inclusive(self):
        """Test that a pair exactly at the threshold is merged."""
        labs = _labs(["#ff0000", "#f00000"])
        distance = delta_e(labs[0], labs[1])
        assert cluster_labs(labs, threshold=distance).group_count == 1
        assert cluster_labs(labs, threshold=distance * 0.999).group_count == 2

    def test_single_link_chaining(self):
        """Test that colors link through an intermediate neighbour."""
        labs = [LabColor(50.0, 0.0, 0.0), LabColor(51.5, 0.0, 0.0), LabColor(53.0, 0.0, 0.0)]
        assert delta_e(labs[0], labs[2]) > 2.0
        uf = cluster_labs(labs, threshold=2.0)
        assert uf.connected(0, 2)

    def test_red_and_blue_families(self):
        """Test the near-red and near-blue palette splits into two groups."""
        uf = cluster_labs(_labs(["#ff0000", "#fe0101", "#ff0102", "#0000ff", "#0001fe"]), threshold=3.0)

        assert uf.group_count == 2
        assert uf.connected(0, 1)
        assert uf.connected(0, 2)
        assert uf.connected(3, 4)
        assert not uf.connected(0, 3)


class TestBuildGroups:
    def test_groups_numbered_and_canonical(self):
        """Test group ids follow lowest index and canonical is first seen."""
        codes = [parse_color_code(c) for c in ["#000", "#fff", "#fefefe", "#010101"]]
        uf = cluster_labs([color_to_lab(c) for c in codes], threshold=2.0)

        groups = build_groups(uf, codes)

        assert [g.group_id for g in groups] == ["grp_001", "grp_002"]
        assert groups[0].indices == [0, 3]
        assert groups[0].members == ["#000", "#010101"]
        assert groups[0].canonical == "#000"
        assert groups[1].canonical == "#fff"

    def test_length_mismatch_rejected(self):
        """Test that codes must line up with the clustered elements."""
        codes = [parse_color_code("#000")]
        uf = cluster_labs(_labs(["#000", "#fff"]), threshold=2.0)
        with pytest.raises(ValueError):
            build_groups(uf, codes)
