import pytest

from cubicat.physics.body import Body
from cubicat.physics.collide import (
    ClipVertex,
    Edge,
    FeaturePair,
    clip_segment_to_line,
    collide,
    compute_incident_edge,
)
from cubicat.physics.math_utils import Mat22, Vec2, dot


def make_box(x, y, w, h, mass=1.0):
    body = Body()
    body.reset(Vec2(w, h), mass)
    body.position = Vec2(x, y)
    return body


def test_feature_pair_flip():
    fp = FeaturePair(Edge.EDGE1, Edge.EDGE2, Edge.EDGE3, Edge.EDGE4)
    flipped = fp.flipped()
    assert flipped.in_edge1 == fp.in_edge2
    assert flipped.out_edge2 == fp.out_edge1
    assert flipped.flipped() == fp


def test_clip_keeps_points_behind_line():
    verts = (ClipVertex(Vec2(0.0, 0.0)), ClipVertex(Vec2(1.0, 0.0)))
    out = clip_segment_to_line(verts, Vec2(1.0, 0.0), 5.0, Edge.EDGE1)
    assert out == list(verts)


def test_clip_drops_points_in_front():
    verts = (ClipVertex(Vec2(6.0, 0.0)), ClipVertex(Vec2(7.0, 0.0)))
    assert clip_segment_to_line(verts, Vec2(1.0, 0.0), 5.0, Edge.EDGE1) == []


def test_clip_intersection_lies_on_line():
    normal = Vec2(1.0, 0.0)
    verts = (ClipVertex(Vec2(0.0, 1.0)), ClipVertex(Vec2(4.0, 3.0)))
    out = clip_segment_to_line(verts, normal, 2.0, Edge.EDGE2)
    assert len(out) == 2
    assert out[0] == verts[0]
    assert dot(normal, out[1].v) == pytest.approx(2.0)
    assert out[1].fp.out_edge1 == Edge.EDGE2
    assert out[1].fp.out_edge2 == Edge.NO_EDGE


def test_clip_intersection_from_front_point_sets_in_edge():
    normal = Vec2(1.0, 0.0)
    verts = (ClipVertex(Vec2(4.0, 0.0)), ClipVertex(Vec2(0.0, 0.0)))
    out = clip_segment_to_line(verts, normal, 2.0, Edge.EDGE3)
    assert out[0] == verts[1]
    assert out[1].fp.in_edge1 == Edge.EDGE3
    assert out[1].fp.in_edge2 == Edge.NO_EDGE


def test_incident_edge_vertices_are_box_corners():
    h = Vec2(1.0, 0.5)
    pos = Vec2(3.0, 4.0)
    c0, c1 = compute_incident_edge(h, pos, Mat22.from_angle(0.0), Vec2(0.0, 1.0))
    for vertex in (c0, c1):
        assert abs(vertex.v.x - pos.x) == pytest.approx(h.x)
        assert abs(vertex.v.y - pos.y) == pytest.approx(h.y)
    # The edge faces against the normal, so both corners are at the bottom.
    assert c0.v.y == pytest.approx(pos.y - h.y)
    assert c1.v.y == pytest.approx(pos.y - h.y)


def test_separated_boxes_do_not_collide():
    a = make_box(0.0, 0.0, 1.0, 1.0)
    b = make_box(5.0, 0.0, 1.0, 1.0)
    assert collide(a, b) == []


def test_overlapping_boxes_produce_two_contacts():
    a = make_box(0.0, 0.0, 2.0, 2.0)
    b = make_box(0.0, 1.5, 2.0, 2.0)
    contacts = collide(a, b)
    assert len(contacts) == 2
    dp = b.position - a.position
    for contact in contacts:
        assert contact.separation <= 0.0
        assert contact.normal.length() == pytest.approx(1.0)
        assert dot(contact.normal, dp) > 0.0
    assert contacts[0].separation == pytest.approx(contacts[1].separation)
    assert contacts[0].feature != contacts[1].feature