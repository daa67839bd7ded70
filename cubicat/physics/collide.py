"""Box-versus-box contact generation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Sequence

from cubicat.physics.body import Body
from cubicat.physics.math_utils import Mat22, Vec2, dot, sign

# Box vertex and edge numbering:
#
#        ^ y
#        |
#        e1
#   v2 ------ v1
#    |        |
# e2 |        | e4  --> x
#    |        |
#   v3 ------ v4
#        e3


class Edge(IntEnum):
    NO_EDGE = 0
    EDGE1 = 1
    EDGE2 = 2
    EDGE3 = 3
    EDGE4 = 4


class _Axis(Enum):
    FACE_A_X = 0
    FACE_A_Y = 1
    FACE_B_X = 2
    FACE_B_Y = 3


@dataclass(frozen=True, slots=True)
class FeaturePair:
    """Edges that identify a contact point across frames."""

    in_edge1: int = Edge.NO_EDGE
    out_edge1: int = Edge.NO_EDGE
    in_edge2: int = Edge.NO_EDGE
    out_edge2: int = Edge.NO_EDGE

    def flipped(self) -> FeaturePair:
        return FeaturePair(self.in_edge2, self.out_edge2, self.in_edge1, self.out_edge1)


@dataclass
class Contact:
    position: Vec2 = field(default_factory=Vec2)
    normal: Vec2 = field(default_factory=Vec2)
    r1: Vec2 = field(default_factory=Vec2)
    r2: Vec2 = field(default_factory=Vec2)
    separation: float = 0.0
    pn: float = 0.0  # accumulated normal impulse
    pt: float = 0.0  # accumulated tangent impulse
    pnb: float = 0.0  # accumulated normal impulse for position bias
    mass_normal: float = 0.0
    mass_tangent: float = 0.0
    bias: float = 0.0
    feature: FeaturePair = field(default_factory=FeaturePair)


@dataclass(frozen=True, slots=True)
class ClipVertex:
    v: Vec2 = Vec2()
    fp: FeaturePair = FeaturePair()


def clip_segment_to_line(
    v_in: Sequence[ClipVertex], normal: Vec2, offset: float, clip_edge: int
) -> list[ClipVertex]:
    """Clip a two-point segment against the half plane ``dot(normal, p) <= offset``."""
    v0, v1 = v_in
    distance0 = dot(normal, v0.v) - offset
    distance1 = dot(normal, v1.v) - offset

    out: list[ClipVertex] = []
    if distance0 <= 0.0:
        out.append(v0)
    if distance1 <= 0.0:
        out.append(v1)

    if distance0 * distance1 < 0.0:
        interp = distance0 / (distance0 - distance1)
        point = v0.v + interp * (v1.v - v0.v)
        if distance0 > 0.0:
            fp = replace(v0.fp, in_edge1=clip_edge, in_edge2=Edge.NO_EDGE)
        else:
            fp = replace(v1.fp, out_edge1=clip_edge, out_edge2=Edge.NO_EDGE)
        out.append(ClipVertex(point, fp))
    return out


def compute_incident_edge(
    h: Vec2, pos: Vec2, rot: Mat22, normal: Vec2
) -> tuple[ClipVertex, ClipVertex]:
    """Find the edge of the incident box most anti-parallel to ``normal``."""
    # Convert the reference normal into the incident box's frame and flip it.
    n = -(rot.transpose() * normal)
    n_abs = abs(n)

    if n_abs.x > n_abs.y:
        if sign(n.x) > 0.0:
            local = (
                (Vec2(h.x, -h.y), Edge.EDGE3, Edge.EDGE4),
                (Vec2(h.x, h.y), Edge.EDGE4, Edge.EDGE1),
            )
        else:
            local = (
                (Vec2(-h.x, h.y), Edge.EDGE1, Edge.EDGE2),
                (Vec2(-h.x, -h.y), Edge.EDGE2, Edge.EDGE3),
            )
    else:
        if sign(n.y) > 0.0:
            local = (
                (Vec2(h.x, h.y), Edge.EDGE4, Edge.EDGE1),
                (Vec2(-h.x, h.y), Edge.EDGE1, Edge.EDGE2),
            )
        else:
            local = (
                (Vec2(-h.x, -h.y), Edge.EDGE2, Edge.EDGE3),
                (Vec2(h.x, -h.y), Edge.EDGE3, Edge.EDGE4),
            )

    first, second = (
        ClipVertex(pos + rot * v, FeaturePair(in_edge2=in_edge, out_edge2=out_edge))
        for v, in_edge, out_edge in local
    )
    return first, second


def collide(body_a: Body, body_b: Body) -> list[Contact]:
    """Return up to two contacts between two boxes; the normal points from A to B."""
    h_a = 0.5 * body_a.width
    h_b = 0.5 * body_b.width
    pos_a = body_a.position
    pos_b = body_b.position

    rot_a = Mat22.from_angle(body_a.rotation)
    rot_b = Mat22.from_angle(body_b.rotation)
    rot_at = rot_a.transpose()
    rot_bt = rot_b.transpose()

    dp = pos_b - pos_a
    d_a = rot_at * dp
    d_b = rot_bt * dp

    c = rot_at * rot_b
    abs_c = abs(c)
    abs_ct = abs_c.transpose()

    face_a = abs(d_a) - h_a - abs_c * h_b
    if face_a.x > 0.0 or face_a.y > 0.0:
        return []

    face_b = abs(d_b) - abs_ct * h_a - h_b
    if face_b.x > 0.0 or face_b.y > 0.0:
        return []

    relative_tol = 0.95
    absolute_tol = 0.01

    axis = _Axis.FACE_A_X
    separation = face_a.x
    normal = rot_a.col1 if d_a.x > 0.0 else -rot_a.col1

    if face_a.y > relative_tol * separation + absolute_tol * h_a.y:
        axis = _Axis.FACE_A_Y
        separation = face_a.y
        normal = rot_a.col2 if d_a.y > 0.0 else -rot_a.col2

    if face_b.x > relative_tol * separation + absolute_tol * h_b.x:
        axis = _Axis.FACE_B_X
        separation = face_b.x
        normal = rot_b.col1 if d_b.x > 0.0 else -rot_b.col1

    if face_b.y > relative_tol * separation + absolute_tol * h_b.y:
        axis = _Axis.FACE_B_Y
        separation = face_b.y
        normal = rot_b.col2 if d_b.y > 0.0 else -rot_b.col2

    if axis is _Axis.FACE_A_X:
        front_normal = normal
        front = dot(pos_a, front_normal) + h_a.x
        side_normal = rot_a.col2
        side = dot(pos_a, side_normal)
        neg_side, pos_side = -side + h_a.y, side + h_a.y
        neg_edge, pos_edge = Edge.EDGE3, Edge.EDGE1
        incident = compute_incident_edge(h_b, pos_b, rot_b, front_normal)
    elif axis is _Axis.FACE_A_Y:
        front_normal = normal
        front = dot(pos_a, front_normal) + h_a.y
        side_normal = rot_a.col1
        side = dot(pos_a, side_normal)
        neg_side, pos_side = -side + h_a.x, side + h_a.x
        neg_edge, pos_edge = Edge.EDGE2, Edge.EDGE4
        incident = compute_incident_edge(h_b, pos_b, rot_b, front_normal)
    elif axis is _Axis.FACE_B_X:
        front_normal = -normal
        front = dot(pos_b, front_normal) + h_b.x
        side_normal = rot_b.col2
        side = dot(pos_b, side_normal)
        neg_side, pos_side = -side + h_b.y, side + h_b.y
        neg_edge, pos_edge = Edge.EDGE3, Edge.EDGE1
        incident = compute_incident_edge(h_a, pos_a, rot_a, front_normal)
    else:
        front_normal = -normal
        front = dot(pos_b, front_normal) + h_b.y
        side_normal = rot_b.col1
        side = dot(pos_b, side_normal)
        neg_side, pos_side = -side + h_b.x, side + h_b.x
        neg_edge, pos_edge = Edge.EDGE2, Edge.EDGE4
        incident = compute_incident_edge(h_a, pos_a, rot_a, front_normal)

    # Clip the incident edge against the side planes of the reference face.
    clip_points1 = clip_segment_to_line(incident, -side_normal, neg_side, neg_edge)
    if len(clip_points1) < 2:
        return []
    clip_points2 = clip_segment_to_line(clip_points1, side_normal, pos_side, pos_edge)
    if len(clip_points2) < 2:
        return []

    flip = axis in (_Axis.FACE_B_X, _Axis.FACE_B_Y)
    contacts: list[Contact] = []
    for clip in clip_points2:
        sep = dot(front_normal, clip.v) - front
        if sep <= 0:
            contacts.append(
                Contact(
                    separation=sep,
                    normal=normal,
                    # slide the point onto the reference face
                    position=clip.v - sep * front_normal,
                    feature=clip.fp.flipped() if flip else clip.fp,
                )
            )
    return contacts