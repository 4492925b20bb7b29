"""Markup serializer: shapes and materials to renderer XML.

The renderer reads a generic key/value tree. write_xml_obj() encodes one
node of that tree as an ElementTree element:

    {"radius": 10}                  -> <radius>10</radius>
    {"position": (0, 1, 2)}         -> <position>0 1 2</position>
    {"float3": {"name": "k", "value": (1, 1, 1)}}
                                    -> <float3 name="k">1 1 1</float3>
    {"parameters": [{"float": ...}, {"float3": ...}]}
                                    -> <parameters><float .../><float3 .../></parameters>

Lists of records are flattened: each record's entries become siblings.

Each shape writer validates the shape before creating any element for it and
raises SceneError on the first failed check. A Sphere with radius <= 0 is
the one exception: it is skipped and contributes nothing.

The finished document looks like:

    <?xml version="1.0"?>
    <scene>
      <Group>
        <Transform>
          <translate>1 2 3</translate>
          <Sphere>
            ...
          </Sphere>
        </Transform>
      </Group>
    </scene>
"""

from __future__ import annotations

import logging
import numbers
import xml.etree.ElementTree as ET

import numpy as np

from rayscene.errors import SceneError
from rayscene.materials import pack_material
from rayscene.shapes import Disk, Shape, Sphere, TransformBegin, TransformEnd, TriangleMesh

log = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0"?>'
INDENT = "  "

# Self-describing typed elements: <kind name="...">value</kind>
WIRE_KINDS = frozenset(
    {
        "bool1", "bool2", "bool3", "bool4",
        "int1", "int2", "int3", "int4",
        "float", "float1", "float2", "float3", "float4",
        "texture",
    }
)  # fmt: skip


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------


def format_scalar(value) -> str:
    """Format a single value: bools lowercase, integral numbers without a fraction."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, numbers.Integral):
        return str(int(value))
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_value(value) -> str:
    """Format a scalar, string or (nested) sequence as element text.

    A bare string is quoted; strings inside a sequence are not.
    """
    if isinstance(value, np.ndarray):
        value = value.ravel().tolist()
    if isinstance(value, (list, tuple)):
        return " ".join(v if isinstance(v, str) else format_value(v) for v in value)
    return format_scalar(value)


def _is_record(value) -> bool:
    return isinstance(value, dict)


def write_xml_obj(parent: ET.Element, tag: str, value) -> ET.Element:
    """Encode one key/value node as a child of parent and return it."""
    if tag in WIRE_KINDS:
        elem = ET.SubElement(parent, tag, name=str(value["name"]))
        elem.text = format_value(value["value"])
        return elem

    elem = ET.SubElement(parent, tag)
    if _is_record(value):
        for key, child in value.items():
            write_xml_obj(elem, key, child)
    elif isinstance(value, (list, tuple, np.ndarray)):
        if len(value) and _is_record(value[0]):
            for record in value:
                for key, child in record.items():
                    write_xml_obj(elem, key, child)
        else:
            elem.text = format_value(value)
    else:
        elem.text = format_value(value)
    return elem


# ---------------------------------------------------------------------------
# Shape writers
# ---------------------------------------------------------------------------


def disk_record(disk: Disk) -> dict:
    shape_id = "Disk"
    if disk.radius <= 0:
        raise SceneError.property_invalid(shape_id, "radius", disk.radius)
    if disk.num_triangles <= 0:
        raise SceneError.property_invalid(shape_id, "numTriangles", disk.num_triangles)
    return {
        "position": disk.position,
        "height": disk.height,
        "radius": disk.radius,
        "numTriangles": disk.num_triangles,
        "material": pack_material(disk.material),
    }


def sphere_record(sphere: Sphere) -> dict | None:
    """Record for a sphere, or None if it has no extent and is skipped."""
    shape_id = "Sphere"
    if sphere.radius <= 0:
        return None
    if sphere.num_phi == 0:
        raise SceneError.property_invalid(shape_id, "numPhi", sphere.num_phi)
    if sphere.num_theta <= 0:
        raise SceneError.property_invalid(shape_id, "numTheta", sphere.num_theta)

    obj = {"position": sphere.position}
    if any(c != 0 for c in sphere.motion):
        obj["motion"] = sphere.motion
    obj["radius"] = sphere.radius
    obj["numTheta"] = sphere.num_theta
    obj["numPhi"] = sphere.num_phi
    obj["material"] = pack_material(sphere.material)
    return obj


def triangle_mesh_record(mesh: TriangleMesh) -> dict:
    shape_id = "TriangleMesh"
    positions = None if mesh.positions is None else np.asarray(mesh.positions)
    indices = None if mesh.indices is None else np.asarray(mesh.indices)
    if positions is None or len(positions) == 0:
        raise SceneError.property_invalid(shape_id, "positions", mesh.positions)
    if indices is None or len(indices) == 0:
        raise SceneError.property_invalid(shape_id, "indices", mesh.indices)

    num_positions = len(positions)
    obj = {"positions": positions}
    for name in ("motions", "normals", "texcoords"):
        value = getattr(mesh, name)
        if value is None:
            continue
        value = np.asarray(value)
        if len(value) != num_positions:
            raise SceneError.length_mismatch(shape_id, name, len(value), num_positions)
        obj[name] = value
    obj["indices"] = indices
    obj["material"] = pack_material(mesh.material)
    return obj


_RECORDS = {
    Disk: disk_record,
    Sphere: sphere_record,
    TriangleMesh: triangle_mesh_record,
}


def write_shape(parent: ET.Element, shape: Shape) -> ET.Element | None:
    """Validate and append one geometric shape. Returns None if skipped."""
    for cls in type(shape).__mro__:
        if cls in _RECORDS:
            break
    else:
        raise SceneError.shape_invalid(type(shape).__name__)
    record = _RECORDS[cls](shape)
    if record is None:
        log.debug("Skipping %s with radius %s", cls.__name__, shape.radius)
        return None
    return write_xml_obj(parent, cls.__name__, record)


def write_transform(parent: ET.Element, marker: TransformBegin) -> ET.Element:
    """Open a Transform element carrying the marker's set fields."""
    elem = ET.SubElement(parent, "Transform")
    if marker.translate is not None:
        write_xml_obj(elem, "translate", marker.translate)
    if marker.scale is not None:
        write_xml_obj(elem, "scale", marker.scale)
    if marker.rotate is not None:
        write_xml_obj(elem, "rotate", marker.rotate)
    if marker.rotate_axis is not None:
        angle, axis = marker.rotate_axis
        write_xml_obj(elem, "rotateAxis", {"angle": angle, "axis": axis})
    return elem


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


def build_tree(objects: list[Shape]) -> ET.Element:
    """Build the <scene><Group>...</Group></scene> element tree."""
    root = ET.Element("scene")
    group = ET.SubElement(root, "Group")

    parents = [group]
    for obj in objects:
        if isinstance(obj, TransformBegin):
            parents.append(write_transform(parents[-1], obj))
        elif isinstance(obj, TransformEnd):
            if len(parents) == 1:
                log.warning("Ignoring TransformEnd without a matching TransformBegin")
                continue
            parents.pop()
        else:
            write_shape(parents[-1], obj)

    if len(parents) > 1:
        log.debug("Closing %d unterminated transform scope(s)", len(parents) - 1)
    return root


def to_markup(root: ET.Element) -> str:
    """Serialize a tree with two-space indentation per nesting level."""
    ET.indent(root, space=INDENT)
    body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    return f"{XML_DECLARATION}\n{body}\n"


def write_markup(objects: list[Shape]) -> str:
    """Encode the scene objects as a complete markup document."""
    return to_markup(build_tree(objects))
