"""Errors raised while encoding a scene.

Every structural defect in caller-supplied scene data is reported as a
single exception type, SceneError, tagged with an ErrorKind. All of them are
raised before any output is returned, so a failed process() never leaves a
partially written scene behind.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a scene encoding failure."""

    PROPERTY_INVALID = "property_invalid"
    PROPERTY_LENGTH_MISMATCH = "property_length_mismatch"
    MATERIAL_INVALID = "material_invalid"
    SCENE_EMPTY = "scene_empty"
    SHAPE_INVALID = "shape_invalid"


class SceneError(ValueError):
    """A scene (or one of its entities) cannot be rendered.

    Attributes:
        kind: Which check failed
        shape: Shape or material type name involved, if any
        prop: Offending property name, if any
        value: Actual value of the property
        expected: Expected value (length mismatches only)
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        shape: str | None = None,
        prop: str | None = None,
        value=None,
        expected=None,
    ):
        super().__init__(message)
        self.kind = kind
        self.shape = shape
        self.prop = prop
        self.value = value
        self.expected = expected

    @classmethod
    def property_invalid(cls, shape: str, prop: str, value) -> SceneError:
        return cls(
            ErrorKind.PROPERTY_INVALID,
            f'Can\'t render shape of type "{shape}", {prop} not valid: {value}.',
            shape=shape,
            prop=prop,
            value=value,
        )

    @classmethod
    def length_mismatch(cls, shape: str, prop: str, value: int, expected: int) -> SceneError:
        return cls(
            ErrorKind.PROPERTY_LENGTH_MISMATCH,
            f'Can\'t render shape of type "{shape}", {prop} length not valid: '
            f"{value}. Should be: {expected}.",
            shape=shape,
            prop=prop,
            value=value,
            expected=expected,
        )

    @classmethod
    def material_invalid(cls, type_name: str) -> SceneError:
        return cls(
            ErrorKind.MATERIAL_INVALID,
            f'Can\'t render material of type "{type_name}".',
            shape=type_name,
        )

    @classmethod
    def shape_invalid(cls, type_name: str) -> SceneError:
        return cls(
            ErrorKind.SHAPE_INVALID,
            f'Can\'t render object of type "{type_name}".',
            shape=type_name,
        )

    @classmethod
    def scene_empty(cls) -> SceneError:
        return cls(
            ErrorKind.SCENE_EMPTY,
            "The scene to be raytraced does not contain any objects.",
        )
