"""Shader naming conventions shared by the renderer, materials and lights."""

from __future__ import annotations

from enum import IntEnum

MODEL_MATRIX = "ModelMatrix"
NORMAL_MATRIX = "NormalMatrix"
VIEW_MATRIX = "ViewMatrix"
PROJECTION_MATRIX = "ProjectionMatrix"
TEXTURE_MATRIX = "TextureMatrix"
CAMERA_BLOCK = "Camera"
MATERIAL_BLOCK = "Material"
LIGHT_BLOCK = "Light"
CAMERA_POSITION = "CameraPosition"
SKYBOX = "Skybox"

CAMERA_BLOCK_BINDING_POINT = 1
MATERIAL_BLOCK_BINDING_POINT = 2
LIGHT_BLOCK_BINDING_POINT = 3

POSITION_ATTRIBUTE = "inPosition"
NORMAL_ATTRIBUTE = "inNormal"
TEXCOORD_ATTRIBUTE = "inTexcoord"
TANGENT_ATTRIBUTE = "inTangent"
BITANGENT_ATTRIBUTE = "inBitangent"


class ShaderType(IntEnum):
    """Kind of shader program a material is drawn with."""

    UNLIT = 0
    LIGHT = 1
    SKYBOX = 2