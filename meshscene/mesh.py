"""Triangle meshes gathered into one set of vertex streams for drawing."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntFlag
from typing import Optional

logger = logging.getLogger(__name__)

_INDEX_SIZE = 4


class PostProcess(IntFlag):
    """Import post-processing steps requested when a mesh file is read."""

    CALC_TANGENT_SPACE = 0x1
    JOIN_IDENTICAL_VERTICES = 0x2
    TRIANGULATE = 0x8
    GEN_NORMALS = 0x20
    GEN_SMOOTH_NORMALS = 0x40
    GEN_UV_COORDS = 0x40000
    FLIP_UVS = 0x800000


@dataclass
class MeshData:
    """Where one sub-mesh lives inside the shared vertex and index streams."""

    n_indices: int = 0
    base_index: int = 0
    base_vertex: int = 0


@dataclass
class SourceMesh:
    """One imported sub-mesh: per-vertex streams and triangulated faces."""

    vertices: Sequence[Sequence[float]]
    faces: Sequence[Sequence[int]]
    normals: Optional[Sequence[Sequence[float]]] = None
    texcoords: Optional[Sequence[Sequence[float]]] = None
    tangents: Optional[Sequence[Sequence[float]]] = None

    def __post_init__(self):
        count = len(self.vertices)
        for label, stream in (
            ("normals", self.normals),
            ("texcoords", self.texcoords),
            ("tangents", self.tangents),
        ):
            if stream is not None and len(stream) != count:
                raise ValueError(f"{label} has {len(stream)} entries for {count} vertices")
        for face in self.faces:
            if len(face) < 3:
                raise ValueError(f"face {tuple(face)!r} has fewer than three indices")

    @property
    def has_normals(self) -> bool:
        return self.normals is not None

    @property
    def has_texcoords(self) -> bool:
        return self.texcoords is not None

    @property
    def has_tangents(self) -> bool:
        return self.tangents is not None


class Mesh:
    """Vertex streams of one or more sub-meshes, drawn with base-vertex offsets."""

    INDEX = 0
    POSITION = 1
    COLOR = 2
    NORMAL = 3
    TEXCOORD = 4
    TANGENT = 5

    def __init__(self):
        self.flags = PostProcess.TRIANGULATE
        self.initialized = False
        self.has_normals = False
        self.has_texcoords = False
        self.has_tangents_and_bitangents = False
        self.meshes: list[MeshData] = []
        self.positions: list[tuple[float, float, float]] = []
        self.normals: list[tuple[float, float, float]] = []
        self.texcoords: list[tuple[float, float]] = []
        self.tangents: list[tuple[float, float, float]] = []
        self.indices: list[int] = []

    def set_flags(self, flags) -> None:
        """Replace the post-processing flags."""
        self.flags = PostProcess(flags)

    def join_identical_vertices(self) -> None:
        self.flags |= PostProcess.JOIN_IDENTICAL_VERTICES

    def generate_normals(self) -> None:
        self.flags |= PostProcess.GEN_NORMALS

    def generate_smooth_normals(self) -> None:
        self.flags |= PostProcess.GEN_SMOOTH_NORMALS

    def generate_texcoords(self) -> None:
        self.flags |= PostProcess.GEN_UV_COORDS

    def calculate_tangent_space(self) -> None:
        self.flags |= PostProcess.CALC_TANGENT_SPACE

    def flip_uvs(self) -> None:
        self.flags |= PostProcess.FLIP_UVS

    def _process_mesh(self, mesh: SourceMesh) -> None:
        self.has_normals = mesh.has_normals
        self.has_texcoords = mesh.has_texcoords
        self.has_tangents_and_bitangents = mesh.has_tangents
        for i, vertex in enumerate(mesh.vertices):
            x, y, z = vertex[:3]
            self.positions.append((float(x), float(y), float(z)))
            if self.has_normals:
                nx, ny, nz = mesh.normals[i][:3]
                self.normals.append((float(nx), float(ny), float(nz)))
            if self.has_texcoords:
                u, v = mesh.texcoords[i][:2]
                self.texcoords.append((float(u), float(v)))
            if self.has_tangents_and_bitangents:
                tx, ty, tz = mesh.tangents[i][:3]
                self.tangents.append((float(tx), float(ty), float(tz)))
        for face in mesh.faces:
            self.indices.extend(int(index) for index in face[:3])

    def process_scene(self, meshes: Iterable[SourceMesh]) -> None:
        """Append every sub-mesh to the shared streams and record its offsets."""
        meshes = list(meshes)
        n_vertices = 0
        n_indices = 0
        layout = []
        for mesh in meshes:
            data = MeshData(len(mesh.faces) * 3, n_indices, n_vertices)
            layout.append(data)
            n_vertices += len(mesh.vertices)
            n_indices += data.n_indices
        self.meshes = layout
        for mesh in meshes:
            self._process_mesh(mesh)
        logger.debug(
            "Loaded %d mesh(es) [%d vertices, %d indices, %d triangles]",
            len(layout), n_vertices, n_indices, n_indices // 3,
        )

    def create(self, meshes: Iterable[SourceMesh]) -> None:
        """Build the mesh from imported sub-meshes and mark it ready to draw."""
        self.process_scene(meshes)
        self.initialized = True

    def draw_calls(self) -> list[tuple[int, int, int]]:
        """(index count, byte offset into the index buffer, base vertex) per sub-mesh."""
        return [
            (data.n_indices, _INDEX_SIZE * data.base_index, data.base_vertex)
            for data in self.meshes
        ]